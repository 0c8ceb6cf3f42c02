"""Warehouse woes, widened: a robot pushing two-cell boxes."""

from __future__ import annotations

import argparse
from pathlib import Path

from .day15 import parse_movements

Position = tuple[int, int]
Step = tuple[int, int]
Grid = list[list[str]]

_WIDENED = {
    "#": "##",
    "O": "[]",
    ".": "..",
    "@": "@.",
}


def widen(text: str) -> tuple[Grid, Position]:
    """Double every cell of the map; return the grid and the robot's position.

    The robot's cell is left empty in the returned grid.
    """
    grid: Grid = []
    for line in text.splitlines():
        row: list[str] = []
        for ch in line:
            if ch not in _WIDENED:
                raise ValueError(f"Found invalid character: {ch!r}")
            row.extend(_WIDENED[ch])
        grid.append(row)

    for y, row in enumerate(grid):
        if "@" in row:
            x = row.index("@")
            row[x] = "."
            return grid, (x, y)
    raise ValueError("failed to find the robot")


def _inside(grid: Grid, position: Position) -> bool:
    x, y = position
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def can_move(step: Step, position: Position, grid: Grid) -> bool:
    """True if whatever stands at ``position`` can move one ``step``."""
    x, y = position
    dx, dy = step
    cell = grid[y][x]
    if cell == "#":
        return False

    targets = [(x + dx, y + dy)]
    # A box moving vertically drags its other half along.
    if dy != 0:
        if cell == "[":
            targets.append((x + 1 + dx, y + dy))
        elif cell == "]":
            targets.append((x - 1 + dx, y + dy))

    for target in targets:
        if not _inside(grid, target):
            return False
        tx, ty = target
        if not (grid[ty][tx] == "." or can_move(step, target, grid)):
            return False
    return True


def do_move(step: Step, position: Position, grid: Grid) -> None:
    """Move what stands at ``position`` one ``step``, pushing what is in the way.

    Call only after :func:`can_move` has allowed the move.
    """
    x, y = position
    dx, dy = step
    cell = grid[y][x]

    if cell == "." or dy == 0:
        targets = [(x + dx, y + dy)]
    elif cell == "]":
        targets = [(x + dx, y + dy), (x - 1 + dx, y + dy)]
    elif cell == "[":
        targets = [(x + dx, y + dy), (x + 1 + dx, y + dy)]
    else:
        raise ValueError(f"unexpected combination! {cell} {step}")

    for nx, ny in targets:
        ox, oy = nx - dx, ny - dy
        if grid[ny][nx] != ".":
            do_move(step, (nx, ny), grid)
        grid[ny][nx] = grid[oy][ox]
        grid[oy][ox] = "."


def _render(grid: Grid, robot: Position) -> str:
    return "\n".join(
        "".join("@" if (x, y) == robot else ch for x, ch in enumerate(row))
        for y, row in enumerate(grid)
    )


def _gps_sum(grid: Grid) -> int:
    return sum(
        100 * y + x
        for y, row in enumerate(grid)
        for x, ch in enumerate(row)
        if ch == "["
    )


def simulate_wide(text: str) -> tuple[str, int]:
    """Run the moves on the widened map; return the final map and GPS sum."""
    parts = text.split("\n\n")
    if len(parts) < 2:
        raise ValueError("missing movements section")
    grid, position = widen(parts[0])

    for step in parse_movements(parts[1]):
        if can_move(step, position, grid):
            do_move(step, position, grid)
            position = (position[0] + step[0], position[1] + step[1])

    return _render(grid, position), _gps_sum(grid)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Push wide boxes around.")
    parser.add_argument("input", nargs="?", default="inputs/15.txt", type=Path)
    args = parser.parse_args(argv)

    layout, gps_sum = simulate_wide(args.input.read_text())
    print(layout)
    print(f"A sum of GPS coordinates of {gps_sum}")