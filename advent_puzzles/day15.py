"""Warehouse woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

import argparse
from enum import Enum
from pathlib import Path

Position = tuple[int, int]
Step = tuple[int, int]


class Obstacle(Enum):
    BOX = "O"
    WALL = "#"


Grid = list[list[Obstacle | None]]

_STEPS: dict[str, Step] = {
    "^": (0, -1),
    "<": (-1, 0),
    ">": (1, 0),
    "v": (0, 1),
}


def parse_movements(text: str) -> list[Step]:
    """Arrow characters as steps; line breaks are ignored."""
    steps = []
    for line in text.splitlines():
        for ch in line:
            if ch not in _STEPS:
                raise ValueError(f"Invalid movement found: {ch!r}")
            steps.append(_STEPS[ch])
    return steps


def parse_warehouse(text: str) -> tuple[Grid, Position]:
    """The warehouse grid and the robot's starting position."""
    rows = text.splitlines()
    if not rows:
        raise ValueError("empty warehouse")
    start = next(
        ((row.index("@"), y) for y, row in enumerate(rows) if "@" in row), None
    )
    if start is None:
        raise ValueError("failed to find the robot")
    grid: Grid = [
        [Obstacle(ch) if ch in ("#", "O") else None for ch in row] for row in rows
    ]
    return grid, start


def _inside(grid: Grid, position: Position) -> bool:
    x, y = position
    return 0 <= y < len(grid) and 0 <= x < len(grid[0])


def _throw_ray(grid: Grid, step: Step, position: Position) -> Position | None:
    """The empty cell just past a run of boxes ahead, if there is one."""
    current = (position[0] + step[0], position[1] + step[1])
    out = None
    while _inside(grid, current) and grid[current[1]][current[0]] is Obstacle.BOX:
        current = (current[0] + step[0], current[1] + step[1])
        if _inside(grid, current) and grid[current[1]][current[0]] is None:
            out = current
    return out


def _render(grid: Grid, robot: Position) -> str:
    lines = []
    for y, row in enumerate(grid):
        chars = []
        for x, cell in enumerate(row):
            if cell is not None:
                chars.append(cell.value)
            elif (x, y) == robot:
                chars.append("@")
            else:
                chars.append(".")
        lines.append("".join(chars))
    return "\n".join(lines)


def _gps_sum(grid: Grid) -> int:
    return sum(
        100 * y + x
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell is Obstacle.BOX
    )


def simulate_narrow(text: str) -> tuple[str, int]:
    """Run the moves; return the final map and the boxes' GPS sum."""
    parts = text.split("\n\n")
    if len(parts) < 2:
        raise ValueError("missing movements section")
    grid, position = parse_warehouse(parts[0])

    for step in parse_movements(parts[1]):
        space = _throw_ray(grid, step, position)
        if space is not None:
            cx, cy = space[0] - step[0], space[1] - step[1]
            while _inside(grid, (cx, cy)) and grid[cy][cx] is Obstacle.BOX:
                grid[cy + step[1]][cx + step[0]] = grid[cy][cx]
                grid[cy][cx] = None
                cx, cy = cx - step[0], cy - step[1]
        candidate = (position[0] + step[0], position[1] + step[1])
        if _inside(grid, candidate) and grid[candidate[1]][candidate[0]] is None:
            position = candidate

    return _render(grid, position), _gps_sum(grid)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Push boxes around a warehouse.")
    parser.add_argument("input", nargs="?", default="inputs/15.txt", type=Path)
    args = parser.parse_args(argv)

    layout, gps_sum = simulate_narrow(args.input.read_text())
    print(layout)
    print(f"A sum of GPS coordinates of {gps_sum}")