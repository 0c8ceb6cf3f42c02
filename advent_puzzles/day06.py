"""Guard patrol: the cells a guard visits and obstructions that trap it."""

from __future__ import annotations

import argparse
from enum import Enum
from pathlib import Path

Position = tuple[int, int]


class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    def rotated(self) -> Direction:
        """The direction after a quarter turn to the right."""
        return _CLOCKWISE[self]

    def move_from(self, position: Position) -> Position:
        """The position one step away in this direction."""
        dx, dy = self.value
        return position[0] + dx, position[1] + dy


_CLOCKWISE = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}


def parse_grid(text: str) -> list[str]:
    """The lab map as a list of rows."""
    grid = text.splitlines()
    if not grid:
        raise ValueError("empty map")
    return grid


def find_guard(grid: list[str]) -> Position:
    """The position of the ``^`` marking the guard."""
    for y, row in enumerate(grid):
        x = row.find("^")
        if x >= 0:
            return x, y
    raise ValueError("failed to find the guard")


def _inside(grid: list[str], position: Position) -> bool:
    x, y = position
    return 0 <= x < len(grid[0]) and 0 <= y < len(grid)


def _walk(
    grid: list[str], start: Position, obstacle: Position | None = None
) -> tuple[set[Position], bool]:
    """Visited positions, and whether the guard ended up in a loop."""
    states: set[tuple[Position, Direction]] = set()
    position, direction = start, Direction.NORTH
    while _inside(grid, position):
        state = (position, direction)
        if state in states:
            return {p for p, _ in states}, True
        states.add(state)
        forward = direction.move_from(position)
        if _inside(grid, forward) and (
            grid[forward[1]][forward[0]] == "#" or forward == obstacle
        ):
            direction = direction.rotated()
        else:
            position = forward
    return {p for p, _ in states}, False


def patrol_positions(grid: list[str]) -> set[Position]:
    """Every position the guard visits before leaving the map."""
    visited, looped = _walk(grid, find_guard(grid))
    if looped:
        raise ValueError("the guard never leaves the map")
    return visited


def causes_loop(grid: list[str], start: Position, obstacle: Position) -> bool:
    """True if an extra obstruction at ``obstacle`` traps the guard."""
    return _walk(grid, start, obstacle)[1]


def count_loop_options(grid: list[str]) -> int:
    """Number of single obstructions on the patrol path that cause a loop."""
    start = find_guard(grid)
    candidates = patrol_positions(grid) - {start}
    return sum(causes_loop(grid, start, candidate) for candidate in candidates)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Follow the guard's patrol.")
    parser.add_argument("input", nargs="?", default="inputs/6.txt", type=Path)
    args = parser.parse_args(argv)

    grid = parse_grid(args.input.read_text())
    print(f"{len(patrol_positions(grid))} positions")
    print(f"{count_loop_options(grid)} options")