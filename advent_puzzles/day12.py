"""Garden groups: fence prices by perimeter and by number of sides."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

Position = tuple[int, int]


@dataclass(frozen=True)
class Region:
    """A connected patch of one kind of plant."""

    plant: str
    area: int
    perimeter: int
    sides: int


def parse_garden(text: str) -> list[str]:
    """The garden as a list of rows."""
    grid = text.splitlines()
    if not grid:
        raise ValueError("empty garden")
    return grid


def _neighbors(position: Position) -> Iterator[Position]:
    x, y = position
    yield from ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))


def _is_foreign(grid: list[str], plant: str, x: int, y: int) -> bool:
    inside = 0 <= x < len(grid[0]) and 0 <= y < len(grid)
    return not inside or grid[y][x] != plant


def _count_segments(
    borders: set[Position], crossings: set[Position], step: Position
) -> int:
    """Number of straight runs in ``borders`` along ``step``.

    A run is cut where a border of ``crossings`` touches it.
    """
    sx, sy = step
    px, py = sy, sx
    remaining = set(borders)
    count = 0
    while remaining:
        x, y = next(iter(remaining))
        while (x + sx, y + sy) in remaining:
            x, y = x + sx, y + sy
        while (x, y) in remaining:
            remaining.remove((x, y))
            if (x, y) in crossings or (x - px, y - py) in crossings:
                break
            x, y = x - sx, y - sy
        count += 1
    return count


def _count_sides(grid: list[str], plant: str, peripheral: set[Position]) -> int:
    vertical: set[Position] = set()
    horizontal: set[Position] = set()
    for x, y in peripheral:
        if _is_foreign(grid, plant, x + 1, y):
            vertical.add((x + 1, y))
        if _is_foreign(grid, plant, x - 1, y):
            vertical.add((x, y))
        if _is_foreign(grid, plant, x, y + 1):
            horizontal.add((x, y + 1))
        if _is_foreign(grid, plant, x, y - 1):
            horizontal.add((x, y))
    return _count_segments(vertical, horizontal, (0, 1)) + _count_segments(
        horizontal, vertical, (1, 0)
    )


def _explore(grid: list[str], source: Position, seen: set[Position]) -> Region:
    plant = grid[source[1]][source[0]]
    seen.add(source)
    frontier = [source]
    area = 0
    perimeter = 0
    peripheral: set[Position] = set()
    while frontier:
        next_frontier = []
        for origin in frontier:
            area += 1
            for neighbor in _neighbors(origin):
                if _is_foreign(grid, plant, *neighbor):
                    perimeter += 1
                    peripheral.add(origin)
                elif neighbor not in seen:
                    seen.add(neighbor)
                    next_frontier.append(neighbor)
        frontier = next_frontier
    return Region(plant, area, perimeter, _count_sides(grid, plant, peripheral))


def find_regions(grid: list[str]) -> list[Region]:
    """All regions, in the order their first cell appears row by row."""
    seen: set[Position] = set()
    regions = []
    for y, row in enumerate(grid):
        for x, _ in enumerate(row):
            if (x, y) not in seen:
                regions.append(_explore(grid, (x, y), seen))
    return regions


def fencing_cost(grid: list[str]) -> int:
    """Sum of area times perimeter over all regions."""
    return sum(region.area * region.perimeter for region in find_regions(grid))


def discounted_cost(grid: list[str]) -> int:
    """Sum of area times number of sides over all regions."""
    return sum(region.area * region.sides for region in find_regions(grid))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Price the garden fences.")
    parser.add_argument("input", nargs="?", default="inputs/12.txt", type=Path)
    args = parser.parse_args(argv)

    grid = parse_garden(args.input.read_text())
    print(f"A total cost of {fencing_cost(grid)}")
    print(f"A revised total cost of {discounted_cost(grid)}")