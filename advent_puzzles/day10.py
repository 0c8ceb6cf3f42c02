"""Hoof It: score and rate hiking trails on a topographic map."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

Position = tuple[int, int]
Grid = list[list[int]]

_PEAK = 9


def parse_map(text: str) -> Grid:
    """The map as rows of single-digit heights."""
    grid: Grid = []
    for line in text.splitlines():
        if not all(ch in "0123456789" for ch in line):
            raise ValueError(f"invalid height in line {line!r}")
        grid.append([int(ch) for ch in line])
    if not grid:
        raise ValueError("empty map")
    return grid


def _neighbors(position: Position) -> Iterator[Position]:
    x, y = position
    yield from ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))


def _inside(grid: Grid, position: Position) -> bool:
    x, y = position
    return 0 <= x < len(grid[0]) and 0 <= y < len(grid)


def _uphill(grid: Grid, position: Position) -> Iterator[Position]:
    """Neighbours exactly one step higher than ``position``."""
    x, y = position
    for neighbor in _neighbors(position):
        nx, ny = neighbor
        if _inside(grid, neighbor) and grid[ny][nx] == grid[y][x] + 1:
            yield neighbor


def trailheads(grid: Grid) -> list[Position]:
    """Every position of height zero, row by row."""
    return [
        (x, y)
        for y, row in enumerate(grid)
        for x, height in enumerate(row)
        if height == 0
    ]


def trailhead_score(grid: Grid, trailhead: Position) -> int:
    """Number of distinct peaks reachable from the trailhead."""
    seen = {trailhead}
    frontier = [trailhead]
    found = 0
    while frontier:
        next_frontier = []
        for source in frontier:
            for neighbor in _uphill(grid, source):
                if neighbor in seen:
                    continue
                seen.add(neighbor)
                if grid[neighbor[1]][neighbor[0]] == _PEAK:
                    found += 1
                else:
                    next_frontier.append(neighbor)
        frontier = next_frontier
    return found


def trailhead_score_total(grid: Grid) -> int:
    """Sum of the scores of all trailheads."""
    return sum(trailhead_score(grid, trailhead) for trailhead in trailheads(grid))


def trailhead_rating_total(grid: Grid) -> int:
    """Sum over all trailheads of the number of distinct hiking trails."""
    memo: dict[Position, int] = {}

    def rating(position: Position) -> int:
        if position in memo:
            return memo[position]
        x, y = position
        if grid[y][x] == _PEAK:
            return 1
        count = sum(rating(neighbor) for neighbor in _uphill(grid, position))
        memo[position] = count
        return count

    return sum(rating(trailhead) for trailhead in trailheads(grid))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Evaluate hiking trails.")
    parser.add_argument("input", nargs="?", default="inputs/10.txt", type=Path)
    args = parser.parse_args(argv)

    grid = parse_map(args.input.read_text())
    print(f"A total trailhead score of {trailhead_score_total(grid)}")
    print(f"A total trailhead rating of {trailhead_rating_total(grid)}")