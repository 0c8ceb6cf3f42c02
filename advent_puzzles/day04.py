"""Word search: count XMAS in every direction and X-shaped MAS crosses."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

_FORWARD = "XMAS"
_BACKWARD = "SAMX"

# '.' marks a cell the pattern does not care about.
_CROSS_PATTERNS = (
    ("M.M", ".A.", "S.S"),
    ("S.S", ".A.", "M.M"),
    ("S.M", ".A.", "S.M"),
    ("M.S", ".A.", "M.S"),
)


def parse_grid(text: str) -> list[str]:
    """The puzzle as a list of rows."""
    return text.splitlines()


def _dimensions(grid: list[str]) -> tuple[int, int]:
    if not grid:
        raise ValueError("empty grid")
    return len(grid[0]), len(grid)


def _lines(grid: list[str]) -> Iterator[str]:
    width, height = _dimensions(grid)
    yield from grid
    for x in range(width):
        yield "".join(row[x] for row in grid)
    for s in range(width + height - 1):
        yield "".join(grid[y][s - y] for y in range(height) if 0 <= s - y < width)
    for d in range(-(width - 1), height):
        yield "".join(grid[y][y - d] for y in range(height) if 0 <= y - d < width)


def count_xmas(grid: list[str]) -> int:
    """Occurrences of XMAS horizontally, vertically and diagonally, both ways."""
    return sum(line.count(_FORWARD) + line.count(_BACKWARD) for line in _lines(grid))


def _matches(grid: list[str], x: int, y: int, pattern: tuple[str, ...]) -> bool:
    return all(
        expected == "." or grid[y + dy][x + dx] == expected
        for dy, pattern_row in enumerate(pattern)
        for dx, expected in enumerate(pattern_row)
    )


def count_cross_mas(grid: list[str]) -> int:
    """Occurrences of two MAS diagonals crossing on an A."""
    width, height = _dimensions(grid)
    return sum(
        _matches(grid, x, y, pattern)
        for x in range(width - 2)
        for y in range(height - 2)
        for pattern in _CROSS_PATTERNS
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Search a word grid.")
    parser.add_argument("input", nargs="?", default="inputs/4.txt", type=Path)
    args = parser.parse_args(argv)

    grid = parse_grid(args.input.read_text())
    print(f"{count_xmas(grid)} instances of XMAS!")
    print(f"{count_cross_mas(grid)} instances of cross-MAS!")