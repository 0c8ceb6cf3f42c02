"""Resonant collinearity: antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Iterator
from itertools import permutations
from math import gcd
from pathlib import Path

Position = tuple[int, int]


def parse_antennas(text: str) -> tuple[int, int, dict[str, list[Position]]]:
    """Width, height and the antenna positions for each frequency."""
    rows = text.splitlines()
    if not rows:
        raise ValueError("empty map")
    antennas: dict[str, list[Position]] = defaultdict(list)
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch != ".":
                antennas[ch].append((x, y))
    return len(rows[0]), len(rows), dict(antennas)


def _pairs(antennas: dict[str, list[Position]]) -> Iterator[tuple[Position, Position]]:
    for positions in antennas.values():
        yield from permutations(positions, 2)


def count_antinodes(text: str) -> int:
    """Unique in-bounds positions one spacing beyond each antenna pair."""
    width, height, antennas = parse_antennas(text)
    antinodes = set()
    for (x1, y1), (x2, y2) in _pairs(antennas):
        x, y = 2 * x2 - x1, 2 * y2 - y1
        if 0 <= x < width and 0 <= y < height:
            antinodes.add((x, y))
    return len(antinodes)


def count_harmonic_antinodes(text: str) -> int:
    """Unique in-bounds grid points on any line through an antenna pair."""
    width, height, antennas = parse_antennas(text)
    antinodes = set()
    for (x1, y1), (x2, y2) in _pairs(antennas):
        dx, dy = x2 - x1, y2 - y1
        divisor = gcd(dx, dy)
        dx, dy = dx // divisor, dy // divisor
        x, y = x1, y1
        while 0 <= x < width and 0 <= y < height:
            antinodes.add((x, y))
            x, y = x + dx, y + dy
    return len(antinodes)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Locate antenna antinodes.")
    parser.add_argument("input", nargs="?", default="inputs/8.txt", type=Path)
    args = parser.parse_args(argv)

    text = args.input.read_text()
    print(f"{count_antinodes(text)} unique antinode positions")
    print(f"{count_harmonic_antinodes(text)} revised unique antinode positions")