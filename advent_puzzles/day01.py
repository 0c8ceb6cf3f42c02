"""Historian location lists: distance and similarity between two columns."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split whitespace-separated pairs into a left and a right list."""
    left: list[int] = []
    right: list[int] = []
    for i, line in enumerate(text.splitlines()):
        words = line.split()
        if not words:
            raise ValueError(f"Missing first item in line {i}")
        if len(words) < 2:
            raise ValueError(f"Missing second item in line {i}")
        try:
            first = int(words[0])
        except ValueError as exc:
            raise ValueError(f"Failed to parse the first item in line {i}") from exc
        try:
            second = int(words[1])
        except ValueError as exc:
            raise ValueError(f"Failed to parse the second item in line {i}") from exc
        left.append(first)
        right.append(second)
    return left, right


def total_distance(left: list[int], right: list[int]) -> int:
    """Sum of distances between the lists once both are sorted."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: list[int], right: list[int]) -> int:
    """Sum of each left value times how often it appears on the right."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compare two location lists.")
    parser.add_argument("input", nargs="?", default="inputs/1.txt", type=Path)
    args = parser.parse_args(argv)

    left, right = parse_lists(args.input.read_text())
    print(f"An overall difference of {total_distance(left, right)}")
    print(f"An overall similarity of {similarity_score(left, right)}")