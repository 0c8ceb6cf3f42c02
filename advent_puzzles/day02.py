"""Reactor reports: strictly monotonic level changes of one to three."""

from __future__ import annotations

import argparse
from itertools import pairwise
from pathlib import Path


def parse_reports(text: str) -> list[list[int]]:
    """One report of integer levels per line."""
    return [[int(word) for word in line.split()] for line in text.splitlines()]


def is_safe(levels: list[int]) -> bool:
    """True if all steps rise by 1..3 or all fall by 1..3."""
    differences = [b - a for a, b in pairwise(levels)]
    return all(1 <= d <= 3 for d in differences) or all(
        -3 <= d <= -1 for d in differences
    )


def is_tolerably_safe(levels: list[int]) -> bool:
    """True if the report is safe, or becomes safe without one level."""
    if is_safe(levels):
        return True
    return any(is_safe(levels[:i] + levels[i + 1 :]) for i in range(len(levels)))


def count_safe(reports: list[list[int]]) -> int:
    return sum(1 for report in reports if is_safe(report))


def count_tolerable(reports: list[list[int]]) -> int:
    return sum(1 for report in reports if is_tolerably_safe(report))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count safe reactor reports.")
    parser.add_argument("input", nargs="?", default="inputs/2.txt", type=Path)
    args = parser.parse_args(argv)

    reports = parse_reports(args.input.read_text())
    print(f"{count_safe(reports)} safe reports")
    print(f"{count_tolerable(reports)} tolerable reports")