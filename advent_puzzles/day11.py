"""Plutonian pebbles: stones that change and split every blink."""

from __future__ import annotations

import argparse
from functools import lru_cache
from pathlib import Path

_MULTIPLIER = 2024


def parse_stones(text: str) -> list[int]:
    """Whitespace-separated stone numbers."""
    try:
        return [int(word) for word in text.split()]
    except ValueError as exc:
        raise ValueError("Failed to parse a number") from exc


def _transform(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    if stone < 0:
        raise ValueError(f"stone numbers must not be negative: {stone}")
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * _MULTIPLIER,)


def blink(stones: list[int]) -> list[int]:
    """The row of stones after one blink."""
    return [new for stone in stones for new in _transform(stone)]


@lru_cache(maxsize=None)
def _count(stone: int, blinks: int) -> int:
    if blinks == 0:
        return 1
    return sum(_count(new, blinks - 1) for new in _transform(stone))


def count_stones(stone: int, blinks: int) -> int:
    """How many stones one stone becomes after ``blinks`` blinks."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    return _count(stone, blinks)


def count_after(stones: list[int], blinks: int) -> int:
    """How many stones the whole row becomes after ``blinks`` blinks."""
    return sum(count_stones(stone, blinks) for stone in stones)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Watch the stones change.")
    parser.add_argument("input", nargs="?", default="inputs/11.txt", type=Path)
    args = parser.parse_args(argv)

    stones = parse_stones(args.input.read_text())
    row = stones
    for _ in range(25):
        row = blink(row)
    print(f"{len(row)} stones")
    print(f"{count_after(stones, 75)} stones")