"""Bridge calibration: equations whose operators were lost."""

from __future__ import annotations

import argparse
from pathlib import Path


def parse_equations(text: str) -> list[tuple[int, list[int]]]:
    """Lines of ``result: n1 n2 ...`` as ``(result, [n1, n2, ...])``."""
    equations = []
    for line in text.splitlines():
        parts = line.split(":")
        if len(parts) < 2:
            raise ValueError(f"Failed to parse a line: {line!r}")
        equations.append((int(parts[0]), [int(n) for n in parts[1].split()]))
    return equations


def _split(nums: list[int]) -> tuple[list[int], int]:
    if not nums:
        raise ValueError("an equation needs at least one operand")
    return nums[:-1], nums[-1]


def is_possibly_true(result: int, nums: list[int]) -> bool:
    """True if ``+`` and ``*`` applied left to right can reach ``result``."""
    rest, last = _split(nums)
    if not rest:
        return result == last
    return is_possibly_true(result - last, rest) or (
        last != 0 and result % last == 0 and is_possibly_true(result // last, rest)
    )


def is_possibly_true_with_concat(result: int, nums: list[int]) -> bool:
    """Like :func:`is_possibly_true`, also allowing digit concatenation."""
    rest, last = _split(nums)
    if not rest:
        return result == last
    if last < 0:
        raise ValueError("concatenation needs non-negative operands")
    place_value = 10 ** len(str(last))
    remainder = result - last
    return (
        is_possibly_true_with_concat(remainder, rest)
        or (
            last != 0
            and result % last == 0
            and is_possibly_true_with_concat(result // last, rest)
        )
        or (
            remainder % place_value == 0
            and is_possibly_true_with_concat(remainder // place_value, rest)
        )
    )


def calibration_total(
    equations: list[tuple[int, list[int]]], allow_concat: bool = False
) -> int:
    """Sum of the results of the equations that can be made true."""
    check = is_possibly_true_with_concat if allow_concat else is_possibly_true
    return sum(result for result, nums in equations if check(result, nums))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Repair calibration equations.")
    parser.add_argument("input", nargs="?", default="inputs/7.txt", type=Path)
    args = parser.parse_args(argv)

    equations = parse_equations(args.input.read_text())
    print(f"A total calibration result of {calibration_total(equations)}")
    print(
        "A revised total calibration result of "
        f"{calibration_total(equations, allow_concat=True)}"
    )