"""Claw contraption: the fewest tokens that win each prize."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path

A_COST = 3
B_COST = 1
PRIZE_OFFSET = 10000000000000

_SEPARATORS = re.compile(r"[^0-9-]")


def _extract_numbers(line: str) -> list[int]:
    numbers = []
    for word in _SEPARATORS.split(line):
        try:
            numbers.append(int(word))
        except ValueError:
            continue
    return numbers


@dataclass(frozen=True)
class Machine:
    """A claw machine: how far each button moves the claw, and the prize."""

    a_button: tuple[int, int]
    b_button: tuple[int, int]
    prize: tuple[int, int]

    def min_tokens_needed(self) -> int | None:
        """Tokens needed to reach the prize, or None if it cannot be reached."""
        matrix = [
            [
                Fraction(self.a_button[0]),
                Fraction(self.b_button[0]),
                Fraction(self.prize[0]),
            ],
            [
                Fraction(self.a_button[1]),
                Fraction(self.b_button[1]),
                Fraction(self.prize[1]),
            ],
        ]

        to_fill = 0
        for unknown in range(2):
            pivot = None
            for row in range(to_fill, 2):
                if matrix[row][unknown] != 0:
                    matrix[row], matrix[to_fill] = matrix[to_fill], matrix[row]
                    pivot = to_fill
                    to_fill += 1
                    break
            if pivot is None:
                continue
            pivot_value = matrix[pivot][unknown]
            matrix[pivot] = [value / pivot_value for value in matrix[pivot]]
            for row in range(pivot + 1, 2):
                factor = matrix[row][unknown]
                matrix[row] = [
                    value - base * factor
                    for value, base in zip(matrix[row], matrix[pivot])
                ]

        for row in reversed(range(2)):
            leading_one = next(
                (col for col in range(2) if matrix[row][col] == 1), None
            )
            if leading_one is None:
                continue
            for above in range(row):
                factor = matrix[above][leading_one]
                matrix[above] = [
                    value - base * factor
                    for value, base in zip(matrix[above], matrix[row])
                ]

        if matrix[1][0] == 0 and matrix[1][1] == 0 and matrix[1][2] != 0:
            # inconsistent system
            return None

        if matrix[0][1] != 0:
            # dependent system
            coefficient = matrix[0][1]
            value = matrix[0][2]
            b = coefficient.denominator * (value / coefficient.numerator)
            a = value - coefficient * b
            if b.denominator != 1 or a.denominator != 1:
                raise ValueError("dependent system has no integer solution")
            return A_COST * a.numerator + B_COST * b.numerator

        a = matrix[0][2]
        b = matrix[1][2]
        if a.denominator == 1 and b.denominator == 1 and a >= 0 and b >= 0:
            return A_COST * a.numerator + B_COST * b.numerator
        return None


def parse_machines(text: str, offset: int = 0) -> list[Machine]:
    """Machines described in blocks of four lines; ``offset`` moves each prize."""
    lines = text.splitlines()
    machines = []
    for start in range(0, len(lines), 4):
        description = lines[start : start + 4]
        if len(description) < 3:
            raise ValueError(f"incomplete machine description at line {start}")
        a, b, p = (_extract_numbers(line) for line in description[:3])
        if len(a) < 2 or len(b) < 2 or len(p) < 2:
            raise ValueError(f"malformed machine description at line {start}")
        machines.append(
            Machine(
                a_button=(a[0], a[1]),
                b_button=(b[0], b[1]),
                prize=(p[0] + offset, p[1] + offset),
            )
        )
    return machines


def total_tokens(machines: list[Machine]) -> int:
    """Tokens needed to win every prize that can be won."""
    total = 0
    for machine in machines:
        tokens = machine.min_tokens_needed()
        if tokens is not None:
            total += tokens
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Win prizes from claw machines.")
    parser.add_argument("input", nargs="?", default="inputs/13.txt", type=Path)
    args = parser.parse_args(argv)

    text = args.input.read_text()
    print(f"{total_tokens(parse_machines(text))} tokens are needed")
    print(f"{total_tokens(parse_machines(text, PRIZE_OFFSET))} tokens are needed")