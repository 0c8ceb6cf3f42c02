"""Chronospatial computer: a three-bit machine with three registers."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

_SEPARATORS = re.compile(r"[^0-9-]")


class InvalidComboOperand(ValueError):
    """A combo operand outside the range 0 to 6."""


class InvalidOpcode(ValueError):
    """An instruction the machine does not know."""


@dataclass
class Memory:
    """The three registers of the machine."""

    a: int
    b: int
    c: int


def _extract_numbers(line: str) -> list[int]:
    numbers = []
    for word in _SEPARATORS.split(line):
        try:
            numbers.append(int(word))
        except ValueError:
            continue
    return numbers


def parse_program(text: str) -> tuple[Memory, list[int]]:
    """Initial registers and the program from the puzzle input."""
    lines = iter(_extract_numbers(line) for line in text.splitlines() if line)
    registers = []
    for name in "ABC":
        numbers = next(lines, None)
        if not numbers:
            raise ValueError(f"Missing register {name} information")
        registers.append(numbers[0])
    program = next(lines, None)
    if program is None:
        raise ValueError("Missing program information")
    return Memory(*registers), program


def evaluate_combo(operand: int, memory: Memory) -> int:
    """The value a combo operand stands for."""
    if 0 <= operand <= 3:
        return operand
    if operand == 4:
        return memory.a
    if operand == 5:
        return memory.b
    if operand == 6:
        return memory.c
    raise InvalidComboOperand(f"invalid combo operand {operand}")


def _divide(value: int, exponent: int) -> int:
    """``value`` divided by ``2 ** exponent``, truncated toward zero."""
    if exponent < 0:
        raise ValueError(f"negative exponent {exponent}")
    quotient = abs(value) >> exponent
    return -quotient if value < 0 else quotient


def run_program(memory: Memory, program: list[int]) -> list[int]:
    """Run the program, updating ``memory``, and return what it outputs."""
    output: list[int] = []
    pointer = 0
    while pointer < len(program):
        instruction = program[pointer]
        if pointer + 1 >= len(program):
            raise ValueError("Failed to read operand")
        operand = program[pointer + 1]

        match instruction:
            case 0:
                memory.a = _divide(memory.a, evaluate_combo(operand, memory))
            case 1:
                memory.b ^= operand
            case 2:
                memory.b = evaluate_combo(operand, memory) % 8
            case 3:
                if memory.a != 0:
                    if operand < 0:
                        raise ValueError(f"invalid jump target {operand}")
                    pointer = operand
                    continue
            case 4:
                memory.b ^= memory.c
            case 5:
                output.append(evaluate_combo(operand, memory) % 8)
            case 6:
                memory.b = _divide(memory.a, evaluate_combo(operand, memory))
            case 7:
                memory.c = _divide(memory.a, evaluate_combo(operand, memory))
            case _:
                raise InvalidOpcode(f"Invalid opcode! {instruction}")

        pointer += 2
    return output


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the three-bit computer.")
    parser.add_argument("input", nargs="?", default="inputs/17.txt", type=Path)
    args = parser.parse_args(argv)

    memory, program = parse_program(args.input.read_text())
    print(",".join(str(value) for value in run_program(memory, program)))