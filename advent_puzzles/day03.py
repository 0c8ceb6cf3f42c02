"""Corrupted memory: find and evaluate ``mul(X,Y)`` instructions."""

from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import NamedTuple

_PARTS = ("mul(", ",", ")")
_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_ENABLED = re.compile(r"(^|do\(\))[\s\S]*?(don't\(\))")


class _Expecting(NamedTuple):
    digit: bool
    char: str | None


_NOTHING = _Expecting(False, None)


class DraftExpression:
    """Character-by-character recogniser for ``mul(digits,digits)``."""

    def __init__(self) -> None:
        self._text: list[str] = []
        self._part = 0
        self._index = 0

    def _expecting(self) -> _Expecting:
        current = _PARTS[self._part]
        if self._index < len(current):
            return _Expecting(False, current[self._index])
        if self._part == len(_PARTS) - 1:
            return _NOTHING
        if self._index == len(current):
            return _Expecting(True, None)
        return _Expecting(True, _PARTS[self._part + 1][0])

    def push(self, ch: str) -> None:
        """Feed one character, restarting the draft when it does not fit."""
        expectation = self._expecting()
        is_right_digit = expectation.digit and ch in "0123456789"
        is_right_char = expectation.char == ch

        if is_right_digit or is_right_char:
            self._text.append(ch)
            self._index += 1
            if is_right_char and expectation.digit:
                self._part += 1
                self._index = 1
        elif ch == _PARTS[0][0]:
            self.clear()
            self._text.append(ch)
            self._index += 1
        else:
            self.clear()

    def is_ready(self) -> bool:
        """True once a whole expression has been recognised."""
        return self._expecting() == _NOTHING

    def take_text(self) -> str:
        """Return the recognised text and reset the draft."""
        text = "".join(self._text)
        self.clear()
        return text

    def clear(self) -> None:
        self._text.clear()
        self._part = 0
        self._index = 0


def scan_expressions(text: str) -> list[str]:
    """All ``mul(X,Y)`` expressions found by the hand-written recogniser."""
    expressions = []
    draft = DraftExpression()
    for ch in text:
        draft.push(ch)
        if draft.is_ready():
            expressions.append(draft.take_text())
    return expressions


def sum_products(text: str) -> int:
    """Sum of the products of every ``mul(X,Y)`` in the text."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def sum_enabled_products(text: str) -> int:
    """Sum of products inside segments that end in ``don't()``.

    A segment starts at the beginning of the text or at ``do()``.
    """
    return sum(sum_products(match.group(0)) for match in _ENABLED.finditer(text))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Evaluate corrupted instructions.")
    parser.add_argument("input", nargs="?", default="inputs/3.txt", type=Path)
    args = parser.parse_args(argv)

    text = args.input.read_text()
    print(f"A product sum of {sum_products(text)}")
    print(f"A revised product sum of {sum_enabled_products(text)}")