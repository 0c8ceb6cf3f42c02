"""Restroom redoubt: robots moving on a wrapping grid."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

WIDTH = 101
HEIGHT = 103
ELAPSED_SECONDS = 100

_SEPARATORS = re.compile(r"[^0-9-]")

Position = tuple[int, int]


def _extract_numbers(line: str) -> list[int]:
    numbers = []
    for word in _SEPARATORS.split(line):
        try:
            numbers.append(int(word))
        except ValueError:
            continue
    return numbers


class Quadrant(Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"
    LIMBO = "limbo"


@dataclass(frozen=True)
class Robot:
    """A robot's starting position and its velocity per second."""

    position: Position
    velocity: Position

    def position_after(
        self, seconds: int, width: int = WIDTH, height: int = HEIGHT
    ) -> Position:
        """Where the robot is after ``seconds``, wrapping at the edges."""
        return (
            (self.position[0] + self.velocity[0] * seconds) % width,
            (self.position[1] + self.velocity[1] * seconds) % height,
        )


def parse_robots(text: str) -> list[Robot]:
    """Lines of ``p=x,y v=dx,dy``."""
    robots = []
    for line in text.splitlines():
        numbers = _extract_numbers(line)
        if len(numbers) < 4:
            raise ValueError(f"malformed robot: {line!r}")
        robots.append(Robot((numbers[0], numbers[1]), (numbers[2], numbers[3])))
    return robots


def quadrant_of(
    position: Position, width: int = WIDTH, height: int = HEIGHT
) -> Quadrant:
    """The quadrant a position lies in; the middle lines belong to none."""
    x, y = position
    h_middle = width // 2
    v_middle = height // 2
    if x > h_middle and y < v_middle:
        return Quadrant.FIRST
    if x < h_middle and y < v_middle:
        return Quadrant.SECOND
    if x < h_middle and y > v_middle:
        return Quadrant.THIRD
    if x > h_middle and y > v_middle:
        return Quadrant.FOURTH
    return Quadrant.LIMBO


def safety_factor(
    robots: list[Robot],
    seconds: int = ELAPSED_SECONDS,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> int:
    """Product of the robot counts in the four quadrants."""
    counts = dict.fromkeys(Quadrant, 0)
    for robot in robots:
        counts[quadrant_of(robot.position_after(seconds, width, height), width, height)] += 1
    return (
        counts[Quadrant.FIRST]
        * counts[Quadrant.SECOND]
        * counts[Quadrant.THIRD]
        * counts[Quadrant.FOURTH]
    )


def render(
    robots: list[Robot], seconds: int, width: int = WIDTH, height: int = HEIGHT
) -> str:
    """Occupied cells as blocks, one line for each column ``x``."""
    occupied = {robot.position_after(seconds, width, height) for robot in robots}
    return "\n".join(
        "".join("█" if (x, y) in occupied else " " for y in range(height))
        for x in range(width)
    )


def _confirm(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/n] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Track the bathroom robots.")
    parser.add_argument("input", nargs="?", default="inputs/14.txt", type=Path)
    parser.add_argument(
        "--explore",
        action="store_true",
        help="show the robots step by step, looking for a picture",
    )
    parser.add_argument("--start", type=int, default=230)
    parser.add_argument("--step", type=int, default=WIDTH)
    args = parser.parse_args(argv)

    robots = parse_robots(args.input.read_text())
    print(f"A safety factor of {safety_factor(robots)} ")

    if not args.explore:
        return
    seconds = args.start
    while True:
        print(f"\nAfter {seconds} seconds:")
        print(render(robots, seconds))
        if not _confirm("Do you want to continue?"):
            break
        seconds += args.step