"""Print queue: page ordering rules and the updates that follow them."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path


class RequirementParsingError(ValueError):
    """A rule line is not of the form ``A|B``."""


@dataclass(frozen=True)
class Requirement:
    """Page ``before`` must be printed before page ``after``."""

    before: int
    after: int

    @classmethod
    def parse(cls, text: str) -> Requirement:
        parts = text.split("|")
        if len(parts) < 2:
            raise RequirementParsingError(f"invalid rule: {text!r}")
        try:
            return cls(int(parts[0]), int(parts[1]))
        except ValueError as exc:
            raise RequirementParsingError(f"invalid rule: {text!r}") from exc


def parse_manual(text: str) -> tuple[list[Requirement], list[list[int]]]:
    """Rules up to the first blank line, then comma-separated updates."""
    requirements: list[Requirement] = []
    updates: list[list[int]] = []
    in_rules = True
    for line in text.splitlines():
        if not line:
            in_rules = False
            continue
        if in_rules:
            requirements.append(Requirement.parse(line))
        else:
            updates.append([int(n) for n in line.split(",")])
    return requirements, updates


def _relevant(update: list[int], requirements: list[Requirement]) -> list[Requirement]:
    pages = set(update)
    return [r for r in requirements if r.before in pages and r.after in pages]


def is_valid_update(update: list[int], requirements: list[Requirement]) -> bool:
    """True if no applicable rule is broken by the update's order."""
    locations = {page: i for i, page in enumerate(update)}
    return all(
        locations[r.before] <= locations[r.after]
        for r in _relevant(update, requirements)
    )


def reorder_update(update: list[int], requirements: list[Requirement]) -> list[int]:
    """Order the update's pages topologically by the applicable rules."""
    incoming: dict[int, set[int]] = {page: set() for page in update}
    outgoing: dict[int, set[int]] = {page: set() for page in update}
    for rule in _relevant(update, requirements):
        outgoing[rule.before].add(rule.after)
        incoming[rule.after].add(rule.before)

    ready = [page for page, sources in incoming.items() if not sources]
    order: list[int] = []
    while ready:
        page = ready.pop()
        order.append(page)
        for target in sorted(outgoing.pop(page)):
            incoming[target].discard(page)
            if not incoming[target]:
                ready.append(target)
    return order


def sum_valid_middles(
    requirements: list[Requirement], updates: list[list[int]]
) -> int:
    """Sum of middle pages of correctly ordered updates."""
    return sum(
        update[len(update) // 2]
        for update in updates
        if is_valid_update(update, requirements)
    )


def sum_reordered_middles(
    requirements: list[Requirement], updates: list[list[int]]
) -> int:
    """Sum of middle pages of wrongly ordered updates once reordered."""
    total = 0
    for update in updates:
        if not is_valid_update(update, requirements):
            ordered = reorder_update(update, requirements)
            total += ordered[len(ordered) // 2]
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Check print queue updates.")
    parser.add_argument("input", nargs="?", default="inputs/5.txt", type=Path)
    args = parser.parse_args(argv)

    requirements, updates = parse_manual(args.input.read_text())
    print(f"A middle-page-sum of {sum_valid_middles(requirements, updates)}")
    print(
        "Rearranged, a middle-page-sum of "
        f"{sum_reordered_middles(requirements, updates)}"
    )