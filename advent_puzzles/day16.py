"""Reindeer maze: the cheapest route and the cells on any cheapest route."""

from __future__ import annotations

import argparse
import heapq
from dataclasses import dataclass
from enum import Enum
from itertools import count
from pathlib import Path

TURN_COST = 1_000
MOVE_COST = 1

Position = tuple[int, int]
Maze = list[str]


class Direction(Enum):
    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)

    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def turned_clockwise(self) -> Direction:
        dx, dy = self.value
        return Direction((-dy, dx))

    def turned_counter_clockwise(self) -> Direction:
        dx, dy = self.value
        return Direction((dy, -dx))

    def move_from(self, position: Position) -> Position:
        """The position one step away in this direction."""
        dx, dy = self.value
        return position[0] + dx, position[1] + dy


def _is_open(maze: Maze, position: Position) -> bool:
    x, y = position
    return 0 <= y < len(maze) and 0 <= x < len(maze[y]) and maze[y][x] == "."


@dataclass(frozen=True)
class Node:
    """A reindeer state: where it stands and which way it faces."""

    position: Position
    direction: Direction

    def neighbors(self, maze: Maze) -> list[tuple[int, Node]]:
        """Reachable states with their costs: two turns and a step forward."""
        candidates = [
            (TURN_COST, Node(self.position, self.direction.turned_clockwise())),
            (
                TURN_COST,
                Node(self.position, self.direction.turned_counter_clockwise()),
            ),
            (
                MOVE_COST,
                Node(self.direction.move_from(self.position), self.direction),
            ),
        ]
        return [(cost, node) for cost, node in candidates if _is_open(maze, node.position)]


def parse_maze(text: str) -> tuple[Maze, Position, Position]:
    """The maze with ``S`` and ``E`` opened up, plus the start and goal."""
    maze: Maze = []
    start: Position | None = None
    goal: Position | None = None
    for y, line in enumerate(text.splitlines()):
        if "S" in line:
            start = (line.index("S"), y)
        if "E" in line:
            goal = (line.index("E"), y)
        maze.append(line.replace("S", ".").replace("E", "."))
    if start is None:
        raise ValueError("Failed to find starting position.")
    if goal is None:
        raise ValueError("Failed to find goal position.")
    return maze, start, goal


def get_distances(start: Node, maze: Maze) -> dict[Node, int]:
    """Cheapest cost from ``start`` to every reachable state."""
    distances = {start: 0}
    confirmed: set[Node] = set()
    tie = count()
    heap = [(0, next(tie), start)]
    while heap:
        distance, _, node = heapq.heappop(heap)
        if node in confirmed or distance > distances[node]:
            continue
        confirmed.add(node)
        for cost, neighbor in node.neighbors(maze):
            if neighbor in confirmed:
                continue
            new_distance = distance + cost
            if new_distance < distances.get(neighbor, new_distance + 1):
                distances[neighbor] = new_distance
                heapq.heappush(heap, (new_distance, next(tie), neighbor))
    return distances


def _goal_arrivals(
    distances: dict[Node, int], goal: Position
) -> dict[Direction, int]:
    return {
        direction: distances[Node(goal, direction)]
        for direction in Direction
        if Node(goal, direction) in distances
    }


def min_score(start: Position, goal: Position, maze: Maze) -> int | None:
    """Lowest score from ``start`` facing east to ``goal``, or None."""
    arrivals = _goal_arrivals(get_distances(Node(start, Direction.EAST), maze), goal)
    return min(arrivals.values(), default=None)


def best_position_count(start: Position, goal: Position, maze: Maze) -> int:
    """Number of open cells lying on at least one cheapest route."""
    from_start = get_distances(Node(start, Direction.EAST), maze)
    arrivals = _goal_arrivals(from_start, goal)
    if not arrivals:
        raise ValueError("No path could be found!")
    best = min(arrivals.values())

    # Search backwards from each cheapest way of arriving at the goal.
    from_goals = [
        get_distances(Node(goal, direction.opposite()), maze)
        for direction, distance in arrivals.items()
        if distance == best
    ]

    def on_best_path(position: Position) -> bool:
        for direction in Direction:
            forward = Node(position, direction)
            backward = Node(position, direction.opposite())
            if forward not in from_start:
                continue
            for from_goal in from_goals:
                if (
                    backward in from_goal
                    and from_start[forward] + from_goal[backward] == best
                ):
                    return True
        return False

    return sum(
        1
        for y, row in enumerate(maze)
        for x, ch in enumerate(row)
        if ch == "." and on_best_path((x, y))
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Race through the reindeer maze.")
    parser.add_argument("input", nargs="?", default="inputs/16.txt", type=Path)
    args = parser.parse_args(argv)

    maze, start, goal = parse_maze(args.input.read_text())
    score = min_score(start, goal, maze)
    if score is None:
        raise SystemExit("No path could be found!")
    print(f"A minimum score of {score}")
    print(f"{best_position_count(start, goal, maze)} best viewing positions")