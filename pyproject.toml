[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent_puzzles"
version = "0.1.0"
description = "Solutions to seventeen days of a December programming-puzzle series, from list distances to a three-bit computer."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "grid", "pathfinding", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent-day01 = "advent_puzzles.day01:main"
advent-day02 = "advent_puzzles.day02:main"
advent-day03 = "advent_puzzles.day03:main"
advent-day04 = "advent_puzzles.day04:main"
advent-day05 = "advent_puzzles.day05:main"
advent-day06 = "advent_puzzles.day06:main"
advent-day07 = "advent_puzzles.day07:main"
advent-day08 = "advent_puzzles.day08:main"
advent-day09 = "advent_puzzles.day09:main"
advent-day10 = "advent_puzzles.day10:main"
advent-day11 = "advent_puzzles.day11:main"
advent-day12 = "advent_puzzles.day12:main"
advent-day13 = "advent_puzzles.day13:main"
advent-day14 = "advent_puzzles.day14:main"
advent-day15 = "advent_puzzles.day15:main"
advent-day15-wide = "advent_puzzles.day15_wide:main"
advent-day16 = "advent_puzzles.day16:main"
advent-day17 = "advent_puzzles.day17:main"

[tool.hatch.build.targets.wheel]
packages = ["advent_puzzles"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
