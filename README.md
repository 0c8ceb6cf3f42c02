# advent_puzzles

Solutions to seventeen days of a December programming-puzzle series, written
as a plain Python library with one module per day and a command for each.
Nothing beyond the standard library is needed; Python 3.10 or later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Each command solves one day and prints its answers. It takes the path of the
puzzle input as an optional argument; by default it reads `inputs/<day>.txt`
relative to the current directory (for example `inputs/1.txt` for day one).

| Command              | What it prints                                                        |
|----------------------|-----------------------------------------------------------------------|
| `advent-day01`       | total distance and similarity score of two lists of location ids      |
| `advent-day02`       | safe reports, then reports safe once one level is dropped             |
| `advent-day03`       | sum of `mul(a,b)` products, then the sum over segments that start at the beginning or at `do()` and end at `don't()` |
| `advent-day04`       | `XMAS` occurrences in every direction, then crossed `MAS` shapes      |
| `advent-day05`       | middle-page sum of valid updates, then of reordered invalid updates   |
| `advent-day06`       | cells the guard visits, then single obstructions that trap it          |
| `advent-day07`       | calibration total with `+` and `*`, then with concatenation as well   |
| `advent-day08`       | antinode count, then harmonic antinode count                          |
| `advent-day09`       | checksum after block-by-block compaction, then whole-file compaction  |
| `advent-day10`       | total trailhead score, then total trailhead rating                     |
| `advent-day11`       | stone count after 25 blinks, then after 75                            |
| `advent-day12`       | fencing cost by perimeter, then by number of sides                     |
| `advent-day13`       | tokens needed for all winnable prizes, then with prizes moved by 10000000000000 |
| `advent-day14`       | safety factor after 100 seconds                                       |
| `advent-day15`       | final warehouse map and the boxes' GPS sum                            |
| `advent-day15-wide`  | the same on a map with every tile doubled in width                    |
| `advent-day16`       | lowest maze score, then the number of cells on any cheapest route     |
| `advent-day17`       | the comma-separated output of the three-bit program                   |

For example:

```
advent-day07 inputs/7.txt
```

`advent-day14` also has an interactive mode for spotting the picture the
robots form: `--explore` prints the floor at `--start` seconds (default 230)
and asks whether to go on, moving forward `--step` seconds (default 101) each
time.

```
advent-day14 --explore --start 230 --step 101
```

## Using the library

Every day is a module such as `advent_puzzles.day01`, built from small
functions that take parsed values and return answers, so they can be used
without any input file:

```python
from advent_puzzles.day01 import parse_lists, total_distance, similarity_score

left, right = parse_lists("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
print(total_distance(left, right))    # 11
print(similarity_score(left, right))  # 31
```

A few more entry points:

- `advent_puzzles.day02.is_safe` and `is_tolerably_safe` check a single report.
- `advent_puzzles.day03.DraftExpression` is a character-by-character
  recogniser for `mul(a,b)` expressions; `scan_expressions` runs it over a text.
- `advent_puzzles.day05.Requirement.parse` reads an `a|b` ordering rule and
  raises `RequirementParsingError` on malformed input; `reorder_update` sorts
  an update by the rules that apply to it.
- `advent_puzzles.day09.compact_blocks` and `compact_files` return the
  compacted disk; `checksum` scores it.
- `advent_puzzles.day11.count_stones` counts stones after any number of blinks.
- `advent_puzzles.day12.find_regions` returns each `Region` with its plant,
  area, perimeter and number of sides.
- `advent_puzzles.day13.Machine.min_tokens_needed` returns the token cost of a
  prize, or `None` when it cannot be won.
- `advent_puzzles.day14.Robot.position_after` and `render` show where the
  robots are after a given number of seconds.
- `advent_puzzles.day15.simulate_narrow` and
  `advent_puzzles.day15_wide.simulate_wide` return the final map and GPS sum.
- `advent_puzzles.day16.min_score` and `best_position_count` search a maze;
  `get_distances` gives the cheapest cost to every reachable state.
- `advent_puzzles.day17.run_program` executes a program on a `Memory` and
  raises `InvalidComboOperand` or `InvalidOpcode` on bad instructions.

## What it does not do

Only days one to seventeen are covered, and day seventeen only runs the
program it is given: there is no search for a register value that makes the
program print itself. Day fourteen's picture is found by eye in the
interactive mode, not detected automatically.