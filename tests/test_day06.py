import pytest

from advent_puzzles.day06 import (
    Direction,
    causes_loop,
    count_loop_options,
    find_guard,
    main,
    parse_grid,
    patrol_positions,
)

SAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


@pytest.fixture
def grid():
    return parse_grid(SAMPLE)


def test_patrol_positions_sample(grid):
    assert len(patrol_positions(grid)) == 41


def test_loop_options_sample(grid):
    assert count_loop_options(grid) == 6


def test_patrol_includes_start_and_stays_on_open_cells(grid):
    visited = patrol_positions(grid)
    assert find_guard(grid) in visited
    assert all(grid[y][x] != "#" for x, y in visited)


def test_find_guard_marks_caret(grid):
    x, y = find_guard(grid)
    assert grid[y][x] == "^"


def test_find_guard_missing():
    with pytest.raises(ValueError):
        find_guard(["...", "..."])


def test_parse_empty_map():
    with pytest.raises(ValueError):
        parse_grid("")


def test_rotation_order():
    assert Direction.rotated(Direction.NORTH) is Direction.EAST
    assert Direction.rotated(Direction.EAST) is Direction.SOUTH
    assert Direction.rotated(Direction.SOUTH) is Direction.WEST
    assert Direction.rotated(Direction.WEST) is Direction.NORTH


@pytest.mark.parametrize("direction", list(Direction))
def test_rotation_cycles(direction):
    turned = direction
    for _ in range(4):
        turned = Direction.rotated(turned)
    assert turned is direction
    assert Direction.rotated(direction) is not direction


def test_opposite_moves_cancel():
    origin = (5, 7)
    assert Direction.NORTH.move_from(Direction.SOUTH.move_from(origin)) == origin
    assert Direction.EAST.move_from(Direction.WEST.move_from(origin)) == origin


def test_obstacle_off_path_causes_no_loop(grid):
    visited = patrol_positions(grid)
    off_path = next(
        (x, y)
        for y in range(len(grid))
        for x in range(len(grid[0]))
        if (x, y) not in visited and grid[y][x] == "."
    )
    assert causes_loop(grid, find_guard(grid), off_path) is False


def test_trapped_guard_raises():
    trapped = parse_grid(".#.\n#^#\n.#.\n")
    with pytest.raises(ValueError):
        patrol_positions(trapped)
    assert causes_loop(trapped, find_guard(trapped), (0, 0)) is True


def test_main_prints_results(tmp_path, capsys, grid):
    path = tmp_path / "6.txt"
    path.write_text(SAMPLE)
    main([str(path)])
    out = capsys.readouterr().out
    assert f"{len(patrol_positions(grid))} positions" in out
    assert f"{count_loop_options(grid)} options" in out