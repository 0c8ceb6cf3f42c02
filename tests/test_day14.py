import pytest

from advent_puzzles.day14 import (
    Quadrant,
    Robot,
    parse_robots,
    quadrant_of,
    render,
    safety_factor,
)

EXAMPLE = """\
p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""


def test_parse_robots():
    robots = parse_robots(EXAMPLE)
    assert len(robots) == 12
    assert robots[0] == Robot((0, 4), (3, -3))
    assert robots[-1] == Robot((9, 5), (-3, -3))


def test_parse_rejects_incomplete_line():
    with pytest.raises(ValueError):
        parse_robots("p=1,2 v=3")


def test_example_safety_factor():
    assert safety_factor(parse_robots(EXAMPLE), 100, 11, 7) == 12


def test_single_robot_wraps():
    assert Robot((2, 4), (2, -3)).position_after(5, 11, 7) == (1, 3)


def test_position_after_zero_seconds_is_start():
    robot = Robot((3, 5), (-4, 7))
    assert robot.position_after(0, 11, 7) == (3, 5)


@pytest.mark.parametrize("seconds", [0, 1, 13, 100])
def test_positions_are_periodic_and_in_bounds(seconds):
    for robot in parse_robots(EXAMPLE):
        x, y = robot.position_after(seconds, 11, 7)
        assert 0 <= x < 11 and 0 <= y < 7
        assert robot.position_after(seconds + 77, 11, 7) == (x, y)


@pytest.mark.parametrize(
    ("position", "quadrant"),
    [
        ((10, 0), Quadrant.FIRST),
        ((0, 0), Quadrant.SECOND),
        ((0, 6), Quadrant.THIRD),
        ((10, 6), Quadrant.FOURTH),
        ((5, 3), Quadrant.LIMBO),
        ((5, 0), Quadrant.LIMBO),
        ((0, 3), Quadrant.LIMBO),
    ],
)
def test_quadrant_of(position, quadrant):
    assert quadrant_of(position, 11, 7) is quadrant


def test_render_shape_and_occupancy():
    robots = parse_robots(EXAMPLE)
    picture = render(robots, 100, 11, 7)
    lines = picture.split("\n")
    assert len(lines) == 11
    assert all(len(line) == 7 for line in lines)
    occupied = {robot.position_after(100, 11, 7) for robot in robots}
    assert picture.count("█") == len(occupied)
    for x, y in occupied:
        assert lines[x][y] == "█"