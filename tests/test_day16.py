import pytest

from advent_puzzles.day16 import (
    MOVE_COST,
    TURN_COST,
    Direction,
    Node,
    best_position_count,
    get_distances,
    min_score,
    parse_maze,
)

CORRIDOR = "#####\n#S.E#\n#####"

CORNER = "#####\n#..E#\n#S###\n#####"

LOOP = "#####\n#...#\n#S#E#\n#...#\n#####"

LOOP_MIRRORED = "#####\n#...#\n#E#S#\n#...#\n#####"

DEAD_END = "#####\n#S#E#\n#####"


def test_parse_maze_finds_start_and_goal():
    maze, start, goal = parse_maze(CORRIDOR)
    assert start == (1, 1)
    assert goal == (3, 1)
    assert maze[1] == "#...#"


def test_parse_maze_requires_start():
    with pytest.raises(ValueError):
        parse_maze("#####\n#..E#\n#####")


def test_parse_maze_requires_goal():
    with pytest.raises(ValueError):
        parse_maze("#####\n#S..#\n#####")


def test_direction_fixed_values():
    assert Direction.opposite(Direction.NORTH) is Direction.SOUTH
    assert Direction.opposite(Direction.EAST) is Direction.WEST
    assert Direction.turned_clockwise(Direction.NORTH) is Direction.EAST
    assert Direction.turned_counter_clockwise(Direction.NORTH) is Direction.WEST


@pytest.mark.parametrize("direction", list(Direction))
def test_direction_turns_are_consistent(direction):
    assert Direction.opposite(Direction.opposite(direction)) is direction
    assert (
        Direction.turned_counter_clockwise(Direction.turned_clockwise(direction))
        is direction
    )
    assert Direction.turned_clockwise(
        Direction.turned_clockwise(direction)
    ) is Direction.opposite(direction)
    turned = direction
    for _ in range(4):
        turned = Direction.turned_clockwise(turned)
    assert turned is direction


def test_move_from():
    assert Direction.NORTH.move_from((2, 2)) == (2, 1)
    assert Direction.SOUTH.move_from((2, 2)) == (2, 3)
    assert Direction.EAST.move_from((2, 2)) == (3, 2)
    assert Direction.WEST.move_from((2, 2)) == (1, 2)


def test_neighbors_skip_walls():
    maze, start, _ = parse_maze(CORRIDOR)
    edges = Node(start, Direction.EAST).neighbors(maze)
    assert (MOVE_COST, Node((2, 1), Direction.EAST)) in edges
    assert (TURN_COST, Node(start, Direction.NORTH)) in edges
    assert (TURN_COST, Node(start, Direction.SOUTH)) in edges
    blocked = Node((3, 1), Direction.EAST).neighbors(maze)
    assert all(node.position == (3, 1) for _, node in blocked)


def test_get_distances_start_and_turn():
    maze, start, _ = parse_maze(CORRIDOR)
    distances = get_distances(Node(start, Direction.EAST), maze)
    assert distances[Node(start, Direction.EAST)] == 0
    assert distances[Node(start, Direction.NORTH)] == TURN_COST
    assert distances[Node(start, Direction.WEST)] == 2 * TURN_COST


def test_min_score_corridor():
    maze, start, goal = parse_maze(CORRIDOR)
    assert min_score(start, goal, maze) == 2 * MOVE_COST


def test_min_score_corner():
    maze, start, goal = parse_maze(CORNER)
    assert min_score(start, goal, maze) == 2 * TURN_COST + 3 * MOVE_COST


def test_min_score_unreachable():
    maze, start, goal = parse_maze(DEAD_END)
    assert min_score(start, goal, maze) is None


def test_min_score_at_start():
    maze, start, _ = parse_maze(CORRIDOR)
    assert min_score(start, start, maze) == 0


def test_mirrored_loop_has_same_score():
    maze, start, goal = parse_maze(LOOP)
    mirrored, m_start, m_goal = parse_maze(LOOP_MIRRORED)
    assert min_score(start, goal, maze) == min_score(m_start, m_goal, mirrored)


def test_best_positions_corridor_covers_all_cells():
    maze, start, goal = parse_maze(CORRIDOR)
    assert best_position_count(start, goal, maze) == "".join(maze).count(".")


def test_best_positions_loop_uses_both_branches():
    maze, start, goal = parse_maze(LOOP)
    assert best_position_count(start, goal, maze) == "".join(maze).count(".")


def test_best_positions_excludes_side_branch():
    text = "######\n#S..E#\n#.####\n######"
    maze, start, goal = parse_maze(text)
    assert best_position_count(start, goal, maze) == "".join(maze).count(".") - 1


def test_best_positions_unreachable():
    maze, start, goal = parse_maze(DEAD_END)
    with pytest.raises(ValueError):
        best_position_count(start, goal, maze)