import pytest

from advent_puzzles.day01 import main, parse_lists, similarity_score, total_distance

EXAMPLE = """3   4
4   3
2   5
1   3
3   9
3   3
"""


def test_parse_lists_splits_columns():
    assert parse_lists("3   4\n4   3\n") == ([3, 4], [4, 3])


def test_example_distance():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == 11


def test_example_similarity():
    left, right = parse_lists(EXAMPLE)
    assert similarity_score(left, right) == 31


def test_distance_is_symmetric():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)


def test_distance_of_identical_lists_is_zero():
    left, _ = parse_lists(EXAMPLE)
    assert total_distance(left, list(reversed(left))) == 0


def test_similarity_ignores_absent_values():
    assert similarity_score([7, 8], [1, 2, 3]) == similarity_score([], [1, 2, 3])


def test_missing_second_item():
    with pytest.raises(ValueError, match="Missing second item in line 0"):
        parse_lists("3\n")


def test_missing_first_item():
    with pytest.raises(ValueError, match="Missing first item in line 1"):
        parse_lists("1 2\n\n")


def test_unparseable_item():
    with pytest.raises(ValueError, match="first item in line 0"):
        parse_lists("x 2\n")


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "1.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    out = capsys.readouterr().out
    left, right = parse_lists(EXAMPLE)
    assert f"An overall difference of {total_distance(left, right)}" in out
    assert f"An overall similarity of {similarity_score(left, right)}" in out