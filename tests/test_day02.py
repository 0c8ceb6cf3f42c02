import pytest

from advent_puzzles.day02 import (
    count_safe,
    count_tolerable,
    is_safe,
    is_tolerably_safe,
    main,
    parse_reports,
)

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_parse_reports():
    assert parse_reports("7 6 4\n1 2\n") == [[7, 6, 4], [1, 2]]


def test_parse_reports_rejects_words():
    with pytest.raises(ValueError):
        parse_reports("1 two 3\n")


def test_example_safe_count():
    assert count_safe(parse_reports(EXAMPLE)) == 2


def test_example_tolerable_count():
    assert count_tolerable(parse_reports(EXAMPLE)) == 4


def test_decreasing_and_increasing_reports():
    assert is_safe([7, 6, 4, 2, 1])
    assert is_safe([1, 3, 6, 7, 9])
    assert not is_safe([1, 2, 7, 8, 9])
    assert not is_safe([8, 6, 4, 4, 1])


def test_one_bad_level_is_tolerated():
    assert not is_safe([1, 3, 2, 4, 5])
    assert is_tolerably_safe([1, 3, 2, 4, 5])
    assert is_tolerably_safe([100, 1, 2, 3])


def test_two_bad_levels_are_not_tolerated():
    assert not is_tolerably_safe([1, 2, 7, 8, 9])
    assert not is_tolerably_safe([9, 7, 6, 2, 1])


@pytest.mark.parametrize("report", parse_reports(EXAMPLE))
def test_safe_implies_tolerable(report):
    assert not is_safe(report) or is_tolerably_safe(report)


@pytest.mark.parametrize("report", parse_reports(EXAMPLE))
def test_safety_is_reversal_invariant(report):
    assert is_safe(report) == is_safe(report[::-1])
    assert is_tolerably_safe(report) == is_tolerably_safe(report[::-1])


def test_counts_are_ordered():
    reports = parse_reports(EXAMPLE)
    assert count_safe(reports) <= count_tolerable(reports) <= len(reports)


def test_main_prints_counts(tmp_path, capsys):
    path = tmp_path / "2.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    out = capsys.readouterr().out
    reports = parse_reports(EXAMPLE)
    assert f"{count_safe(reports)} safe reports" in out
    assert f"{count_tolerable(reports)} tolerable reports" in out