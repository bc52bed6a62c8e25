import pytest

from aocsolve.y2015_day01 import part1, part2


def test_part1_all_up():
    assert part1("(" * 5) == 5


def test_part1_all_down():
    assert part1(")" * 3) == -3


def test_part1_balanced_matches_empty():
    assert part1("(())()") == part1("")


def test_part1_ignores_other_characters():
    assert part1("((\n") == part1("((")


def test_part2_first_character():
    assert part2(")") == 1


def test_part2_later_position():
    assert part2("()())") == 5


def test_part2_never_in_basement():
    with pytest.raises(ValueError):
        part2("(((")