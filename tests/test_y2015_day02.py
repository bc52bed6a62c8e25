import pytest

from aocsolve.y2015_day02 import parse_boxes, part1, part2


def test_parse_boxes():
    assert parse_boxes("2x3x4\n1x1x10\n") == [(2, 3, 4), (1, 1, 10)]


def test_parse_boxes_skips_blank_lines():
    assert parse_boxes("\n2x3x4\n\n") == [(2, 3, 4)]


def test_parse_boxes_rejects_malformed():
    with pytest.raises(ValueError):
        parse_boxes("2x3")


def test_part1_example():
    assert part1("2x3x4") == 58


def test_part2_example():
    assert part2("2x3x4") == 34


@pytest.mark.parametrize("solve", [part1, part2])
def test_totals_are_additive(solve):
    assert solve("2x3x4\n1x1x10") == solve("2x3x4") + solve("1x1x10")


@pytest.mark.parametrize("solve", [part1, part2])
def test_dimension_order_does_not_matter(solve):
    assert solve("2x3x4") == solve("4x2x3") == solve("3x4x2")