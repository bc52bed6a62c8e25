import pytest

from aocsolve.y2023_day09 import (
    extrapolate_next,
    extrapolate_previous,
    part1,
    part2,
)

EXAMPLE = """0 3 6 9 12 15
1 3 6 10 15 21
10 13 16 21 30 45
"""


def test_part1_example():
    assert part1(EXAMPLE) == 114


def test_part2_example():
    assert part2(EXAMPLE) == 2


def test_extrapolate_previous_example_line():
    assert extrapolate_previous([10, 13, 16, 21, 30, 45]) == 5


@pytest.mark.parametrize(
    "poly",
    [
        lambda n: 7,
        lambda n: 2 * n + 3,
        lambda n: n * n - 4 * n,
        lambda n: n**3 - 2 * n + 1,
    ],
)
def test_polynomials_extend_both_ways(poly):
    values = [poly(n) for n in range(6)]
    assert extrapolate_next(values) == poly(6)
    assert extrapolate_previous(values) == poly(-1)


def test_previous_is_next_of_reversed():
    for line in EXAMPLE.splitlines():
        values = [int(v) for v in line.split()]
        assert extrapolate_previous(values) == extrapolate_next(values[::-1])


def test_single_value_is_constant():
    assert extrapolate_next([42]) == 42
    assert extrapolate_previous([42]) == 42


def test_empty_sequence_raises():
    with pytest.raises(ValueError):
        extrapolate_next([])
    with pytest.raises(ValueError):
        extrapolate_previous([])


def test_blank_lines_are_ignored():
    assert part1(EXAMPLE + "\n\n") == part1(EXAMPLE)