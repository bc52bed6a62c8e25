import pytest

from aocsolve.y2024_day10 import (
    find_trailheads,
    part1,
    part2,
    trail_rating,
    trail_score,
)

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def _parse(text):
    return [[int(char) for char in line] for line in text.splitlines()]


def test_part1_example():
    assert part1(EXAMPLE) == 36


def test_part2_example():
    assert part2(EXAMPLE) == 81


def test_trailheads_of_straight_line():
    assert find_trailheads(_parse("0123456789")) == [(0, 0)]


def test_trailheads_are_zero_heights():
    grid = _parse(EXAMPLE)
    heads = find_trailheads(grid)
    assert heads
    assert all(grid[y][x] == 0 for x, y in heads)


def test_score_never_exceeds_rating():
    grid = _parse(EXAMPLE)
    for start in find_trailheads(grid):
        assert trail_score(grid, start) <= trail_rating(grid, start)


def test_parts_sum_scores_and_ratings():
    grid = _parse(EXAMPLE)
    heads = find_trailheads(grid)
    assert part1(EXAMPLE) == sum(trail_score(grid, h) for h in heads)
    assert part2(EXAMPLE) == sum(trail_rating(grid, h) for h in heads)


def test_map_without_trailheads_scores_nothing():
    assert part1("987\n654\n") == 0
    assert part2("987\n654\n") == 0


def test_start_outside_map_is_rejected():
    with pytest.raises(ValueError):
        trail_score(_parse("0123456789"), (20, 0))