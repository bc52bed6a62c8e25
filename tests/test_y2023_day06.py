import pytest

from aocsolve.y2023_day06 import Race, parse_races, part1, part2, ways_to_win

EXAMPLE = "Time:      7  15   30\nDistance:  9  40  200\n"


def test_part1_example():
    assert part1(EXAMPLE) == 288


def test_part2_example():
    assert part2(EXAMPLE) == 71503


def test_ways_to_win_first_race():
    assert ways_to_win(Race(7, 9)) == 4


def test_parse_races():
    time_line, distance_line = EXAMPLE.splitlines()
    assert parse_races(time_line, distance_line) == [
        Race(7, 9),
        Race(15, 40),
        Race(30, 200),
    ]


@pytest.mark.parametrize("time", [0, 1, 2, 7, 30])
def test_every_hold_wins_against_negative_record(time):
    assert ways_to_win(Race(time, -1)) == time + 1


def test_matching_best_distance_does_not_win():
    assert ways_to_win(Race(10, 25)) == 0
    assert ways_to_win(Race(10, 24)) > 0


def test_more_distance_never_more_ways():
    counts = [ways_to_win(Race(30, d)) for d in range(0, 240, 7)]
    assert counts == sorted(counts, reverse=True)


@pytest.mark.parametrize("time", [10, 11, 40, 41])
def test_winning_holds_are_symmetric(time):
    count = ways_to_win(Race(time, time))
    assert count > 0
    assert count % 2 == (1 if time % 2 == 0 else 0)


def test_mismatched_lines_raise():
    with pytest.raises(ValueError):
        parse_races("Time: 1 2", "Distance: 3")


def test_single_line_raises():
    with pytest.raises(ValueError):
        part1("Time: 7\n")