import pytest

from aocsolve.y2023_day04 import Card, parse_card, part1, part2, score

EXAMPLE = """\
Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11
"""


def test_part1_example():
    assert part1(EXAMPLE) == 13


def test_part2_example():
    assert part2(EXAMPLE) == 30


def test_score_of_first_card():
    assert score(parse_card(EXAMPLE.splitlines()[0])) == 8


def test_parse_card_fields():
    card = parse_card("Card   3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1")
    assert card == Card(
        id=3,
        winning=[1, 21, 53, 59, 44],
        numbers={69, 82, 63, 72, 16, 21, 14, 1},
    )


def test_no_match_scores_nothing():
    assert score(parse_card("Card 9: 1 2 | 3 4")) == 0


def test_score_doubles_with_each_extra_match():
    one = score(parse_card("Card 1: 1 2 3 | 1"))
    two = score(parse_card("Card 1: 1 2 3 | 1 2"))
    three = score(parse_card("Card 1: 1 2 3 | 1 2 3"))
    assert two == 2 * one
    assert three == 2 * two


def test_part2_counts_every_original_card():
    assert part2(EXAMPLE) >= len(EXAMPLE.splitlines())


def test_copy_of_missing_card_still_counts():
    assert part2("Card 1: 5 | 5") == 2 * part2("Card 1: 5 | 6")


def test_malformed_card_raises():
    with pytest.raises(ValueError):
        parse_card("garbage")