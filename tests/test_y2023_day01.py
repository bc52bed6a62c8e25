import pytest

from aocsolve.y2023_day01 import (
    calibration_value,
    part1,
    part2,
    replace_digit_words,
)


def test_calibration_value_first_and_last():
    assert calibration_value("1abc2") == 12


def test_calibration_value_single_digit_repeats():
    assert calibration_value("treb7uchet") == calibration_value("77")


def test_calibration_value_without_digits():
    with pytest.raises(ValueError):
        calibration_value("abc")


def test_replace_digit_words_plain():
    assert replace_digit_words("xsevenx") == "x7x"


@pytest.mark.parametrize(
    "word, digits",
    [("twone", "21"), ("eighthree", "83"), ("oneight", "18"), ("nine", "9")],
)
def test_replace_digit_words_table(word, digits):
    assert replace_digit_words(word) == digits


def test_part1_sums_lines():
    assert part1("1abc2\na7b\n") == calibration_value("1abc2") + calibration_value(
        "a7b"
    )


def test_part2_uses_words():
    assert part2("two1nine\n") == calibration_value("219")


def test_part2_equals_part1_without_words():
    text = "1abc2\npqr3stu8vwx\n"
    assert part2(text) == part1(text)


def test_part1_rejects_blank_line():
    with pytest.raises(ValueError):
        part1("12\n\n34")