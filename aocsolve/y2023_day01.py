"""Calibration values hidden in lines of text."""

from __future__ import annotations

_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")

_WORD_TO_DIGIT = {word: str(value) for value, word in enumerate(_WORDS, start=1)}

# Spellings that share a letter, such as "twone", keep both digits when they
# are replaced before the single words.
_SHARED_LETTER = {
    first + second[1:]: _WORD_TO_DIGIT[first] + _WORD_TO_DIGIT[second]
    for first in _WORDS
    for second in _WORDS
    if first[-1] == second[0]
}


def calibration_value(line: str) -> int:
    """Return the number formed by the first and last digit of a line."""
    found = [char for char in line if char in "0123456789"]
    if not found:
        raise ValueError(f"no digit in line: {line!r}")
    return int(found[0] + found[-1])


def replace_digit_words(line: str) -> str:
    """Replace spelled-out digits with their numerals."""
    for table in (_SHARED_LETTER, _WORD_TO_DIGIT):
        for word, numeral in table.items():
            line = line.replace(word, numeral)
    return line


def part1(text: str) -> int:
    """Return the sum of calibration values using numerals only."""
    return sum(calibration_value(line) for line in text.splitlines())


def part2(text: str) -> int:
    """Return the sum of calibration values counting spelled digits."""
    return sum(
        calibration_value(replace_digit_words(line)) for line in text.splitlines()
    )