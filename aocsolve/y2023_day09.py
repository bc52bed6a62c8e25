"""Extrapolating sequences by repeated differences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def _differences(values: Sequence[int]) -> list[int]:
    return [b - a for a, b in pairwise(values)]


def _check(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("cannot extrapolate an empty sequence")


def extrapolate_next(values: Sequence[int]) -> int:
    """Return the value that follows the sequence."""
    _check(values)
    if all(value == values[0] for value in values):
        return values[-1]
    return values[-1] + extrapolate_next(_differences(values))


def extrapolate_previous(values: Sequence[int]) -> int:
    """Return the value that comes before the sequence."""
    _check(values)
    if all(value == values[0] for value in values):
        return values[0]
    return values[0] - extrapolate_previous(_differences(values))


def _sequences(text: str) -> list[list[int]]:
    return [[int(token) for token in line.split()] for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Return the sum of the next values of every sequence."""
    return sum(extrapolate_next(values) for values in _sequences(text))


def part2(text: str) -> int:
    """Return the sum of the previous values of every sequence."""
    return sum(extrapolate_previous(values) for values in _sequences(text))