"""Reactor reports: safe level sequences, with an optional dampener."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def is_safe(levels: Sequence[int]) -> bool:
    """Tell whether levels move steadily in one direction by 1 to 3."""
    if len(levels) < 2:
        return False
    diffs = [a - b for a, b in pairwise(levels)]
    return all(1 <= d <= 3 for d in diffs) or all(-3 <= d <= -1 for d in diffs)


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """Tell whether levels are safe, or become safe without one level."""
    levels = list(levels)
    return is_safe(levels) or any(
        is_safe(levels[:i] + levels[i + 1 :]) for i in range(len(levels))
    )


def _reports(text: str) -> list[list[int]]:
    return [[int(token) for token in line.split()] for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Return the number of safe reports."""
    return sum(is_safe(report) for report in _reports(text))


def part2(text: str) -> int:
    """Return the number of reports safe with the dampener."""
    return sum(is_safe_with_dampener(report) for report in _reports(text))