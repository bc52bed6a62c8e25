"""Floors reached by following parentheses."""

from __future__ import annotations

from itertools import accumulate

_STEPS = {"(": 1, ")": -1}


def _floors(text: str):
    return accumulate(_STEPS.get(char, 0) for char in text)


def part1(text: str) -> int:
    """Return the floor reached after all directions."""
    return text.count("(") - text.count(")")


def part2(text: str) -> int:
    """Return the 1-based position of the first step into the basement."""
    for position, floor in enumerate(_floors(text), start=1):
        if floor == -1:
            return position
    raise ValueError("directions never reach the basement")