"""Corrupted memory: summing mul instructions."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_DISABLED = re.compile(r"don't\(\).*?do\(\)", re.DOTALL)


def sum_multiplications(text: str) -> int:
    """Return the sum of the products of every mul(a,b) in the text."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def strip_disabled(text: str) -> str:
    """Remove every span from don't() to the next do(), and all after a last don't."""
    return _DISABLED.sub("", text).split("don't", 1)[0]


def part1(text: str) -> int:
    """Return the sum of all multiplications."""
    return sum_multiplications(text)


def part2(text: str) -> int:
    """Return the sum of multiplications that are enabled."""
    return sum_multiplications(strip_disabled(text))