"""Historian location lists: distances and similarity."""

from __future__ import annotations

from collections import Counter


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Parse two whitespace-separated columns of integers."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"expected two numbers: {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def part1(text: str) -> int:
    """Return the total distance between the sorted lists."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Return the similarity score.

    Each distinct left number counts once, times its occurrences on the right.
    """
    left, right = parse_lists(text)
    occurrences = Counter(right)
    return sum(number * occurrences[number] for number in set(left))