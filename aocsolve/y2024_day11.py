"""Plutonian pebbles: stones that change every time you blink."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache


def evolve(stone: int) -> list[int]:
    """Return what a single stone becomes after one blink."""
    if stone < 0:
        raise ValueError(f"stones carry non-negative numbers, got {stone}")
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [stone * 2024]


def blink(stones: Iterable[int]) -> list[int]:
    """Return the row of stones after one blink."""
    return [new for stone in stones for new in evolve(stone)]


def count_stones(stones: Iterable[int], times: int) -> int:
    """Return how many stones there are after blinking the given number of times."""
    if times < 0:
        raise ValueError(f"cannot blink a negative number of times: {times}")

    @lru_cache(maxsize=None)
    def count(stone: int, remaining: int) -> int:
        if remaining == 0:
            return 1
        return sum(count(new, remaining - 1) for new in evolve(stone))

    return sum(count(stone, times) for stone in stones)


def _stones(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def part1(text: str) -> int:
    """Return the number of stones after 25 blinks."""
    return count_stones(_stones(text), 25)


def part2(text: str) -> int:
    """Return the number of stones after 75 blinks."""
    return count_stones(_stones(text), 75)