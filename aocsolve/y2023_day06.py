"""Toy boat races: how many ways there are to beat the record."""

from __future__ import annotations

from dataclasses import dataclass
from math import isqrt, prod


@dataclass(frozen=True)
class Race:
    """A race's duration and the record distance to beat."""

    time: int
    distance: int


def _fields(line: str) -> list[str]:
    return line.split(":", 1)[-1].split()


def parse_races(time_line: str, distance_line: str) -> list[Race]:
    """Pair the times and distances of two labelled lines."""
    times = [int(token) for token in _fields(time_line)]
    distances = [int(token) for token in _fields(distance_line)]
    if len(times) != len(distances):
        raise ValueError("times and distances differ in number")
    return [Race(t, d) for t, d in zip(times, distances)]


def ways_to_win(race: Race) -> int:
    """Count the button hold times that travel farther than the record."""
    time, record = race.time, race.distance
    discriminant = time * time - 4 * record
    if discriminant <= 0:
        return 0
    low = max((time - isqrt(discriminant)) // 2, 0)
    while low > 0 and (low - 1) * (time - low + 1) > record:
        low -= 1
    while low <= time and low * (time - low) <= record:
        low += 1
    high = time - low
    return max(high - low + 1, 0)


def _two_lines(text: str) -> tuple[str, str]:
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    return lines[0], lines[1]


def part1(text: str) -> int:
    """Return the product of the ways to win each race."""
    return prod(ways_to_win(race) for race in parse_races(*_two_lines(text)))


def part2(text: str) -> int:
    """Return the ways to win the single race formed by joining the digits."""
    time_line, distance_line = _two_lines(text)
    race = Race(
        int("".join(_fields(time_line))),
        int("".join(_fields(distance_line))),
    )
    return ways_to_win(race)