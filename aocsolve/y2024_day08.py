"""Resonant collinearity: antinodes created by pairs of antennas."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import permutations

Position = tuple[int, int]


def find_antennas(grid: Sequence[str]) -> dict[str, list[Position]]:
    """Return the (x, y) of every antenna, grouped by frequency."""
    antennas: dict[str, list[Position]] = {}
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char != ".":
                antennas.setdefault(char, []).append((x, y))
    return antennas


def _grid(text: str) -> list[str]:
    grid = [line.strip() for line in text.splitlines() if line.strip()]
    if not grid:
        raise ValueError("empty antenna map")
    return grid


def _pairs(grid: Sequence[str]) -> Iterator[tuple[Position, Position]]:
    for positions in find_antennas(grid).values():
        yield from permutations(positions, 2)


def _inside(grid: Sequence[str], position: Position) -> bool:
    x, y = position
    return 0 <= y < len(grid) and 0 <= x < len(grid[0])


def part1(text: str) -> int:
    """Count positions at twice the distance of one antenna from another."""
    grid = _grid(text)
    antinodes = set()
    for (ax, ay), (bx, by) in _pairs(grid):
        candidate = (2 * bx - ax, 2 * by - ay)
        if _inside(grid, candidate):
            antinodes.add(candidate)
    return len(antinodes)


def part2(text: str) -> int:
    """Count positions in line with any two antennas of the same frequency."""
    grid = _grid(text)
    antinodes = set()
    for (ax, ay), (bx, by) in _pairs(grid):
        dx, dy = bx - ax, by - ay
        position = (bx, by)
        while _inside(grid, position):
            antinodes.add(position)
            position = (position[0] + dx, position[1] + dy)
    return len(antinodes)