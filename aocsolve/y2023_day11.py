"""Cosmic expansion: distances between galaxies in an expanding image."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from itertools import combinations

Position = tuple[int, int]


def find_galaxies(grid: Sequence[str]) -> list[Position]:
    """Return the (x, y) of every galaxy, row by row."""
    return [
        (x, y)
        for y, row in enumerate(grid)
        for x, char in enumerate(row)
        if char == "#"
    ]


def empty_rows(grid: Sequence[str]) -> list[int]:
    """Return the indices of rows without a galaxy."""
    return [y for y, row in enumerate(grid) if "#" not in row]


def empty_columns(grid: Sequence[str]) -> list[int]:
    """Return the indices of columns without a galaxy."""
    if not grid:
        raise ValueError("empty image")
    width = len(grid[0])
    return [x for x in range(width) if all("#" not in row[x : x + 1] for row in grid)]


def _grid(text: str) -> list[str]:
    grid = [line.strip() for line in text.splitlines() if line.strip()]
    if not grid:
        raise ValueError("empty image")
    return grid


def total_distance(text: str, multiplier: int) -> int:
    """Sum the shortest paths between all galaxy pairs.

    Every empty row and column is replaced by ``multiplier`` copies of itself.
    """
    if multiplier < 1:
        raise ValueError(f"multiplier must be at least 1, got {multiplier}")
    grid = _grid(text)
    rows = empty_rows(grid)
    columns = empty_columns(grid)
    extra = multiplier - 1
    positions = [
        (x + extra * bisect_left(columns, x), y + extra * bisect_left(rows, y))
        for x, y in find_galaxies(grid)
    ]
    return sum(
        abs(ax - bx) + abs(ay - by)
        for (ax, ay), (bx, by) in combinations(positions, 2)
    )


def part1(text: str) -> int:
    """Return the summed distances with empty lines doubled."""
    return total_distance(text, 2)


def part2(text: str) -> int:
    """Return the summed distances with empty lines a million times wider."""
    return total_distance(text, 1_000_000)