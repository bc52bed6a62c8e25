"""Word search: XMAS in any direction, and MAS crosses."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_ALL_DIRECTIONS = [
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
]
_DIAGONALS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]


def _letter(grid: Sequence[str], x: int, y: int) -> str | None:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return None


def _spells(grid: Sequence[str], x: int, y: int, dx: int, dy: int, word: str) -> bool:
    return all(
        _letter(grid, x + i * dx, y + i * dy) == char for i, char in enumerate(word)
    )


def count_xmas(grid: Sequence[str]) -> int:
    """Count XMAS in all eight directions."""
    return sum(
        _spells(grid, x, y, dx, dy, "XMAS")
        for y, row in enumerate(grid)
        for x, char in enumerate(row)
        if char == "X"
        for dx, dy in _ALL_DIRECTIONS
    )


def count_x_mas(grid: Sequence[str]) -> int:
    """Count A tiles crossed by two diagonal MAS words."""
    centres = Counter(
        (x + dx, y + dy)
        for y, row in enumerate(grid)
        for x, char in enumerate(row)
        if char == "M"
        for dx, dy in _DIAGONALS
        if _spells(grid, x, y, dx, dy, "MAS")
    )
    return sum(1 for count in centres.values() if count >= 2)


def _grid(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Return the number of XMAS words."""
    return count_xmas(_grid(text))


def part2(text: str) -> int:
    """Return the number of X-MAS crosses."""
    return count_x_mas(_grid(text))