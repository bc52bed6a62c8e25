"""Hoof It: hiking trails that climb one step at a time from 0 to 9."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

Position = tuple[int, int]
Grid = Sequence[Sequence[int]]

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_SUMMIT = 9


def _height(grid: Grid, x: int, y: int) -> int | None:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return None


def _check_start(grid: Grid, start: Position) -> None:
    if _height(grid, *start) is None:
        raise ValueError(f"start {start} lies outside the map")


def _uphill(grid: Grid, position: Position) -> Iterator[Position]:
    x, y = position
    height = grid[y][x]
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if _height(grid, nx, ny) == height + 1:
            yield nx, ny


def _summits(grid: Grid, position: Position) -> Iterator[Position]:
    """Yield the summit ending each trail from position, once per trail."""
    x, y = position
    if grid[y][x] == _SUMMIT:
        yield position
        return
    for neighbour in _uphill(grid, position):
        yield from _summits(grid, neighbour)


def find_trailheads(grid: Grid) -> list[Position]:
    """Return the (x, y) of every height-0 position, row by row."""
    return [
        (x, y)
        for y, row in enumerate(grid)
        for x, height in enumerate(row)
        if height == 0
    ]


def trail_score(grid: Grid, start: Position) -> int:
    """Return the number of distinct summits reachable from start."""
    _check_start(grid, start)
    return len(set(_summits(grid, start)))


def trail_rating(grid: Grid, start: Position) -> int:
    """Return the number of distinct trails from start to any summit."""
    _check_start(grid, start)
    return sum(1 for _ in _summits(grid, start))


def _grid(text: str) -> list[list[int]]:
    return [
        [ord(char) - ord("0") for char in line.strip()]
        for line in text.splitlines()
        if line.strip()
    ]


def part1(text: str) -> int:
    """Return the sum of the scores of all trailheads."""
    grid = _grid(text)
    return sum(trail_score(grid, start) for start in find_trailheads(grid))


def part2(text: str) -> int:
    """Return the sum of the ratings of all trailheads."""
    grid = _grid(text)
    return sum(trail_rating(grid, start) for start in find_trailheads(grid))