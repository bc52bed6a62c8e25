"""Houses visited while delivering presents on a grid."""

from __future__ import annotations

from collections.abc import Iterable

_MOVES = {"<": (-1, 0), ">": (1, 0), "^": (0, -1), "v": (0, 1)}


def _visit(directions: Iterable[str]) -> set[tuple[int, int]]:
    x = y = 0
    visited = {(x, y)}
    for direction in directions:
        move = _MOVES.get(direction)
        if move is None:
            continue
        x += move[0]
        y += move[1]
        visited.add((x, y))
    return visited


def part1(text: str) -> int:
    """Return the number of houses visited by one deliverer."""
    return len(_visit(text))


def part2(text: str) -> int:
    """Return the number of houses visited by two deliverers taking turns."""
    return len(_visit(text[::2]) | _visit(text[1::2]))