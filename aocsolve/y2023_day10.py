"""Pipe maze: the loop through S, its farthest point and what it encloses."""

from __future__ import annotations

from collections.abc import Sequence

Position = tuple[int, int]
Direction = tuple[int, int]

NORTH: Direction = (-1, 0)
SOUTH: Direction = (1, 0)
EAST: Direction = (0, 1)
WEST: Direction = (0, -1)

_CONNECTIONS: dict[str, frozenset[Direction]] = {
    "|": frozenset({NORTH, SOUTH}),
    "-": frozenset({EAST, WEST}),
    "L": frozenset({NORTH, EAST}),
    "J": frozenset({NORTH, WEST}),
    "7": frozenset({SOUTH, WEST}),
    "F": frozenset({SOUTH, EAST}),
}


def _opposite(direction: Direction) -> Direction:
    return (-direction[0], -direction[1])


def _find_start(grid: Sequence[str]) -> Position:
    for row, line in enumerate(grid):
        col = line.find("S")
        if col >= 0:
            return row, col
    raise ValueError("grid has no starting tile S")


def _follow(
    grid: Sequence[str], start: Position, direction: Direction
) -> tuple[list[Position], Direction] | None:
    """Walk from start; return the path and the direction of arrival back at S."""
    path = [start]
    row, col = start
    while True:
        row, col = row + direction[0], col + direction[1]
        if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
            return None
        tile = grid[row][col]
        if tile == "S":
            return path, direction
        back = _opposite(direction)
        connections = _CONNECTIONS.get(tile)
        if connections is None or back not in connections:
            return None
        path.append((row, col))
        direction = next(d for d in connections if d != back)


def _trace(grid: Sequence[str]) -> tuple[list[Position], str]:
    """Return the loop positions starting at S, and the pipe S stands for."""
    start = _find_start(grid)
    for direction in (NORTH, SOUTH, EAST, WEST):
        found = _follow(grid, start, direction)
        if found is None:
            continue
        path, arrival = found
        sides = frozenset({direction, _opposite(arrival)})
        shape = next(char for char, conns in _CONNECTIONS.items() if conns == sides)
        return path, shape
    raise ValueError("no loop passes through S")


def loop_tiles(grid: Sequence[str]) -> list[Position]:
    """Return the (row, column) of every loop tile in order, starting at S."""
    path, _ = _trace(grid)
    return path


def farthest_distance(grid: Sequence[str]) -> int:
    """Return the number of steps to the loop tile farthest from S."""
    return len(loop_tiles(grid)) // 2


def enclosed_tiles(grid: Sequence[str]) -> int:
    """Count the tiles that lie inside the loop and are not part of it."""
    path, start_shape = _trace(grid)
    loop = set(path)
    count = 0
    for row, line in enumerate(grid):
        inside = False
        for col, char in enumerate(line):
            if (row, col) in loop:
                shape = start_shape if char == "S" else char
                if NORTH in _CONNECTIONS[shape]:
                    inside = not inside
            elif inside:
                count += 1
    return count


def _grid(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Return the distance to the farthest point of the loop."""
    return farthest_distance(_grid(text))


def part2(text: str) -> int:
    """Return the number of tiles enclosed by the loop."""
    return enclosed_tiles(_grid(text))