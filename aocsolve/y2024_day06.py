"""Guard patrol in a lab, and the obstructions that trap the guard in a loop."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

Position = tuple[int, int]
Direction = tuple[int, int]

_UP: Direction = (0, -1)


@dataclass
class Lab:
    """The lab floor: its size, the guard's start and the obstacles."""

    width: int
    height: int
    start: Position
    obstacles: set[Position] = field(default_factory=set)

    def _inside(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def _walk(self) -> Iterator[tuple[Position, Direction]]:
        """Yield the guard's states until the next step leaves the lab."""
        x, y = self.start
        dx, dy = _UP
        while True:
            yield (x, y), (dx, dy)
            ahead = (x + dx, y + dy)
            if not self._inside(ahead):
                return
            if ahead in self.obstacles:
                dx, dy = -dy, dx
            else:
                x, y = ahead

    def _run(self) -> tuple[list[Position], bool]:
        """Return the positions visited in order and whether the guard loops."""
        seen: set[tuple[Position, Direction]] = set()
        visited: dict[Position, None] = {}
        for state in self._walk():
            if state in seen:
                return list(visited), True
            seen.add(state)
            visited.setdefault(state[0], None)
        return list(visited), False

    def patrol(self) -> list[Position]:
        """Return every position the guard visits, in order of first visit."""
        positions, _ = self._run()
        return positions

    def creates_loop(self) -> bool:
        """Tell whether the guard walks in a loop forever."""
        _, looped = self._run()
        return looped

    @contextmanager
    def _blocked(self, position: Position) -> Iterator[None]:
        self.obstacles.add(position)
        try:
            yield
        finally:
            self.obstacles.discard(position)


def parse_lab(text: str) -> Lab:
    """Parse a map of '.', '#' obstacles and one '^' guard facing up."""
    rows = [line.rstrip("\r") for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty lab map")
    start: Position | None = None
    obstacles: set[Position] = set()
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == "#":
                obstacles.add((x, y))
            elif char == "^" and start is None:
                start = (x, y)
    if start is None:
        raise ValueError("lab map has no guard '^'")
    width = max(len(row) for row in rows)
    return Lab(width=width, height=len(rows), start=start, obstacles=obstacles)


def part1(text: str) -> int:
    """Return the number of distinct positions the guard visits."""
    return len(parse_lab(text).patrol())


def part2(text: str) -> int:
    """Return the number of single obstructions that make the guard loop."""
    lab = parse_lab(text)
    count = 0
    for position in lab.patrol():
        if position == lab.start:
            continue
        with lab._blocked(position):
            if lab.creates_loop():
                count += 1
    return count