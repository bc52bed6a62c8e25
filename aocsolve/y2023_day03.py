"""Part numbers and gears in an engine schematic."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_NUMBER = re.compile(r"[0-9]+")


@dataclass
class PartNumber:
    """A number in the schematic and the first symbol next to it."""

    value: int
    x: int
    y: int
    has_symbol: bool = False
    gear: tuple[int, int] | None = None


def _first_symbol(
    grid: Sequence[str], start: int, end: int, row: int
) -> tuple[int, int] | None:
    above = max(row - 1, 0)
    below = min(row + 2, len(grid))
    left = max(start - 1, 0)
    right = min(end + 1, len(grid[0]))
    for y in range(above, below):
        for x, char in enumerate(grid[y][left:right], start=left):
            if not (char.isdigit() or char == "."):
                return x, y
    return None


def find_numbers(grid: Sequence[str]) -> list[PartNumber]:
    """Return every number in the grid, noting adjacent symbols and gears."""
    numbers = []
    for y, row in enumerate(grid):
        line = "".join(row)
        for match in _NUMBER.finditer(line):
            number = PartNumber(value=int(match.group()), x=match.start(), y=y)
            symbol = _first_symbol(grid, match.start(), match.end(), y)
            if symbol is not None:
                number.has_symbol = True
                sx, sy = symbol
                if grid[sy][sx] == "*":
                    number.gear = symbol
            numbers.append(number)
    return numbers


def part1(text: str) -> int:
    """Return the sum of numbers adjacent to a symbol."""
    return sum(n.value for n in find_numbers(text.splitlines()) if n.has_symbol)


def part2(text: str) -> int:
    """Return the sum of gear ratios.

    A gear pairs the first number on it with the first other number of a
    different value on the same gear.
    """
    numbers = find_numbers(text.splitlines())
    processed: set[tuple[int, int]] = set()
    total = 0
    for number in numbers:
        if number.gear is None or number.gear in processed:
            continue
        partner = next(
            (
                other
                for other in numbers
                if other.gear == number.gear and other.value != number.value
            ),
            None,
        )
        if partner is not None:
            processed.add(number.gear)
            total += number.value * partner.value
    return total