"""Games of coloured cubes drawn from a bag."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import prod

_COLOURS = ("red", "green", "blue")


@dataclass
class Game:
    """A game id and the cube counts of each set revealed."""

    id: int
    sets: list[dict[str, int]] = field(default_factory=list)


def parse_game(line: str) -> Game:
    """Parse a line like 'Game 1: 3 blue, 4 red; 1 red, 2 green'."""
    head, body = line.split(": ", 1)
    game_id = int(head.split(" ")[1])
    sets = []
    for chunk in body.split("; "):
        counts = {}
        for entry in chunk.split(", "):
            number, colour = entry.split(" ")
            counts[colour] = int(number)
        sets.append(counts)
    return Game(id=game_id, sets=sets)


def is_possible(game: Game, red: int, green: int, blue: int) -> bool:
    """Tell whether every set fits within the given cube counts."""
    limits = {"red": red, "green": green, "blue": blue}
    return all(
        cubes.get(colour, 0) <= limit
        for cubes in game.sets
        for colour, limit in limits.items()
    )


def power(game: Game) -> int:
    """Return the product of the fewest cubes of each colour needed."""
    return prod(
        max((cubes.get(colour, 0) for cubes in game.sets), default=0)
        for colour in _COLOURS
    )


def _games(text: str) -> list[Game]:
    return [parse_game(line) for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Return the sum of ids of games possible with 12 red, 13 green, 14 blue."""
    return sum(game.id for game in _games(text) if is_possible(game, 12, 13, 14))


def part2(text: str) -> int:
    """Return the sum of the powers of all games."""
    return sum(power(game) for game in _games(text))