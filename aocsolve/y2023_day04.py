"""Scratchcards, their points and the copies they win."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Card:
    """A scratchcard: its id, the winning numbers and the numbers held."""

    id: int
    winning: list[int] = field(default_factory=list)
    numbers: set[int] = field(default_factory=set)

    @property
    def matches(self) -> int:
        """Number of winning numbers that are also held."""
        return sum(1 for n in self.winning if n > 0 and n in self.numbers)


def parse_card(line: str) -> Card:
    """Parse a line like 'Card 1: 41 48 | 83 86 6'."""
    try:
        head, body = line.split(":", 1)
        winning_part, held_part = body.split("|", 1)
        card_id = int(head.split()[1])
    except (ValueError, IndexError) as error:
        raise ValueError(f"malformed card: {line!r}") from error
    return Card(
        id=card_id,
        winning=[int(token) for token in winning_part.split()],
        numbers={int(token) for token in held_part.split()},
    )


def score(card: Card) -> int:
    """Return the points of a card: 1 for the first match, doubled for each other."""
    matches = card.matches
    return 1 << (matches - 1) if matches else 0


def _cards(text: str) -> list[Card]:
    return [parse_card(line) for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    """Return the total points of all cards."""
    return sum(score(card) for card in _cards(text))


def part2(text: str) -> int:
    """Return the total number of cards held once all copies are won.

    A card with n matches wins one copy of each of the next n cards; a
    copy of a card that does not exist still counts but wins nothing.
    """
    cards = {card.id: card for card in _cards(text)}
    won: dict[int, int] = {}
    for card_id in sorted(cards, reverse=True):
        matches = cards[card_id].matches
        won[card_id] = sum(1 + won.get(card_id + k, 0) for k in range(1, matches + 1))
    return sum(1 + won[card_id] for card_id in cards)