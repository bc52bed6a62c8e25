"""Camel Cards: ranking poker-like hands and totalling their winnings."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

_FACE_VALUES = {"A": 14, "K": 13, "Q": 12, "J": 11, "T": 10}
_JOKER_VALUE = 1


@dataclass(frozen=True)
class Hand:
    """Five cards and the bid placed on them."""

    cards: str
    bid: int


def _card_value(card: str, jokers: bool) -> int:
    if jokers and card == "J":
        return _JOKER_VALUE
    if card in _FACE_VALUES:
        return _FACE_VALUES[card]
    return int(card)


def hand_type(cards: str, jokers: bool) -> int:
    """Rank the kind of a hand from 1 (high card) to 7 (five of a kind).

    With jokers, every J joins the most frequent other card.
    """
    if not cards:
        raise ValueError("a hand needs cards")
    counts = Counter(cards)
    if jokers:
        wild = counts.pop("J", 0)
        if not counts:
            return 7
        best, _ = counts.most_common(1)[0]
        counts[best] += wild
    shape = sorted(counts.values(), reverse=True)
    if shape[0] >= 5:
        return 7
    if shape[0] == 4:
        return 6
    if shape[0] == 3:
        return 5 if len(shape) > 1 and shape[1] == 2 else 4
    if shape[0] == 2:
        return 3 if len(shape) > 1 and shape[1] == 2 else 2
    return 1


def _strength(hand: Hand, jokers: bool) -> tuple[int, list[int]]:
    return hand_type(hand.cards, jokers), [
        _card_value(card, jokers) for card in hand.cards
    ]


def _parse_hand(line: str) -> Hand:
    cards, bid = line.split()
    return Hand(cards=cards, bid=int(bid))


def total_winnings(text: str, jokers: bool) -> int:
    """Return the sum of each bid times its hand's rank, weakest first."""
    hands = [_parse_hand(line) for line in text.splitlines() if line.strip()]
    ranked = sorted(hands, key=lambda hand: _strength(hand, jokers))
    return sum(rank * hand.bid for rank, hand in enumerate(ranked, start=1))


def part1(text: str) -> int:
    """Return the total winnings with J as jacks."""
    return total_winnings(text, jokers=False)


def part2(text: str) -> int:
    """Return the total winnings with J as weak jokers."""
    return total_winnings(text, jokers=True)