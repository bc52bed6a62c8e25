"""Print queue: page ordering rules and the updates that follow them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from itertools import combinations


@dataclass
class Rules:
    """Ordering rules as (earlier, later) page pairs."""

    pairs: set[tuple[str, str]] = field(default_factory=set)

    def is_ordered(self, update: Sequence[str]) -> bool:
        """Tell whether no rule puts a later page before an earlier one."""
        return not any(
            (later, earlier) in self.pairs for earlier, later in combinations(update, 2)
        )

    def _compare(self, a: str, b: str) -> int:
        if (a, b) in self.pairs:
            return -1
        if (b, a) in self.pairs:
            return 1
        return 0

    def reorder(self, update: Sequence[str]) -> list[str]:
        """Return the pages of an update sorted by the rules."""
        return sorted(update, key=cmp_to_key(self._compare))


def parse_rules(text: str) -> Rules:
    """Parse lines of the form 'A|B'."""
    pairs = set()
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        parts = line.split("|")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"malformed rule: {line!r}")
        pairs.add((parts[0], parts[1]))
    return Rules(pairs)


def parse_updates(text: str) -> list[list[str]]:
    """Parse comma-separated page lists, one per line."""
    return [line.strip().split(",") for line in text.splitlines() if line.strip()]


def _middle(update: Sequence[str]) -> int:
    if not update:
        raise ValueError("empty update")
    return int(update[len(update) // 2])


def part1(rules_text: str, updates_text: str) -> int:
    """Return the sum of middle pages of correctly ordered updates."""
    rules = parse_rules(rules_text)
    return sum(
        _middle(update)
        for update in parse_updates(updates_text)
        if rules.is_ordered(update)
    )


def part2(rules_text: str, updates_text: str) -> int:
    """Return the sum of middle pages of misordered updates once reordered."""
    rules = parse_rules(rules_text)
    return sum(
        _middle(rules.reorder(update))
        for update in parse_updates(updates_text)
        if not rules.is_ordered(update)
    )