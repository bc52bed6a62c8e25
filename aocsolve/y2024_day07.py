"""Bridge repair: equations that can be made true with +, * and ||."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Equation:
    """A target value and the operands to combine left to right."""

    target: int
    operands: tuple[int, ...]

    def is_valid(self, concat: bool = False) -> bool:
        """Tell whether some choice of operators reaches the target.

        Operators are + and *, and also digit concatenation when concat is set.
        """
        if not self.operands:
            return False

        def search(value: int, index: int) -> bool:
            if index == len(self.operands):
                return value == self.target
            if value > self.target:
                return False
            operand = self.operands[index]
            return (
                search(value + operand, index + 1)
                or search(value * operand, index + 1)
                or (concat and search(int(f"{value}{operand}"), index + 1))
            )

        return search(self.operands[0], 1)


def parse_equations(text: str) -> list[Equation]:
    """Parse lines of the form 'target: a b c'."""
    equations = []
    for line in text.splitlines():
        if not line.strip():
            continue
        head, sep, body = line.partition(":")
        if not sep:
            raise ValueError(f"malformed equation: {line!r}")
        try:
            target = int(head)
            operands = tuple(int(token) for token in body.split())
        except ValueError as error:
            raise ValueError(f"malformed equation: {line!r}") from error
        if not operands:
            raise ValueError(f"equation has no operands: {line!r}")
        equations.append(Equation(target=target, operands=operands))
    return equations


def part1(text: str) -> int:
    """Return the sum of targets reachable with + and *."""
    return sum(eq.target for eq in parse_equations(text) if eq.is_valid())


def part2(text: str) -> int:
    """Return the sum of targets reachable with +, * and concatenation."""
    return sum(eq.target for eq in parse_equations(text) if eq.is_valid(concat=True))