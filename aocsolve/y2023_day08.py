"""Desert map: following left/right instructions through a node network."""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import cycle

_NODE = re.compile(r"\s*(\w+)\s*=\s*\(\s*(\w+)\s*,\s*(\w+)\s*\)\s*")


@dataclass
class Network:
    """Instructions of L and R, and each node's left and right neighbours."""

    instructions: str
    nodes: dict[str, tuple[str, str]] = field(default_factory=dict)

    def _walk(self, start: str, is_end: Callable[[str], bool]) -> int:
        if not self.instructions:
            raise ValueError("no instructions")
        if start not in self.nodes:
            raise ValueError(f"node {start!r} is not defined")
        node = start
        seen: set[tuple[str, int]] = set()
        for count, (index, turn) in enumerate(
            cycle(enumerate(self.instructions)), start=1
        ):
            state = (node, index)
            if state in seen:
                raise ValueError(f"walk from {start!r} never reaches its end")
            seen.add(state)
            if node not in self.nodes:
                raise ValueError(f"node {node!r} is not defined")
            left, right = self.nodes[node]
            node = left if turn == "L" else right
            if is_end(node):
                return count
        raise AssertionError("unreachable")

    def steps(self, start: str) -> int:
        """Count the steps from start to the first node whose name ends in Z."""
        return self._walk(start, lambda name: name.endswith("Z"))


def parse_network(text: str) -> Network:
    """Parse an instruction line followed by lines like 'AAA = (BBB, CCC)'."""
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("empty network description")
    instructions = lines[0].strip()
    if not instructions or set(instructions) - {"L", "R"}:
        raise ValueError(f"instructions must be made of L and R: {instructions!r}")
    nodes = {}
    for line in lines[1:]:
        match = _NODE.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed node: {line!r}")
        name, left, right = match.groups()
        nodes[name] = (left, right)
    return Network(instructions=instructions, nodes=nodes)


def part1(text: str) -> int:
    """Return the steps needed to get from AAA to ZZZ."""
    network = parse_network(text)
    return network._walk("AAA", lambda name: name == "ZZZ")


def part2(text: str) -> int:
    """Return the steps until every node ending in A is at a node ending in Z."""
    network = parse_network(text)
    starts = [name for name in network.nodes if name.endswith("A")]
    return math.lcm(*(network.steps(start) for start in starts))