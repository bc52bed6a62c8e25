"""Seed almanac: chained range maps from seeds to locations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import reduce


@dataclass(frozen=True)
class _Rule:
    destination: int
    source: int
    length: int

    @property
    def source_end(self) -> int:
        return self.source + self.length

    @property
    def shift(self) -> int:
        return self.destination - self.source


@dataclass
class _Mapping:
    name: str
    rules: list[_Rule] = field(default_factory=list)

    def lookup(self, value: int) -> int:
        for rule in self.rules:
            if rule.source <= value < rule.source_end:
                return value + rule.shift
        return value

    def map_intervals(
        self, intervals: Iterable[tuple[int, int]]
    ) -> list[tuple[int, int]]:
        """Map half-open intervals; the first rule containing a value wins."""
        mapped: list[tuple[int, int]] = []
        pending = list(intervals)
        for rule in self.rules:
            remaining = []
            for start, end in pending:
                low = max(start, rule.source)
                high = min(end, rule.source_end)
                if low >= high:
                    remaining.append((start, end))
                    continue
                mapped.append((low + rule.shift, high + rule.shift))
                if start < low:
                    remaining.append((start, low))
                if high < end:
                    remaining.append((high, end))
            pending = remaining
        return mapped + pending


@dataclass
class Almanac:
    """The seeds to plant and the maps applied to them in order."""

    seeds: list[int] = field(default_factory=list)
    maps: list[_Mapping] = field(default_factory=list)

    def location(self, seed: int) -> int:
        """Follow a seed through every map and return where it ends."""
        return reduce(lambda value, mapping: mapping.lookup(value), self.maps, seed)


def parse_almanac(text: str) -> Almanac:
    """Parse a 'seeds:' line followed by named blocks of 'dest source length'."""
    lines = text.splitlines()
    if not lines or not lines[0].startswith("seeds:"):
        raise ValueError("almanac must start with a seeds line")
    seeds = [int(token) for token in lines[0].removeprefix("seeds:").split()]

    maps = []
    rest = iter(lines[1:])
    for line in rest:
        if "map:" not in line:
            continue
        name = line.replace(" map:", "", 1)
        rules = []
        for entry in rest:
            if not entry.strip():
                break
            destination, source, length = (int(v) for v in entry.split())
            rules.append(_Rule(destination, source, length))
        maps.append(_Mapping(name, rules))
    return Almanac(seeds=seeds, maps=maps)


def range_minimums(almanac: Almanac) -> list[int]:
    """Return the lowest location for each (start, length) pair of seeds."""
    minimums = []
    for start, length in zip(almanac.seeds[::2], almanac.seeds[1::2]):
        if length <= 0:
            raise ValueError(f"empty seed range starting at {start}")
        intervals = reduce(
            lambda spans, mapping: mapping.map_intervals(spans),
            almanac.maps,
            [(start, start + length)],
        )
        minimums.append(min(low for low, _ in intervals))
    return minimums


def part1(text: str) -> int:
    """Return the lowest location of any listed seed."""
    almanac = parse_almanac(text)
    if not almanac.seeds:
        raise ValueError("no seeds")
    return min(almanac.location(seed) for seed in almanac.seeds)


def part2(text: str) -> int:
    """Return the lowest location of any seed in the seed ranges."""
    minimums = range_minimums(parse_almanac(text))
    if not minimums:
        raise ValueError("no seed ranges")
    return min(minimums)