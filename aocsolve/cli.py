"""Command line entry point that runs puzzle solutions on input files."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from types import ModuleType

from aocsolve import (
    y2015_day01,
    y2015_day02,
    y2015_day03,
    y2023_day01,
    y2023_day02,
    y2023_day03,
    y2023_day04,
    y2023_day05,
    y2023_day06,
    y2023_day07,
    y2023_day08,
    y2023_day09,
    y2023_day10,
    y2023_day11,
    y2024_day01,
    y2024_day02,
    y2024_day03,
    y2024_day04,
    y2024_day05,
    y2024_day06,
    y2024_day07,
    y2024_day08,
    y2024_day09,
    y2024_day10,
    y2024_day11,
)
from aocsolve.timer import measure

_PUZZLES: dict[tuple[int, int], ModuleType] = {
    (2015, 1): y2015_day01,
    (2015, 2): y2015_day02,
    (2015, 3): y2015_day03,
    (2023, 1): y2023_day01,
    (2023, 2): y2023_day02,
    (2023, 3): y2023_day03,
    (2023, 4): y2023_day04,
    (2023, 5): y2023_day05,
    (2023, 6): y2023_day06,
    (2023, 7): y2023_day07,
    (2023, 8): y2023_day08,
    (2023, 9): y2023_day09,
    (2023, 10): y2023_day10,
    (2023, 11): y2023_day11,
    (2024, 1): y2024_day01,
    (2024, 2): y2024_day02,
    (2024, 3): y2024_day03,
    (2024, 4): y2024_day04,
    (2024, 5): y2024_day05,
    (2024, 6): y2024_day06,
    (2024, 7): y2024_day07,
    (2024, 8): y2024_day08,
    (2024, 9): y2024_day09,
    (2024, 10): y2024_day10,
    (2024, 11): y2024_day11,
}

# Puzzles whose solution reads more than one input file.
_INPUT_NAMES: dict[tuple[int, int], tuple[str, ...]] = {
    (2024, 5): ("input1", "input2"),
}


def solve(year: int, day: int, part: int, *args: str) -> int:
    """Run one part of a puzzle on the given input texts and return its answer."""
    module = _PUZZLES.get((year, day))
    if module is None:
        raise ValueError(f"no solution for {year} day {day}")
    if part == 1:
        return module.part1(*args)
    if part == 2:
        return module.part2(*args)
    raise ValueError(f"part must be 1 or 2, got {part}")


def _default_inputs(year: int, day: int, part: int) -> list[Path]:
    directory = Path(f"{year}") / f"{day:02d}" / f"p{part}"
    names = _INPUT_NAMES.get((year, day), ("input",))
    return [directory / name for name in names]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aocsolve", description="Solve a puzzle and report the time it took."
    )
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument(
        "inputs",
        nargs="*",
        type=Path,
        help="input files; by default YEAR/DD/pN/input",
    )
    parser.add_argument("--part", type=int, choices=(1, 2), help="run one part only")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the requested puzzle parts and print their results."""
    parser = _build_parser()
    options = parser.parse_args(argv)
    year, day = options.year, options.day
    if (year, day) not in _PUZZLES:
        parser.error(f"no solution for {year} day {day}")

    parts = [options.part] if options.part else [1, 2]
    for part in parts:
        paths = options.inputs or _default_inputs(year, day, part)
        try:
            texts = [path.read_text() for path in paths]
        except OSError as error:
            print(f"aocsolve: {error}", file=sys.stderr)
            return 1

        def run(part: int = part, texts: list[str] = texts) -> int:
            print(f"--- {day}-{part} ---")
            result = solve(year, day, part, *texts)
            print(f"Result: {result}")
            return result

        try:
            measure(run, sys.stdout)
        except (ValueError, TypeError) as error:
            print(f"aocsolve: {error}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())