"""Wrapping paper and ribbon for boxes."""

from __future__ import annotations

Box = tuple[int, int, int]


def parse_boxes(text: str) -> list[Box]:
    """Parse lines of the form LxWxH."""
    boxes = []
    for line in text.splitlines():
        if not line.strip():
            continue
        length, width, height = (int(part) for part in line.strip().split("x"))
        boxes.append((length, width, height))
    return boxes


def _paper(box: Box) -> int:
    length, width, height = box
    sides = sorted((length * width, width * height, height * length))
    return 2 * sum(sides) + sides[0]


def _ribbon(box: Box) -> int:
    length, width, height = box
    smallest, second, _ = sorted((length, width, height))
    return length * width * height + 2 * (smallest + second)


def part1(text: str) -> int:
    """Return the total square feet of wrapping paper."""
    return sum(_paper(box) for box in parse_boxes(text))


def part2(text: str) -> int:
    """Return the total feet of ribbon."""
    return sum(_ribbon(box) for box in parse_boxes(text))