"""Disk fragmenter: compacting files and computing the filesystem checksum."""

from __future__ import annotations

from collections.abc import Sequence

DiskFile = tuple[int, int, int]
Blocks = list[int | None]


def parse_disk_map(text: str) -> list[DiskFile]:
    """Parse a dense disk map into (file id, length, free space after) triples."""
    digits = text.strip()
    if not digits.isdigit() or not digits.isascii():
        raise ValueError(f"disk map must be made of digits: {digits!r}")
    values = [int(char) for char in digits]
    lengths = values[::2]
    gaps = values[1::2] + [0] * (len(lengths) - len(values[1::2]))
    return [(file_id, length, gap) for file_id, (length, gap) in enumerate(zip(lengths, gaps))]


def _blocks(files: Sequence[DiskFile]) -> Blocks:
    blocks: Blocks = []
    for file_id, length, gap in files:
        blocks.extend([file_id] * length)
        blocks.extend([None] * gap)
    return blocks


def compact_blocks(blocks: Sequence[int | None]) -> Blocks:
    """Move file blocks one at a time from the end into the leftmost free block."""
    result = list(blocks)
    left, right = 0, len(result) - 1
    while True:
        while left < right and result[left] is not None:
            left += 1
        while left < right and result[right] is None:
            right -= 1
        if left >= right:
            return result
        result[left], result[right] = result[right], None


def compact_files(files: Sequence[DiskFile]) -> Blocks:
    """Move whole files, highest id first, into the leftmost span that fits."""
    locations: dict[int, tuple[int, int]] = {}
    free: list[list[int]] = []
    position = 0
    for file_id, length, gap in files:
        locations[file_id] = (position, length)
        position += length
        if gap:
            free.append([position, gap])
        position += gap

    for file_id in sorted(locations, reverse=True):
        start, length = locations[file_id]
        for span in free:
            if span[0] >= start:
                break
            if span[1] >= length:
                locations[file_id] = (span[0], length)
                span[0] += length
                span[1] -= length
                break

    blocks: Blocks = [None] * position
    for file_id, (start, length) in locations.items():
        blocks[start : start + length] = [file_id] * length
    return blocks


def checksum(blocks: Sequence[int | None]) -> int:
    """Return the sum of each block's position times its file id."""
    return sum(index * file_id for index, file_id in enumerate(blocks) if file_id is not None)


def part1(text: str) -> int:
    """Return the checksum after compacting block by block."""
    return checksum(compact_blocks(_blocks(parse_disk_map(text))))


def part2(text: str) -> int:
    """Return the checksum after compacting whole files."""
    return checksum(compact_files(parse_disk_map(text)))