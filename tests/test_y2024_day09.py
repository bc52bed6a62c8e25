from collections import Counter

import pytest

from aocsolve.y2024_day09 import (
    checksum,
    compact_blocks,
    compact_files,
    parse_disk_map,
    part1,
    part2,
)

EXAMPLE = "2333133121414131402"


def _render(blocks):
    return "".join("." if block is None else str(block) for block in blocks)


def _expand(files):
    return [b for fid, length, gap in files for b in [fid] * length + [None] * gap]


def test_part1_example():
    assert part1(EXAMPLE) == 1928


def test_part2_example():
    assert part2(EXAMPLE + "\n") == 2858


def test_compact_blocks_small():
    blocks = _expand(parse_disk_map("12345"))
    assert _render(compact_blocks(blocks)) == "022111222......"


def test_parse_disk_map_triples():
    files = parse_disk_map("12345")
    assert [fid for fid, _, _ in files] == list(range(len(files)))
    assert [length for _, length, _ in files] == [1, 3, 5]
    assert [gap for _, _, gap in files] == [2, 4, 0]


def test_parse_even_length_map_keeps_trailing_gap():
    assert parse_disk_map("1234") == [(0, 1, 2), (1, 3, 4)]


@pytest.mark.parametrize("text", ["", "12a4", "1 2"])
def test_parse_rejects_non_digits(text):
    with pytest.raises(ValueError):
        parse_disk_map(text)


def test_compact_blocks_keeps_blocks_and_leaves_no_gaps():
    blocks = _expand(parse_disk_map(EXAMPLE))
    compacted = compact_blocks(blocks)
    assert len(compacted) == len(blocks)
    assert Counter(compacted) == Counter(blocks)
    used = sum(block is not None for block in blocks)
    assert all(block is not None for block in compacted[:used])
    assert all(block is None for block in compacted[used:])


def test_compact_blocks_does_not_modify_input():
    blocks = _expand(parse_disk_map("12345"))
    copy = list(blocks)
    compact_blocks(blocks)
    assert blocks == copy


def test_compact_files_keeps_files_whole():
    files = parse_disk_map(EXAMPLE)
    blocks = compact_files(files)
    assert len(blocks) == len(_expand(files))
    assert Counter(blocks) == Counter(_expand(files))
    for file_id, length, _ in files:
        indices = [i for i, block in enumerate(blocks) if block == file_id]
        assert indices == list(range(indices[0], indices[0] + length))


def test_compact_files_never_moves_right():
    files = parse_disk_map(EXAMPLE)
    before = _expand(files)
    after = compact_files(files)
    for file_id, _, _ in files:
        assert after.index(file_id) <= before.index(file_id)


def test_checksum_ignores_free_blocks():
    assert checksum([1, None, 2]) == checksum([1, 0, 2])
    assert checksum([None, None]) == 0


def test_already_compact_disk_is_unchanged():
    files = parse_disk_map("90909")
    assert compact_blocks(_expand(files)) == _expand(files)
    assert compact_files(files) == _expand(files)