"""Readers for puzzle input files."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

StrPath = str | PathLike[str]

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _split_lines(text: str) -> list[str]:
    """Split text into lines, dropping line endings and a final empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _to_int(token: str) -> int:
    """Parse a decimal integer; anything else counts as zero."""
    return int(token) if _INTEGER.fullmatch(token) else 0


def read_file(path: StrPath) -> str:
    """Return the whole content of a file as text."""
    return Path(path).read_text()


def read_lines(path: StrPath) -> list[str]:
    """Return the lines of a file without their line endings."""
    return _split_lines(read_file(path))


def read_delimited_strings(path: StrPath, delimiter: str) -> list[list[str]]:
    """Return every line of a file split on a delimiter."""
    return [line.split(delimiter) for line in read_lines(path)]


def read_delimited_ints(path: StrPath, delimiter: str) -> list[int]:
    """Return all delimited integers of a file as one flat list."""
    return [
        _to_int(token)
        for line in read_lines(path)
        for token in line.split(delimiter)
    ]


def read_digit_grid(path: StrPath) -> list[list[int]]:
    """Return a grid of single digits, one row per line."""
    return [[ord(char) - ord("0") for char in line] for line in read_lines(path)]


def read_char_grid(path: StrPath) -> list[list[str]]:
    """Return a grid of characters, one row per line."""
    return [list(line) for line in read_lines(path)]