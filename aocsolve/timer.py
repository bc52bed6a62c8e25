"""Timing of a single call."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from typing import TextIO, TypeVar

T = TypeVar("T")

_UNITS = ((1_000_000_000, "s"), (1_000_000, "ms"), (1_000, "µs"))


def _format_duration(nanoseconds: int) -> str:
    for scale, unit in _UNITS:
        if nanoseconds >= scale:
            value = f"{nanoseconds / scale:.6f}".rstrip("0").rstrip(".")
            return f"{value}{unit}"
    return f"{nanoseconds}ns"


def measure(func: Callable[[], T], out: TextIO | None = None) -> T:
    """Call func, report how long it took, and return its result.

    The elapsed time is written even when func raises.
    """
    stream = out if out is not None else sys.stdout
    start = time.perf_counter_ns()
    try:
        return func()
    finally:
        elapsed = time.perf_counter_ns() - start
        stream.write(f"in {_format_duration(elapsed)}\n")