"""Advent of Code puzzle solutions for 2015, 2023 and 2024, with input readers, a timer and a command."""

__version__ = "0.1.0"