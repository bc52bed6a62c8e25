[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolve"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles from 2015, 2023 and 2024, as a library and a command."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aocsolve = "aocsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
