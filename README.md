# aocsolve

Solutions to a selection of Advent of Code puzzles:

- 2015, days 1 to 3
- 2023, days 1 to 11
- 2024, days 1 to 11

Every day is a module named `y<year>_day<NN>` with `part1` and `part2`
functions. Each takes the puzzle input as text and returns the answer as an
integer. Malformed input raises `ValueError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it from Python

```python
from aocsolve import y2024_day01

with open("input.txt") as fh:
    text = fh.read()

print(y2024_day01.part1(text))
print(y2024_day01.part2(text))
```

Day 5 of 2024 takes two inputs, the ordering rules and the updates:

```python
from aocsolve import y2024_day05

print(y2024_day05.part1(rules_text, updates_text))
```

`aocsolve.cli.solve(year, day, part, *texts)` picks the right module and part
for you:

```python
from aocsolve.cli import solve

print(solve(2023, 7, 2, text))
```

Many modules also expose the pieces behind the answers, for example
`y2023_day05.parse_almanac` and `Almanac.location`, `y2024_day06.parse_lab`
with `Lab.patrol` and `Lab.creates_loop`, or `y2024_day11.count_stones`.

The helpers in `aocsolve.inputs` read the usual input shapes from a file:
`read_file`, `read_lines`, `read_delimited_strings`, `read_delimited_ints`,
`read_digit_grid` and `read_char_grid`. `aocsolve.timer.measure(func, out)`
calls `func`, writes `in <duration>` to `out` (standard output by default),
and returns what `func` returned.

## Using it from the command line

```
aocsolve YEAR DAY [INPUT ...] [--part {1,2}]
```

Without `--part` both parts are run. Each part prints a `--- DAY-PART ---`
header, a `Result: N` line and the time taken:

```
aocsolve 2024 1 input.txt
aocsolve 2024 1 input.txt --part 2
aocsolve 2024 5 rules.txt updates.txt
aocsolve --help
```

When no input files are given, each part reads `YEAR/DD/pN/input` from the
current directory (for 2024 day 5, `input1` and `input2` there). A missing
file, an unknown puzzle or bad input ends the command with status 1 and a
message on standard error.

## What it does not do

The package does not download puzzle inputs or submit answers; you supply the
input files yourself. Only the years and days listed above are solved.