import pytest

from aocsolve.y2023_day11 import (
    empty_columns,
    empty_rows,
    find_galaxies,
    part1,
    part2,
    total_distance,
)

EXAMPLE = """\
...#......
.......#..
#.........
..........
......#...
.#........
.........#
..........
.......#..
#...#.....
"""

GRID = EXAMPLE.splitlines()


def test_worked_example_values():
    assert part1(EXAMPLE) == 374
    assert total_distance(EXAMPLE, 10) == 1030
    assert total_distance(EXAMPLE, 100) == 8410


def test_parts_use_their_multipliers():
    assert part1(EXAMPLE) == total_distance(EXAMPLE, 2)
    assert part2(EXAMPLE) == total_distance(EXAMPLE, 1_000_000)


def test_galaxies_found_at_hash_marks():
    galaxies = find_galaxies(GRID)
    assert len(galaxies) == EXAMPLE.count("#")
    assert all(GRID[y][x] == "#" for x, y in galaxies)


def test_empty_rows_have_no_galaxy():
    rows = set(empty_rows(GRID))
    for y, row in enumerate(GRID):
        assert ("#" not in row) == (y in rows)


def test_empty_columns_have_no_galaxy():
    columns = set(empty_columns(GRID))
    for x in range(len(GRID[0])):
        column = "".join(row[x] for row in GRID)
        assert ("#" not in column) == (x in columns)


def test_distance_grows_linearly_with_multiplier():
    d1 = total_distance(EXAMPLE, 1)
    d2 = total_distance(EXAMPLE, 2)
    d3 = total_distance(EXAMPLE, 3)
    assert d3 - d2 == d2 - d1
    assert d2 > d1


def test_no_empty_lines_means_no_expansion():
    text = "#.\n.#\n"
    assert total_distance(text, 1) == total_distance(text, 50)


def test_empty_image_raises():
    with pytest.raises(ValueError):
        part1("")


def test_bad_multiplier_raises():
    with pytest.raises(ValueError):
        total_distance(EXAMPLE, 0)