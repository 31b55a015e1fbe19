import pytest

from yuletide.day import Part
from yuletide.day_25 import count_fits, parse_schematics, run
from yuletide.errors import InvalidInputError
from yuletide.input import Input

EXAMPLE = """#####
.####
.####
.####
.#.#.
.#...
.....

#####
##.##
.#.##
...##
...#.
...#.
.....

.....
#....
#....
#...#
#.#.#
#.###
#####

.....
.....
#.#..
###..
###.#
###.#
#####

.....
.....
.....
#....
#.#..
#.#.#
#####
"""


@pytest.fixture
def schematics():
    return parse_schematics(Input.from_text(EXAMPLE))


def test_parse_splits_locks_and_keys(schematics):
    locks, keys = schematics
    assert len(locks) == 2
    assert len(keys) == 3


def test_first_lock_heights(schematics):
    locks, _ = schematics
    assert locks[0] == (0, 5, 3, 4, 3)


def test_example_fits(schematics):
    locks, keys = schematics
    assert count_fits(locks, keys) == 3


def test_run_part_one_matches_count(schematics):
    locks, keys = schematics
    assert run(Input.from_text(EXAMPLE), Part.ONE) == count_fits(locks, keys)


def test_run_part_two_is_zero():
    assert run(Input.from_text(EXAMPLE), Part.TWO) == 0


def test_empty_lock_fits_every_key(schematics):
    _, keys = schematics
    assert count_fits([(0, 0, 0, 0, 0)], keys) == len(keys)


def test_overlapping_column_does_not_fit():
    assert count_fits([(5, 0, 0, 0, 0)], [(1, 0, 0, 0, 0)]) == 0


def test_fit_count_is_symmetric(schematics):
    locks, keys = schematics
    assert count_fits(locks, keys) == count_fits(keys, locks)


def test_heights_within_range(schematics):
    locks, keys = schematics
    assert all(0 <= h <= 5 for item in locks + keys for h in item)


def test_wrong_line_width_rejected():
    with pytest.raises(InvalidInputError):
        parse_schematics(Input.from_text("####\n"))


def test_short_schematic_rejected():
    with pytest.raises(InvalidInputError):
        parse_schematics(Input.from_text("#####\n.....\n"))