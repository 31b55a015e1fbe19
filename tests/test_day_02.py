import pytest

from yuletide.day import Part
from yuletide.day_02 import is_safe, is_safe_with_tolerance, run
from yuletide.input import Input

EXAMPLE = (
    "7 6 4 2 1\n"
    "1 2 7 8 9\n"
    "9 7 6 2 1\n"
    "1 3 2 4 5\n"
    "8 6 4 4 1\n"
    "1 3 6 7 9\n"
)


def test_example_part_one():
    assert run(Input.from_text(EXAMPLE), Part.ONE) == 2


def test_example_part_two():
    assert run(Input.from_text(EXAMPLE), Part.TWO) == 4


@pytest.mark.parametrize("record", [[7, 6, 4, 2, 1], [1, 3, 6, 7, 9]])
def test_safe_records(record):
    assert is_safe(record)
    assert is_safe_with_tolerance(record)


@pytest.mark.parametrize("record", [[1, 2, 7, 8, 9], [9, 7, 6, 2, 1]])
def test_unsafe_even_with_tolerance(record):
    assert not is_safe(record)
    assert not is_safe_with_tolerance(record)


@pytest.mark.parametrize("record", [[1, 3, 2, 4, 5], [8, 6, 4, 4, 1], [9, 1, 2, 3]])
def test_fixed_by_removing_one_level(record):
    assert not is_safe(record)
    assert is_safe_with_tolerance(record)


def test_single_level():
    assert not is_safe([4])
    assert is_safe_with_tolerance([4])


def test_reading_stops_at_garbage_line():
    prefix = "1 2 3\n5 4 3\n"
    with_garbage = prefix + "x y\n1 2 3\n"
    for part in Part:
        assert run(Input.from_text(with_garbage), part) == run(Input.from_text(prefix), part)