import pytest

from yuletide.day import Part
from yuletide.day_06 import LabMap, run
from yuletide.errors import InvalidInputError
from yuletide.input import Input
from yuletide.vec2 import Vec2

EXAMPLE = (
    "....#.....\n"
    ".........#\n"
    "..........\n"
    "..#.......\n"
    ".......#..\n"
    "..........\n"
    ".#..^.....\n"
    "........#.\n"
    "#.........\n"
    "......#...\n"
)

CORRIDOR = ".\n.\n^\n"


def lab(text):
    return LabMap.from_input(Input.from_text(text))


def test_finds_guard_start():
    assert lab(EXAMPLE).start == Vec2(4, 6)


def test_example_guard_walk():
    assert lab(EXAMPLE).guard_walk() == 41


def test_example_loop_obstructions():
    assert lab(EXAMPLE).count_loop_obstructions() == 6


def test_corridor_walk_covers_every_row():
    assert lab(CORRIDOR).guard_walk() == 3


def test_loop_obstructions_never_exceed_visited_cells():
    corridor = lab(CORRIDOR)
    assert corridor.count_loop_obstructions() <= corridor.guard_walk()


def test_missing_guard_is_an_error():
    with pytest.raises(InvalidInputError):
        lab("...\n.#.\n")


def test_run_matches_methods():
    example = lab(EXAMPLE)
    assert run(Input.from_text(EXAMPLE), Part.ONE) == example.guard_walk()
    assert run(Input.from_text(EXAMPLE), Part.TWO) == example.count_loop_obstructions()