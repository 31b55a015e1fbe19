import pytest

from yuletide.day_18 import CorruptedMemory
from yuletide.errors import InvalidInputError, NoSolutionError
from yuletide.input import Input
from yuletide.vec2 import Vec2

EXAMPLE = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def _memory(text, width, height, first_wave):
    return CorruptedMemory.from_input(Input.from_text(text), width, height, first_wave)


def test_example_escape_path():
    assert _memory(EXAMPLE, 7, 7, 12).find_escape_path() == 22


def test_example_cut_off_byte():
    assert _memory(EXAMPLE, 7, 7, 12).find_cut_off_byte() == 601


def test_empty_memory_path_is_manhattan_distance():
    width, height = 5, 4
    memory = _memory("", width, height, 0)
    assert memory.find_escape_path() == (width - 1) + (height - 1)


def test_blocking_wall_has_no_path():
    memory = _memory("1,0\n1,1\n1,2\n", 3, 3, 3)
    with pytest.raises(NoSolutionError):
        memory.find_escape_path()


def test_cut_off_byte_is_the_last_wall_piece():
    memory = _memory("1,0\n1,1\n1,2\n", 3, 3, 0)
    last = Vec2.parse("1,2")
    assert memory.find_cut_off_byte() == 100 * last.x + last.y
    assert memory.fallen == len(memory.falling_bytes)


def test_cut_off_needs_a_blocking_byte():
    memory = _memory("0,2\n", 3, 3, 0)
    with pytest.raises(NoSolutionError):
        memory.find_cut_off_byte()


def test_malformed_line_is_rejected():
    with pytest.raises(InvalidInputError):
        _memory("1;2\n", 3, 3, 0)


def test_byte_outside_memory_is_rejected():
    memory = _memory("9,9\n", 3, 3, 1)
    with pytest.raises(InvalidInputError):
        memory.find_escape_path()


def test_first_wave_larger_than_input_is_rejected():
    memory = _memory("1,1\n", 3, 3, 5)
    with pytest.raises(InvalidInputError):
        memory.find_escape_path()