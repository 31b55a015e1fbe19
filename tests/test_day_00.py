import pytest

from yuletide.day import Part
from yuletide.day_00 import run
from yuletide.input import Input


@pytest.mark.parametrize("part", [Part.ONE, Part.TWO])
def test_run_answers_zero_for_empty_input(part):
    assert run(Input.from_text(""), part) == 0


@pytest.mark.parametrize("part", [Part.ONE, Part.TWO])
def test_run_answers_zero_for_any_input(part):
    assert run(Input.from_text("1 2 3\nabc\n"), part) == 0