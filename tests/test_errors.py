import pytest

from yuletide.errors import (
    AocError,
    ArgumentError,
    DayNotImplementedError,
    InputFileNotFoundError,
    InvalidDayError,
    InvalidDayInputError,
    InvalidInputError,
    InvalidPartArgumentError,
    MissingArgumentError,
    NoSolutionError,
    PartOutOfRangeError,
)


@pytest.mark.parametrize(
    ("error_class", "argument", "message"),
    [
        (MissingArgumentError, "day", "Missing argument"),
        (InvalidDayInputError, "x", "Invalid day input: x"),
        (InvalidDayError, 30, "Invalid day: 30"),
        (InvalidPartArgumentError, "y", "Invalid part argument: y"),
        (PartOutOfRangeError, 3, "Part out of range: 3"),
    ],
)
def test_argument_errors_share_hierarchy(error_class, argument, message):
    error = error_class(argument)
    assert str(error) == message
    assert isinstance(error, ArgumentError)
    assert isinstance(error, AocError)


def test_missing_argument_message_and_name():
    error = MissingArgumentError("part")
    assert str(error) == "Missing argument"
    assert error.name == "part"


def test_invalid_day_message():
    assert str(InvalidDayError(30)) == "Invalid day: 30"


def test_day_not_implemented_message():
    error = DayNotImplementedError(26)
    assert str(error) == "Solution for day 26 not implemented yet"
    assert error.day == 26
    assert not isinstance(error, ArgumentError)


def test_input_file_not_found_keeps_filename():
    error = InputFileNotFoundError("input/day_1-1.dat")
    assert error.filename == "input/day_1-1.dat"
    assert "input/day_1-1.dat" in str(error)


def test_invalid_input_with_and_without_detail():
    assert str(InvalidInputError()) == "Invalid input"
    assert "bad" in str(InvalidInputError("bad"))


def test_no_solution_carries_reason():
    error = NoSolutionError("nothing found")
    assert "nothing found" in str(error)
    assert isinstance(error, AocError)
    assert not isinstance(error, ArgumentError)