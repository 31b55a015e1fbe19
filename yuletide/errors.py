"""Exceptions raised by the puzzle runner and the solutions."""

from __future__ import annotations


class AocError(Exception):
    """Base class for every error the package raises."""


class ArgumentError(AocError):
    """A command-line argument was missing or invalid."""


class MissingArgumentError(ArgumentError):
    def __init__(self, name: str) -> None:
        super().__init__("Missing argument")
        self.name = name


class InvalidDayInputError(ArgumentError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid day input: {text}")
        self.text = text


class InvalidDayError(ArgumentError):
    def __init__(self, day: int) -> None:
        super().__init__(f"Invalid day: {day}")
        self.day = day


class InvalidPartArgumentError(ArgumentError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid part argument: {text}")
        self.text = text


class PartOutOfRangeError(ArgumentError):
    def __init__(self, part: int) -> None:
        super().__init__(f"Part out of range: {part}")
        self.part = part


class DayNotImplementedError(AocError):
    def __init__(self, day: int) -> None:
        super().__init__(f"Solution for day {day} not implemented yet")
        self.day = day


class InputFileNotFoundError(AocError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"Input file not found: {filename}")
        self.filename = filename


class InvalidInputError(AocError):
    def __init__(self, detail: str | None = None) -> None:
        message = "Invalid input" if detail is None else f"Invalid input: {detail}"
        super().__init__(message)
        self.detail = detail


class NoSolutionError(AocError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"No solution: {reason}")
        self.reason = reason