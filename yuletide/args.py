"""Parsing and validation of the day and part arguments."""

from __future__ import annotations

import re

from yuletide.day import Part
from yuletide.errors import (
    InvalidDayError,
    InvalidDayInputError,
    InvalidPartArgumentError,
    PartOutOfRangeError,
)

_UNSIGNED_BYTE = re.compile(r"\+?[0-9]+")
_LAST_DAY = 25


def _parse_byte(text: str) -> int | None:
    if not _UNSIGNED_BYTE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 0xFF else None


def validate_day(day: int) -> int:
    if day > _LAST_DAY:
        raise InvalidDayError(day)
    return day


def parse_day(arg: str) -> int:
    value = _parse_byte(arg)
    if value is None:
        raise InvalidDayInputError(arg)
    return value


def validate_part(part: int) -> Part:
    if part == 1:
        return Part.ONE
    if part == 2:
        return Part.TWO
    raise PartOutOfRangeError(part)


def parse_part(arg: str) -> int:
    value = _parse_byte(arg)
    if value is None:
        raise InvalidPartArgumentError(arg)
    return value


def construct_filename(day: int, part: Part) -> str:
    """Default input path for a day and part."""
    return f"input/day_{day}-{part}.dat"