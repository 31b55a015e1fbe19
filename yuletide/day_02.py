"""Red-Nosed Reports: checking level sequences for safety."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

from yuletide.day import Part
from yuletide.input import Input

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _step_direction(a: int, b: int) -> int | None:
    """+1 for a safe increase, -1 for a safe decrease, None otherwise."""
    diff = b - a
    if not 1 <= abs(diff) <= 3:
        return None
    return 1 if diff > 0 else -1


def _first_failure(levels: Sequence[int]) -> int | None:
    """Index of the first failing pair, or None when the levels are safe."""
    if len(levels) < 2:
        return 0
    pairs = zip(levels, levels[1:])
    direction = _step_direction(*next(pairs))
    if direction is None:
        return 0
    for index, (a, b) in enumerate(pairs, start=1):
        if _step_direction(a, b) != direction:
            return index
    return None


def is_safe(record: Sequence[int]) -> bool:
    return _first_failure(record) is None


def is_safe_with_tolerance(record: Sequence[int]) -> bool:
    """Whether the record is safe once at most one level is removed."""
    failure = _first_failure(record)
    if failure is None or failure == len(record) - 1:
        return True
    for skip in (failure, failure + 1, 0, 1):
        if skip < len(record) and is_safe([*record[:skip], *record[skip + 1:]]):
            return True
    return False


def _read_records(input: Input) -> Iterator[list[int]]:
    while (line := input.read_line()) is not None:
        tokens = line.split()
        if not all(_INTEGER.fullmatch(token) for token in tokens):
            return
        yield [int(token) for token in tokens]


def run(input: Input, part: Part) -> int:
    check = is_safe if part is Part.ONE else is_safe_with_tolerance
    return sum(1 for record in _read_records(input) if check(record))