"""Plutonian Pebbles: counting stones that change every blink."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _blink(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def count_after_blinks(pebbles: Iterable[int], blinks: int) -> int:
    """Number of stones after blinking the given number of times."""
    counts = Counter(pebbles)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, count in counts.items():
            for result in _blink(stone):
                following[result] += count
        counts = following
    return sum(counts.values())


def _parse_pebbles(input: Input) -> list[int]:
    line = input.read_line()
    if line is None:
        raise InvalidInputError("missing pebbles")
    tokens = line.split()
    if not all(_UNSIGNED.fullmatch(token) for token in tokens):
        raise InvalidInputError(f"invalid pebbles: {line!r}")
    return [int(token) for token in tokens]


def run(input: Input, part: Part) -> int:
    blinks = 25 if part is Part.ONE else 75
    return count_after_blinks(_parse_pebbles(input), blinks)