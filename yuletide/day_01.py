"""Historian Hysteria: comparing two location lists."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterator, Sequence

from yuletide.day import Part
from yuletide.input import Input

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _read_pairs(input: Input) -> Iterator[tuple[int, int]]:
    """Yield pairs of numbers until a line without two numbers."""
    while (line := input.read_line()) is not None:
        tokens = line.split()
        if len(tokens) < 2 or not all(_INTEGER.fullmatch(t) for t in tokens[:2]):
            return
        yield int(tokens[0]), int(tokens[1])


def parse_locations(input: Input) -> tuple[list[int], list[int]]:
    """Read both columns and return them sorted."""
    pairs = list(_read_pairs(input))
    left = sorted(a for a, _ in pairs)
    right = sorted(b for _, b in pairs)
    return left, right


def lists_distance(left: Sequence[int], right: Sequence[int]) -> int:
    return sum(abs(a - b) for a, b in zip(left, right))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    frequency = Counter(right)
    return sum(a * frequency[a] for a in left)


def run(input: Input, part: Part) -> int:
    left, right = parse_locations(input)
    if part is Part.ONE:
        return lists_distance(left, right)
    return similarity_score(left, right)