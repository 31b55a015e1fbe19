"""Ceres Search: finding XMAS in a word search."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator, Sequence

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input

_WORDS = ("XMAS", "SAMX")
_BORDER = "_"
_CROSS_ENDS = {("M", "S"), ("S", "M")}


def _directional_lines(lines: Sequence[str]) -> Iterator[str]:
    """Every row, column, diagonal and anti-diagonal as a string."""
    groups: defaultdict[tuple[str, int], list[str]] = defaultdict(list)
    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            groups["row", y].append(ch)
            groups["column", x].append(ch)
            groups["diagonal", x - y].append(ch)
            groups["anti-diagonal", x + y].append(ch)
    return ("".join(chars) for chars in groups.values())


def count_xmas(lines: Sequence[str]) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    if not lines:
        raise InvalidInputError("empty word search")
    return sum(
        text.count(word) for text in _directional_lines(lines) for word in _WORDS
    )


def _at(lines: Sequence[str], x: int, y: int) -> str:
    if 0 <= y < len(lines) and 0 <= x < len(lines[y]):
        return lines[y][x]
    return _BORDER


def count_x_mas(lines: Sequence[str]) -> int:
    """Number of A cells crossed by two diagonal MAS words."""
    if not lines:
        raise InvalidInputError("empty word search")

    def is_cross(x: int, y: int) -> bool:
        major = (_at(lines, x - 1, y - 1), _at(lines, x + 1, y + 1))
        minor = (_at(lines, x - 1, y + 1), _at(lines, x + 1, y - 1))
        return major in _CROSS_ENDS and minor in _CROSS_ENDS

    return sum(
        1
        for y, line in enumerate(lines)
        for x, ch in enumerate(line)
        if ch == "A" and is_cross(x, y)
    )


def _read_grid(input: Input) -> list[str]:
    # The last byte of every line is dropped, newline or not.
    lines = []
    while (raw := input.read_line_bytes()) is not None:
        lines.append(raw[:-1].decode("latin-1"))
    return lines


def run(input: Input, part: Part) -> int:
    lines = _read_grid(input)
    if part is Part.ONE:
        return count_xmas(lines)
    return count_x_mas(lines)