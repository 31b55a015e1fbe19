"""Code Chronicle: which keys fit which locks."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input

_log = logging.getLogger(__name__)

_WIDTH = 5
_HEIGHT = 5
_LOCK_TOP = "#" * _WIDTH

Columns = tuple[int, ...]


def _read_block(input: Input) -> list[str]:
    block = []
    while (line := input.read_line()) is not None:
        line = line.rstrip()
        if not line:
            break
        if len(line.encode("utf-8")) != _WIDTH:
            raise InvalidInputError(f"{_WIDTH} bytes per input line expected: {line!r}")
        block.append(line)
    return block


def _heights(block: Sequence[str]) -> Columns:
    if len(block) < _HEIGHT + 1:
        raise InvalidInputError(f"schematic too short: {block!r}")
    body = block[1:_HEIGHT + 1]
    return tuple(sum(row[i] == "#" for row in body) for i in range(_WIDTH))


def parse_schematics(input: Input) -> tuple[list[Columns], list[Columns]]:
    """Read blank-line separated schematics into lock and key column heights."""
    locks: list[Columns] = []
    keys: list[Columns] = []
    while block := _read_block(input):
        target = locks if block[0] == _LOCK_TOP else keys
        target.append(_heights(block))
    return locks, keys


def count_fits(locks: Iterable[Columns], keys: Iterable[Columns]) -> int:
    """Number of (key, lock) pairs whose columns never overlap."""
    locks = list(locks)
    matches = 0
    for key in keys:
        for lock in locks:
            if all(k + l <= _HEIGHT for k, l in zip(key, lock)):
                _log.debug("Match: %s %s", key, lock)
                matches += 1
    return matches


def run(input: Input, part: Part) -> int:
    locks, keys = parse_schematics(input)
    if part is Part.ONE:
        return count_fits(locks, keys)
    return 0