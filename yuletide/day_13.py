"""Claw Contraption: the cheapest button presses that reach each prize."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input
from yuletide.numeric import checked_int_div
from yuletide.vec2 import Vec2, VecLike

_log = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_A_COST = 3
_B_COST = 1
_LARGE_OFFSET = 10_000_000_000_000


@dataclass(frozen=True)
class ClawMachine:
    button_a: Vec2
    button_b: Vec2
    prize: Vec2

    def solve(self, offset: VecLike = (0, 0)) -> Vec2 | None:
        """Presses (a, b) that reach the shifted prize exactly, or None.

        The buttons are assumed linearly independent, so there is at most one
        solution; it is found by solving the 2x2 system directly.
        """
        px, py = self.prize + offset
        ax, ay = self.button_a
        bx, by = self.button_b
        a = checked_int_div(py * bx - px * by, ay * bx - ax * by)
        if a is None:
            return None
        b = checked_int_div(px - a * ax, bx)
        if b is None:
            return None
        return Vec2(a, b)


def _read_vec2(input: Input, separator: str) -> Vec2:
    line = input.read_line()
    if line is None:
        raise InvalidInputError("unexpected end of claw machine input")
    fields = line.split(":")
    if len(fields) < 2:
        raise InvalidInputError(f"missing ':' in {line!r}")
    values = []
    for item in fields[1].strip().split(", "):
        pieces = item.split(separator)
        if len(pieces) < 2 or not _INTEGER.fullmatch(pieces[1]):
            raise InvalidInputError(f"invalid coordinate {item!r}")
        values.append(int(pieces[1]))
    if len(values) != 2:
        raise InvalidInputError(f"expected two coordinates in {line!r}")
    return Vec2(values[0], values[1])


def parse_machines(input: Input) -> list[ClawMachine]:
    """Read blocks of two button lines and a prize line, separated by blank lines."""
    machines = []
    while True:
        machine = ClawMachine(
            button_a=_read_vec2(input, "+"),
            button_b=_read_vec2(input, "+"),
            prize=_read_vec2(input, "="),
        )
        _log.debug("A: %r, B: %r, P: %r", machine.button_a, machine.button_b, machine.prize)
        machines.append(machine)
        if input.read_line() is None:
            return machines


def total_tokens(machines: Iterable[ClawMachine], offset: VecLike = (0, 0)) -> int:
    """Tokens spent winning every prize that can be won."""
    total = 0
    for machine in machines:
        presses = machine.solve(offset)
        if presses is not None:
            total += presses.x * _A_COST + presses.y * _B_COST
    return total


def run(input: Input, part: Part) -> int:
    machines = parse_machines(input)
    if part is Part.ONE:
        return total_tokens(machines, (0, 0))
    return total_tokens(machines, (_LARGE_OFFSET, _LARGE_OFFSET))