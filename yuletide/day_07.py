"""Bridge Repair: filling in operators to make equations hold."""

from __future__ import annotations

import logging
import operator
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from itertools import product

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input

_log = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _concat(left: int, right: int) -> int:
    digits = len(str(right)) if right > 0 else 1
    return left * 10**digits + right


# Order matters: the first n of these are the operators available with n.
_OPERATORS: tuple[tuple[str, Callable[[int, int], int]], ...] = (
    (" * ", operator.mul),
    (" + ", operator.add),
    ("||", _concat),
)


@dataclass(frozen=True)
class BridgeEquation:
    """A test value and the operands that should combine to it, left to right."""

    result: int
    operands: tuple[int, ...]

    def _evaluate(self, operators: Sequence[tuple[str, Callable[[int, int], int]]]) -> bool:
        value = self.operands[0]
        for (_, apply), argument in zip(operators, self.operands[1:]):
            value = apply(value, argument)
            if value > self.result:
                return False
        return value == self.result

    def _describe(self, operators: Sequence[tuple[str, Callable[[int, int], int]]]) -> str:
        text = str(self.operands[0])
        for (symbol, _), argument in zip(operators, self.operands[1:]):
            text += f"{symbol}{argument}"
        return f"{text} = {self.result}"

    def is_solvable(self, operator_count: int) -> bool:
        """Whether some choice among the first operator_count operators works."""
        if not 1 <= operator_count <= len(_OPERATORS):
            raise ValueError(f"operator count must be 1..{len(_OPERATORS)}")
        if len(self.operands) < 2:
            raise InvalidInputError("an equation needs at least two operands")
        choices = _OPERATORS[:operator_count]
        for operators in product(choices, repeat=len(self.operands) - 1):
            if self._evaluate(operators):
                _log.debug("%s", self._describe(operators))
                return True
        return False


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise InvalidInputError(f"not a number: {text!r}")
    return int(text)


def parse_equations(input: Input) -> list[BridgeEquation]:
    """Read lines of the form "result: a b c"."""
    equations = []
    for line in input.lines():
        parts = line.split(": ")
        if len(parts) < 2:
            raise InvalidInputError(f"missing ': ' in {line!r}")
        result = _parse_int(parts[0])
        operands = tuple(_parse_int(token) for token in parts[1].split(" "))
        equations.append(BridgeEquation(result, operands))
    return equations


def run(input: Input, part: Part) -> int:
    operator_count = 2 if part is Part.ONE else 3
    return sum(
        equation.result
        for equation in parse_equations(input)
        if equation.is_solvable(operator_count)
    )