"""Mull It Over: summing well-formed multiplications in corrupted memory."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from enum import Enum

from yuletide.day import Part
from yuletide.input import Input

_ASCII_DIGITS = re.compile(r"[0-9]+")
_I64_MAX = 2**63 - 1


class Token(Enum):
    """Symbols recognised in corrupted memory; numbers are yielded as plain ints."""

    MUL = "mul"
    DO = "do()"
    DONT = "don't()"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    COMMA = ","
    INVALID = "invalid"


_SINGLE_CHAR = {
    "(": Token.LEFT_PAREN,
    ")": Token.RIGHT_PAREN,
    ",": Token.COMMA,
}


def _valid_initial(ch: str) -> bool:
    return ch in "()md" or ch.isnumeric()


class _Scanner:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _peek(self) -> str | None:
        return self._text[self._pos] if self._pos < len(self._text) else None

    def _expect(self, ch: str) -> bool:
        if self._peek() == ch:
            self._pos += 1
            return True
        return False

    def _expect_all(self, chars: str) -> bool:
        return all(self._expect(ch) for ch in chars)

    def _consume_while(self, predicate) -> str:
        start = self._pos
        while self._pos < len(self._text) and predicate(self._text[self._pos]):
            self._pos += 1
        return self._text[start:self._pos]

    def scan(self) -> Token | int | None:
        """Next token, or None once scanning is over."""
        ch = self._peek()
        if ch is None:
            return None
        if ch in _SINGLE_CHAR:
            self._pos += 1
            return _SINGLE_CHAR[ch]
        if ch == "m":
            return Token.MUL if self._expect_all("mul") else Token.INVALID
        if ch == "d":
            return self._scan_do_dont()
        if ch.isnumeric():
            return self._scan_number()
        self._consume_while(lambda c: not _valid_initial(c))
        return Token.INVALID

    def _scan_do_dont(self) -> Token | None:
        if not self._expect_all("do"):
            return None
        following = self._peek()
        if following == "(":
            return Token.DO if self._expect_all("()") else None
        if following == "n":
            return Token.DONT if self._expect_all("n't()") else None
        return Token.INVALID

    def _scan_number(self) -> Token | int:
        digits = self._consume_while(str.isnumeric)
        if not _ASCII_DIGITS.fullmatch(digits):
            return Token.INVALID
        value = int(digits)
        return value if value <= _I64_MAX else Token.INVALID


def tokenize(text: str) -> Iterator[Token | int]:
    """Yield tokens until the text ends or a broken do/don't cuts scanning short."""
    scanner = _Scanner(text)
    while (token := scanner.scan()) is not None:
        yield token


_MUL_ARGUMENTS = (Token.LEFT_PAREN, int, Token.COMMA, int, Token.RIGHT_PAREN)


def _match_mul(tokens: Sequence[Token | int], pos: int) -> tuple[int | None, int]:
    """Match "(a,b)" at pos; return the product (or None) and the new position."""
    numbers: list[int] = []
    for expected in _MUL_ARGUMENTS:
        if pos >= len(tokens):
            return None, pos
        token = tokens[pos]
        if expected is int:
            if not isinstance(token, int):
                return None, pos
            numbers.append(token)
        elif token is not expected:
            return None, pos
        pos += 1
    return numbers[0] * numbers[1], pos


def evaluate(text: str, with_toggle: bool = False) -> int:
    """Sum the products of valid mul(a,b) calls, honouring do()/don't() if asked."""
    tokens = list(tokenize(text))
    total = 0
    enabled = True
    pos = 0
    while pos < len(tokens):
        token = tokens[pos]
        pos += 1
        if token is Token.DO:
            enabled = True
        elif token is Token.DONT:
            enabled = False
        elif token is Token.MUL:
            product, pos = _match_mul(tokens, pos)
            if product is not None and (enabled or not with_toggle):
                total += product
    return total


def run(input: Input, part: Part) -> int:
    return evaluate(input.read_all(), with_toggle=part is Part.TWO)