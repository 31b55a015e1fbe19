"""Integer 2D vectors and grid dimensions."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

_SEPARATORS = re.compile(r"[, |]")
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Dims:
    width: int
    height: int


@dataclass(frozen=True, eq=False)
class Vec2:
    """An integer 2D vector; compares equal to an (x, y) tuple."""

    x: int = 0
    y: int = 0

    @classmethod
    def parse(cls, text: str) -> Vec2:
        """Parse "x,y" (comma, space or pipe separated); raise ValueError otherwise."""
        values = []
        for piece in _SEPARATORS.split(text):
            piece = piece.strip()
            if not _INTEGER.fullmatch(piece):
                raise ValueError(f"invalid Vec2: {text!r}")
            values.append(int(piece))
        if len(values) != 2:
            raise ValueError(f"invalid Vec2: {values!r}")
        return cls(values[0], values[1])

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vec2):
            return self.x == other.x and self.y == other.y
        if isinstance(other, tuple) and len(other) == 2:
            return (self.x, self.y) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __add__(self, other: VecLike) -> Vec2:
        ox, oy = other
        return Vec2(self.x + ox, self.y + oy)

    __radd__ = __add__

    def __sub__(self, other: VecLike) -> Vec2:
        ox, oy = other
        return Vec2(self.x - ox, self.y - oy)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: int) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __mod__(self, bounds: VecLike) -> Vec2:
        bx, by = bounds
        return Vec2(self.x % abs(bx), self.y % abs(by))

    def manhattan_dist(self, other: VecLike) -> int:
        ox, oy = other
        return abs(self.x - ox) + abs(self.y - oy)

    def manhattan_len(self) -> int:
        return abs(self.x) + abs(self.y)

    def abs_vec(self) -> Vec2:
        return Vec2(abs(self.x), abs(self.y))

    def try_add(self, other: VecLike, bounds: VecLike) -> Vec2 | None:
        """Sum of the two vectors if it lies inside bounds, else None."""
        result = self + other
        return result if result.inside(bounds) else None

    def wrapping_add(self, other: VecLike, bounds: VecLike) -> Vec2:
        """Sum of the two vectors wrapped around bounds."""
        return (self + other) % bounds

    def neighbours(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """Up, down, left and right neighbours, in that order."""
        return (
            self + (0, -1),
            self + (0, 1),
            self + (-1, 0),
            self + (1, 0),
        )

    def inside(self, bounds: VecLike) -> bool:
        bx, by = bounds
        return 0 <= self.x < bx and 0 <= self.y < by


VecLike = Union[Vec2, "tuple[int, int]"]