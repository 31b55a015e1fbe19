"""A rectangular grid indexed by (x, y) positions."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from yuletide.vec2 import Vec2

T = TypeVar("T")


class Grid(Generic[T]):
    """Rows of equal length, addressed as grid[x, y] or grid[Vec2]."""

    def __init__(self, rows: Iterable[Iterable[T]]) -> None:
        self._rows = [list(row) for row in rows]
        width = len(self._rows[0]) if self._rows else 0
        if any(len(row) != width for row in self._rows):
            raise ValueError("grid rows have different lengths")
        self._dims = Vec2(width, len(self._rows))

    @classmethod
    def with_size(cls, width: int, height: int, default: T) -> Grid[T]:
        """A width x height grid where every cell holds its own copy of default."""
        return cls([[copy.copy(default) for _ in range(width)] for _ in range(height)])

    @property
    def dims(self) -> Vec2:
        return self._dims

    @property
    def width(self) -> int:
        return self._dims.x

    @property
    def height(self) -> int:
        return self._dims.y

    def items(self) -> Iterator[tuple[Vec2, T]]:
        """Yield (position, value) pairs row by row."""
        for y, row in enumerate(self._rows):
            for x, value in enumerate(row):
                yield Vec2(x, y), value

    def _locate(self, pos: Vec2 | tuple[int, int]) -> tuple[int, int]:
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position {tuple(pos)} outside grid {self._dims}")
        return x, y

    def __getitem__(self, pos: Vec2 | tuple[int, int]) -> T:
        x, y = self._locate(pos)
        return self._rows[y][x]

    def __setitem__(self, pos: Vec2 | tuple[int, int], value: T) -> None:
        x, y = self._locate(pos)
        self._rows[y][x] = value