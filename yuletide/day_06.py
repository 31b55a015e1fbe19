"""Guard Gallivant: following a patrolling guard and trapping it in a loop."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input
from yuletide.vec2 import Vec2

_GUARD = "^"
_WALL = "#"


class _Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def turn(self) -> _Direction:
        """The direction after turning right."""
        return _TURNS[self]


_TURNS = {
    _Direction.UP: _Direction.RIGHT,
    _Direction.RIGHT: _Direction.DOWN,
    _Direction.DOWN: _Direction.LEFT,
    _Direction.LEFT: _Direction.UP,
}


class _Cell(Enum):
    WALL = "wall"
    EMPTY = "empty"
    OUT_OF_BOUNDS = "out"


@dataclass(frozen=True)
class _Guard:
    pos: Vec2
    direction: _Direction = _Direction.UP

    def ahead(self) -> Vec2:
        return self.pos + self.direction.value


class LabMap:
    """The lab floor plan and where the guard starts, facing up."""

    def __init__(self, rows: Sequence[str], start: Vec2) -> None:
        self.rows = list(rows)
        self.start = start

    @classmethod
    def from_input(cls, input: Input) -> LabMap:
        # The last byte of every line is dropped, newline or not.
        rows: list[str] = []
        start: Vec2 | None = None
        while (raw := input.read_line_bytes()) is not None:
            row = raw[:-1].decode("latin-1")
            if start is None and _GUARD in row:
                start = Vec2(row.rindex(_GUARD), len(rows))
            rows.append(row)
        if start is None:
            raise InvalidInputError("Guard should be in the map")
        return cls(rows, start)

    def _at(self, pos: Vec2, extra_wall: Vec2 | None = None) -> _Cell:
        x, y = pos
        if y < 0 or x < 0 or y >= len(self.rows) or x >= len(self.rows[y]):
            return _Cell.OUT_OF_BOUNDS
        if pos == extra_wall or self.rows[y][x] == _WALL:
            return _Cell.WALL
        return _Cell.EMPTY

    def _walk(
        self, start: _Guard, extra_wall: Vec2 | None = None
    ) -> tuple[list[_Guard], bool]:
        """States the guard passes through after start, and whether it loops."""
        visited: set[_Guard] = set()
        path: list[_Guard] = []
        guard = start
        while True:
            ahead = guard.ahead()
            cell = self._at(ahead, extra_wall)
            if cell is _Cell.OUT_OF_BOUNDS:
                return path, False
            if cell is _Cell.WALL:
                guard = _Guard(guard.pos, guard.direction.turn())
            else:
                guard = _Guard(ahead, guard.direction)
            if guard in visited:
                return path, True
            visited.add(guard)
            path.append(guard)

    def guard_walk(self) -> int:
        """Number of distinct positions the guard visits before leaving."""
        path, _ = self._walk(_Guard(self.start))
        return len({self.start} | {guard.pos for guard in path})

    def count_loop_obstructions(self) -> int:
        """Number of single extra walls on the guard's path that trap it in a loop."""
        start = _Guard(self.start)
        path, _ = self._walk(start)
        states = [start, *path]
        tested: set[Vec2] = set()
        count = 0
        for before, after in zip(states, states[1:]):
            wall = after.pos
            if self._at(wall) is _Cell.WALL or wall == self.start:
                continue
            if wall in tested:
                continue
            tested.add(wall)
            _, loops = self._walk(before, wall)
            if loops:
                count += 1
        return count


def run(input: Input, part: Part) -> int:
    lab = LabMap.from_input(input)
    if part is Part.ONE:
        return lab.guard_walk()
    return lab.count_loop_obstructions()