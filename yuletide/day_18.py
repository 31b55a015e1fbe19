"""RAM Run: escaping a memory grid while bytes keep falling."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from yuletide.day import Part
from yuletide.errors import InvalidInputError, NoSolutionError
from yuletide.input import Input
from yuletide.vec2 import Vec2

_log = logging.getLogger(__name__)

_SIZE = 71
_FIRST_WAVE = 1024


class CorruptedMemory:
    """A width x height memory space that bytes fall into, one at a time."""

    def __init__(
        self, falling_bytes: Iterable[Vec2], width: int, height: int, first_wave: int
    ) -> None:
        self.falling_bytes = list(falling_bytes)
        self.bounds = Vec2(width, height)
        self.first_wave = first_wave
        self.corrupted: set[Vec2] = set()
        self.fallen = 0

    @classmethod
    def from_input(
        cls, input: Input, width: int, height: int, first_wave: int
    ) -> CorruptedMemory:
        try:
            falling = [Vec2.parse(line) for line in input.lines()]
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc
        return cls(falling, width, height, first_wave)

    def _drop(self, count: int) -> None:
        if self.fallen + count > len(self.falling_bytes):
            raise InvalidInputError(
                f"only {len(self.falling_bytes)} bytes, {self.fallen + count} needed"
            )
        for pos in self.falling_bytes[self.fallen:self.fallen + count]:
            if not pos.inside(self.bounds):
                raise InvalidInputError(f"byte {pos!r} falls outside memory")
            self.corrupted.add(pos)
        self.fallen += count

    def _render(self) -> str:
        return "\n".join(
            "".join(
                "#" if Vec2(x, y) in self.corrupted else "."
                for x in range(self.bounds.x)
            )
            for y in range(self.bounds.y)
        )

    def _shortest_path(self, start: Vec2, end: Vec2) -> int | None:
        queue = deque([(start, 0)])
        visited: set[Vec2] = set()
        while queue:
            pos, cost = queue.popleft()
            if pos == end:
                return cost
            for step in pos.neighbours():
                if not step.inside(self.bounds) or step in self.corrupted:
                    continue
                if step in visited:
                    continue
                visited.add(step)
                queue.append((step, cost + 1))
        return None

    @property
    def _exit(self) -> Vec2:
        return self.bounds - (1, 1)

    def find_escape_path(self) -> int:
        """Steps from the top-left to the bottom-right once the first wave has fallen."""
        self._drop(self.first_wave)
        _log.debug("memory:\n%s", self._render())
        steps = self._shortest_path(Vec2(0, 0), self._exit)
        if steps is None:
            raise NoSolutionError(f"No path found after {self.first_wave} bytes fell")
        return steps

    def find_cut_off_byte(self) -> int:
        """Encode the first byte that blocks every path as 100 * x + y."""
        self._drop(self.first_wave)
        _log.debug("memory:\n%s", self._render())
        start, end = Vec2(0, 0), self._exit
        while self._shortest_path(start, end) is not None:
            if self.fallen >= len(self.falling_bytes):
                raise NoSolutionError("the exit stays reachable after every byte fell")
            self._drop(1)
        if self.fallen == 0:
            raise NoSolutionError("the exit is unreachable before any byte fell")
        cut_off = self.falling_bytes[self.fallen - 1]
        _log.info("%d,%d", cut_off.x, cut_off.y)
        return 100 * cut_off.x + cut_off.y


def run(input: Input, part: Part) -> int:
    memory = CorruptedMemory.from_input(input, _SIZE, _SIZE, _FIRST_WAVE)
    if part is Part.ONE:
        return memory.find_escape_path()
    return memory.find_cut_off_byte()