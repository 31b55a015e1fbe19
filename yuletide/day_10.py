"""Hoof It: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input
from yuletide.vec2 import Vec2

_PEAK = 9


@dataclass
class TopographicMap:
    """Heights 0-9 per cell and the positions of every trailhead (height 0)."""

    heights: list[list[int]] = field(default_factory=list)
    trailheads: list[Vec2] = field(default_factory=list)

    @classmethod
    def from_input(cls, input: Input) -> TopographicMap:
        heights: list[list[int]] = []
        trailheads: list[Vec2] = []
        for y, line in enumerate(input.lines()):
            row = []
            for x, ch in enumerate(line):
                if ch not in "0123456789":
                    raise InvalidInputError(f"invalid height {ch!r}")
                if ch == "0":
                    trailheads.append(Vec2(x, y))
                row.append(int(ch))
            heights.append(row)
        return cls(heights, trailheads)

    def _height(self, pos: Vec2) -> int | None:
        x, y = pos
        if 0 <= y < len(self.heights) and 0 <= x < len(self.heights[y]):
            return self.heights[y][x]
        return None

    def _uphill(self, pos: Vec2) -> list[tuple[Vec2, int]]:
        base = self._height(pos) or 0
        return [
            (neighbour, height)
            for neighbour in pos.neighbours()
            if (height := self._height(neighbour)) is not None and height == base + 1
        ]

    def _reachable_peaks(self, trailhead: Vec2) -> int:
        peaks = 0
        visited = {trailhead}
        exploring = deque([trailhead])
        while exploring:
            pos = exploring.popleft()
            for neighbour, height in self._uphill(pos):
                if neighbour in visited:
                    continue
                visited.add(neighbour)
                if height == _PEAK:
                    peaks += 1
                else:
                    exploring.append(neighbour)
        return peaks

    def _rating(self, trailhead: Vec2) -> int:
        routes = 0
        exploring = [trailhead]
        while exploring:
            pos = exploring.pop()
            for neighbour, height in self._uphill(pos):
                if height == _PEAK:
                    routes += 1
                else:
                    exploring.append(neighbour)
        return routes

    def total_score(self) -> int:
        """Sum over trailheads of the number of distinct peaks they reach."""
        return sum(self._reachable_peaks(head) for head in self.trailheads)

    def total_rating(self) -> int:
        """Sum over trailheads of the number of distinct trails to a peak."""
        return sum(self._rating(head) for head in self.trailheads)


def run(input: Input, part: Part) -> int:
    topographic_map = TopographicMap.from_input(input)
    if part is Part.ONE:
        return topographic_map.total_score()
    return topographic_map.total_rating()