"""Garden Groups: pricing fences around garden regions."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator, Sequence
from enum import Enum

from yuletide.day import Part
from yuletide.input import Input
from yuletide.vec2 import Vec2

_BORDER = "_"


class _Side(Enum):
    TOP = "T"
    BOTTOM = "B"
    LEFT = "L"
    RIGHT = "R"


# Matches the order of Vec2.neighbours(): up, down, left, right.
_NEIGHBOUR_SIDES = (_Side.TOP, _Side.BOTTOM, _Side.LEFT, _Side.RIGHT)


def _count_runs(values: list[int]) -> int:
    """Number of runs of consecutive integers in the values once sorted."""
    ordered = sorted(values)
    if not ordered:
        return 0
    return 1 + sum(1 for prev, cur in zip(ordered, ordered[1:]) if cur != prev + 1)


class Garden:
    """Plots labelled by plant type; anything outside the map is a border."""

    def __init__(self, rows: Sequence[str]) -> None:
        self.rows = list(rows)

    @classmethod
    def from_input(cls, input: Input) -> Garden:
        # The last byte of every line is dropped, newline or not.
        rows = []
        while (raw := input.read_line_bytes()) is not None:
            rows.append(raw[:-1].decode("latin-1"))
        return cls(rows)

    def _at(self, pos: Vec2) -> str:
        x, y = pos
        if 0 <= y < len(self.rows) and 0 <= x < len(self.rows[y]):
            return self.rows[y][x]
        return _BORDER

    def _regions(self) -> Iterator[list[Vec2]]:
        """Yield the plots of each region, found by depth-first search."""
        visited: set[Vec2] = set()
        for y, row in enumerate(self.rows):
            for x in range(len(row)):
                start = Vec2(x, y)
                if start in visited:
                    continue
                label = self._at(start)
                region = []
                exploring = [start]
                while exploring:
                    pos = exploring.pop()
                    if pos in visited:
                        continue
                    visited.add(pos)
                    region.append(pos)
                    exploring.extend(
                        n
                        for n in pos.neighbours()
                        if n not in visited and self._at(n) == label
                    )
                yield region

    def _fences_at(self, pos: Vec2) -> Iterator[_Side]:
        label = self._at(pos)
        for neighbour, side in zip(pos.neighbours(), _NEIGHBOUR_SIDES):
            if self._at(neighbour) != label:
                yield side

    def fence_price(self) -> int:
        """Sum over regions of area times perimeter."""
        return sum(
            len(region) * sum(len(list(self._fences_at(pos))) for pos in region)
            for region in self._regions()
        )

    def _sides(self, region: list[Vec2]) -> int:
        groups: defaultdict[tuple[_Side, int], list[int]] = defaultdict(list)
        for pos in region:
            for side in self._fences_at(pos):
                if side in (_Side.TOP, _Side.BOTTOM):
                    groups[side, pos.y].append(pos.x)
                else:
                    groups[side, pos.x].append(pos.y)
        return sum(_count_runs(values) for values in groups.values())

    def bulk_price(self) -> int:
        """Sum over regions of area times number of straight sides."""
        return sum(len(region) * self._sides(region) for region in self._regions())


def run(input: Input, part: Part) -> int:
    garden = Garden.from_input(input)
    if part is Part.ONE:
        return garden.fence_price()
    return garden.bulk_price()