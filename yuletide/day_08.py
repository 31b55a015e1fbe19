"""Resonant Collinearity: antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import combinations

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input
from yuletide.vec2 import Vec2

_EMPTY = "."


def subsets(m: int, n: int) -> Iterator[tuple[int, ...]]:
    """Yield every m-element subset of range(n) as sorted indices, in lexicographic order.

    Nothing is yielded for m == 0.
    """
    if m <= 0:
        return
    yield from combinations(range(n), m)


@dataclass
class CityAntennaMap:
    """Antenna positions grouped by frequency, within a width x height map."""

    antennas: dict[str, list[Vec2]] = field(default_factory=dict)
    width: int = 0
    height: int = 0

    @classmethod
    def from_input(cls, input: Input) -> CityAntennaMap:
        antennas: defaultdict[str, list[Vec2]] = defaultdict(list)
        width = height = 0
        for y, line in enumerate(input.lines()):
            height = y + 1
            width = len(line)
            for x, ch in enumerate(line):
                if ch == _EMPTY:
                    continue
                if ord(ch) >= 128:
                    raise InvalidInputError(f"antenna {ch!r} is not a lower ASCII symbol")
                antennas[ch].append(Vec2(x, y))
        return cls(dict(antennas), width, height)

    def _inside(self, pos: Vec2) -> bool:
        return pos.inside((self.width, self.height))

    def _ray(self, start: Vec2, step: Vec2) -> Iterator[Vec2]:
        pos = start
        while self._inside(pos):
            yield pos
            pos = pos + step

    def _adjacent_antinodes(self, a: Vec2, b: Vec2) -> Iterator[Vec2]:
        ab = b - a
        for candidate in (a - ab, b + ab):
            if self._inside(candidate):
                yield candidate

    def _all_antinodes(self, a: Vec2, b: Vec2) -> Iterator[Vec2]:
        ab = b - a
        yield from self._ray(a, -ab)
        yield from self._ray(b, ab)

    def count_antinodes(self, all_harmonics: bool = False) -> int:
        """Number of distinct in-bounds antinode positions."""
        antinodes_of = self._all_antinodes if all_harmonics else self._adjacent_antinodes
        found: set[Vec2] = set()
        for positions in self.antennas.values():
            for i, j in subsets(2, len(positions)):
                found.update(antinodes_of(positions[i], positions[j]))
        return len(found)


def run(input: Input, part: Part) -> int:
    antenna_map = CityAntennaMap.from_input(input)
    return antenna_map.count_antinodes(all_harmonics=part is Part.TWO)