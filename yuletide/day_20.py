"""Race Condition: counting wall-clipping cheats on a single-path race track."""

from __future__ import annotations

from dataclasses import dataclass, field

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input
from yuletide.vec2 import Vec2

_THRESHOLD = 100


@dataclass
class RaceTrack:
    """Open cells with their distance from the start along the track."""

    distances: dict[Vec2, int] = field(default_factory=dict)
    start: Vec2 = Vec2(0, 0)
    end: Vec2 = Vec2(0, 0)

    @classmethod
    def from_input(cls, input: Input) -> RaceTrack:
        open_cells: set[Vec2] = set()
        start = end = None
        y = 0
        while (line := input.read_line()) is not None:
            line = line.strip()
            if not line:
                break
            for x, ch in enumerate(line):
                pos = Vec2(x, y)
                if ch == "#":
                    continue
                if ch == "S":
                    start = pos
                elif ch == "E":
                    end = pos
                elif ch != ".":
                    raise InvalidInputError(f"Unknown maze tile: {ch}")
                open_cells.add(pos)
            y += 1
        if start is None or end is None:
            raise InvalidInputError("the track needs a start and an end")
        return cls(cls._label(open_cells, start, end), start, end)

    @staticmethod
    def _label(open_cells: set[Vec2], start: Vec2, end: Vec2) -> dict[Vec2, int]:
        """Walk the track from start to end, numbering every step."""
        distances = dict.fromkeys(open_cells, 0)
        visited = {start}
        pos = start
        distance = 0
        while pos != end:
            distance += 1
            following = next(
                (n for n in pos.neighbours() if n in open_cells and n not in visited),
                None,
            )
            if following is None:
                raise InvalidInputError(f"the track breaks off at {pos!r}")
            visited.add(following)
            distances[following] = distance
            pos = following
        return distances

    def find_cheats(self, threshold: int, radius: int) -> int:
        """Cheats of at most radius steps that save at least threshold steps."""
        offsets = [
            Vec2(x, y)
            for y in range(-radius, radius + 1)
            for x in range(-radius, radius + 1)
            if abs(x) + abs(y) <= radius
        ]
        return sum(
            1
            for origin, d0 in self.distances.items()
            for offset in offsets
            if (d1 := self.distances.get(origin + offset)) is not None
            and d1 - d0 - offset.manhattan_len() >= threshold
        )


def run(input: Input, part: Part) -> int:
    track = RaceTrack.from_input(input)
    radius = 2 if part is Part.ONE else 20
    return track.find_cheats(_THRESHOLD, radius)