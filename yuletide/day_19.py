"""Linen Layout: arranging towel patterns into designs."""

from __future__ import annotations

from dataclasses import dataclass, field

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input


@dataclass
class OnsenTowels:
    """Available towel patterns and the designs to build from them."""

    patterns: list[str] = field(default_factory=list)
    designs: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if any(not pattern for pattern in self.patterns):
            raise InvalidInputError("empty towel pattern")

    @classmethod
    def from_input(cls, input: Input) -> OnsenTowels:
        line = input.read_line()
        if line is None:
            raise InvalidInputError("missing towel patterns")
        patterns = line.strip().split(", ")
        if input.read_line() is None:
            raise InvalidInputError("missing designs")
        return cls(patterns, list(input.lines()))

    def count_arrangements(self, design: str) -> int:
        """Number of ways to build design from the patterns, in order."""
        ways = [0] * len(design) + [1]
        for start in range(len(design) - 1, -1, -1):
            ways[start] = sum(
                ways[start + len(pattern)]
                for pattern in self.patterns
                if design.startswith(pattern, start)
            )
        return ways[0]

    def count_feasible_designs(self) -> int:
        return sum(1 for design in self.designs if self.count_arrangements(design) > 0)

    def count_all_arrangements(self) -> int:
        return sum(self.count_arrangements(design) for design in self.designs)


def run(input: Input, part: Part) -> int:
    towels = OnsenTowels.from_input(input)
    if part is Part.ONE:
        return towels.count_feasible_designs()
    return towels.count_all_arrangements()