"""Restroom Redoubt: robots wandering a wrapping grid."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from yuletide.day import Part
from yuletide.errors import InvalidInputError, NoSolutionError
from yuletide.input import Input
from yuletide.vec2 import Vec2, VecLike

_log = logging.getLogger(__name__)

_BOUNDS = Vec2(101, 103)
_TREE_PATTERN = "#######"
_SECONDS = 100
_TREE_ITERATIONS = 1_000_000


@dataclass(frozen=True)
class Robot:
    p: Vec2
    v: Vec2


def _parse_field(token: str) -> Vec2:
    pieces = token.split("=")
    if len(pieces) < 2:
        raise InvalidInputError(f"missing '=' in {token!r}")
    try:
        return Vec2.parse(pieces[1])
    except ValueError as exc:
        raise InvalidInputError(str(exc)) from exc


def parse_robots(input: Input) -> list[Robot]:
    """Read lines of the form "p=x,y v=dx,dy"."""
    robots = []
    while (line := input.read_line()) is not None:
        tokens = line.split()
        if len(tokens) < 2:
            raise InvalidInputError(f"expected position and velocity in {line!r}")
        robots.append(Robot(_parse_field(tokens[0]), _parse_field(tokens[1])))
    return robots


def _quadrant(pos: Vec2, bounds: Vec2) -> int | None:
    mid_x, mid_y = bounds.x // 2, bounds.y // 2
    if pos.x == mid_x or pos.y == mid_y:
        return None
    return (1 if pos.x > mid_x else 0) + (2 if pos.y > mid_y else 0)


def quadrant_score(robots: Iterable[Robot], bounds: VecLike, seconds: int) -> int:
    """Product of robot counts per quadrant after the given number of seconds."""
    bounds = Vec2(*bounds)
    counts = [0, 0, 0, 0]
    for robot in robots:
        quadrant = _quadrant((robot.p + robot.v * seconds) % bounds, bounds)
        if quadrant is not None:
            counts[quadrant] += 1
    return math.prod(counts)


def _tree_canvas(positions: Iterable[Vec2], bounds: Vec2) -> list[str] | None:
    """The rendered grid if some row holds the pattern in an aligned chunk."""
    canvas = [["."] * bounds.x for _ in range(bounds.y)]
    for pos in positions:
        canvas[pos.y][pos.x] = "#"
    rows = ["".join(row) for row in canvas]
    width = len(_TREE_PATTERN)
    if any(
        row[start:start + width] == _TREE_PATTERN
        for row in rows
        for start in range(0, bounds.x, width)
    ):
        return rows
    return None


def find_tree(robots: Sequence[Robot], bounds: VecLike, iterations: int) -> int:
    """Seconds until the robots draw a long horizontal line, as a tree's hint."""
    bounds = Vec2(*bounds)
    positions = [robot.p for robot in robots]
    for second in range(1, iterations + 1):
        positions = [
            pos.wrapping_add(robot.v, bounds) for pos, robot in zip(positions, robots)
        ]
        canvas = _tree_canvas(positions, bounds)
        if canvas is not None:
            _log.info("tree after %d seconds:\n%s", second, "\n".join(canvas))
            return second
    raise NoSolutionError(f"No Christmas tree found after {iterations} iterations")


def run(input: Input, part: Part) -> int:
    robots = parse_robots(input)
    if part is Part.ONE:
        return quadrant_score(robots, _BOUNDS, _SECONDS)
    return find_tree(robots, _BOUNDS, _TREE_ITERATIONS)