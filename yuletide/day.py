"""Puzzle part selector shared by every day's solution."""

from __future__ import annotations

from enum import Enum


class Part(Enum):
    """Which half of a day's puzzle to solve."""

    ONE = 1
    TWO = 2

    def __str__(self) -> str:
        return str(self.value)