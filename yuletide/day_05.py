"""Print Queue: page ordering rules and updates."""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass, field

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input

_UNSIGNED_BYTE = re.compile(r"\+?[0-9]+")


def _parse_page(text: str) -> int:
    if not _UNSIGNED_BYTE.fullmatch(text) or int(text) > 0xFF:
        raise InvalidInputError(f"invalid page number {text!r}")
    return int(text)


def _middle_page(pages: list[int]) -> int:
    return pages[len(pages) // 2]


@dataclass
class PrintInstructions:
    """Ordering rules (page -> pages that must follow it) and the updates."""

    rules: dict[int, list[int]] = field(default_factory=dict)
    updates: list[list[int]] = field(default_factory=list)

    @classmethod
    def parse(cls, input: Input) -> PrintInstructions:
        rules: defaultdict[int, list[int]] = defaultdict(list)
        while (line := input.read_line()) is not None:
            line = line.strip()
            if not line:
                break
            parts = line.split("|")
            if len(parts) < 2:
                raise InvalidInputError(f"rule without '|': {line!r}")
            rules[_parse_page(parts[0])].append(_parse_page(parts[1]))

        updates = [
            [_parse_page(page) for page in line.strip().split(",")]
            for line in input.read_all().splitlines()
        ]
        return cls(dict(rules), updates)

    def _check_order(self, pages: list[int], fix: bool) -> tuple[bool, list[int]]:
        """Return whether the order is valid, and the pages (reordered when fixing)."""
        pages = list(pages)
        valid = True
        for i in range(len(pages)):
            must_follow = self.rules.get(pages[i], ())
            for j in range(i):
                if pages[j] in must_follow:
                    valid = False
                    if not fix:
                        return valid, pages
                    pages[i], pages[j] = pages[j], pages[i]
        return valid, pages

    def valid_pages_metric(self) -> int:
        """Sum of middle pages of the correctly ordered updates."""
        return sum(
            _middle_page(update)
            for update in self.updates
            if self._check_order(update, fix=False)[0]
        )

    def fixed_invalid_pages_metric(self) -> int:
        """Sum of middle pages of the incorrectly ordered updates, once fixed."""
        total = 0
        for update in self.updates:
            valid, fixed = self._check_order(update, fix=True)
            if not valid:
                total += _middle_page(fixed)
        return total


def run(input: Input, part: Part) -> int:
    instructions = PrintInstructions.parse(input)
    if part is Part.ONE:
        return instructions.valid_pages_metric()
    return instructions.fixed_invalid_pages_metric()