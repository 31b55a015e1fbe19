"""Monkey Market: pseudorandom secrets and the best sequence of price changes."""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input

_log = logging.getLogger(__name__)

_MODULO = 16777216
_ITERATIONS = 2000
_UNSIGNED = re.compile(r"\+?[0-9]+")


def next_secret(value: int) -> int:
    """The secret number that follows value."""
    value = (value ^ (value * 64)) % _MODULO
    value = (value ^ (value // 32)) % _MODULO
    value = (value ^ (value * 2048)) % _MODULO
    return value


def nth_secret(seed: int, n: int) -> int:
    """The secret after n steps starting from seed."""
    for _ in range(n):
        seed = next_secret(seed)
    return seed


def _sell_prices(seed: int, n: int) -> dict[tuple[int, int, int, int], int]:
    """Price at the first occurrence of every window of four price changes."""
    secrets = [seed]
    for _ in range(n):
        secrets.append(next_secret(secrets[-1]))
    prices = [secret % 10 for secret in secrets]
    diffs = [b - a for a, b in zip(prices, prices[1:])]
    sell_prices: dict[tuple[int, int, int, int], int] = {}
    windows = zip(diffs, diffs[1:], diffs[2:], diffs[3:])
    for i, window in enumerate(windows):
        sell_prices.setdefault(window, prices[i + 4])
    return sell_prices


def best_sell_price(seeds: Iterable[int], n: int) -> int:
    """Most bananas one sequence of four price changes can earn over all buyers."""
    totals: Counter[tuple[int, int, int, int]] = Counter()
    for seed in seeds:
        for window, price in _sell_prices(seed, n).items():
            totals[window] += price
    if not totals:
        return 0
    window, best = max(totals.items(), key=lambda item: item[1])
    _log.info("best sell sequence: %s", window)
    return max(best, 0)


def _parse_seeds(input: Input) -> list[int]:
    seeds = []
    for line in input.lines():
        if not _UNSIGNED.fullmatch(line):
            raise InvalidInputError(f"not a number: {line!r}")
        seeds.append(int(line))
    return seeds


def run(input: Input, part: Part) -> int:
    seeds = _parse_seeds(input)
    if part is Part.ONE:
        return sum(nth_secret(seed, _ITERATIONS) for seed in seeds)
    return best_sell_price(seeds, _ITERATIONS)