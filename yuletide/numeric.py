"""Small integer helpers."""

from __future__ import annotations


def checked_int_div(a: int, b: int) -> int | None:
    """Return a / b when b divides a exactly, otherwise None."""
    if b == 0 or a % b != 0:
        return None
    return a // b