"""Line-oriented access to a puzzle input."""

from __future__ import annotations

import io
import os
from collections.abc import Iterator

from yuletide.errors import InputFileNotFoundError


class Input:
    """A puzzle input that is consumed line by line or all at once."""

    def __init__(self, data: bytes) -> None:
        self._stream = io.BytesIO(data)

    @classmethod
    def from_file(cls, filename: str | os.PathLike[str]) -> Input:
        """Load an input file; raise InputFileNotFoundError if it cannot be opened."""
        try:
            with open(filename, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise InputFileNotFoundError(str(filename)) from exc
        return cls(data)

    @classmethod
    def from_text(cls, text: str) -> Input:
        return cls(text.encode("utf-8"))

    def read_line(self) -> str | None:
        """Return the next line with its newline, or None at the end."""
        raw = self._stream.readline()
        if not raw:
            return None
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def read_all(self) -> str:
        """Return everything not yet read."""
        return self._stream.read().decode("utf-8")

    def read_line_bytes(self) -> bytes | None:
        """Return the next line as bytes with its newline, or None at the end."""
        raw = self._stream.readline()
        return raw or None

    def lines(self) -> Iterator[str]:
        """Yield the remaining lines without their line endings."""
        for raw in self._stream:
            line = raw.decode("utf-8")
            if line.endswith("\n"):
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            yield line