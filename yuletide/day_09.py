"""Disk Fragmenter: compacting an amphipod disk and computing its checksum."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input

_DIGITS = frozenset("0123456789")


def parse_disk_map(text: str) -> list[int]:
    """Turn a dense disk map such as "12345" into its digit lengths."""
    text = text.rstrip("\r\n")
    if not set(text) <= _DIGITS:
        raise InvalidInputError(f"disk map holds non-digits: {text!r}")
    return [int(ch) for ch in text]


def _block_sum(start: int, length: int) -> int:
    return sum(range(start, start + length))


class _BackCursor:
    """Hands out file blocks one at a time, starting from the back of the disk."""

    def __init__(self, disk_map: Sequence[int]) -> None:
        self._map = disk_map
        # The starting entry is picked by the parity of the last length.
        self.index = len(disk_map) - 1 if disk_map[-1] % 2 == 0 else len(disk_map) - 2
        if self.index < 0:
            raise InvalidInputError("disk map too short")
        self.remaining = disk_map[self.index]

    def take(self) -> int | None:
        """File id of the next block from the back, or None once exhausted."""
        if self.index == 0 and self.remaining == 0:
            return None
        while self.remaining <= 0:
            previous = self.index - 2
            if previous < 0:
                return None
            self.index = previous
            self.remaining = self._map[previous]
        self.remaining -= 1
        return self.index // 2


def fragmented_checksum(disk_map: Sequence[int]) -> int:
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    if not disk_map:
        raise InvalidInputError("empty disk map")
    cursor = _BackCursor(disk_map)
    checksum = 0
    position = 0
    for index, length in enumerate(disk_map):
        if index == cursor.index:
            break
        if index % 2 == 0:
            checksum += (index // 2) * _block_sum(position, length)
        else:
            for offset in range(length):
                file_id = cursor.take()
                if file_id is None:
                    raise InvalidInputError("ran out of file blocks to move")
                checksum += (position + offset) * file_id
        position += length
    return checksum + (cursor.index // 2) * _block_sum(position, cursor.remaining)


@dataclass(frozen=True)
class _Segment:
    length: int
    file_id: int | None = None


def _relocate(layout: list[_Segment], file: _Segment) -> None:
    """Copy file into the leftmost gap that fits, if one lies before the file."""
    for i, current in enumerate(layout):
        if current.file_id is None and current.length >= file.length:
            layout[i] = file
            rest = current.length - file.length
            if rest > 0:
                layout.insert(i + 1, _Segment(rest))
            return
        if current.file_id == file.file_id:
            return


def defragmented_checksum(disk_map: Sequence[int]) -> int:
    """Checksum after moving whole files, highest id first, into the leftmost gaps."""
    segments = [
        _Segment(length, index // 2 if index % 2 == 0 else None)
        for index, length in enumerate(disk_map)
    ]
    layout = list(segments)
    for segment in reversed(segments):
        if segment.file_id is not None:
            _relocate(layout, segment)

    # A moved file also keeps its old slot; only its first occurrence counts.
    seen: set[int] = set()
    checksum = 0
    position = 0
    for segment in layout:
        if segment.file_id is not None and segment.file_id not in seen:
            seen.add(segment.file_id)
            checksum += segment.file_id * _block_sum(position, segment.length)
        position += segment.length
    return checksum


def run(input: Input, part: Part) -> int:
    raw = input.read_line_bytes()
    if raw is None:
        raise InvalidInputError("missing disk map")
    # The last byte of the line is dropped, newline or not.
    disk_map = parse_disk_map(raw[:-1].decode("latin-1"))
    if part is Part.ONE:
        return fragmented_checksum(disk_map)
    return defragmented_checksum(disk_map)