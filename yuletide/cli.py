"""Command line: solve one part of one day's puzzle."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence

from yuletide import (
    day_00,
    day_01,
    day_02,
    day_03,
    day_04,
    day_05,
    day_06,
    day_07,
    day_08,
    day_09,
    day_10,
    day_11,
    day_12,
    day_13,
    day_14,
    day_17,
    day_18,
    day_19,
    day_20,
    day_22,
    day_23,
    day_25,
)
from yuletide.args import (
    construct_filename,
    parse_day,
    parse_part,
    validate_day,
    validate_part,
)
from yuletide.day import Part
from yuletide.errors import (
    AocError,
    DayNotImplementedError,
    InputFileNotFoundError,
    MissingArgumentError,
)
from yuletide.input import Input

_log = logging.getLogger(__name__)

_SOLVERS: dict[int, Callable[[Input, Part], int]] = {
    0: day_00.run,
    1: day_01.run,
    2: day_02.run,
    3: day_03.run,
    4: day_04.run,
    5: day_05.run,
    6: day_06.run,
    7: day_07.run,
    8: day_08.run,
    9: day_09.run,
    10: day_10.run,
    11: day_11.run,
    12: day_12.run,
    13: day_13.run,
    14: day_14.run,
    17: day_17.run,
    18: day_18.run,
    19: day_19.run,
    20: day_20.run,
    22: day_22.run,
    23: day_23.run,
    25: day_25.run,
}


def _open_input(path: str) -> Input:
    """Open the input file, falling back to standard input if it is missing."""
    try:
        return Input.from_file(path)
    except InputFileNotFoundError:
        _log.debug("%s not found, reading standard input", path)
        return Input(sys.stdin.buffer.read())


def run_day(day: int, part: Part, input_file: str | None = None) -> int:
    """Solve the given day and part, reading the named or default input."""
    input = _open_input(input_file or construct_filename(day, part))
    _log.info("Day %d|%s", day, part)
    solver = _SOLVERS.get(day)
    if solver is None:
        raise DayNotImplementedError(day)
    result = solver(input, part)
    _log.info("Day %d|%s done", day, part)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: DAY PART [INPUT_FILE]; returns the exit status."""
    logging.basicConfig(level=logging.WARNING)
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if not args:
            raise MissingArgumentError("day")
        day = validate_day(parse_day(args[0]))
        part = validate_part(parse_part(args[1] if len(args) > 1 else "0"))
        input_file = args[2] if len(args) > 2 else None
        result = run_day(day, part, input_file)
    except AocError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())