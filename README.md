# yuletide

Solutions to a set of daily programming puzzles, run from the command line or
called from Python. Solutions are included for days 0 to 14, 17 to 20, 22, 23
and 25.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
yuletide DAY PART [INPUT_FILE]
```

- `DAY` is a number from 0 to 25.
- `PART` is `1` or `2`. Leaving it out is an error.
- `INPUT_FILE` is optional. When it is left out, the runner reads
  `input/day_<DAY>-<PART>.dat`. If the file cannot be opened, it reads
  standard input instead.

The answer is printed to standard output as a single integer, and the exit
status is 0. For example:

```
yuletide 1 1 input/day_1-1.dat
yuletide 11 2 < my-puzzle.txt
```

Bad arguments, a day with no solution, and input that cannot be parsed or
solved are reported on standard error as `Error: <message>`, with exit
status 1.

Some answers are encoded as integers:

- Day 17, part 1: the program's output digits read as one decimal number.
- Day 18, part 2: the blocking byte at `x,y` is reported as `100 * x + y`.
- Day 23, part 2: the size of the largest group of connected computers. The
  names themselves are returned by `yuletide.day_23.Network.largest_party()`.
- Day 0 and day 25, part 2, always answer 0.

Progress and intermediate results (such as the day 14 picture or the day 23
names) go to the `logging` module; the command line shows warnings and above
only.

## From Python

Every day module (`yuletide.day_00` to `yuletide.day_25`, for the days listed
above) has `run(input, part)`. It takes an `Input` and a `Part` and returns
the answer as an integer:

```python
from yuletide.day import Part
from yuletide.input import Input
from yuletide import day_01

puzzle = Input.from_text("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
print(day_01.run(puzzle, Part.ONE))   # 11
```

Use `Input.from_file(path)` to read a puzzle from disk. If the file cannot be
opened, it raises `InputFileNotFoundError`. `yuletide.cli.run_day(day, part,
input_file)` does what the command does and returns the answer.

The modules also expose the pieces the solutions are built from, for example
`yuletide.vec2.Vec2`, `yuletide.grid.Grid`, `day_11.count_after_blinks` and
`day_22.next_secret`.

All errors derive from `yuletide.errors.AocError`, so one `except` clause
catches everything the package raises.

## What is not included

- Days 15, 16, 21 and 24 have no solution; asking for them raises
  `DayNotImplementedError`.
- The day 17 search for register A is written for one particular program and
  does not work for other programs.
- Nothing is drawn or animated on the terminal.