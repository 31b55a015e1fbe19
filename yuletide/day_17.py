"""Chronospatial Computer: a tiny 3-bit machine and the quine hunt for register A."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from yuletide.day import Part
from yuletide.errors import InvalidInputError, NoSolutionError
from yuletide.input import Input

_log = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

_ADV, _BXL, _BST, _JNZ, _BXC, _OUT, _BDV, _CDV = range(8)
_MNEMONICS = ("adv", "bxl", "bst", "jnz", "bxc", "out", "bdv", "cdv")
_LITERAL_OPCODES = frozenset({_BXL, _JNZ, _BXC})

# The program the register A search is built around.
_QUINE_PROGRAM = (2, 4, 1, 5, 7, 5, 4, 3, 1, 6, 0, 3, 5, 5, 3, 0)


class Register(Enum):
    A = 0
    B = 1
    C = 2

    def __str__(self) -> str:
        return f"*{self.name}"


@dataclass(frozen=True)
class Arg:
    """An operand: either a literal number or a register reference."""

    number: int = 0
    register: Register | None = None

    @classmethod
    def literal(cls, value: int) -> Arg:
        return cls(number=value)

    @classmethod
    def combo(cls, value: int) -> Arg:
        """Decode a combo operand: 0-3 are literals, 4-6 registers A-C."""
        if 0 <= value <= 3:
            return cls(number=value)
        if 4 <= value <= 6:
            return cls(register=Register(value - 4))
        if value == 7:
            raise ValueError("Reserved operand value: b111")
        raise ValueError(f"Invalid operand: {value}")

    def value(self, computer: Computer) -> int:
        if self.register is not None:
            return computer[self.register]
        return self.number

    def __str__(self) -> str:
        if self.register is not None:
            return str(self.register)
        return format(self.number, "#01x")


@dataclass(frozen=True)
class Instruction:
    opcode: int
    arg: Arg

    @classmethod
    def decode(cls, opcode: int, operand: int) -> Instruction:
        """Build an instruction from an opcode and its raw operand."""
        if not 0 <= opcode < len(_MNEMONICS):
            raise ValueError(f"Unknown opcode: {opcode}")
        if opcode == _JNZ:
            # Jump targets are stored as instruction indices, not byte offsets.
            return cls(opcode, Arg.literal(operand // 2))
        if opcode in _LITERAL_OPCODES:
            return cls(opcode, Arg.literal(operand))
        return cls(opcode, Arg.combo(operand))

    @property
    def mnemonic(self) -> str:
        return _MNEMONICS[self.opcode]

    def __str__(self) -> str:
        return f"{self.mnemonic} {self.arg}"


def _shift_right_truncating(value: int, shift: int) -> int:
    """value / 2**shift, rounded toward zero."""
    if shift < 0:
        raise ValueError(f"negative shift: {shift}")
    if value >= 0:
        return value >> shift
    return -((-value) >> shift)


def _mod8_truncating(value: int) -> int:
    """value % 8 with the sign of the dividend."""
    if value >= 0:
        return value % 8
    return -((-value) % 8)


_DIVISION_TARGETS = {_ADV: Register.A, _BDV: Register.B, _CDV: Register.C}


class Computer:
    """Three registers, an instruction pointer and the collected output."""

    def __init__(
        self,
        asm: Iterable[Instruction],
        registers: Sequence[int],
        code: Iterable[int] = (),
    ) -> None:
        if len(registers) != 3:
            raise ValueError("exactly three registers are needed")
        self.asm = list(asm)
        self.registers = list(registers)
        self.code = list(code)
        self.ip = 0
        self.output: list[int] = []

    def __getitem__(self, register: Register) -> int:
        return self.registers[register.value]

    def __setitem__(self, register: Register, value: int) -> None:
        self.registers[register.value] = value

    @classmethod
    def from_input(cls, input: Input) -> Computer:
        registers = [_parse_int(_read_field(input, f"register {name}")) for name in "ABC"]
        input.read_line()
        program = _read_field(input, "program")
        code = []
        for piece in program.split(","):
            if not _INTEGER.fullmatch(piece) or not 0 <= int(piece) <= 0xFF:
                raise InvalidInputError(f"invalid program value {piece!r}")
            code.append(int(piece))
        return cls(cls.disassemble(code), registers, code)

    @staticmethod
    def disassemble(code: Sequence[int]) -> list[Instruction]:
        """Turn machine code (opcode, operand pairs) into instructions."""
        if len(code) % 2:
            raise InvalidInputError(f"Invalid instruction: {list(code[-1:])}")
        try:
            return [
                Instruction.decode(opcode, operand)
                for opcode, operand in zip(code[::2], code[1::2])
            ]
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc

    def _step(self, instruction: Instruction) -> bool:
        """Execute one instruction; return True if it jumped."""
        opcode, arg = instruction.opcode, instruction.arg
        if opcode in _DIVISION_TARGETS:
            result = _shift_right_truncating(self[Register.A], arg.value(self))
            _log.debug("%s | %d", instruction, result)
            self[_DIVISION_TARGETS[opcode]] = result
        elif opcode == _BXL:
            self[Register.B] ^= arg.value(self)
            _log.debug("%s | B = %d", instruction, self[Register.B])
        elif opcode == _BST:
            self[Register.B] = _mod8_truncating(arg.value(self))
            _log.debug("%s | B = %d", instruction, self[Register.B])
        elif opcode == _JNZ:
            if self[Register.A] != 0:
                self.ip = arg.value(self) // 2
                _log.debug("%s | jump to %d", instruction, self.ip)
                return True
            _log.debug("%s | nop", instruction)
        elif opcode == _BXC:
            self[Register.B] ^= self[Register.C]
            _log.debug("%s | B = %d", instruction, self[Register.B])
        elif opcode == _OUT:
            self.output.append(_mod8_truncating(arg.value(self)) & 0xFF)
            _log.debug("%s | output %s", instruction, self.output)
        return False

    def execute(self) -> None:
        """Run until the instruction pointer leaves the program."""
        while 0 <= self.ip < len(self.asm):
            if not self._step(self.asm[self.ip]):
                self.ip += 1

    def run_program(self) -> int:
        """Run the program; its output digits read as one decimal number."""
        self.execute()
        _log.info("%s", ",".join(map(str, self.output)))
        if not self.output:
            raise NoSolutionError("the program produced no output")
        return int("".join(map(str, self.output)))

    def _reset(self, a: int) -> None:
        self.registers = [a, 0, 0]
        self.ip = 0
        self.output.clear()

    @staticmethod
    def _produces(a: int, expected: Sequence[int]) -> bool:
        """Whether the quine program started with A = a outputs expected."""
        for wanted in reversed(expected):
            shift = (a % 8) ^ 5
            if ((a >> shift) ^ shift ^ 6) % 8 != wanted:
                return False
            a //= 8
        return True

    def find_a(self) -> int:
        """Smallest A, built three bits at a time, making the program output itself."""
        self.execute()
        self._reset(0)
        expected: list[int] = []
        base = 0
        result = 0
        for value in reversed(_QUINE_PROGRAM):
            expected.append(value)
            a = base
            while not self._produces(a, expected):
                a += 1
            base = a * 8
            result = a
        _log.info("A to produce %s: %d", expected, result)
        return result


def _read_field(input: Input, what: str) -> str:
    line = input.read_line()
    if line is None:
        raise InvalidInputError(f"missing {what}")
    fields = line.split(":")
    if len(fields) < 2:
        raise InvalidInputError(f"missing ':' in {what} line {line!r}")
    return fields[1].strip()


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise InvalidInputError(f"not a number: {text!r}")
    return int(text)


def run(input: Input, part: Part) -> int:
    computer = Computer.from_input(input)
    _log.debug("registers %s, code %s", computer.registers, computer.code)
    if part is Part.ONE:
        return computer.run_program()
    return computer.find_a()