"""A tiny stack machine that runs single-byte opcodes."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Iterator, Sequence

STACK_SIZE = 256
CHUNK_SIZE = 256


class Opcode(IntEnum):
    HALT = 0x00
    PUSH = 0x01
    POP = 0x02
    ADD = 0x03
    SUB = 0x04
    MUL = 0x05
    DIV = 0x06
    PRINT = 0x08


class VMError(Exception):
    """Raised when a program cannot continue."""


def _wrap(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_BINARY = {
    Opcode.ADD: lambda a, b: a + b,
    Opcode.SUB: lambda a, b: a - b,
    Opcode.MUL: lambda a, b: a * b,
    Opcode.DIV: _divide,
}


def execute(bytecode) -> Iterator[int]:
    """Run a program and yield every value it prints.

    The program is fetched in 256-byte blocks; an instruction's operand must
    lie in the same block as the instruction.
    """
    code = bytes(bytecode)
    stack: list[int] = []
    for offset in range(0, len(code), CHUNK_SIZE):
        block = code[offset:offset + CHUNK_SIZE]
        ip = 0
        while ip < len(block):
            opcode = block[ip]
            ip += 1
            if opcode == Opcode.PUSH:
                if ip >= len(block):
                    raise VMError("PUSH missing operand")
                if len(stack) >= STACK_SIZE:
                    raise VMError("Stack overflow")
                stack.append(block[ip])
                ip += 1
            elif opcode == Opcode.POP:
                if not stack:
                    raise VMError("POP missing operand")
                stack.pop()
            elif opcode in _BINARY:
                name = Opcode(opcode).name
                if len(stack) < 2:
                    raise VMError(f"Not enough values for {name}")
                b = stack.pop()
                a = stack.pop()
                if opcode == Opcode.DIV and b == 0:
                    raise VMError("Division by zero")
                stack.append(_wrap(_BINARY[opcode](a, b)))
            elif opcode == Opcode.PRINT:
                if not stack:
                    raise VMError("Stack empty, cannot PRINT")
                yield stack[-1]
            elif opcode == Opcode.HALT:
                return
            else:
                raise VMError(f"Unknown opcode 0x{opcode:02X}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the bytecode file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error: Only one command line argument should be given", file=sys.stderr)
        return 1
    try:
        with open(args[0], "rb") as fh:
            code = fh.read()
    except OSError:
        print("Error: File Path does not exist", file=sys.stderr)
        return 1
    try:
        for value in execute(code):
            print(value)
    except VMError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0