"""Command that reads operations on standard input and tells whether they sort the arguments."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .parsing import ParseError, parse_arguments
from .push_swap import ERROR_MESSAGE
from .sorting import is_sorted
from .stack import Operation, Stack, apply

SUCCESS_MESSAGE = "OK\n"
FAILURE_MESSAGE = "KO\n"
INSTRUCTION_ERROR_MESSAGE = "Error\n"


class InstructionError(ValueError):
    """Raised when a line of input is not exactly one known operation."""


def parse_instruction(line: str) -> Operation:
    """Read one line, which must be an operation name followed by a newline."""
    if not line.endswith("\n"):
        raise InstructionError(f"instruction not terminated by a newline: {line!r}")
    try:
        return Operation(line[:-1])
    except ValueError:
        raise InstructionError(f"unknown instruction: {line!r}") from None


def execute(instructions: Iterable[str], stack_a: Stack, stack_b: Stack) -> None:
    """Apply each instruction line in turn, stopping at the first invalid one."""
    for line in instructions:
        apply(parse_instruction(line), stack_a, stack_b)


def check(values: Iterable[int], instructions: Iterable[str]) -> bool:
    """Tell whether the instructions leave A sorted and non-empty and B empty."""
    stack_a = Stack(values)
    stack_b = Stack()
    execute(instructions, stack_a, stack_b)
    return len(stack_a) > 0 and is_sorted(stack_a) and len(stack_b) == 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the operations on standard input against the numbers; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write(ERROR_MESSAGE)
        return 1
    try:
        sorted_ok = check(values, sys.stdin)
    except InstructionError:
        sys.stderr.write(INSTRUCTION_ERROR_MESSAGE)
        return 1
    sys.stdout.write(SUCCESS_MESSAGE if sorted_ok else FAILURE_MESSAGE)
    return 0


if __name__ == "__main__":
    sys.exit(main())