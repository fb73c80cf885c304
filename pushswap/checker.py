"""Verify that a list of instructions read from standard input sorts the stack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import ArgumentError, parse_arguments
from .stacks import Operation, Stacks


class InvalidInstruction(ValueError):
    """Raised when a line does not name a known instruction."""

    def __init__(self, line: str) -> None:
        super().__init__(f"invalid instruction: {line!r}")
        self.line = line


def parse_instruction(line: str) -> Operation:
    """Return the instruction a line names.

    A line is accepted when it is a prefix of an instruction followed by a
    newline, so ``"sa\\n"`` and a final ``"sa"`` without newline both name
    ``sa``. Instructions are tried in a fixed order and the first that
    matches wins.
    """
    for operation in Operation:
        if f"{operation.value}\n".startswith(line):
            return operation
    raise InvalidInstruction(line)


def execute(stacks: Stacks, lines: Iterable[str]) -> Stacks:
    """Apply each instruction line to ``stacks`` in order and return them.

    Stops at the first unknown line with :class:`InvalidInstruction`; the
    lines before it have already been applied.
    """
    for line in lines:
        stacks.apply(parse_instruction(line))
    return stacks


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Tell whether the instruction lines sort ``values`` with ``b`` left empty."""
    return execute(Stacks(values), lines).is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 0
    try:
        sorted_ok = check(values, sys.stdin)
    except InvalidInstruction:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0