"""The two stacks and the operations allowed on them."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence


class Operation(str, enum.Enum):
    """The instructions that act on stacks ``a`` and ``b``."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def lowest_index(values: Sequence[int]) -> int | None:
    """Index of the first smallest value, or None for an empty sequence."""
    if not values:
        return None
    return min(range(len(values)), key=values.__getitem__)


def highest_index(values: Sequence[int]) -> int | None:
    """Index of the last largest value, or None for an empty sequence."""
    if not values:
        return None
    best = 0
    for index, value in enumerate(values):
        if value >= values[best]:
            best = index
    return best


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each list is the top."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def _stack(self, name: str) -> list[int]:
        if name == "a":
            return self.a
        if name == "b":
            return self.b
        raise ValueError(f"unknown stack: {name!r}")

    def swap(self, name: str) -> bool:
        """Swap the two top elements; return whether anything moved."""
        stack = self._stack(name)
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    def push(self, target: str) -> bool:
        """Move the top of the other stack onto ``target``."""
        destination = self._stack(target)
        source = self.b if destination is self.a else self.a
        if not source:
            return False
        destination.insert(0, source.pop(0))
        return True

    def rotate(self, name: str) -> bool:
        """Move the top element to the bottom."""
        stack = self._stack(name)
        if len(stack) < 2:
            return False
        stack.append(stack.pop(0))
        return True

    def reverse_rotate(self, name: str) -> bool:
        """Move the bottom element to the top."""
        stack = self._stack(name)
        if len(stack) < 2:
            return False
        stack.insert(0, stack.pop())
        return True

    def apply(self, operation: Operation | str) -> None:
        """Carry out one instruction."""
        operation = Operation(operation)
        if operation is Operation.SA:
            self.swap("a")
        elif operation is Operation.SB:
            self.swap("b")
        elif operation is Operation.SS:
            self.swap("a")
            self.swap("b")
        elif operation is Operation.PA:
            self.push("a")
        elif operation is Operation.PB:
            self.push("b")
        elif operation is Operation.RA:
            self.rotate("a")
        elif operation is Operation.RB:
            self.rotate("b")
        elif operation is Operation.RR:
            self.rotate("a")
            self.rotate("b")
        elif operation is Operation.RRA:
            self.reverse_rotate("a")
        elif operation is Operation.RRB:
            self.reverse_rotate("b")
        else:
            self.reverse_rotate("a")
            self.reverse_rotate("b")

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` is in ascending order."""
        if self.b:
            return False
        return all(x <= y for x, y in zip(self.a, self.a[1:]))