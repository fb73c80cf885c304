"""Produce the list of operations that sorts stack ``a`` in ascending order."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain

from .stacks import Operation, Stacks, highest_index, lowest_index


def _countdown(value: int) -> tuple[int, int]:
    """Iterations of a ``while (value-- > 0)`` loop and the value left after it."""
    return max(value, 0), min(value, 0) - 1


def _offset(index: int | None) -> int:
    """One-based position of an index, 0 when there is none."""
    return 0 if index is None else index + 1


class _Sorter:
    """Greedy insertion sort through stack ``b`` that records every move."""

    def __init__(self, stacks: Stacks) -> None:
        self.stacks = stacks
        self.operations: list[Operation] = []
        self.bigger: int | None = None
        self.lower: int | None = None
        self.top_a = 0
        self.bottom_a = 0
        self.top_b = 0
        self.bottom_b = 0

    # -- primitive moves -------------------------------------------------

    def _record(self, moved: bool, operation: Operation) -> None:
        if moved:
            self.operations.append(operation)

    def _rotate(self, name: str, operation: Operation, times: int) -> None:
        for _ in range(max(times, 0)):
            self._record(self.stacks.rotate(name), operation)

    def _reverse_rotate(self, name: str, operation: Operation, times: int) -> None:
        for _ in range(max(times, 0)):
            self._record(self.stacks.reverse_rotate(name), operation)

    def _rotate_both(self, times: int) -> None:
        for _ in range(times):
            self.stacks.rotate("a")
            self._record(self.stacks.rotate("b"), Operation.RR)

    def _reverse_rotate_both(self, times: int) -> None:
        for _ in range(times):
            self.stacks.reverse_rotate("a")
            self._record(self.stacks.reverse_rotate("b"), Operation.RRR)

    def _push(self, target: str) -> None:
        operation = Operation.PA if target == "a" else Operation.PB
        self._record(self.stacks.push(target), operation)

    # -- bookkeeping -----------------------------------------------------

    def _assign_a(self, offset: int) -> None:
        self.top_a = offset - 1
        self.bottom_a = len(self.stacks.a) - offset + 1

    def _assign_b(self, offset: int) -> None:
        self.top_b = offset - 1
        self.bottom_b = len(self.stacks.b) - offset + 1

    # -- target positions ------------------------------------------------

    def _position_in_b(self, near: int) -> int | None:
        """Index of the element of ``b`` that ``near`` should sit above."""
        b = self.stacks.b
        if len(b) < 2:
            return None
        start = b.index(self.bigger)
        if not near > self.lower or near > self.bigger:
            return start
        for index in chain(range(start, len(b)), range(start)):
            if near > b[index]:
                return index
        return None

    def _position_in_a(self, target: int) -> int | None:
        """Index of the element of ``a`` that ``target`` should sit above."""
        a = self.stacks.a
        low = lowest_index(a)
        high = highest_index(a)
        if not target > a[low] or target > a[high]:
            return low
        for index in chain(range(low, len(a)), range(low)):
            if not target > a[index]:
                return index
        return None

    # -- cost estimation -------------------------------------------------

    def _top_cost(self) -> int:
        if self.top_a == 0:
            return self.top_b + 1
        if self.top_b == 0:
            return self.top_a + 1
        if self.top_a <= self.top_b:
            return self.top_b + 1
        return self.top_a + 1

    def _bottom_cost(self) -> int:
        if self.bottom_a == 0:
            return self.bottom_b + 1
        if self.bottom_b == 0:
            return self.bottom_a + 1
        if self.bottom_a <= self.bottom_b:
            return self.bottom_b + 1
        return self.bottom_a + 1

    def _move_cost(self, near: int, a_offset: int) -> tuple[int, int]:
        """Moves needed to push ``near`` into place, and its target offset in ``b``."""
        self._assign_a(a_offset)
        b_offset = _offset(self._position_in_b(near))
        self._assign_b(b_offset)
        a_up = self.bottom_a >= self.top_a
        a_down = self.bottom_a <= self.top_a
        b_up = self.bottom_b >= self.top_b
        b_down = self.bottom_b <= self.top_b
        if a_up and b_up:
            cost = self._top_cost()
        elif a_down and b_down:
            cost = self._bottom_cost()
        elif a_up and b_down:
            cost = self.top_a + self.bottom_b + 1
        elif a_down and b_up:
            cost = self.bottom_a + self.top_b + 1
        else:
            cost = 0
        return cost, b_offset

    def _cheapest_index(self) -> int:
        """Index in ``a`` of the element that is cheapest to move to ``b``."""
        a = self.stacks.a
        best, offset = self._move_cost(a[0], 1)
        chosen = 0
        for position, value in enumerate(a, start=1):
            cost, offset = self._move_cost(value, offset)
            if best > cost:
                chosen = position - 1
                best, offset = self._move_cost(value, position)
            offset = position + 1
        return chosen

    # -- moving elements -------------------------------------------------

    def _rotate_together_up(self) -> None:
        if self.top_a >= self.top_b:
            times, self.top_b = _countdown(self.top_b)
            self._rotate_both(times)
            self.top_a -= times
        else:
            times, self.top_a = _countdown(self.top_a)
            self._rotate_both(times)
            self.top_b -= times

    def _rotate_together_down(self) -> None:
        if self.bottom_a >= self.bottom_b:
            times, self.bottom_b = _countdown(self.bottom_b)
            self._reverse_rotate_both(times)
            self.bottom_a -= times
        else:
            times, self.bottom_a = _countdown(self.bottom_a)
            self._reverse_rotate_both(times)
            self.bottom_b -= times

    def _finish_and_push_b(self) -> None:
        if self.bottom_a >= self.top_a:
            self._rotate("a", Operation.RA, self.top_a)
        else:
            self._reverse_rotate("a", Operation.RRA, self.bottom_a)
        if self.bottom_b >= self.top_b:
            self._rotate("b", Operation.RB, self.top_b)
        else:
            self._reverse_rotate("b", Operation.RRB, self.bottom_b)
        self._push("b")

    def _move_to_b(self, index: int) -> None:
        near = self.stacks.a[index]
        position = self._position_in_b(near)
        self._assign_a(_offset(index))
        self._assign_b(_offset(position))
        if self.bottom_a >= self.top_a and self.bottom_b >= self.top_b:
            self._rotate_together_up()
        elif self.bottom_a <= self.top_a and self.bottom_b <= self.top_b:
            self._rotate_together_down()
        self._finish_and_push_b()

    def _move_to_a(self) -> None:
        a = self.stacks.a
        offset = _offset(self._position_in_a(self.stacks.b[0]))
        top = offset - 1
        bottom = len(a) - offset + 1
        if bottom >= top:
            self._rotate("a", Operation.RA, top)
        else:
            self._reverse_rotate("a", Operation.RRA, bottom)
        self._push("a")

    def _sort_three(self) -> None:
        a = self.stacks.a
        offset = _offset(highest_index(a))
        if offset != 3 and len(a) > 2:
            if len(a) - offset >= offset:
                self._rotate("a", Operation.RA, 1)
            else:
                self._reverse_rotate("a", Operation.RRA, 1)
        if len(a) >= 2 and a[0] > a[1]:
            self._record(self.stacks.swap("a"), Operation.SA)

    def _main_sort(self) -> None:
        a = self.stacks.a
        while len(a) > 3:
            near = a[self._cheapest_index()]
            self._move_to_b(a.index(near))
            if near > self.bigger:
                self.bigger = near
            elif not near > self.lower:
                self.lower = near
        self._sort_three()
        while self.stacks.b:
            self._move_to_a()
        self._assign_a(_offset(lowest_index(a)))
        if self.bottom_a >= self.top_a:
            self._rotate("a", Operation.RA, self.top_a)
        else:
            self._reverse_rotate("a", Operation.RRA, self.bottom_a)

    def run(self) -> list[Operation]:
        a, b = self.stacks.a, self.stacks.b
        if len(a) <= 3:
            self._sort_three()
            return self.operations
        while len(a) > 3 and len(b) < 2:
            self._push("b")
        if len(b) >= 2:
            if b[0] > b[1]:
                self.bigger, self.lower = b[0], b[1]
            else:
                self.bigger, self.lower = b[1], b[0]
        self._main_sort()
        return self.operations


def sort_stacks(stacks: Stacks) -> list[Operation]:
    """Sort ``stacks`` in place and return the operations that did it.

    Nothing is done when the stacks are already sorted. The values must be
    distinct; :class:`ValueError` is raised otherwise.
    """
    values = stacks.a + stacks.b
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    if stacks.is_sorted():
        return []
    return _Sorter(stacks).run()


def sort_operations(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` when loaded into stack ``a``."""
    return sort_stacks(Stacks(values))