"""Ranking of stack elements and the strategy that sorts stack A with the operations."""

from __future__ import annotations

from itertools import islice, pairwise
from typing import Iterable

from .stack import Node, Operation, Stack, apply

UPPER_HALF = 2
LOWER_HALF = 1
NOT_FOUND = 0


def is_sorted(stack: Stack) -> bool:
    """Tell whether the values never decrease from top to tail."""
    return all(upper <= lower for upper, lower in pairwise(stack.values()))


def assign_indices(stack: Stack) -> None:
    """Give every element its rank by value, starting at 1.

    Equal values receive consecutive ranks in top-to-tail order.
    """
    for rank, node in enumerate(sorted(stack, key=lambda n: n.value), start=1):
        node.index = rank


def max_index(stack: Stack) -> int:
    """The highest rank in the stack; raises ValueError when it is empty."""
    if not len(stack):
        raise ValueError("max_index() of an empty stack")
    return max(stack.indices())


def search_position(stack: Stack, element: int) -> int:
    """Tell in which half of the stack the element of the given rank lies.

    Returns UPPER_HALF, LOWER_HALF, or NOT_FOUND when no element has that rank.
    """
    half = len(stack) // 2
    for position, node in enumerate(stack):
        if node.index == element:
            return UPPER_HALF if half - position > 0 else LOWER_HALF
    return NOT_FOUND


def _top_two(stack: Stack) -> tuple[Node, Node]:
    first, second = islice(stack, 2)
    return first, second


class Sorter:
    """Sorts ranked stack A with the help of stack B, recording every operation."""

    def __init__(self, stack_a: Stack, stack_b: Stack) -> None:
        self.stack_a = stack_a
        self.stack_b = stack_b
        self.operations: list[Operation] = []
        self._parked = False

    def run(self, op: Operation) -> None:
        """Apply one operation to the stacks and record it."""
        apply(op, self.stack_a, self.stack_b)
        self.operations.append(op)

    def sort(self) -> list[Operation]:
        """Pick the strategy for the size of stack A and return the operations used."""
        size = len(self.stack_a)
        if size < 2:
            return self.operations
        if size == 2:
            self.run(Operation.SA)
        elif size == 3:
            self.small_sort()
        elif size in (4, 5):
            self.mid_sort()
        else:
            self.big_sort()
        return self.operations

    def small_sort(self) -> None:
        """Sort a stack A of two or three elements."""
        a = self.stack_a
        highest = max_index(a)
        first, second = _top_two(a)
        if second.index == highest:
            self.run(Operation.RRA)
        elif first.index == highest:
            self.run(Operation.RA)
        first, second = _top_two(a)
        if first.index > second.index:
            self.run(Operation.SA)

    def mid_sort(self) -> None:
        """Sort a stack A of four or five elements."""
        self.move_mid_to_b()
        if is_sorted(self.stack_b):
            self.run(Operation.SB)
        self.small_sort()
        while len(self.stack_b):
            self.run(Operation.PA)

    def big_sort(self) -> None:
        """Sort a stack A of six or more elements."""
        self.move_to_b()
        self.small_sort()
        self.move_to_a()

    def move_mid_to_b(self) -> None:
        """Push the elements ranked 1 and 2 to B, rotating past the others once."""
        for _ in range(len(self.stack_a)):
            if self.stack_a.top.index < 3:
                self.run(Operation.PB)
            else:
                self.run(Operation.RA)

    def move_to_b(self) -> None:
        """Push all but three elements to B in chunks of rising rank."""
        a, b = self.stack_a, self.stack_b
        bound = len(a) // 3
        split = len(a) // 6
        while len(a) != 3:
            rank = a.top.index
            if rank < bound:
                self.run(Operation.PB)
                if rank >= split:
                    self.run(Operation.RB)
            else:
                self.run(Operation.RA)
            if bound - 1 == len(b):
                previous = bound
                bound += len(a) // 3
                split = len(a) // 6 + previous
        return None

    def move_to_a(self) -> None:
        """Bring every element back from B so that A ends up sorted."""
        a, b = self.stack_a, self.stack_b
        max_a = a.tail.index
        self._parked = False
        while len(b):
            position = search_position(b, a.top.index - 1)
            if position == UPPER_HALF:
                self.push_from_upper(max_a)
            elif position == LOWER_HALF:
                self.push_from_lower(max_a)
            while a.tail.index == a.top.index - 1:
                self.run(Operation.RRA)

    def push_from_upper(self, max_a: int) -> None:
        """Rotate B forwards until the wanted element is on top, then push it to A."""
        self._push_wanted(max_a, Operation.RB)

    def push_from_lower(self, max_a: int) -> None:
        """Rotate B backwards until the wanted element is on top, then push it to A."""
        self._push_wanted(max_a, Operation.RRB)

    def _push_wanted(self, max_a: int, turn: Operation) -> None:
        a, b = self.stack_a, self.stack_b
        while b.top.index != a.top.index - 1:
            if not self._parked or b.top.index > a.tail.index:
                # Park the element at the bottom of A; it is brought back later.
                self.run(Operation.PA)
                self.run(Operation.RA)
                self._parked = True
            else:
                self.run(turn)
            if a.tail.index == max_a:
                self._parked = False
        self.run(Operation.PA)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort the given values, top first."""
    stack_a = Stack(values)
    stack_b = Stack()
    if is_sorted(stack_a):
        return []
    assign_indices(stack_a)
    return Sorter(stack_a, stack_b).sort()