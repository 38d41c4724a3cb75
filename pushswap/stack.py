"""Stacks of integers and the eleven push_swap operations on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional


@dataclass
class Node:
    """One element of a stack: its value and its rank once ranks are assigned."""

    value: int
    index: int = 0


class Stack:
    """A stack whose first element is the top and whose last is the tail."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque()
        for value in values:
            self.add(value)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def add(self, value: int) -> None:
        """Append a new element with the given value below the tail."""
        self._nodes.append(Node(value))

    @property
    def top(self) -> Optional[Node]:
        """The top element, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    @property
    def tail(self) -> Optional[Node]:
        """The bottom element, or None when the stack is empty."""
        return self._nodes[-1] if self._nodes else None

    def values(self) -> list[int]:
        """The values from top to tail."""
        return [node.value for node in self._nodes]

    def indices(self) -> list[int]:
        """The ranks from top to tail."""
        return [node.index for node in self._nodes]

    def swap(self) -> None:
        """Exchange the two top elements; nothing happens with fewer than two."""
        if len(self._nodes) >= 2:
            first = self._nodes.popleft()
            second = self._nodes.popleft()
            self._nodes.appendleft(first)
            self._nodes.appendleft(second)

    def rotate(self) -> None:
        """Move the top element to the tail."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the tail element to the top."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(1)

    def _pop_top(self) -> Node:
        return self._nodes.popleft()

    def _push_top(self, node: Node) -> None:
        self._nodes.appendleft(node)


class Operation(Enum):
    """The instructions of the puzzle, valued by their written names."""

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


def push(source: Stack, target: Stack) -> None:
    """Move the top element of source onto target; nothing happens if source is empty."""
    if len(source):
        target._push_top(source._pop_top())


def apply(op: Operation, stack_a: Stack, stack_b: Stack) -> None:
    """Carry out one operation on the pair of stacks."""
    if op is Operation.SA:
        stack_a.swap()
    elif op is Operation.SB:
        stack_b.swap()
    elif op is Operation.SS:
        # Both stacks are swapped only when each holds at least two elements.
        if len(stack_a) >= 2 and len(stack_b) >= 2:
            stack_a.swap()
            stack_b.swap()
    elif op is Operation.PA:
        push(stack_b, stack_a)
    elif op is Operation.PB:
        push(stack_a, stack_b)
    elif op is Operation.RA:
        stack_a.rotate()
    elif op is Operation.RB:
        stack_b.rotate()
    elif op is Operation.RR:
        stack_a.rotate()
        stack_b.rotate()
    elif op is Operation.RRA:
        stack_a.reverse_rotate()
    elif op is Operation.RRB:
        stack_b.reverse_rotate()
    elif op is Operation.RRR:
        stack_a.reverse_rotate()
        stack_b.reverse_rotate()
    else:
        raise ValueError(f"unknown operation: {op!r}")