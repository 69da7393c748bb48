"""The two stacks and the instructions that move numbers between them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum

from pushswap.parsing import InputError, is_sorted


class Operation(str, Enum):
    """One instruction of the push-swap language."""

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

    @staticmethod
    def parse(text: str) -> Operation | None:
        """Read one instruction line, which must end with a newline.

        A line holding only the newline is accepted and gives None; anything
        else that is not exactly an instruction raises InputError.
        """
        if text == "\n":
            return None
        if not text.endswith("\n"):
            raise InputError()
        try:
            return Operation(text[:-1])
        except ValueError:
            raise InputError() from None


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


def _push(source: deque[int], target: deque[int]) -> None:
    if source:
        target.appendleft(source.popleft())


class Stacks:
    """Stacks a and b, each held with its top at index 0."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()

    def apply(self, operation: Operation) -> None:
        """Carry out one instruction; moves that cannot happen do nothing."""
        a, b = self.a, self.b
        match operation:
            case Operation.SA:
                _swap(a)
            case Operation.SB:
                _swap(b)
            case Operation.SS:
                _swap(a)
                _swap(b)
            case Operation.PA:
                _push(b, a)
            case Operation.PB:
                _push(a, b)
            case Operation.RA:
                _rotate(a)
            case Operation.RB:
                _rotate(b)
            case Operation.RR:
                _rotate(a)
                _rotate(b)
            case Operation.RRA:
                _reverse_rotate(a)
            case Operation.RRB:
                _reverse_rotate(b)
            case Operation.RRR:
                _reverse_rotate(a)
                _reverse_rotate(b)
            case _:
                raise InputError()

    def is_sorted(self) -> bool:
        """Tell whether stack a ascends from its top; stack b is not looked at."""
        return is_sorted(self.a)