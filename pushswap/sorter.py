"""Producing a short sequence of instructions that sorts stack a."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable, Sequence

from pushswap.parsing import INT_MAX, check_duplicates, is_sorted
from pushswap.stacks import Operation

# Stacks are kept internally as lists with the bottom at index 0 and the top at
# the end, and positions are counted from 1 at the bottom. Rotation costs are
# signed: a positive cost is that many forward rotations (ra/rb), a negative
# cost that many reverse rotations (rra/rrb).


def final_cost(a: int, b: int) -> int:
    """Number of instructions needed to carry out two signed rotation costs.

    Rotations in the same direction are shared (rr/rrr), so only the larger
    one counts; rotations in opposite directions add up.
    """
    if a <= 0 and b <= 0:
        return -min(a, b)
    if a > 0 and b > 0:
        return max(a, b)
    if a < b:
        return -a + b
    return -b + a


def _rotation_cost(size: int, index: int) -> int:
    """Signed rotations that bring position ``index`` to the top."""
    if index <= size // 2:
        return -index
    return size - index


def _rotate(stack: list[int], count: int) -> None:
    """Rotate forward (top to bottom) ``count`` times; negative reverses."""
    if count > 0:
        stack[:] = stack[-count:] + stack[:-count]
    elif count < 0:
        steps = -count
        stack[:] = stack[steps:] + stack[:steps]


def _position_cost(stack: list[int], value: int) -> int:
    return _rotation_cost(len(stack), stack.index(value) + 1)


def _sort_three_in_place(stack: list[int]) -> list[Operation]:
    """Sort a three-element stack (bottom first) and return the moves made."""
    bottom, middle, top = stack
    if middle > bottom > top:
        steps = [Operation.RRA, Operation.SA]
    elif top > middle > bottom:
        steps = [Operation.RA, Operation.SA]
    elif top > middle and not top > bottom:
        steps = [Operation.SA]
    elif top > middle and bottom > middle:
        steps = [Operation.RA]
    elif top > bottom and not top > middle:
        steps = [Operation.RRA]
    else:
        steps = []
    for step in steps:
        if step is Operation.SA:
            stack[1], stack[2] = stack[2], stack[1]
        elif step is Operation.RA:
            _rotate(stack, 1)
        else:
            _rotate(stack, -1)
    return steps


def sort_three(values: Sequence[int]) -> list[Operation]:
    """Instructions that sort exactly three values, listed from the top."""
    if len(values) != 3:
        raise ValueError("exactly three values are required")
    stack = list(reversed(values))
    return _sort_three_in_place(stack)


class _Sorter:
    """Greedy cost-based sort: push to b in order, then merge back into a."""

    def __init__(self, values: Sequence[int]) -> None:
        self.a: list[int] = list(reversed(values))
        self.b: list[int] = []
        self.ops: list[Operation] = []
        self.a_min = self.a_max = 0
        self.b_min = self.b_max = 0

    def _emit(self, operation: Operation, times: int = 1) -> None:
        self.ops.extend([operation] * times)

    def _spin(self, stack: list[int], cost: int, forward: Operation, backward: Operation) -> None:
        _rotate(stack, cost)
        if cost > 0:
            self._emit(forward, cost)
        elif cost < 0:
            self._emit(backward, -cost)

    def _spin_a(self, cost: int) -> None:
        self._spin(self.a, cost, Operation.RA, Operation.RRA)

    def _spin_b(self, cost: int) -> None:
        self._spin(self.b, cost, Operation.RB, Operation.RRB)

    def _push_b(self) -> None:
        value = self.a.pop()
        self.b.append(value)
        if value < self.b_min:
            self.b_min = value
        elif value > self.b_max:
            self.b_max = value
        self._emit(Operation.PB)

    def _push_a(self) -> None:
        value = self.b.pop()
        self.a.append(value)
        if value <= self.a_min:
            self.a_min = value
        if value >= self.a_max:
            self.a_max = value
        self._emit(Operation.PA)

    def _b_placement(self) -> Callable[[int], int]:
        """Cost in b of bringing the place for a value to the top of b."""
        size = len(self.b)
        where = {value: index for index, value in enumerate(self.b, 1)}
        ordered = sorted(self.b)
        above_max = _rotation_cost(size, where[self.b_max])
        lowest = self.b_min

        def cost(value: int) -> int:
            if value <= lowest:
                return above_max
            below = ordered[bisect_left(ordered, value) - 1]
            return _rotation_cost(size, where[below])

        return cost

    def _cost_above_in_a(self, number: int) -> int:
        size = len(self.a)
        _, index = min(
            (value, index) for index, value in enumerate(self.a, 1) if value > number
        )
        half = size // 2
        if index == half and size % 2 == 0:
            return size - index
        if index <= half:
            return -index
        return size - index

    def _cheapest_move(self) -> None:
        """Rotate towards the cheapest element of a and its place in b."""
        place = self._b_placement()
        size_a = len(self.a)
        best_index, best_cost = size_a, INT_MAX
        for index, value in reversed(list(enumerate(self.a, 1))):
            cost = final_cost(place(value), _rotation_cost(size_a, index))
            if cost < best_cost:
                best_index, best_cost = index, cost
        cost_b = place(self.a[best_index - 1])
        cost_a = _rotation_cost(size_a, best_index)
        if cost_a > 0 and cost_b > 0:
            times = min(cost_a, cost_b)
            _rotate(self.a, times)
            _rotate(self.b, times)
            self._emit(Operation.RR, times)
        elif cost_a < 0 and cost_b < 0:
            times = min(-cost_a, -cost_b)
            _rotate(self.a, -times)
            _rotate(self.b, -times)
            self._emit(Operation.RRR, times)
        else:
            self._spin_a(cost_a)
            self._spin_b(cost_b)

    def _fill_b(self) -> None:
        while len(self.a) > 3:
            if not self.b:
                self.b_min = self.b_max = self.a[-1]
                self._push_b()
                continue
            self._cheapest_move()
            self._cheapest_move()
            self._spin_b(self._b_placement()(self.a[-1]))
            self._push_b()
        self.ops.extend(_sort_three_in_place(self.a))

    def _empty_b(self) -> None:
        self.a_min, self.a_max = min(self.a), max(self.a)
        while self.b:
            top = self.b[-1]
            if top > self.a_max:
                cost = _position_cost(self.a, self.a_min)
            else:
                cost = self._cost_above_in_a(top)
            self._spin_a(cost)
            self._push_a()
        cost = _position_cost(self.a, self.a_min)
        size = len(self.a)
        self._spin_a(cost if cost <= size // 2 else size - cost)

    def run(self) -> list[Operation]:
        self._fill_b()
        self._empty_b()
        return self.ops


def sort_operations(values: Iterable[int]) -> list[Operation]:
    """Instructions that sort the values (listed from the top) on stack a.

    Repeated values raise InputError. Values already in order need nothing,
    and two values out of order need a single swap.
    """
    numbers = list(values)
    check_duplicates(numbers)
    if is_sorted(numbers):
        return []
    if len(numbers) == 2:
        return [Operation.SA]
    return _Sorter(numbers).run()