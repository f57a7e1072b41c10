"""Sorting stack a in ascending order with the fewest practical moves.

Small inputs (up to three numbers) are sorted directly. Larger inputs are
sorted by moving numbers to b, each time choosing the number that is
cheapest to place in its right position, and then moving them back.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from .stacks import Stacks


class Option(IntEnum):
    """The four ways of bringing two elements to the tops of their stacks."""

    SAME_FORWARD = 0
    SAME_REVERSE = 1
    FORWARD_REVERSE = 2
    REVERSE_FORWARD = 3


@dataclass
class Rotations:
    """Rotations needed on each stack, forward (ra, rb) and reverse (rra, rrb)."""

    ra: int = 0
    rra: int = 0
    rb: int = 0
    rrb: int = 0

    def best_option(self) -> tuple[Option, int]:
        """Return the cheapest option and the number of moves it takes.

        When several options cost the same, the first one wins.
        """
        costs = [
            max(self.ra, self.rb),
            max(self.rra, self.rrb),
            self.ra + self.rrb,
            self.rra + self.rb,
        ]
        lowest = min(costs)
        return Option(costs.index(lowest)), lowest

    def keep_option(self, option: int) -> None:
        """Zero the rotations that the chosen option does not use."""
        if option == Option.SAME_FORWARD:
            self.rra = self.rrb = 0
        elif option == Option.SAME_REVERSE:
            self.ra = self.rb = 0
        elif option == Option.FORWARD_REVERSE:
            self.rb = self.rra = 0
        else:
            self.ra = self.rrb = 0

    def apply(self, stacks: Stacks) -> None:
        """Carry out the rotations, combining them into rr and rrr where possible."""
        ra, rb, rra, rrb = self.ra, self.rb, self.rra, self.rrb
        both_forward = min(ra, rb) if ra > 0 and rb > 0 else 0
        ra -= both_forward
        rb -= both_forward
        both_reverse = min(rra, rrb) if rra > 0 and rrb > 0 else 0
        rra -= both_reverse
        rrb -= both_reverse
        for _ in range(both_forward):
            stacks.rr()
        for _ in range(ra):
            stacks.ra()
        for _ in range(rb):
            stacks.rb()
        for _ in range(both_reverse):
            stacks.rrr()
        for _ in range(rra):
            stacks.rra()
        for _ in range(rrb):
            stacks.rrb()


def is_sorted(values: Sequence[int]) -> bool:
    """Whether the values never decrease from top to bottom."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def insertion_target(value: int, destination: Sequence[int], source: str) -> int:
    """Index of the element in ``destination`` that ``value`` should go on top of.

    Moving from a to b keeps b in descending order; moving from b to a keeps
    a in ascending order (both up to a rotation).
    """
    values = list(destination)
    if not values:
        raise ValueError("destination stack is empty")
    size = len(values)
    if source == "a":
        position = values.index(max(values))
        if value < min(values):
            return position
        while value < values[position]:
            position = (position + 1) % size
        return position
    if source == "b":
        position = values.index(min(values))
        if value > max(values):
            return position
        while value > values[position]:
            position = (position + 1) % size
        return position
    raise ValueError(f"unknown stack: {source!r}")


def _distances(index: int, size: int) -> tuple[int, int]:
    """Forward and reverse rotations that bring ``index`` to the top."""
    return index, (size - index if index else 0)


def plan_rotations(
    source_index: int,
    source_size: int,
    target_index: int,
    target_size: int,
    source: str,
) -> Rotations:
    """Rotations that bring both the element to move and its target to the top."""
    source_fwd, source_rev = _distances(source_index, source_size)
    target_fwd, target_rev = _distances(target_index, target_size)
    if source == "a":
        return Rotations(ra=source_fwd, rra=source_rev, rb=target_fwd, rrb=target_rev)
    if source == "b":
        return Rotations(ra=target_fwd, rra=target_rev, rb=source_fwd, rrb=source_rev)
    raise ValueError(f"unknown stack: {source!r}")


def _cheapest_in_a(stacks: Stacks) -> int:
    """Index in a of the number that costs the fewest moves to place in b."""
    a_values, b_values = list(stacks.a), list(stacks.b)
    costs = []
    for index, value in enumerate(a_values):
        target = insertion_target(value, b_values, "a")
        plan = plan_rotations(index, len(a_values), target, len(b_values), "a")
        costs.append(plan.best_option()[1])
    lowest = min(costs)
    # The bottom element is the first candidate, then the others from the top.
    if costs[-1] == lowest:
        return len(costs) - 1
    return costs.index(lowest)


def _push_best(stacks: Stacks, source: str) -> None:
    """Rotate both stacks into place and push one number from ``source``."""
    if source == "a":
        index = _cheapest_in_a(stacks)
        origin, destination = stacks.a, stacks.b
    else:
        index = 0
        origin, destination = stacks.b, stacks.a
    target = insertion_target(origin[index], destination, source)
    rotations = plan_rotations(index, len(origin), target, len(destination), source)
    option, _ = rotations.best_option()
    rotations.keep_option(option)
    rotations.apply(stacks)
    stacks.push(source)


def sort_small(stacks: Stacks) -> None:
    """Sort a stack a of at most three numbers."""
    values = list(stacks.a)
    if len(values) < 2:
        return
    top = values.index(max(values))
    if top == 0:
        stacks.ra()
    elif top == len(values) - 2:
        stacks.rra()
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def sort_large(stacks: Stacks) -> None:
    """Sort a stack a of four or more numbers, using b as temporary storage."""
    if len(stacks.a) < 4:
        raise ValueError("sort_large needs at least four numbers")
    while len(stacks.b) < 2:
        stacks.pb()
    while len(stacks.a) > 3:
        _push_best(stacks, "a")
    sort_small(stacks)
    while stacks.b:
        _push_best(stacks, "b")
    smallest = min(stacks.a)
    position = list(stacks.a).index(smallest)
    if position < len(stacks.a) // 2:
        while stacks.a[0] != smallest:
            stacks.ra()
    else:
        while stacks.a[0] != smallest:
            stacks.rra()


def sort_ascending(stacks: Stacks) -> None:
    """Sort stack a in ascending order, recording the moves on ``stacks``."""
    if is_sorted(stacks.a):
        return
    if len(stacks.a) <= 3:
        sort_small(stacks)
    else:
        sort_large(stacks)