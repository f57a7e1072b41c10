"""The two stacks and the eleven operations that move numbers between them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _swap(stack: deque[int]) -> bool:
    """Swap the two top elements; return whether anything changed."""
    if len(stack) < 2:
        return False
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)
    return True


def _rotate(stack: deque[int], step: int) -> bool:
    """Rotate a stack; -1 moves the top to the bottom, 1 the reverse."""
    if len(stack) < 2:
        return False
    stack.rotate(step)
    return True


def _transfer(source: deque[int], destination: deque[int]) -> bool:
    """Move the top of ``source`` onto ``destination``."""
    if not source:
        return False
    destination.appendleft(source.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b``, with the top of each at index 0.

    Every operation that is carried out is appended to ``moves`` under its
    name. An operation on a single stack that has nothing to act on leaves
    no record; the combined operations (ss, rr, rrr) are always recorded.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def _record(self, name: str, done: bool) -> None:
        if done:
            self.moves.append(name)

    def push(self, source: str) -> None:
        """Push the top of ``source`` ("a" or "b") onto the other stack."""
        if source == "a":
            self.pb()
        elif source == "b":
            self.pa()
        else:
            raise ValueError(f"unknown stack: {source!r}")

    def pa(self) -> None:
        """Take the top of b and put it on top of a."""
        self._record("pa", _transfer(self.b, self.a))

    def pb(self) -> None:
        """Take the top of a and put it on top of b."""
        self._record("pb", _transfer(self.a, self.b))

    def sa(self) -> None:
        """Swap the two top elements of a."""
        self._record("sa", _swap(self.a))

    def sb(self) -> None:
        """Swap the two top elements of b."""
        self._record("sb", _swap(self.b))

    def ss(self) -> None:
        """Do sa and sb at once."""
        _swap(self.a)
        _swap(self.b)
        self.moves.append("ss")

    def ra(self) -> None:
        """Shift a up by one: the top becomes the bottom."""
        self._record("ra", _rotate(self.a, -1))

    def rb(self) -> None:
        """Shift b up by one: the top becomes the bottom."""
        self._record("rb", _rotate(self.b, -1))

    def rr(self) -> None:
        """Do ra and rb at once."""
        _rotate(self.a, -1)
        _rotate(self.b, -1)
        self.moves.append("rr")

    def rra(self) -> None:
        """Shift a down by one: the bottom becomes the top."""
        self._record("rra", _rotate(self.a, 1))

    def rrb(self) -> None:
        """Shift b down by one: the bottom becomes the top."""
        self._record("rrb", _rotate(self.b, 1))

    def rrr(self) -> None:
        """Do rra and rrb at once."""
        _rotate(self.a, 1)
        _rotate(self.b, 1)
        self.moves.append("rrr")