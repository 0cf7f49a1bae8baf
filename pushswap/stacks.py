"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable


class Op(str, Enum):
    """An instruction that acts on the stacks, named as it is written."""

    PA = "pa"
    PB = "pb"
    SA = "sa"
    SB = "sb"
    SS = "ss"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def parse_op(text: str) -> Op:
    """Return the operation named exactly by ``text``.

    Raises ValueError when ``text`` names no operation.
    """
    try:
        return Op(text)
    except ValueError:
        raise ValueError(f"unknown instruction: {text!r}") from None


def _swap(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _push(source: deque, target: deque) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


def _rotate(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _rrotate(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


class Stacks:
    """Stacks ``a`` and ``b``, with the top of each at index 0.

    Every operation that changes a stack is appended to ``history``; an
    operation that finds nothing to do changes nothing and is not recorded.
    The combined operations act on each stack in turn and record the single
    operations they performed.
    """

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.history: list[Op] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, done: bool, op: Op) -> bool:
        if done:
            self.history.append(op)
        return done

    def swap_a(self) -> bool:
        """Swap the two top elements of ``a``."""
        return self._record(_swap(self.a), Op.SA)

    def swap_b(self) -> bool:
        """Swap the two top elements of ``b``."""
        return self._record(_swap(self.b), Op.SB)

    def swap_ab(self) -> bool:
        """Swap the tops of ``a`` and then of ``b``."""
        done_a = self.swap_a()
        done_b = self.swap_b()
        return done_a or done_b

    def push_a(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        return self._record(_push(self.b, self.a), Op.PA)

    def push_b(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        return self._record(_push(self.a, self.b), Op.PB)

    def rotate_a(self) -> bool:
        """Move the top of ``a`` to its bottom."""
        return self._record(_rotate(self.a), Op.RA)

    def rotate_b(self) -> bool:
        """Move the top of ``b`` to its bottom."""
        return self._record(_rotate(self.b), Op.RB)

    def rotate_ab(self) -> bool:
        """Rotate ``a`` and then ``b``."""
        done_a = self.rotate_a()
        done_b = self.rotate_b()
        return done_a or done_b

    def rrotate_a(self) -> bool:
        """Move the bottom of ``a`` to its top."""
        return self._record(_rrotate(self.a), Op.RRA)

    def rrotate_b(self) -> bool:
        """Move the bottom of ``b`` to its top."""
        return self._record(_rrotate(self.b), Op.RRB)

    def rrotate_ab(self) -> bool:
        """Reverse-rotate ``a`` and then ``b``."""
        done_a = self.rrotate_a()
        done_b = self.rrotate_b()
        return done_a or done_b

    def apply(self, op: Op | str) -> bool:
        """Perform ``op``, given as an Op or by its name."""
        if not isinstance(op, Op):
            op = parse_op(op)
        return _DISPATCH[op](self)

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` is non-empty and ascending."""
        if not self.a or self.b:
            return False
        return all(x <= y for x, y in zip(self.a, list(self.a)[1:]))


_DISPATCH = {
    Op.PA: Stacks.push_a,
    Op.PB: Stacks.push_b,
    Op.SA: Stacks.swap_a,
    Op.SB: Stacks.swap_b,
    Op.SS: Stacks.swap_ab,
    Op.RA: Stacks.rotate_a,
    Op.RB: Stacks.rotate_b,
    Op.RR: Stacks.rotate_ab,
    Op.RRA: Stacks.rrotate_a,
    Op.RRB: Stacks.rrotate_b,
    Op.RRR: Stacks.rrotate_ab,
}