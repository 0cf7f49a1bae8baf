"""Strategies that sort stack ``a`` and record the operations used."""

from __future__ import annotations

from typing import Iterable

from .indexing import log_2, rank, sq_root
from .parse import is_ascending
from .stacks import Op, Stacks

SMALL_LIMIT = 12


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly three elements in at most two moves."""
    if len(stacks.a) != 3:
        raise ValueError(f"sort_three needs three elements, got {len(stacks.a)}")
    first, second, third = stacks.a
    if first < third and first < second and second > third:
        stacks.swap_a()
        stacks.rotate_a()
    elif first < third and first > second:
        stacks.swap_a()
    elif first > third and first < second:
        stacks.rrotate_a()
    elif first > second and first > third and second < third:
        stacks.rotate_a()
    elif first > third and first > second and second > third:
        stacks.swap_a()
        stacks.rrotate_a()


def shortest_way_a(stacks: Stacks, value: int) -> None:
    """Bring ``value`` to the top of ``a``, rotating the shorter way."""
    position = stacks.a.index(value)
    if position < len(stacks.a) // 2:
        while stacks.a[0] != value:
            stacks.rotate_a()
    else:
        while stacks.a[0] != value:
            stacks.rrotate_a()


def shortest_way_b(stacks: Stacks, value: int, position: int) -> None:
    """Bring ``value``, found at ``position``, to the top of ``b``."""
    if value not in stacks.b:
        raise ValueError(f"{value} is not in stack b")
    if position < len(stacks.b) // 2:
        while stacks.b[0] != value:
            stacks.rotate_b()
    else:
        while stacks.b[0] != value:
            stacks.rrotate_b()


def sort_small(stacks: Stacks) -> None:
    """Sort ``a`` by moving all but three of its smallest values to ``b``."""
    if len(stacks.a) < 3:
        raise ValueError(f"sort_small needs at least three elements, got {len(stacks.a)}")
    for value in sorted(stacks.a)[: len(stacks.a) - 3]:
        shortest_way_a(stacks, value)
        stacks.push_b()
    sort_three(stacks)
    while stacks.b:
        stacks.push_a()


def sort_butterfly(stacks: Stacks) -> None:
    """Sort ``a`` by spreading it into ``b`` in a window of ranks and back."""
    size = len(stacks.a)
    if size < 2:
        raise ValueError(f"sort_butterfly needs at least two elements, got {size}")
    ranks = dict(zip(stacks.a, rank(list(stacks.a))))
    window = sq_root(size) + log_2(size)
    pushed = 0
    while pushed < size:
        current = ranks[stacks.a[0]]
        if current <= pushed:
            stacks.push_b()
            stacks.rotate_b()
            pushed += 1
        elif current <= pushed + window:
            stacks.push_b()
            pushed += 1
        else:
            stacks.rotate_a()
    while stacks.b:
        top = max(stacks.b)
        shortest_way_b(stacks, top, stacks.b.index(top))
        stacks.push_a()


def solve(values: Iterable[int]) -> list[Op]:
    """Return the operations that sort the distinct ``values``."""
    values = list(values)
    if is_ascending(values):
        return []
    stacks = Stacks(values)
    if len(values) == 2:
        stacks.swap_a()
    elif len(values) <= SMALL_LIMIT:
        sort_small(stacks)
    else:
        sort_butterfly(stacks)
    return list(stacks.history)