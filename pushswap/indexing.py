"""Ranking of values and the size helpers used to tune the big sort."""

from __future__ import annotations

from math import isqrt
from typing import Sequence


def merge_sort(values: Sequence[int]) -> list[int]:
    """Return a new list holding ``values`` in ascending order."""
    if len(values) <= 1:
        return list(values)
    mid = (len(values) + 1) // 2
    left = merge_sort(values[:mid])
    right = merge_sort(values[mid:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def rank(values: Sequence[int]) -> list[int]:
    """Return, for each value, its position in the sorted values."""
    positions: dict[int, int] = {}
    for position, value in enumerate(merge_sort(values)):
        positions.setdefault(value, position)
    return [positions[value] for value in values]


def sq_root(n: int) -> int:
    """Return the largest ``i`` with ``i * i <= n``, for ``n >= 1``."""
    if n < 1:
        raise ValueError(f"sq_root needs a positive number, got {n}")
    return isqrt(n)


def log_2(n: int) -> int:
    """Return the ``i`` with ``2**i <= n < 2**(i + 1)``, for ``n >= 2``."""
    if n < 2:
        raise ValueError(f"log_2 needs a number of at least 2, got {n}")
    return n.bit_length() - 1