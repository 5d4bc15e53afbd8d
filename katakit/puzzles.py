"""Array puzzles: elimination games, balance points and trapped rain water."""

from __future__ import annotations

from collections import deque
from itertools import accumulate
from typing import Iterable, List, TypeVar

T = TypeVar("T")


def _require_values(items: List[T]) -> None:
    if not items:
        raise ValueError("at least one value is required")


def remaining_after_elimination(values: Iterable[T]) -> T:
    """Play the elimination game and return the survivor.

    The largest value is removed first, then the smallest of what is left,
    then the largest again, and so on until a single value remains.
    """
    items = list(values)
    _require_values(items)
    pool = deque(sorted(items))
    remove_largest = True
    while len(pool) > 1:
        if remove_largest:
            pool.pop()
        else:
            pool.popleft()
        remove_largest = not remove_largest
    return pool[0]


def last_remaining(values: Iterable[T]) -> T:
    """Return the survivor of the elimination game without playing it out.

    This is the lower middle element of the sorted values.
    """
    ordered = sorted(values)
    _require_values(ordered)
    size = len(ordered)
    return ordered[size // 2 - 1] if size % 2 == 0 else ordered[size // 2]


def count_balance_points(values: Iterable[int]) -> int:
    """Count the elements equal to the sum of all the other elements."""
    items = list(values)
    total = sum(items)
    return sum(1 for value in items if total - value == value)


def trapped_water(heights: Iterable[int]) -> int:
    """Return how much water unit-width blocks of the given heights can hold."""
    blocks = list(heights)
    if not blocks:
        return 0
    left_walls = accumulate(blocks, max)
    right_walls = reversed(list(accumulate(reversed(blocks), max)))
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_walls, right_walls, blocks)
    )