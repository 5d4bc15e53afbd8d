"""Small array puzzles: reversals, rearrangements and simple queries."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def is_perfect(values: Sequence) -> bool:
    """Return True if the sequence reads the same forwards and backwards."""
    items = list(values)
    return items == items[::-1]


def arrange_alternating_sign(values: Iterable[int]) -> List[int]:
    """Interleave positives and non-positives, keeping each group's order.

    Positive values go to even positions and the rest to odd positions.
    The input must supply exactly enough of each kind to fill those slots.
    """
    items = list(values)
    positives = [v for v in items if v > 0]
    others = [v for v in items if v <= 0]
    if len(positives) != (len(items) + 1) // 2 or len(others) != len(items) // 2:
        raise ValueError("positive and negative elements must balance")
    arranged: List[int] = [0] * len(items)
    arranged[0::2] = positives
    arranged[1::2] = others
    return arranged


def alternate_elements(values: Sequence[T]) -> List[T]:
    """Return the elements at even positions, starting with the first."""
    return list(values)[::2]


def _min_max_pairs(ordered: List[T]) -> Iterator[T]:
    for low, high in zip(ordered, reversed(ordered)):
        yield low
        yield high


def rearrange_min_max(values: Iterable[T]) -> List[T]:
    """Return the values as smallest, largest, next smallest, next largest, ..."""
    ordered = sorted(values)
    return list(islice(_min_max_pairs(ordered), len(ordered)))


def reverse_in_groups(values: Iterable[T], k: int) -> List[T]:
    """Reverse every consecutive block of ``k`` values; the last block may be short."""
    if k <= 0:
        raise ValueError("group size must be positive")
    items = list(values)
    result: List[T] = []
    for start in range(0, len(items), k):
        result.extend(reversed(items[start:start + k]))
    return result


def second_largest(values: Iterable[int]) -> Optional[int]:
    """Return the largest value strictly below the maximum, or None if there is none."""
    largest: Optional[int] = None
    second: Optional[int] = None
    for value in values:
        if largest is None or value > largest:
            second = largest
            largest = value
        elif value < largest and (second is None or value > second):
            second = value
    return second


def count_less_and_more(values: Iterable[int], x: int) -> Tuple[int, int]:
    """Return (count of values <= x, count of values >= x)."""
    less = more = 0
    for value in values:
        if value <= x:
            less += 1
        if value >= x:
            more += 1
    return less, more


def swap_kth(values: Iterable[T], k: int) -> List[T]:
    """Swap the k-th element from the start with the k-th from the end (1-based)."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError("k must be between 1 and the number of values")
    items[k - 1], items[-k] = items[-k], items[k - 1]
    return items


def swap_pair(a: T, b: T) -> Tuple[T, T]:
    """Return the two values in swapped order."""
    return b, a


def values_equal_to_index(values: Iterable[int]) -> List[int]:
    """Return the values equal to their 1-based position."""
    return [value for position, value in enumerate(values, start=1) if value == position]