"""Classic sorting routines and small in-place rearrangements.

Every function takes any iterable of values and returns a new list,
leaving the input untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class InsertionStats:
    """Result of an instrumented insertion sort.

    ``steps`` counts every elementary operation (loop tests, assignments,
    increments), ``swaps`` counts element shifts, and ``comparisons``
    counts outer passes that test a key against the sorted prefix.
    """

    values: List
    steps: int
    swaps: int
    comparisons: int


def _merge(left: List[T], right: List[T]) -> List[T]:
    merged: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> List[T]:
    """Return the values in ascending order using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def insertion_sort_with_stats(values: Iterable[T]) -> InsertionStats:
    """Insertion sort that also reports operation, shift and comparison counts."""
    items = list(values)
    steps = 1  # initialising the outer index
    swaps = 0
    comparisons = 0
    for i in range(1, len(items)):
        steps += 3  # loop test, key assignment, inner index assignment
        key = items[i]
        j = i
        comparisons += 1
        while j > 0 and items[j - 1] > key:
            steps += 2  # successful test and decrement
            swaps += 1
            items[j] = items[j - 1]
            j -= 1
        steps += 3  # failed inner test, key placement, outer increment
        items[j] = key
    steps += 1  # failed outer test
    return InsertionStats(items, steps, swaps, comparisons)


def insertion_sort(values: Iterable[T]) -> List[T]:
    """Return the values in ascending order using insertion sort."""
    return insertion_sort_with_stats(values).values


def selection_sort(values: Iterable[T]) -> List[T]:
    """Return the values in ascending order using selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def move_zeroes(values: Iterable[int]) -> List[int]:
    """Move every zero to the end, keeping the order of the other values."""
    items = list(values)
    nonzero = [v for v in items if v != 0]
    return nonzero + [0] * (len(items) - len(nonzero))


def sort_012(values: Iterable[int]) -> List[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass (Dutch national flag).

    Any value other than 0 or 1 is treated like a 2.
    """
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def _popcount32(value: int) -> int:
    return bin(value & 0xFFFFFFFF).count("1")


def sort_by_set_bit_count(values: Iterable[int]) -> List[int]:
    """Stable sort by number of set bits (as 32-bit words), most bits first."""
    return sorted(values, key=_popcount32, reverse=True)


def sort_array(values: Iterable[T]) -> List[T]:
    """Return the values in ascending order."""
    return sorted(values)


def convert_to_wave(values: Iterable[T]) -> List[T]:
    """Swap each adjacent pair so a sorted input becomes a wave a0>=a1<=a2>=..."""
    items = list(values)
    for i in range(0, len(items) - 1, 2):
        items[i], items[i + 1] = items[i + 1], items[i]
    return items


def zig_zag(values: Iterable[T]) -> List[T]:
    """Rearrange values so that a0 < a1 > a2 < a3 > ... for distinct inputs."""
    items = list(values)
    for i in range(len(items) - 1):
        rising = i % 2 == 0
        if (rising and items[i] > items[i + 1]) or (
            not rising and items[i] < items[i + 1]
        ):
            items[i], items[i + 1] = items[i + 1], items[i]
    return items