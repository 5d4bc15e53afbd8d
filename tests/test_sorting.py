from collections import Counter
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from katakit.sorting import (
    InsertionStats,
    convert_to_wave,
    insertion_sort,
    insertion_sort_with_stats,
    merge_sort,
    move_zeroes,
    selection_sort,
    sort_012,
    sort_array,
    sort_by_set_bit_count,
    zig_zag,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=40)


@pytest.mark.parametrize(
    "sorter", [merge_sort, insertion_sort, selection_sort, sort_array]
)
@given(values=int_lists)
def test_sorters_match_builtin(sorter, values):
    assert sorter(values) == sorted(values)


@pytest.mark.parametrize(
    "sorter", [merge_sort, insertion_sort, selection_sort, sort_array]
)
def test_sorters_do_not_mutate_input(sorter):
    data = [4, 5, 6, 3, 12]
    original = list(data)
    result = sorter(data)
    assert data == original
    assert result == sorted(original)


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in merge_sort(Key(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])


def test_selection_sort_example():
    assert selection_sort([64, 25, 12, 22, 11]) == [11, 12, 22, 25, 64]


@given(values=int_lists)
def test_insertion_stats_shifts_equal_inversions(values):
    stats = insertion_sort_with_stats(values)
    inversions = sum(1 for a, b in combinations(values, 2) if a > b)
    assert isinstance(stats, InsertionStats)
    assert stats.values == sorted(values)
    assert stats.swaps == inversions
    assert stats.comparisons == max(len(values) - 1, 0)


@given(values=st.lists(st.integers(), min_size=1, max_size=30))
def test_insertion_steps_grow_with_shifts(values):
    stats = insertion_sort_with_stats(values)
    baseline = insertion_sort_with_stats(sorted(values))
    assert baseline.swaps == 0
    assert stats.steps - baseline.steps == 2 * stats.swaps


@given(values=int_lists)
def test_move_zeroes(values):
    result = move_zeroes(values)
    nonzero = [v for v in values if v != 0]
    assert result[: len(nonzero)] == nonzero
    assert all(v == 0 for v in result[len(nonzero):])
    assert len(result) == len(values)


@given(values=st.lists(st.sampled_from([0, 1, 2]), max_size=50))
def test_sort_012(values):
    assert sort_012(values) == sorted(values)


def test_sort_by_set_bit_count_stable_descending():
    data = [5, 2, 3, 9, 4, 6, 7, 15, 32]
    result = sort_by_set_bit_count(data)
    assert Counter(result) == Counter(data)
    counts = [bin(v).count("1") for v in result]
    assert counts == sorted(counts, reverse=True)
    # equal bit counts keep their original relative order
    assert [v for v in result if bin(v).count("1") == 2] == [5, 3, 9, 6]


def test_sort_by_set_bit_count_negative_is_32_bit():
    assert sort_by_set_bit_count([1, -1]) == [-1, 1]


@given(values=st.lists(st.integers(), unique=True, max_size=30))
def test_convert_to_wave(values):
    ordered = sorted(values)
    wave = convert_to_wave(ordered)
    assert Counter(wave) == Counter(values)
    for i in range(len(wave) - 1):
        if i % 2 == 0:
            assert wave[i] >= wave[i + 1]
        else:
            assert wave[i] <= wave[i + 1]


@given(values=st.lists(st.integers(), unique=True, max_size=30))
def test_zig_zag(values):
    result = zig_zag(values)
    assert Counter(result) == Counter(values)
    for i in range(len(result) - 1):
        if i % 2 == 0:
            assert result[i] < result[i + 1]
        else:
            assert result[i] > result[i + 1]