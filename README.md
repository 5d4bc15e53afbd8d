# katakit

A collection of small, dependable solutions to classic programming exercises:
sorting, array manipulation, matrix operations and a few array puzzles. Every
function takes ordinary Python values (lists, iterables, lists of rows) and
returns new ones, so inputs are never changed in place.

## Installation

```
pip install katakit
```

For development, install the test extra and run the suite:

```
pip install -e ".[test]"
pytest
```

## Modules

### `katakit.sorting`

- `merge_sort`, `insertion_sort`, `selection_sort`, `sort_array`: return the
  values in ascending order.
- `insertion_sort_with_stats`: insertion sort that returns an `InsertionStats`
  with the sorted `values` and the counts `steps`, `swaps` and `comparisons`.
- `move_zeroes`: move every zero to the end, keeping the order of the rest.
- `sort_012`: one-pass sort of 0s, 1s and 2s (anything else counts as a 2).
- `sort_by_set_bit_count`: stable sort by number of set bits in the 32-bit
  value, most bits first.
- `convert_to_wave`: swap adjacent pairs, turning a sorted list into a wave.
- `zig_zag`: rearrange so that `a0 < a1 > a2 < a3 > ...` for distinct values.

### `katakit.matrix`

Matrices are lists of rows. Functions that need a square matrix raise
`ValueError` otherwise.

- `transpose`, `rotate_by_90` (anti-clockwise), `swap_triangle`
- `sort_matrix`: same shape, all elements sorted in row-major order
- `diagonal_sum`, `matrix_sum`

### `katakit.arrays`

- `is_perfect`: whether the sequence is a palindrome.
- `arrange_alternating_sign`: positives at even positions, the rest at odd
  positions, each group keeping its order; raises `ValueError` if the counts
  do not balance.
- `alternate_elements`: every other element, starting with the first.
- `rearrange_min_max`: smallest, largest, next smallest, next largest, ...
- `reverse_in_groups(values, k)`: reverse each block of `k`; `k` must be
  positive.
- `second_largest`: largest value below the maximum, or `None`.
- `count_less_and_more(values, x)`: `(count <= x, count >= x)`.
- `swap_kth(values, k)`: swap the k-th element from each end (1-based).
- `swap_pair(a, b)`: returns `(b, a)`.
- `values_equal_to_index`: values equal to their 1-based position.

### `katakit.puzzles`

- `remaining_after_elimination`: remove the largest, then the smallest,
  alternately, and return the survivor.
- `last_remaining`: the same survivor computed directly (the lower middle of
  the sorted values). Both raise `ValueError` for empty input.
- `count_balance_points`: number of elements equal to the sum of the others.
- `trapped_water`: water held between unit-width blocks of given heights.

## Examples

```python
from katakit.sorting import merge_sort, sort_012, insertion_sort_with_stats
from katakit.matrix import transpose, rotate_by_90
from katakit.arrays import rearrange_min_max, reverse_in_groups, second_largest
from katakit.puzzles import last_remaining, trapped_water

merge_sort([4, 5, 6, 3, 12])              # [3, 4, 5, 6, 12]
sort_012([0, 2, 1, 2, 0])                 # [0, 0, 1, 2, 2]
insertion_sort_with_stats([3, 1, 2])
# InsertionStats(values=[1, 2, 3], steps=18, swaps=2, comparisons=2)

transpose([[1, 2], [3, 4]])               # [[1, 3], [2, 4]]
rotate_by_90([[1, 2], [3, 4]])            # [[2, 4], [1, 3]]

rearrange_min_max([1, 2, 3, 4, 5])        # [1, 5, 2, 4, 3]
reverse_in_groups([1, 2, 3, 4, 5], 3)     # [3, 2, 1, 5, 4]
second_largest([10, 5, 10])               # 5

last_remaining([7, 8, 3, 4, 2, 9])        # 4
trapped_water([3, 0, 0, 2, 0, 4])         # 10
```

## What it does not do

katakit is a library only: it has no command-line program and reads no input
files. It does not include string-processing or integer-arithmetic exercises;
its functions cover sorting, arrays, matrices and the puzzles listed above.