"""Operations on matrices represented as lists of rows."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")

Matrix = List[List[T]]


def _require_square(matrix: Sequence[Sequence[T]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def transpose(matrix: Sequence[Sequence[T]]) -> Matrix:
    """Return the transpose of a square matrix."""
    _require_square(matrix)
    return [list(column) for column in zip(*matrix)]


def rotate_by_90(matrix: Sequence[Sequence[T]]) -> Matrix:
    """Return a square matrix rotated 90 degrees anti-clockwise."""
    _require_square(matrix)
    return transpose([list(reversed(row)) for row in matrix])


def swap_triangle(matrix: Sequence[Sequence[T]]) -> Matrix:
    """Swap the triangle above the main diagonal with the one below it."""
    return transpose(matrix)


def sort_matrix(matrix: Sequence[Sequence[T]]) -> Matrix:
    """Return a matrix of the same shape holding all elements in row-major order."""
    flat = iter(sorted(value for row in matrix for value in row))
    return [[next(flat) for _ in row] for row in matrix]


def diagonal_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the sum of the principal diagonal of a square matrix."""
    _require_square(matrix)
    return sum(row[i] for i, row in enumerate(matrix))


def matrix_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the sum of every element of a grid."""
    return sum(sum(row) for row in grid)