"""Dimension and index checks shared by every matrix and vector type.

All checks raise before any state is touched, so a failed call leaves the
receiver unmodified.
"""

from typing import Iterable, List, Sequence

from .._errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    assert_argument,
)
from ._entry import SparseEntry

__all__ = [
    'is_same_dimension',
    'throw_if_invalid_row',
    'throw_if_invalid_column',
    'throw_if_invalid_index',
    'throw_if_different_dimension',
    'throw_if_different_size',
    'throw_if_incompatible_for_multiplication',
    'validate_triplets',
    'validate_entries',
]


def is_same_dimension(a, b) -> bool:
    return a.rows == b.rows and a.cols == b.cols


def throw_if_invalid_row(a, i: int) -> None:
    if i < 1 or i > a.rows:
        raise IndexOutOfBoundsError(f"out of range [1:{a.rows}] row index: {i}")


def throw_if_invalid_column(a, j: int) -> None:
    if j < 1 or j > a.cols:
        raise IndexOutOfBoundsError(f"out of range [1:{a.cols}] column index: {j}")


def throw_if_invalid_index(v, index: int) -> None:
    if index < 1 or index > v.size:
        raise IndexOutOfBoundsError(f"out of range [1:{v.size}] index: {index}")


def throw_if_different_dimension(a, b) -> None:
    if not is_same_dimension(a, b):
        raise DimensionMismatchError(
            f"matrices do not have the same dimension: {a.shape} vs {b.shape}"
        )


def throw_if_different_size(u, v) -> None:
    if u.size != v.size:
        raise DimensionMismatchError(
            f"vectors do not have the same size: {u.size} vs {v.size}"
        )


def throw_if_incompatible_for_multiplication(a, b) -> None:
    """Check ``a @ b`` where ``b`` is a matrix or a vector."""
    if hasattr(b, 'rows'):
        if a.cols != b.rows:
            raise DimensionMismatchError(
                f"matrix with {a.cols} columns and matrix with {b.rows} rows "
                f"cannot multiply due to mis-matched dimension"
            )
    elif a.cols != b.size:
        raise DimensionMismatchError(
            f"matrix with {a.cols} columns and vector with {b.size} elements "
            f"cannot multiply due to mis-matched dimension"
        )


def _check_shape(n_rows: int, n_cols: int) -> None:
    assert_argument(n_rows >= 0 and n_cols >= 0, "Invalid shape: (%d, %d)", n_rows, n_cols)


def validate_triplets(
    n_rows: int,
    n_cols: int,
    row_indices: Sequence[int],
    col_indices: Sequence[int],
    values: Sequence[float],
) -> List[SparseEntry]:
    """Validate triplet arrays and return the non-zero entries they describe.

    Args:
        n_rows: Number of matrix rows.
        n_cols: Number of matrix columns.
        row_indices: 1-based row index of each value.
        col_indices: 1-based column index of each value.
        values: The values.

    Returns:
        Entries in input order; zero values are dropped.

    Raises:
        InvalidArgumentError: unequal lengths, out-of-range coordinates or
            duplicated coordinates.
    """
    if not (len(row_indices) == len(col_indices) == len(values)):
        raise InvalidArgumentError(
            f"input arrays size mismatch: {len(row_indices)} row indices, "
            f"{len(col_indices)} column indices, {len(values)} values"
        )
    entries = [
        SparseEntry.of(i, j, v)
        for i, j, v in zip(row_indices, col_indices, values)
    ]
    return validate_entries(n_rows, n_cols, entries)


def validate_entries(
    n_rows: int,
    n_cols: int,
    entries: Iterable[SparseEntry],
) -> List[SparseEntry]:
    """Validate an entry list against a shape; zero values are dropped.

    The caller's list is never modified.
    """
    _check_shape(n_rows, n_cols)
    seen = set()
    result = []
    for entry in entries:
        i, j = entry.coordinates
        if i < 1 or i > n_rows or j < 1 or j > n_cols:
            raise InvalidArgumentError(
                f"out-of-range element coordinates ({i}, {j}) "
                f"for a {n_rows}x{n_cols} matrix"
            )
        if (i, j) in seen:
            raise InvalidArgumentError(f"duplicated coordinates: ({i}, {j})")
        seen.add((i, j))
        if entry.value != 0.0:
            result.append(SparseEntry.of(i, j, entry.value))
    return result
