"""CSR (Compressed Sparse Row) Matrix.

This module provides CSRMatrix, a row-compressed sparse matrix stored as
three numpy arrays:

    value[nnz]       float64  non-zero values, row by row
    col_ind[nnz]     int64    0-based column of each value
    row_ptr[rows+1]  int64    row r occupies value[row_ptr[r]:row_ptr[r+1]]

Invariants:
    - ``row_ptr[0] == 0``, ``row_ptr[-1] == nnz``, non-decreasing
    - column indices ascending and unique inside every row
    - no stored value is exactly 0.0

Arithmetic:
    Same-format add, minus and multiply are computed row by row with a
    Scatter accumulator (Gustavson's algorithm for multiply). The
    accumulator drains columns in first-touch order, so every result goes
    through a drop-zeros pass and a column-sort pass. The column sort
    strategy is ``config.compute.column_sort``:

    - DOUBLE_TRANSPOSE: ``t().t()``; each transpose is a counting sort
    - ROW_SORT: argsort every row segment in place

    Any other operand type goes through MatrixMathOperation.

Mutation:
    ``set`` splices the arrays and shifts ``row_ptr``, which is O(nnz) per
    call. Build incrementally in DOK or LIL and convert instead.

Example:
    >>> m = CSRMatrix(3, 4, [1, 1, 2, 3, 2, 3], [1, 2, 2, 2, 3, 3],
    ...               [1, 2, 3, 1, 9, 4])
    >>> m.get(2, 3)
    9.0
    >>> (m + m.opposite()).nnz
    0
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .._config import ColumnSortStrategy, config
from .._errors import InvalidArgumentError
from ._base import Matrix, SparseFormat, SparseMatrix, Vector
from ._checks import (
    throw_if_different_dimension,
    throw_if_incompatible_for_multiplication,
    throw_if_invalid_column,
    throw_if_invalid_row,
    validate_entries,
    validate_triplets,
)
from ._dense import DenseVector
from ._entry import SparseEntry, sort_entries
from ._math import MatrixMathOperation
from ._scatter import Scatter
from ._vector import SparseVector

__all__ = ['CSRMatrix', 'CSR']

logger = logging.getLogger("sparsela.sparse.csr")


class CSRMatrix(SparseMatrix):
    """Compressed Sparse Row matrix.

    Attributes:
        shape: Matrix dimensions (rows, cols).
        nnz: Number of stored non-zeros.
        data: Copy of the value array.
        indices: Copy of the 0-based column index array.
        indptr: Copy of the row pointer array.
    """

    __slots__ = ('_n_rows', '_n_cols', '_value', '_col_ind', '_row_ptr')

    # =========================================================================
    # Initialization
    # =========================================================================

    def __init__(
        self,
        n_rows: int,
        n_cols: int,
        row_indices: Optional[Sequence[int]] = None,
        col_indices: Optional[Sequence[int]] = None,
        values: Optional[Sequence[float]] = None,
        *,
        entries: Optional[Sequence[SparseEntry]] = None,
    ):
        """Construct a CSR matrix.

        With only a shape the matrix is empty. Non-zeros come either from
        three parallel triplet arrays or from a list of SparseEntry records.

        Args:
            n_rows: Number of rows.
            n_cols: Number of columns.
            row_indices: 1-based row index of each value.
            col_indices: 1-based column index of each value.
            values: The values; zeros are skipped.
            entries: Alternative to the triplet arrays.

        Raises:
            InvalidArgumentError: unequal array lengths, coordinates outside
                the shape, or duplicated coordinates.
        """
        if entries is not None:
            checked = validate_entries(n_rows, n_cols, entries)
        elif row_indices is not None or col_indices is not None or values is not None:
            checked = validate_triplets(
                n_rows, n_cols,
                row_indices if row_indices is not None else [],
                col_indices if col_indices is not None else [],
                values if values is not None else [],
            )
        else:
            checked = validate_entries(n_rows, n_cols, [])

        self._n_rows = int(n_rows)
        self._n_cols = int(n_cols)
        self._build(sort_entries(checked))

    def _build(self, entries: List[SparseEntry]) -> None:
        """Fill the arrays from entries sorted top-left first."""
        nnz = len(entries)
        rows = np.fromiter((e.row - 1 for e in entries), dtype=np.int64, count=nnz)
        self._col_ind = np.fromiter((e.col - 1 for e in entries), dtype=np.int64, count=nnz)
        self._value = np.fromiter((e.value for e in entries), dtype=np.float64, count=nnz)

        counts = np.bincount(rows, minlength=self._n_rows)
        self._row_ptr = np.zeros(self._n_rows + 1, dtype=np.int64)
        np.cumsum(counts, out=self._row_ptr[1:])

    @classmethod
    def _from_arrays(
        cls,
        n_rows: int,
        n_cols: int,
        value: np.ndarray,
        col_ind: np.ndarray,
        row_ptr: np.ndarray,
    ) -> 'CSRMatrix':
        """Wrap arrays without copying or validating them."""
        m = cls.__new__(cls)
        m._n_rows = n_rows
        m._n_cols = n_cols
        m._value = value
        m._col_ind = col_ind
        m._row_ptr = row_ptr
        return m

    @classmethod
    def from_arrays(
        cls,
        data: Sequence[float],
        indices: Sequence[int],
        indptr: Sequence[int],
        shape: Tuple[int, int],
    ) -> 'CSRMatrix':
        """Create from 0-based CSR arrays (copied).

        Args:
            data: Non-zero values.
            indices: 0-based column indices.
            indptr: Row pointer array of length ``rows + 1``.
            shape: Matrix dimensions (rows, cols).

        Raises:
            InvalidArgumentError: inconsistent array lengths, an indptr that
                does not start at 0 or decreases, out-of-range or duplicated
                columns inside a row.
        """
        n_rows, n_cols = shape
        data = np.asarray(data, dtype=np.float64)
        indices = np.asarray(indices, dtype=np.int64)
        indptr = np.asarray(indptr, dtype=np.int64)

        if indptr.shape != (n_rows + 1,) or len(data) != len(indices) or indptr[-1] != len(data):
            raise InvalidArgumentError(
                f"Inconsistent CSR arrays for shape {shape}: "
                f"len(data)={len(data)}, len(indices)={len(indices)}, len(indptr)={len(indptr)}"
            )
        if indptr[0] != 0 or np.any(np.diff(indptr) < 0):
            raise InvalidArgumentError(
                f"indptr must start at 0 and be non-decreasing, got {indptr.tolist()}"
            )
        row_of = np.repeat(np.arange(n_rows), np.diff(indptr))
        return cls(n_rows, n_cols, row_of + 1, indices + 1, data)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._n_rows, self._n_cols)

    @property
    def nnz(self) -> int:
        return int(self._row_ptr[-1])

    @property
    def format(self) -> str:
        return SparseFormat.CSR

    @property
    def data(self) -> np.ndarray:
        return self._value.copy()

    @property
    def indices(self) -> np.ndarray:
        return self._col_ind.copy()

    @property
    def indptr(self) -> np.ndarray:
        return self._row_ptr.copy()

    def _row_of_entries(self) -> np.ndarray:
        """0-based row of every stored entry."""
        return np.repeat(np.arange(self._n_rows, dtype=np.int64), np.diff(self._row_ptr))

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, i: int, j: int) -> float:
        throw_if_invalid_row(self, i)
        throw_if_invalid_column(self, j)
        start, end = self._row_ptr[i - 1], self._row_ptr[i]
        hit = np.flatnonzero(self._col_ind[start:end] == j - 1)
        return float(self._value[start + hit[0]]) if hit.size else 0.0

    def set(self, i: int, j: int, value: float) -> None:
        """Set element (i, j), splicing the arrays when the pattern changes."""
        throw_if_invalid_row(self, i)
        throw_if_invalid_column(self, j)
        start, end = self._row_ptr[i - 1], self._row_ptr[i]
        pos = int(start + np.searchsorted(self._col_ind[start:end], j - 1))

        if pos < end and self._col_ind[pos] == j - 1:
            if value != 0.0:
                self._value[pos] = value
            else:
                self._value = np.delete(self._value, pos)
                self._col_ind = np.delete(self._col_ind, pos)
                self._row_ptr[i:] -= 1
        elif value != 0.0:
            self._value = np.insert(self._value, pos, value)
            self._col_ind = np.insert(self._col_ind, pos, j - 1)
            self._row_ptr[i:] += 1

    def get_row(self, i: int) -> SparseVector:
        throw_if_invalid_row(self, i)
        start, end = self._row_ptr[i - 1], self._row_ptr[i]
        return SparseVector._from_sorted(
            self._n_cols,
            (self._col_ind[start:end] + 1).tolist(),
            self._value[start:end].tolist(),
        )

    def get_column(self, j: int) -> SparseVector:
        """Extract column ``j``; scans every row."""
        throw_if_invalid_column(self, j)
        mask = self._col_ind == j - 1
        return SparseVector._from_sorted(
            self._n_rows,
            (self._row_of_entries()[mask] + 1).tolist(),
            self._value[mask].tolist(),
        )

    def get_entry_list(self) -> List[SparseEntry]:
        rows = (self._row_of_entries() + 1).tolist()
        cols = (self._col_ind + 1).tolist()
        return [SparseEntry.of(i, j, v) for i, j, v in zip(rows, cols, self._value.tolist())]

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, that: Matrix) -> Matrix:
        if isinstance(that, CSRMatrix):
            return self._add(that, 1.0)
        return MatrixMathOperation().add(self, that)

    def minus(self, that: Matrix) -> Matrix:
        if isinstance(that, CSRMatrix):
            return self._add(that, -1.0)
        return MatrixMathOperation().minus(self, that)

    def _add(self, that: 'CSRMatrix', weight: float) -> 'CSRMatrix':
        throw_if_different_dimension(self, that)

        # nnz(A) + nnz(B) bounds the result
        capacity = self.nnz + that.nnz
        value = np.empty(capacity, dtype=np.float64)
        col_ind = np.empty(capacity, dtype=np.int64)
        row_ptr = np.zeros(self._n_rows + 1, dtype=np.int64)

        scatter = Scatter(self._n_cols)
        nnz = 0
        for r in range(self._n_rows):
            scatter.start_row(r)
            scatter.add_row(self, r, 1.0)
            scatter.add_row(that, r, weight)
            nnz += scatter.copy_results(value, col_ind, nnz)
            row_ptr[r + 1] = nnz

        result = CSRMatrix._from_arrays(
            self._n_rows, self._n_cols, value[:nnz], col_ind[:nnz], row_ptr
        )
        result._drop_zeros()
        return result._sort_columns()

    def multiply(self, that: Union[Matrix, Vector]) -> Union[Matrix, Vector]:
        """Matrix-matrix or matrix-vector product.

        Returns:
            CSRMatrix for a CSR operand, SparseVector for a sparse vector,
            DenseVector for any other vector, DenseMatrix otherwise.
        """
        if isinstance(that, Vector):
            return self._multiply_vector(that)
        if isinstance(that, CSRMatrix):
            return self._multiply_csr(that)
        return MatrixMathOperation().multiply(self, that)

    def _multiply_csr(self, that: 'CSRMatrix') -> 'CSRMatrix':
        throw_if_incompatible_for_multiplication(self, that)
        n_cols = that._n_cols

        capacity = max(self.nnz + that.nnz, n_cols)
        value = np.empty(capacity, dtype=np.float64)
        col_ind = np.empty(capacity, dtype=np.int64)
        row_ptr = np.zeros(self._n_rows + 1, dtype=np.int64)

        scatter = Scatter(n_cols)
        nnz = 0
        for r in range(self._n_rows):
            start, end = self._row_ptr[r], self._row_ptr[r + 1]
            scatter.start_row(r)
            for k, a_rk in zip(self._col_ind[start:end].tolist(),
                               self._value[start:end].tolist()):
                scatter.add_row(that, k, a_rk)

            # a product row holds at most n_cols entries
            if nnz + n_cols > capacity:
                capacity = 2 * capacity + n_cols
                logger.debug(f"multiply: growing product buffers to {capacity} at row {r}")
                value = np.resize(value, capacity)
                col_ind = np.resize(col_ind, capacity)

            nnz += scatter.copy_results(value, col_ind, nnz)
            row_ptr[r + 1] = nnz

        result = CSRMatrix._from_arrays(
            self._n_rows, n_cols, value[:nnz].copy(), col_ind[:nnz].copy(), row_ptr
        )
        result._drop_zeros()
        return result._sort_columns()

    def _multiply_vector(self, v: Vector) -> Vector:
        throw_if_incompatible_for_multiplication(self, v)
        if isinstance(v, SparseVector):
            indices, values = [], []
            for r in range(self._n_rows):
                dot = self.get_row(r + 1).inner_product(v)
                if dot != 0.0:
                    indices.append(r + 1)
                    values.append(dot)
            return SparseVector._from_sorted(self._n_rows, indices, values)

        x = v.to_array()
        products = self._value * x[self._col_ind]
        return DenseVector(
            np.bincount(self._row_of_entries(), weights=products, minlength=self._n_rows)
        )

    def scaled(self, c: float) -> 'CSRMatrix':
        if c == 0.0:
            return self.zero()
        result = CSRMatrix._from_arrays(
            self._n_rows, self._n_cols,
            self._value * c, self._col_ind.copy(), self._row_ptr.copy(),
        )
        # underflow can produce zeros
        result._drop_zeros()
        return result

    def t(self) -> 'CSRMatrix':
        """Transpose by counting sort on the column index."""
        nnz = self.nnz
        counts = np.bincount(self._col_ind, minlength=self._n_cols)
        t_row_ptr = np.zeros(self._n_cols + 1, dtype=np.int64)
        np.cumsum(counts, out=t_row_ptr[1:])

        offsets = t_row_ptr[:-1].tolist()
        t_value = np.empty(nnz, dtype=np.float64)
        t_col_ind = np.empty(nnz, dtype=np.int64)
        row_ptr = self._row_ptr.tolist()
        col_ind = self._col_ind.tolist()
        value = self._value.tolist()
        for r in range(self._n_rows):
            for p in range(row_ptr[r], row_ptr[r + 1]):
                c = col_ind[p]
                dest = offsets[c]
                t_value[dest] = value[p]
                t_col_ind[dest] = r
                offsets[c] = dest + 1

        return CSRMatrix._from_arrays(self._n_cols, self._n_rows, t_value, t_col_ind, t_row_ptr)

    # =========================================================================
    # Compaction and Ordering
    # =========================================================================

    def _keep_entries(self, predicate: Callable[[np.ndarray], np.ndarray]) -> None:
        """Keep only the entries whose value satisfies ``predicate`` (vectorized)."""
        keep = np.asarray(predicate(self._value), dtype=bool)
        if keep.all():
            return
        kept_rows = self._row_of_entries()[keep]
        self._value = self._value[keep]
        self._col_ind = self._col_ind[keep]
        counts = np.bincount(kept_rows, minlength=self._n_rows)
        self._row_ptr = np.zeros(self._n_rows + 1, dtype=np.int64)
        np.cumsum(counts, out=self._row_ptr[1:])

    def _drop_zeros(self) -> None:
        self._keep_entries(lambda value: value != 0.0)

    def _sort_columns(self) -> 'CSRMatrix':
        strategy = config.compute.column_sort
        logger.debug(f"sorting columns with {strategy.name}")
        if strategy == ColumnSortStrategy.ROW_SORT:
            for r in range(self._n_rows):
                start, end = self._row_ptr[r], self._row_ptr[r + 1]
                if end - start > 1:
                    order = np.argsort(self._col_ind[start:end], kind='stable')
                    self._col_ind[start:end] = self._col_ind[start:end][order]
                    self._value[start:end] = self._value[start:end][order]
            return self
        return self.t().t()

    # =========================================================================
    # Factories and Conversion
    # =========================================================================

    def zero(self) -> 'CSRMatrix':
        return CSRMatrix(self._n_rows, self._n_cols)

    def one(self) -> 'CSRMatrix':
        n = min(self._n_rows, self._n_cols)
        diag = list(range(1, n + 1))
        return CSRMatrix(self._n_rows, self._n_cols, diag, diag, [1.0] * n)

    def copy(self) -> 'CSRMatrix':
        return CSRMatrix._from_arrays(
            self._n_rows, self._n_cols,
            self._value.copy(), self._col_ind.copy(), self._row_ptr.copy(),
        )

    def to_numpy(self) -> np.ndarray:
        result = np.zeros(self.shape, dtype=np.float64)
        result[self._row_of_entries(), self._col_ind] = self._value
        return result


# Alias
CSR = CSRMatrix
