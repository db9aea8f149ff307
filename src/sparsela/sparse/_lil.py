"""LIL (List of Lists) Matrix.

An array of ``rows`` SparseVectors of size ``cols``, one per row. Cheap to
build row by row and cheap to read a row; reading a column scans every
row.

Add and minus between two LIL matrices are row-wise SparseVector merges.
Multiplication transposes the right operand so that each column of the
product is a matrix-vector product against one of its rows; the column
vectors are then assembled and transposed back.
"""

from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

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
from ._vector import SparseVector

__all__ = ['LILMatrix', 'LIL']


class LILMatrix(SparseMatrix):
    """List-of-lists sparse matrix.

    Attributes:
        shape: Matrix dimensions (rows, cols).
        nnz: Number of stored non-zeros (sum over rows).
    """

    __slots__ = ('_n_rows', '_n_cols', '_rows')

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
        """Construct a LIL matrix.

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
        self._rows: List[SparseVector] = [SparseVector(self._n_cols) for _ in range(self._n_rows)]
        # sorted input makes every set an append
        for (i, j), value in sort_entries(checked):
            self._rows[i - 1].set(j, value)

    @classmethod
    def _from_rows(cls, n_rows: int, n_cols: int, rows: List[SparseVector]) -> 'LILMatrix':
        """Wrap row vectors of size ``n_cols`` (not copied)."""
        m = cls.__new__(cls)
        m._n_rows = n_rows
        m._n_cols = n_cols
        m._rows = rows
        return m

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._n_rows, self._n_cols)

    @property
    def nnz(self) -> int:
        return sum(row.nnz for row in self._rows)

    @property
    def format(self) -> str:
        return SparseFormat.LIL

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, i: int, j: int) -> float:
        throw_if_invalid_row(self, i)
        throw_if_invalid_column(self, j)
        return self._rows[i - 1].get(j)

    def set(self, i: int, j: int, value: float) -> None:
        throw_if_invalid_row(self, i)
        throw_if_invalid_column(self, j)
        self._rows[i - 1].set(j, value)

    def get_row(self, i: int) -> SparseVector:
        throw_if_invalid_row(self, i)
        return self._rows[i - 1].copy()

    def get_column(self, j: int) -> SparseVector:
        throw_if_invalid_column(self, j)
        column = SparseVector(self._n_rows)
        for i, row in enumerate(self._rows, 1):
            value = row.get(j)
            if value != 0.0:
                column.set(i, value)
        return column

    def get_entry_list(self) -> List[SparseEntry]:
        return [
            SparseEntry.of(i, entry.index, entry.value)
            for i, row in enumerate(self._rows, 1)
            for entry in row
        ]

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, that: Matrix) -> Matrix:
        if isinstance(that, LILMatrix):
            throw_if_different_dimension(self, that)
            return LILMatrix._from_rows(
                self._n_rows, self._n_cols,
                [a.add(b) for a, b in zip(self._rows, that._rows)],
            )
        return MatrixMathOperation().add(self, that)

    def minus(self, that: Matrix) -> Matrix:
        if isinstance(that, LILMatrix):
            throw_if_different_dimension(self, that)
            return LILMatrix._from_rows(
                self._n_rows, self._n_cols,
                [a.minus(b) for a, b in zip(self._rows, that._rows)],
            )
        return MatrixMathOperation().minus(self, that)

    def multiply(self, that: Union[Matrix, Vector]) -> Union[Matrix, Vector]:
        """Matrix-matrix or matrix-vector product.

        Returns:
            LILMatrix for a LIL operand, SparseVector for a sparse vector,
            DenseVector for any other vector, DenseMatrix otherwise.
        """
        if isinstance(that, Vector):
            return self._multiply_vector(that)
        if not isinstance(that, LILMatrix):
            return MatrixMathOperation().multiply(self, that)

        throw_if_incompatible_for_multiplication(self, that)
        that_t = that.t()
        # row j of product_t is column j of the product
        product_t = LILMatrix._from_rows(
            that._n_cols, self._n_rows,
            [self._multiply_vector(column) for column in that_t._rows],
        )
        return product_t.t()

    def _multiply_vector(self, v: Vector) -> Vector:
        throw_if_incompatible_for_multiplication(self, v)
        if isinstance(v, SparseVector):
            indices, values = [], []
            for i, row in enumerate(self._rows, 1):
                dot = row.inner_product(v)
                if dot != 0.0:
                    indices.append(i)
                    values.append(dot)
            return SparseVector._from_sorted(self._n_rows, indices, values)

        return DenseVector(np.array([row.inner_product(v) for row in self._rows], dtype=np.float64))

    def scaled(self, c: float) -> 'LILMatrix':
        return LILMatrix._from_rows(
            self._n_rows, self._n_cols, [row.scaled(c) for row in self._rows]
        )

    def t(self) -> 'LILMatrix':
        result = LILMatrix(self._n_cols, self._n_rows)
        for i, row in enumerate(self._rows, 1):
            for j, value in row:
                result._rows[j - 1].set(i, value)
        return result

    # =========================================================================
    # Factories and Conversion
    # =========================================================================

    def zero(self) -> 'LILMatrix':
        return LILMatrix(self._n_rows, self._n_cols)

    def one(self) -> 'LILMatrix':
        result = LILMatrix(self._n_rows, self._n_cols)
        for k in range(1, min(self._n_rows, self._n_cols) + 1):
            result._rows[k - 1].set(k, 1.0)
        return result

    def copy(self) -> 'LILMatrix':
        return LILMatrix._from_rows(
            self._n_rows, self._n_cols, [row.copy() for row in self._rows]
        )


# Alias
LIL = LILMatrix
