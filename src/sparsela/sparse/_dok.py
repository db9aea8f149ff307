"""DOK (Dictionary of Keys) Matrix.

A dict from Coordinates to non-zero float. Random access and incremental
construction are O(1) amortized; ordered traversal, row and column
extraction need a full scan of the keys.

Writing 0.0 removes the key, so the dict never holds a zero.

Add and minus between two DOK matrices are dict merges. Multiplication is
generic: for each stored (i, k, v), row k of the right operand is scaled
by v and accumulated into row i of the product. The product is a
DOKMatrix when the right operand is sparse and a DenseMatrix otherwise.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

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
from ._dense import DenseMatrix, DenseVector
from ._entry import Coordinates, SparseEntry
from ._math import MatrixMathOperation
from ._vector import SparseVector

__all__ = ['DOKMatrix', 'DOK']


class DOKMatrix(SparseMatrix):
    """Dictionary-of-keys sparse matrix.

    Attributes:
        shape: Matrix dimensions (rows, cols).
        nnz: Number of stored non-zeros.
    """

    __slots__ = ('_n_rows', '_n_cols', '_data')

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
        """Construct a DOK matrix.

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
        self._data: Dict[Coordinates, float] = {
            entry.coordinates: entry.value for entry in checked
        }

    @classmethod
    def _from_dict(cls, n_rows: int, n_cols: int, data: Dict[Coordinates, float]) -> 'DOKMatrix':
        m = cls.__new__(cls)
        m._n_rows = n_rows
        m._n_cols = n_cols
        m._data = data
        return m

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._n_rows, self._n_cols)

    @property
    def nnz(self) -> int:
        return len(self._data)

    @property
    def format(self) -> str:
        return SparseFormat.DOK

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, i: int, j: int) -> float:
        throw_if_invalid_row(self, i)
        throw_if_invalid_column(self, j)
        return self._data.get(Coordinates(i, j), 0.0)

    def set(self, i: int, j: int, value: float) -> None:
        throw_if_invalid_row(self, i)
        throw_if_invalid_column(self, j)
        key = Coordinates(int(i), int(j))
        if value == 0.0:
            self._data.pop(key, None)
        else:
            self._data[key] = float(value)

    def get_row(self, i: int) -> SparseVector:
        throw_if_invalid_row(self, i)
        return self._collect(self._n_cols, ((key.j, v) for key, v in self._data.items() if key.i == i))

    def get_column(self, j: int) -> SparseVector:
        throw_if_invalid_column(self, j)
        return self._collect(self._n_rows, ((key.i, v) for key, v in self._data.items() if key.j == j))

    @staticmethod
    def _collect(size: int, items: Iterable[Tuple[int, float]]) -> SparseVector:
        ordered = sorted(items)
        return SparseVector._from_sorted(size, [i for i, _ in ordered], [v for _, v in ordered])

    def get_entry_list(self) -> List[SparseEntry]:
        return [SparseEntry(key, value) for key, value in self._data.items()]

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, that: Matrix) -> Matrix:
        if isinstance(that, DOKMatrix):
            return self._merge(that, 1.0)
        return MatrixMathOperation().add(self, that)

    def minus(self, that: Matrix) -> Matrix:
        if isinstance(that, DOKMatrix):
            return self._merge(that, -1.0)
        return MatrixMathOperation().minus(self, that)

    def _merge(self, that: 'DOKMatrix', weight: float) -> 'DOKMatrix':
        throw_if_different_dimension(self, that)
        result = dict(self._data)
        for key, value in that._data.items():
            total = result.get(key, 0.0) + weight * value
            if total != 0.0:
                result[key] = total
            else:
                result.pop(key, None)
        return DOKMatrix._from_dict(self._n_rows, self._n_cols, result)

    def multiply(self, that: Union[Matrix, Vector]) -> Union[Matrix, Vector]:
        """Matrix-matrix or matrix-vector product.

        Returns:
            DOKMatrix for a sparse matrix operand, DenseMatrix for a dense
            one; SparseVector for a sparse vector, DenseVector otherwise.
        """
        throw_if_incompatible_for_multiplication(self, that)
        if isinstance(that, Vector):
            return self._multiply_vector(that)

        n_cols = that.cols
        product: Dict[Coordinates, float] = {}
        for (i, k), v in self._data.items():
            row = that.get_row(k)
            if isinstance(row, SparseVector):
                terms = ((entry.index, entry.value) for entry in row)
            else:
                terms = enumerate(row, 1)
            for j, b in terms:
                key = Coordinates(i, j)
                product[key] = product.get(key, 0.0) + v * b

        product = {key: value for key, value in product.items() if value != 0.0}
        if isinstance(that, SparseMatrix):
            return DOKMatrix._from_dict(self._n_rows, n_cols, product)

        result = np.zeros((self._n_rows, n_cols), dtype=np.float64)
        for (i, j), value in product.items():
            result[i - 1, j - 1] = value
        return DenseMatrix(result)

    def _multiply_vector(self, v: Vector) -> Vector:
        acc = np.zeros(self._n_rows, dtype=np.float64)
        for (i, k), value in self._data.items():
            acc[i - 1] += value * v.get(k)

        if isinstance(v, SparseVector):
            rows = np.flatnonzero(acc)
            return SparseVector._from_sorted(
                self._n_rows, (rows + 1).tolist(), acc[rows].tolist()
            )
        return DenseVector(acc)

    def scaled(self, c: float) -> 'DOKMatrix':
        if c == 0.0:
            return self.zero()
        result = {key: c * value for key, value in self._data.items()}
        return DOKMatrix._from_dict(
            self._n_rows, self._n_cols,
            {key: value for key, value in result.items() if value != 0.0},
        )

    def t(self) -> 'DOKMatrix':
        return DOKMatrix._from_dict(
            self._n_cols, self._n_rows,
            {Coordinates(key.j, key.i): value for key, value in self._data.items()},
        )

    # =========================================================================
    # Factories and Conversion
    # =========================================================================

    def zero(self) -> 'DOKMatrix':
        return DOKMatrix(self._n_rows, self._n_cols)

    def one(self) -> 'DOKMatrix':
        n = min(self._n_rows, self._n_cols)
        return DOKMatrix._from_dict(
            self._n_rows, self._n_cols,
            {Coordinates(k, k): 1.0 for k in range(1, n + 1)},
        )

    def copy(self) -> 'DOKMatrix':
        return DOKMatrix._from_dict(self._n_rows, self._n_cols, dict(self._data))


# Alias
DOK = DOKMatrix
