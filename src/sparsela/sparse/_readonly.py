"""Read-only view over a sparse matrix.

Every read and every arithmetic operation is forwarded to the wrapped
matrix; ``set`` raises UnsupportedOperationError. Results of arithmetic
(and ``copy``) are ordinary, mutable matrices in the wrapped format.
"""

from typing import List, Tuple, Union

import numpy as np

from .._errors import UnsupportedOperationError
from ._base import Matrix, SparseMatrix, Vector
from ._entry import SparseEntry
from ._vector import SparseVector

__all__ = ['ReadOnlySparseMatrix', 'read_only']


def _unwrap(m):
    return m._matrix if isinstance(m, ReadOnlySparseMatrix) else m


class ReadOnlySparseMatrix(SparseMatrix):
    """Immutable view of a CSR, DOK or LIL matrix."""

    __slots__ = ('_matrix',)

    def __init__(self, matrix: SparseMatrix):
        if not isinstance(matrix, SparseMatrix):
            raise TypeError(f"Expected a sparse matrix, got {type(matrix).__name__}")
        self._matrix = _unwrap(matrix)

    @property
    def shape(self) -> Tuple[int, int]:
        return self._matrix.shape

    @property
    def nnz(self) -> int:
        return self._matrix.nnz

    @property
    def format(self) -> str:
        return self._matrix.format

    def get(self, i: int, j: int) -> float:
        return self._matrix.get(i, j)

    def set(self, i: int, j: int, value: float) -> None:
        raise UnsupportedOperationError(
            f"cannot set ({i}, {j}) on a read-only {self._matrix.format} matrix"
        )

    def get_row(self, i: int) -> SparseVector:
        return self._matrix.get_row(i)

    def get_column(self, j: int) -> SparseVector:
        return self._matrix.get_column(j)

    def get_entry_list(self) -> List[SparseEntry]:
        return self._matrix.get_entry_list()

    def add(self, that: Matrix) -> Matrix:
        return self._matrix.add(_unwrap(that))

    def minus(self, that: Matrix) -> Matrix:
        return self._matrix.minus(_unwrap(that))

    def multiply(self, that: Union[Matrix, Vector]) -> Union[Matrix, Vector]:
        return self._matrix.multiply(_unwrap(that))

    def scaled(self, c: float) -> SparseMatrix:
        return self._matrix.scaled(c)

    def t(self) -> SparseMatrix:
        return self._matrix.t()

    def zero(self) -> SparseMatrix:
        return self._matrix.zero()

    def one(self) -> SparseMatrix:
        return self._matrix.one()

    def copy(self) -> SparseMatrix:
        return self._matrix.copy()

    def to_numpy(self) -> np.ndarray:
        return self._matrix.to_numpy()

    def __repr__(self) -> str:
        return f"ReadOnlySparseMatrix({self._matrix!r})"


def read_only(matrix: SparseMatrix) -> ReadOnlySparseMatrix:
    """Wrap ``matrix`` in a read-only view (no copy)."""
    return ReadOnlySparseMatrix(matrix)
