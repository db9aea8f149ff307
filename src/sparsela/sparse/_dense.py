"""
Dense Vector and Matrix

Thin numpy-backed implementations of the Vector and Matrix contracts.
They are the one non-sparse representation all sparse formats agree on:
``to_dense()`` on every format returns a DenseMatrix, and mixed-format
arithmetic produces DenseMatrix results.

Indices on the public API are 1-based, like the sparse formats. The
underlying ndarray is always float64 and always owned (inputs are copied).

Example:
    >>> a = DenseMatrix([[1, 2], [3, 4]])
    >>> a.get(2, 1)
    3.0
    >>> a.to_numpy()  # a copy
"""

from numbers import Real
from typing import Tuple, Union

import numpy as np

from ._base import Matrix, Vector
from ._checks import (
    throw_if_different_dimension,
    throw_if_different_size,
    throw_if_incompatible_for_multiplication,
    throw_if_invalid_column,
    throw_if_invalid_index,
    throw_if_invalid_row,
)
from .._errors import InvalidArgumentError, assert_argument

__all__ = ['DenseVector', 'DenseMatrix']


def _p_norm(values: np.ndarray, p: float) -> float:
    assert_argument(p != 0, "norm order must be non-zero")
    if p == np.inf:
        return float(np.max(np.abs(values))) if values.size else 0.0
    if p == -np.inf:
        return float(np.min(np.abs(values))) if values.size else 0.0
    return float(np.sum(np.abs(values) ** p) ** (1.0 / p))


# =============================================================================
# DenseVector
# =============================================================================

class DenseVector(Vector):
    """Dense float64 vector."""

    __slots__ = ('_data',)

    def __init__(self, data):
        """
        Args:
            data: 1-D array-like, or an int giving the size of a zero vector.
        """
        if isinstance(data, (int, np.integer)):
            arr = np.zeros(int(data), dtype=np.float64)
        else:
            arr = np.array(data, dtype=np.float64)
        if arr.ndim != 1:
            raise InvalidArgumentError(f"Expected 1-D data, got {arr.ndim}-D")
        self._data = arr

    @property
    def size(self) -> int:
        return int(self._data.shape[0])

    def get(self, index: int) -> float:
        throw_if_invalid_index(self, index)
        return float(self._data[index - 1])

    def set(self, index: int, value: float) -> None:
        throw_if_invalid_index(self, index)
        self._data[index - 1] = value

    def add(self, that: Union[Vector, float]) -> 'DenseVector':
        if isinstance(that, Real):
            return DenseVector(self._data + float(that))
        throw_if_different_size(self, that)
        return DenseVector(self._data + that.to_array())

    def minus(self, that: Union[Vector, float]) -> 'DenseVector':
        if isinstance(that, Real):
            return DenseVector(self._data - float(that))
        throw_if_different_size(self, that)
        return DenseVector(self._data - that.to_array())

    def multiply(self, that: Vector) -> 'DenseVector':
        throw_if_different_size(self, that)
        return DenseVector(self._data * that.to_array())

    def divide(self, that: Vector) -> 'DenseVector':
        throw_if_different_size(self, that)
        return DenseVector(self._data / that.to_array())

    def inner_product(self, that: Vector) -> float:
        throw_if_different_size(self, that)
        return float(np.dot(self._data, that.to_array()))

    def pow(self, c: float) -> 'DenseVector':
        return DenseVector(np.power(self._data, c))

    def scaled(self, c: float) -> 'DenseVector':
        return DenseVector(self._data * c)

    def norm(self, p: float = 2) -> float:
        return _p_norm(self._data, p)

    def zero(self) -> 'DenseVector':
        return DenseVector(self.size)

    def to_array(self) -> np.ndarray:
        return self._data.copy()

    def copy(self) -> 'DenseVector':
        return DenseVector(self._data)

    def __iter__(self):
        return (float(x) for x in self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenseVector):
            return False
        return np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self) -> str:
        return f"DenseVector({self._data.tolist()})"


# =============================================================================
# DenseMatrix
# =============================================================================

class DenseMatrix(Matrix):
    """Dense float64 matrix."""

    __slots__ = ('_data',)

    def __init__(self, data, cols: int = None):
        """
        Args:
            data: 2-D array-like, or the number of rows when ``cols`` is given.
            cols: Number of columns of a zero matrix.
        """
        if cols is not None:
            arr = np.zeros((int(data), int(cols)), dtype=np.float64)
        else:
            arr = np.array(data, dtype=np.float64)
        if arr.ndim != 2:
            raise InvalidArgumentError(f"Expected 2-D data, got {arr.ndim}-D")
        self._data = arr

    @property
    def shape(self) -> Tuple[int, int]:
        return (int(self._data.shape[0]), int(self._data.shape[1]))

    def get(self, i: int, j: int) -> float:
        throw_if_invalid_row(self, i)
        throw_if_invalid_column(self, j)
        return float(self._data[i - 1, j - 1])

    def set(self, i: int, j: int, value: float) -> None:
        throw_if_invalid_row(self, i)
        throw_if_invalid_column(self, j)
        self._data[i - 1, j - 1] = value

    def get_row(self, i: int) -> DenseVector:
        throw_if_invalid_row(self, i)
        return DenseVector(self._data[i - 1, :])

    def get_column(self, j: int) -> DenseVector:
        throw_if_invalid_column(self, j)
        return DenseVector(self._data[:, j - 1])

    def add(self, that: Matrix) -> 'DenseMatrix':
        throw_if_different_dimension(self, that)
        return DenseMatrix(self._data + that.to_numpy())

    def minus(self, that: Matrix) -> 'DenseMatrix':
        throw_if_different_dimension(self, that)
        return DenseMatrix(self._data - that.to_numpy())

    def multiply(self, that: Union[Matrix, Vector]) -> Union['DenseMatrix', DenseVector]:
        throw_if_incompatible_for_multiplication(self, that)
        if isinstance(that, Vector):
            return DenseVector(self._data @ that.to_array())
        return DenseMatrix(self._data @ that.to_numpy())

    def scaled(self, c: float) -> 'DenseMatrix':
        return DenseMatrix(self._data * c)

    def t(self) -> 'DenseMatrix':
        return DenseMatrix(self._data.T)

    def zero(self) -> 'DenseMatrix':
        return DenseMatrix(*self.shape)

    def one(self) -> 'DenseMatrix':
        return DenseMatrix(np.eye(*self.shape))

    def copy(self) -> 'DenseMatrix':
        return DenseMatrix(self._data)

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def to_dense(self) -> 'DenseMatrix':
        return self.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenseMatrix):
            return False
        return self.shape == other.shape and np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self) -> str:
        return f"DenseMatrix(shape={self.shape})"

    def __str__(self) -> str:
        return str(self._data)
