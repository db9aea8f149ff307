"""Sparse Vector.

A one-dimensional container that stores only its non-zero elements, as
two parallel Python lists (indices and values) kept sorted by index. It is
the primitive the matrix formats reduce to: rows and columns are
extracted as SparseVectors, and LIL matrices are arrays of them.

Invariants:
    - indices are 1-based and strictly increasing
    - no stored value is exactly 0.0
    - ``nnz == len(indices) == len(values)``

Binary operations between two sparse vectors are merges: a two-pointer
walk over both index-sorted sequences, O(nnz1 + nnz2). A sum that cancels
to exactly zero is dropped during the merge, which is what keeps the
no-zero invariant.

Example:
    >>> v = SparseVector(10, [2, 5], [22.0, 55.0])
    >>> v.get(5)
    55.0
    >>> v.set(5, 0)  # removes the entry
    >>> v.nnz
    1
"""

from bisect import bisect_left
from numbers import Real
from typing import List, NamedTuple, Optional, Sequence, Union

import numpy as np

from .._errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    UnsupportedOperationError,
)
from ._base import SparseStructure, Vector
from ._checks import throw_if_different_size, throw_if_invalid_index
from ._dense import DenseVector, _p_norm

__all__ = ['SparseVector', 'VectorEntry']


class VectorEntry(NamedTuple):
    """A stored element of a SparseVector."""

    index: int
    value: float

    def __str__(self) -> str:
        return f"[{self.index}] {self.value:.4f}"


class _EntryIterator:
    """Read-only iterator over the entries of a SparseVector.

    Iterates over a snapshot taken when the iterator is created.
    """

    __slots__ = ('_entries',)

    def __init__(self, indices: List[int], values: List[float]):
        self._entries = iter([VectorEntry(i, v) for i, v in zip(indices, values)])

    def __iter__(self) -> '_EntryIterator':
        return self

    def __next__(self) -> VectorEntry:
        return next(self._entries)

    def remove(self) -> None:
        raise UnsupportedOperationError(
            "cannot remove an element in a vector; set it to zero instead"
        )


class SparseVector(Vector, SparseStructure):
    """Sparse vector with 1-based indices.

    Attributes:
        size: Number of elements (fixed at construction).
        nnz: Number of stored non-zeros.
    """

    __slots__ = ('_size', '_indices', '_values')

    def __init__(
        self,
        size: int,
        indices: Optional[Sequence[int]] = None,
        values: Optional[Sequence[float]] = None,
    ):
        """Construct a sparse vector.

        Args:
            size: The size of the vector.
            indices: 1-based indices of the non-zero values (any order).
            values: The values at ``indices``; zeros are not stored.

        Raises:
            InvalidArgumentError: arrays of different lengths or duplicated
                indices.
            IndexOutOfBoundsError: an index outside ``[1, size]``.
        """
        if size < 0:
            raise InvalidArgumentError(f"Vector size must be non-negative, got {size}")
        self._size = int(size)
        self._indices: List[int] = []
        self._values: List[float] = []

        if indices is None and values is None:
            return
        indices = [] if indices is None else list(indices)
        values = [] if values is None else list(values)
        if len(indices) != len(values):
            raise InvalidArgumentError(
                f"sizes of input arrays mismatch: {len(indices)} indices, {len(values)} values"
            )

        for index in indices:
            if index < 1 or index > size:
                raise IndexOutOfBoundsError(f"out-of-range index: {index}")

        last_index = 0
        for index, value in sorted(zip(indices, values), key=lambda e: e[0]):
            if last_index >= index:
                raise InvalidArgumentError(f"duplicated indices: {index}")
            last_index = index
            if value != 0.0:
                self._indices.append(int(index))
                self._values.append(float(value))

    @classmethod
    def _from_sorted(cls, size: int, indices: List[int], values: List[float]) -> 'SparseVector':
        """Wrap lists already satisfying the invariants (no copy, no checks)."""
        v = cls.__new__(cls)
        v._size = size
        v._indices = indices
        v._values = values
        return v

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def size(self) -> int:
        return self._size

    @property
    def nnz(self) -> int:
        return len(self._indices)

    # =========================================================================
    # Element Access
    # =========================================================================

    def get(self, index: int) -> float:
        throw_if_invalid_index(self, index)
        pos = bisect_left(self._indices, index)
        if pos < len(self._indices) and self._indices[pos] == index:
            return self._values[pos]
        return 0.0

    def set(self, index: int, value: float) -> None:
        """Set element ``index``; writing 0 removes a stored entry."""
        throw_if_invalid_index(self, index)
        pos = bisect_left(self._indices, index)
        if pos < len(self._indices) and self._indices[pos] == index:
            if value != 0.0:
                self._values[pos] = float(value)
            else:
                del self._indices[pos]
                del self._values[pos]
        elif value != 0.0:
            self._indices.insert(pos, int(index))
            self._values.insert(pos, float(value))

    def __iter__(self) -> _EntryIterator:
        """Iterate over stored entries in ascending index order."""
        return _EntryIterator(self._indices, self._values)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def add(self, that: Union[Vector, float]) -> Vector:
        if isinstance(that, Real):
            data = np.full(self._size, float(that))
            for index, value in zip(self._indices, self._values):
                data[index - 1] += value
            return DenseVector(data)
        if isinstance(that, SparseVector):
            return self._merge_add(that, 1.0)

        throw_if_different_size(self, that)
        result = DenseVector(that.to_array())
        for index, value in zip(self._indices, self._values):
            result.set(index, value + result.get(index))
        return result

    def minus(self, that: Union[Vector, float]) -> Vector:
        if isinstance(that, Real):
            return self.add(-float(that))
        if isinstance(that, SparseVector):
            return self._merge_add(that, -1.0)

        throw_if_different_size(self, that)
        result = that.opposite()
        for index, value in zip(self._indices, self._values):
            result.set(index, value + result.get(index))
        return result

    def _merge_add(self, that: 'SparseVector', sign: float) -> 'SparseVector':
        throw_if_different_size(self, that)

        a_idx, a_val = self._indices, self._values
        b_idx, b_val = that._indices, that._values
        out_idx: List[int] = []
        out_val: List[float] = []
        p, q = 0, 0
        na, nb = len(a_idx), len(b_idx)
        while p < na or q < nb:
            if q >= nb or (p < na and a_idx[p] < b_idx[q]):
                out_idx.append(a_idx[p])
                out_val.append(a_val[p])
                p += 1
            elif p >= na or a_idx[p] > b_idx[q]:
                out_idx.append(b_idx[q])
                out_val.append(sign * b_val[q])
                q += 1
            else:
                total = a_val[p] + sign * b_val[q]
                if total != 0.0:
                    out_idx.append(a_idx[p])
                    out_val.append(total)
                p += 1
                q += 1
        return SparseVector._from_sorted(self._size, out_idx, out_val)

    def multiply(self, that: Vector) -> 'SparseVector':
        """Hadamard product; the result is always sparse."""
        throw_if_different_size(self, that)
        if isinstance(that, SparseVector):
            return self._merge_multiply(that)

        out_idx: List[int] = []
        out_val: List[float] = []
        for index, value in zip(self._indices, self._values):
            product = value * that.get(index)
            if product != 0.0:
                out_idx.append(index)
                out_val.append(product)
        return SparseVector._from_sorted(self._size, out_idx, out_val)

    def _merge_multiply(self, that: 'SparseVector') -> 'SparseVector':
        a_idx, a_val = self._indices, self._values
        b_idx, b_val = that._indices, that._values
        out_idx: List[int] = []
        out_val: List[float] = []
        p, q = 0, 0
        while p < len(a_idx) and q < len(b_idx):
            if a_idx[p] < b_idx[q]:
                p += 1
            elif a_idx[p] > b_idx[q]:
                q += 1
            else:
                product = a_val[p] * b_val[q]
                if product != 0.0:
                    out_idx.append(a_idx[p])
                    out_val.append(product)
                p += 1
                q += 1
        return SparseVector._from_sorted(self._size, out_idx, out_val)

    def divide(self, that: Vector) -> 'SparseVector':
        """Divide each stored value by the matching element of ``that``."""
        throw_if_different_size(self, that)
        result = self.copy()
        # zero divisors give inf or nan, as in IEEE division
        with np.errstate(divide='ignore', invalid='ignore'):
            for index, value in zip(self._indices, self._values):
                result.set(index, float(np.divide(value, that.get(index))))
        return result

    def inner_product(self, that: Vector) -> float:
        throw_if_different_size(self, that)
        if not isinstance(that, SparseVector):
            return sum(value * that.get(index)
                       for index, value in zip(self._indices, self._values))

        a_idx, a_val = self._indices, self._values
        b_idx, b_val = that._indices, that._values
        total = 0.0
        p, q = 0, 0
        while p < len(a_idx) and q < len(b_idx):
            if a_idx[p] < b_idx[q]:
                p += 1
            elif a_idx[p] > b_idx[q]:
                q += 1
            else:
                total += a_val[p] * b_val[q]
                p += 1
                q += 1
        return total

    def pow(self, c: float) -> Vector:
        """Element-wise power.

        If ``0 ** c`` is non-zero (``c <= 0``) every implicit zero becomes
        non-zero and the result is a DenseVector; otherwise it stays sparse.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            zero_pow = float(np.power(0.0, c))
            powers = [float(np.power(value, c)) for value in self._values]

        if zero_pow != 0.0:
            data = np.full(self._size, zero_pow)
            for index, value in zip(self._indices, powers):
                data[index - 1] = value
            return DenseVector(data)

        kept = [(i, v) for i, v in zip(self._indices, powers) if v != 0.0]
        return SparseVector._from_sorted(
            self._size, [i for i, _ in kept], [v for _, v in kept]
        )

    def scaled(self, c: float) -> 'SparseVector':
        if c == 0.0:
            return SparseVector(self._size)
        out_idx: List[int] = []
        out_val: List[float] = []
        for index, value in zip(self._indices, self._values):
            scaled = c * value
            if scaled != 0.0:
                out_idx.append(index)
                out_val.append(scaled)
        return SparseVector._from_sorted(self._size, out_idx, out_val)

    def opposite(self) -> 'SparseVector':
        return self.scaled(-1.0)

    def norm(self, p: float = 2) -> float:
        """The p-norm.

        ``p = inf`` / ``-inf`` give the largest / smallest absolute element
        (implicit zeros included); finite ``p`` sums over stored entries only.
        """
        if p == np.inf or p == -np.inf:
            return _p_norm(self.to_array(), p)
        return _p_norm(np.asarray(self._values, dtype=np.float64), p)

    # =========================================================================
    # Conversion
    # =========================================================================

    def zero(self) -> 'SparseVector':
        return SparseVector(self._size)

    def to_array(self) -> np.ndarray:
        result = np.zeros(self._size, dtype=np.float64)
        if self._indices:
            result[np.asarray(self._indices) - 1] = self._values
        return result

    def copy(self) -> 'SparseVector':
        """Deep copy; the copy shares no mutable state with this vector."""
        return SparseVector._from_sorted(self._size, list(self._indices), list(self._values))

    # =========================================================================
    # Representation
    # =========================================================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, SparseVector):
            return False
        return (
            self._size == other._size
            and self._indices == other._indices
            and self._values == other._values
        )

    def __hash__(self) -> int:
        return hash((self._size, tuple(self._indices), tuple(self._values)))

    def __str__(self) -> str:
        return "".join(f"{entry}\n" for entry in self)

    def __repr__(self) -> str:
        return f"SparseVector(size={self._size}, nnz={self.nnz})"
