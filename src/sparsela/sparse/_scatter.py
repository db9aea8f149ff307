"""Sparse accumulator for CSR row arithmetic.

A Scatter is a dense workspace the width of one output row. It sums any
number of weighted CSR rows into that row without re-zeroing the dense
buffer between rows: ``_w[col]`` remembers the last row that touched a
column, so a stale slot is detected in O(1) and overwritten instead of
accumulated into.

One Scatter serves one top-level operation. It is not thread-safe and
not re-entrant: every row must be drained with ``copy_results`` before
the next ``start_row``.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    import numpy as np
    from ._csr import CSRMatrix

__all__ = ['Scatter']


class Scatter:
    """Row accumulator sized to the output column count.

    Row and column arguments are 0-based positions in the CSR arrays.
    """

    __slots__ = ('_w', '_sum', '_columns', '_row')

    def __init__(self, size: int):
        self._w: List[int] = [-1] * size      # last row that touched each column
        self._sum: List[float] = [0.0] * size
        self._columns: List[int] = []         # first-touch order
        self._row = -1

    def start_row(self, i: int) -> None:
        """Begin accumulating output row ``i``."""
        self._row = i
        self._columns.clear()

    def add_row(self, matrix: 'CSRMatrix', i: int, weight: float) -> None:
        """Fold ``weight * matrix[i, :]`` into the current row."""
        row = self._row
        w, acc, columns = self._w, self._sum, self._columns
        start, end = matrix._row_ptr[i], matrix._row_ptr[i + 1]
        for col, value in zip(matrix._col_ind[start:end].tolist(),
                              matrix._value[start:end].tolist()):
            if w[col] != row:
                w[col] = row
                acc[col] = weight * value
                columns.append(col)
            else:
                acc[col] += weight * value

    def copy_results(self, dest_value: 'np.ndarray', dest_col: 'np.ndarray', offset: int) -> int:
        """Drain the current row into ``dest_*[offset:]``.

        Columns come out in first-touch order, not sorted.

        Returns:
            Number of entries written.
        """
        n = len(self._columns)
        if n:
            dest_col[offset:offset + n] = self._columns
            dest_value[offset:offset + n] = [self._sum[col] for col in self._columns]
        return n
