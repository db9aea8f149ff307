"""
Tests for behaviour specific to DOKMatrix and LILMatrix.
"""

import pytest
import numpy as np

from sparsela.sparse import (
    DOK,
    LIL,
    Coordinates,
    CSRMatrix,
    DenseMatrix,
    DOKMatrix,
    LILMatrix,
    SparseVector,
)

from conftest import M1_COLS, M1_DENSE, M1_ROWS, M1_VALUES


class TestDOK:
    """Test the dictionary-of-keys format."""

    def test_alias(self):
        """Test DOK is DOKMatrix."""
        assert DOK is DOKMatrix

    def test_keys_are_coordinates(self):
        """Test entries are keyed by Coordinates."""
        mat = DOKMatrix(3, 4, M1_ROWS, M1_COLS, M1_VALUES)
        keys = {entry.coordinates for entry in mat.get_entry_list()}
        assert Coordinates(2, 3) in keys
        assert len(keys) == 6

    def test_incremental_build(self):
        """Test building by random-order set calls."""
        mat = DOKMatrix(3, 4)
        for i, j, v in reversed(list(zip(M1_ROWS, M1_COLS, M1_VALUES))):
            mat.set(i, j, v)
        assert mat == DOKMatrix(3, 4, M1_ROWS, M1_COLS, M1_VALUES)

    def test_multiply_sparse_other_format(self):
        """Test DOK @ any sparse matrix stays DOK."""
        dok = DOKMatrix(3, 4, M1_ROWS, M1_COLS, M1_VALUES)
        csr = CSRMatrix(3, 4, M1_ROWS, M1_COLS, M1_VALUES).t()
        result = dok @ csr
        assert isinstance(result, DOKMatrix)
        np.testing.assert_array_equal(result.to_numpy(), M1_DENSE @ M1_DENSE.T)

    def test_multiply_dense(self):
        """Test DOK @ DenseMatrix gives a DenseMatrix."""
        dok = DOKMatrix(3, 4, M1_ROWS, M1_COLS, M1_VALUES)
        b = np.arange(8, dtype=float).reshape(4, 2)
        result = dok @ DenseMatrix(b)
        assert isinstance(result, DenseMatrix)
        np.testing.assert_array_equal(result.to_numpy(), M1_DENSE @ b)

    def test_add_other_format_falls_back(self):
        """Test DOK + LIL is computed densely."""
        dok = DOKMatrix(3, 4, M1_ROWS, M1_COLS, M1_VALUES)
        lil = LILMatrix(3, 4, M1_ROWS, M1_COLS, M1_VALUES)
        result = dok + lil
        assert isinstance(result, DenseMatrix)
        np.testing.assert_array_equal(result.to_numpy(), 2 * M1_DENSE)

    def test_transpose_swaps_keys(self):
        """Test transposed keys."""
        t = DOKMatrix(2, 3, [1], [3], [5.0]).t()
        assert t.shape == (3, 2)
        assert t.get(3, 1) == 5.0


class TestLIL:
    """Test the list-of-lists format."""

    def test_alias(self):
        """Test LIL is LILMatrix."""
        assert LIL is LILMatrix

    def test_row_vectors(self):
        """Test each row is a SparseVector of size cols."""
        mat = LILMatrix(3, 4, M1_ROWS, M1_COLS, M1_VALUES)
        row = mat.get_row(2)
        assert isinstance(row, SparseVector)
        assert row.size == 4
        assert [entry.index for entry in row] == [2, 3]

    def test_row_wise_build(self):
        """Test building row by row."""
        mat = LILMatrix(3, 4)
        for i in range(1, 4):
            for j in range(1, 5):
                mat.set(i, j, M1_DENSE[i - 1, j - 1])
        assert mat.nnz == 6
        np.testing.assert_array_equal(mat.to_numpy(), M1_DENSE)

    def test_multiply_rectangular(self):
        """Test the transpose-based product on non-square operands."""
        a = np.array([[1, 0, 2], [0, 3, 0]], dtype=float)
        b = np.array([[0, 1, 0, 4], [5, 0, 0, 0], [0, 6, 7, 0]], dtype=float)
        ma = LILMatrix(2, 3, [1, 1, 2], [1, 3, 2], [1, 2, 3])
        mb = LILMatrix(3, 4, [1, 1, 2, 3, 3], [2, 4, 1, 2, 3], [1, 4, 5, 6, 7])
        result = ma @ mb
        assert isinstance(result, LILMatrix)
        np.testing.assert_array_equal(result.to_numpy(), a @ b)

    def test_multiply_other_format_falls_back(self):
        """Test LIL @ CSR is computed densely."""
        lil = LILMatrix(3, 4, M1_ROWS, M1_COLS, M1_VALUES)
        csr = CSRMatrix(3, 4, M1_ROWS, M1_COLS, M1_VALUES).t()
        result = lil @ csr
        assert isinstance(result, DenseMatrix)
        np.testing.assert_array_equal(result.to_numpy(), M1_DENSE @ M1_DENSE.T)

    @pytest.mark.parametrize("shape", [(0, 0), (0, 4), (4, 0)])
    def test_degenerate_shapes(self, shape):
        """Test matrices without rows or columns."""
        mat = LILMatrix(*shape)
        assert mat.nnz == 0
        assert mat.t().shape == shape[::-1]
        assert str(mat) == f"{shape[0]}x{shape[1]} nnz = 0"
