"""
Tests for the read-only sparse matrix view.
"""

import pytest
import numpy as np

from sparsela import UnsupportedOperationError
from sparsela.sparse import ReadOnlySparseMatrix, SparseVector, read_only

from conftest import M1_DENSE


class TestReadOnly:
    """Test ReadOnlySparseMatrix over every format."""

    def test_reads_delegate(self, m1):
        """Test reads see the wrapped matrix."""
        view = read_only(m1)
        assert isinstance(view, ReadOnlySparseMatrix)
        assert view.shape == (3, 4)
        assert view.nnz == 6
        assert view.format == m1.format
        assert view.get(2, 3) == 9.0
        np.testing.assert_array_equal(view.get_row(1).to_array(), M1_DENSE[0])
        np.testing.assert_array_equal(view.get_column(2).to_array(), M1_DENSE[:, 1])
        np.testing.assert_array_equal(view.to_numpy(), M1_DENSE)

    def test_set_unsupported(self, m1):
        """Test writes raise and leave the matrix unmodified."""
        view = read_only(m1)
        with pytest.raises(UnsupportedOperationError):
            view.set(1, 1, 5.0)
        assert m1.get(1, 1) == 1.0

    def test_is_a_view(self, m1):
        """Test changes to the wrapped matrix are visible."""
        view = read_only(m1)
        m1.set(3, 4, 8.0)
        assert view.get(3, 4) == 8.0

    def test_arithmetic_returns_wrapped_format(self, m1, m2):
        """Test arithmetic uses the wrapped format's fast paths."""
        result = read_only(m1) + read_only(m2)
        assert type(result) is type(m1)
        assert result == m1 + m2

        product = read_only(m1) @ m1.t()
        assert type(product) is type(m1)
        assert read_only(m1).t() == m1.t()

    def test_matrix_vector(self, m1):
        """Test matrix-vector product through the view."""
        result = read_only(m1) @ SparseVector(4, [2], [1.0])
        np.testing.assert_array_equal(result.to_array(), [2, 3, 1])

    def test_copy_is_mutable(self, m1):
        """Test copy() gives an ordinary matrix."""
        c = read_only(m1).copy()
        c.set(1, 1, 0)
        assert c.nnz == 5

    def test_no_double_wrapping(self, m1):
        """Test wrapping a view wraps the underlying matrix."""
        assert read_only(read_only(m1))._matrix is m1

    def test_equality(self, m1):
        """Test views compare by value."""
        assert read_only(m1) == read_only(m1.copy())
        assert read_only(m1) != m1

    def test_rendering(self, m1):
        """Test str and repr."""
        view = read_only(m1)
        assert str(view) == str(m1)
        assert repr(view) == f"ReadOnlySparseMatrix({m1!r})"

    def test_rejects_dense(self):
        """Test only sparse matrices can be wrapped."""
        with pytest.raises(TypeError):
            ReadOnlySparseMatrix(M1_DENSE)
