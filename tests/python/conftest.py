"""
Pytest configuration and shared fixtures for sparsela tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

from sparsela import config
from sparsela.sparse import CSRMatrix, DOKMatrix, LILMatrix

# Try to import scipy
try:
    import scipy.sparse as sp
    HAS_SCIPY = True
except ImportError:
    HAS_SCIPY = False


# =============================================================================
# Test Data
# =============================================================================

# 3x4 matrix
#   [[1, 2, 0, 0],
#    [0, 3, 9, 0],
#    [0, 1, 4, 0]]
M1_ROWS = [1, 1, 2, 3, 2, 3]
M1_COLS = [1, 2, 2, 2, 3, 3]
M1_VALUES = [1.0, 2.0, 3.0, 1.0, 9.0, 4.0]
M1_DENSE = np.array([
    [1, 2, 0, 0],
    [0, 3, 9, 0],
    [0, 1, 4, 0],
], dtype=np.float64)

# 3x4 matrix
#   [[-1,  2,  0, 1],
#    [ 1, -1,  0, 0],
#    [ 0,  1, -4, 0]]
M2_ROWS = [1, 2, 1, 2, 3, 3, 1]
M2_COLS = [1, 1, 2, 2, 2, 3, 4]
M2_VALUES = [-1.0, 1.0, 2.0, -1.0, 1.0, -4.0, 1.0]
M2_DENSE = np.array([
    [-1, 2, 0, 1],
    [1, -1, 0, 0],
    [0, 1, -4, 0],
], dtype=np.float64)

FORMAT_CLASSES = [CSRMatrix, DOKMatrix, LILMatrix]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_config():
    """Restore the global configuration after every test."""
    yield
    config.reset()


@pytest.fixture(scope="session")
def requires_scipy():
    """Skip test if scipy is not available."""
    if not HAS_SCIPY:
        pytest.skip("scipy not available")


@pytest.fixture(params=FORMAT_CLASSES, ids=lambda cls: cls.__name__)
def matrix_cls(request):
    """Each sparse matrix format in turn."""
    return request.param


@pytest.fixture
def m1(matrix_cls):
    """The 3x4 M1 matrix in the current format."""
    return matrix_cls(3, 4, M1_ROWS, M1_COLS, M1_VALUES)


@pytest.fixture
def m2(matrix_cls):
    """The 3x4 M2 matrix in the current format."""
    return matrix_cls(3, 4, M2_ROWS, M2_COLS, M2_VALUES)


@pytest.fixture
def random_dense():
    """Factory for random sparse-ish dense arrays with small integer values.

    Integer values keep every sum and product exact, so sparse and dense
    results can be compared with exact equality.
    """
    rng = np.random.default_rng(42)

    def make(rows, cols, density=0.3):
        values = rng.integers(-9, 10, size=(rows, cols)).astype(np.float64)
        mask = rng.random((rows, cols)) < density
        return np.where(mask, values, 0.0)

    return make


# =============================================================================
# Helper Functions
# =============================================================================

def from_array(cls, arr):
    """Build a ``cls`` matrix from a dense numpy array."""
    rows, cols = np.nonzero(arr)
    return cls(arr.shape[0], arr.shape[1], rows + 1, cols + 1, arr[rows, cols])


def assert_no_stored_zeros(mat):
    """nnz must equal the number of non-zeros of the dense form."""
    assert mat.nnz == np.count_nonzero(mat.to_numpy())
    assert all(entry.value != 0.0 for entry in mat.get_entry_list())
