"""Format Conversions.

This module provides functional conversions between the sparse formats
and to/from external representations:
- Format conversion (csr, dok, lil) through the entry list
- numpy 2-D arrays
- scipy.sparse (optional dependency)

Every conversion is lossless: the result is equal by value to the source
in the target format.

Example:
    >>> from sparsela.sparse import from_dense, convert_format
    >>>
    >>> csr = from_dense([[1, 0], [0, 2]])
    >>> lil = convert_format(csr, 'lil')
    >>> scipy_mat = to_scipy(lil)
"""

from typing import Any

import numpy as np

from .._errors import InvalidArgumentError, assert_argument
from ._base import SparseFormat, SparseMatrix
from ._csr import CSRMatrix
from ._dok import DOKMatrix
from ._lil import LILMatrix

__all__ = [
    'FORMATS',
    'convert_format',
    'from_dense',
    'from_scipy',
    'to_scipy',
]

FORMATS = {
    SparseFormat.CSR: CSRMatrix,
    SparseFormat.DOK: DOKMatrix,
    SparseFormat.LIL: LILMatrix,
}


def _format_class(target: str) -> type:
    try:
        return FORMATS[target.lower()]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown format: {target}. Use one of {', '.join(SparseFormat.ALL)}"
        ) from None


# =============================================================================
# Format Conversion
# =============================================================================

def convert_format(mat: SparseMatrix, target: str) -> SparseMatrix:
    """Convert between CSR, DOK and LIL.

    Args:
        mat: Source matrix.
        target: Target format ('csr', 'dok' or 'lil').

    Returns:
        A new matrix in the target format. Converting to the source's own
        format returns a copy.

    Example:
        >>> dok = convert_format(csr, 'dok')
    """
    cls = _format_class(target)
    if type(mat) is cls:
        return mat.copy()
    return cls(mat.rows, mat.cols, entries=mat.get_entry_list())


# =============================================================================
# Cross-Platform Conversions
# =============================================================================

def from_dense(arr: Any, format: str = SparseFormat.CSR) -> SparseMatrix:
    """Create a sparse matrix from a 2-D array-like; zeros are skipped.

    Args:
        arr: 2-D list or numpy array.
        format: Target format.

    Returns:
        Sparse matrix in ``format``.
    """
    cls = _format_class(format)
    arr = np.asarray(arr, dtype=np.float64)
    assert_argument(arr.ndim == 2, "Expected 2D array, got %dD", arr.ndim)

    rows, cols = np.nonzero(arr)
    return cls(arr.shape[0], arr.shape[1], rows + 1, cols + 1, arr[rows, cols])


def from_scipy(mat: Any, format: str = SparseFormat.CSR) -> SparseMatrix:
    """Create a sparse matrix from any scipy.sparse matrix or array.

    Duplicate entries are summed and explicit zeros dropped first.

    Args:
        mat: scipy sparse matrix.
        format: Target format.

    Returns:
        Sparse matrix in ``format``.

    Example:
        >>> import scipy.sparse as sp
        >>> m = from_scipy(sp.random(100, 50, density=0.01), 'lil')
    """
    try:
        import scipy.sparse as sp
    except ImportError:
        raise ImportError("scipy required for from_scipy()")

    if not sp.issparse(mat):
        raise InvalidArgumentError(f"Expected a scipy sparse matrix, got {type(mat).__name__}")

    csr = sp.csr_matrix(mat, dtype=np.float64, copy=True)
    csr.sum_duplicates()
    csr.eliminate_zeros()
    result = CSRMatrix.from_arrays(csr.data, csr.indices, csr.indptr, csr.shape)
    return convert_format(result, format) if format.lower() != SparseFormat.CSR else result


def to_scipy(mat: SparseMatrix) -> Any:
    """Convert any sparse format to ``scipy.sparse.csr_matrix``.

    Args:
        mat: Source matrix.

    Returns:
        scipy.sparse.csr_matrix with sorted indices.
    """
    try:
        import scipy.sparse as sp
    except ImportError:
        raise ImportError("scipy required for to_scipy()")

    csr = mat if isinstance(mat, CSRMatrix) else convert_format(mat, SparseFormat.CSR)
    return sp.csr_matrix((csr.data, csr.indices, csr.indptr), shape=csr.shape)
