"""sparsela Sparse Matrix Module.

Three interchangeable sparse storage formats and a sparse vector, all
behind one algebraic contract.

Type Hierarchy:

    Vector (ABC)
    ├── SparseVector                  # Index-sorted non-zeros
    └── DenseVector                   # numpy-backed

    Matrix (ABC)
    ├── DenseMatrix                   # numpy-backed
    └── SparseMatrix (ABC)
        ├── CSRMatrix                 # value / col_ind / row_ptr arrays
        ├── DOKMatrix                 # Coordinates -> value dict
        ├── LILMatrix                 # One SparseVector per row
        └── ReadOnlySparseMatrix      # Immutable view

Quick Start:
    >>> from sparsela.sparse import CSR, DOK, SparseVector
    >>>
    >>> m = CSR(3, 4, [1, 1, 2], [1, 2, 3], [1.0, 2.0, 9.0])
    >>> d = DOK(3, 4, entries=m.get_entry_list())
    >>> m.to_dense() == d.to_dense()
    True
    >>> print(m @ m.t())

Format Guide:
    - CSR: fastest arithmetic and row access; O(nnz) per ``set``
    - DOK: O(1) random access and incremental construction
    - LIL: cheap row-by-row construction and row access

Indices on the public API are 1-based.

Key Functions:
    - convert_format: CSR / DOK / LIL conversion
    - from_dense: build any format from a 2-D array
    - from_scipy, to_scipy: scipy interop
    - read_only: immutable view
"""

# =============================================================================
# Base Classes (Abstract Interfaces)
# =============================================================================
from ._base import (
    Vector,
    Matrix,
    SparseStructure,
    Densifiable,
    SparseMatrix,
    SparseFormat,
)

# =============================================================================
# Value Types
# =============================================================================
from ._entry import (
    Coordinates,
    SparseEntry,
    top_left_first,
    sort_entries,
)

# =============================================================================
# Dense Types
# =============================================================================
from ._dense import DenseVector, DenseMatrix
from ._math import MatrixMathOperation

# =============================================================================
# Sparse Types
# =============================================================================
from ._vector import SparseVector, VectorEntry
from ._scatter import Scatter
from ._csr import CSRMatrix, CSR
from ._dok import DOKMatrix, DOK
from ._lil import LILMatrix, LIL
from ._readonly import ReadOnlySparseMatrix, read_only

# =============================================================================
# Operations
# =============================================================================
from ._utils import equals, hash_code, to_string
from ._ops import (
    FORMATS,
    convert_format,
    from_dense,
    from_scipy,
    to_scipy,
)

__all__ = [
    # Base
    'Vector',
    'Matrix',
    'SparseStructure',
    'Densifiable',
    'SparseMatrix',
    'SparseFormat',

    # Value types
    'Coordinates',
    'SparseEntry',
    'top_left_first',
    'sort_entries',

    # Dense
    'DenseVector',
    'DenseMatrix',
    'MatrixMathOperation',

    # Sparse
    'SparseVector',
    'VectorEntry',
    'Scatter',
    'CSRMatrix',
    'CSR',
    'DOKMatrix',
    'DOK',
    'LILMatrix',
    'LIL',
    'ReadOnlySparseMatrix',
    'read_only',

    # Utilities
    'equals',
    'hash_code',
    'to_string',

    # Conversion
    'FORMATS',
    'convert_format',
    'from_dense',
    'from_scipy',
    'to_scipy',
]
