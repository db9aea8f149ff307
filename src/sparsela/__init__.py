"""
sparsela - Sparse Linear Algebra

Sparse matrix algebra with three interchangeable storage formats:
- CSR: compressed sparse row arrays, Scatter-based arithmetic
- DOK: dictionary of keys, O(1) random access
- LIL: one sparse vector per row

plus a sparse vector primitive, all behind one algebraic contract (add,
minus, multiply, transpose, scale, densify). Any format converts to any
other through its entry list.

Modules:
- sparse: Matrix and vector types, conversions
- config: Strategy configuration (column sort, display)

Architecture:
    ┌──────────────────────────────────────────────┐
    │      CSRMatrix | DOKMatrix | LILMatrix       │
    ├──────────────────────────────────────────────┤
    │  SparseVector  |  Scatter  |  SparseEntry    │
    ├──────────────────────────────────────────────┤
    │  DenseMatrix / DenseVector (numpy fallback)  │
    └──────────────────────────────────────────────┘

Example:
    >>> import sparsela
    >>> from sparsela import CSR, SparseVector
    >>>
    >>> m = CSR(3, 4, [1, 1, 2, 3, 2, 3], [1, 2, 2, 2, 3, 3], [1, 2, 3, 1, 9, 4])
    >>> print(m)
    3x4 nnz = 6
    (1, 1): 1.0
    ...
    >>> v = SparseVector(4, [1, 3], [1.0, 2.0])
    >>> m @ v
"""

__version__ = '0.1.0'

# Import main modules
from . import sparse

from ._config import (
    config,
    get_config,
    set_column_sort,
    ColumnSortStrategy,
    ComputeConfig,
    DisplayConfig,
    SparseConfig,
)

from ._errors import (
    SparseError,
    IndexOutOfBoundsError,
    DimensionMismatchError,
    InvalidArgumentError,
    UnsupportedOperationError,
)

# Re-export common types
from .sparse import (
    # Core classes
    SparseVector,
    CSRMatrix,
    DOKMatrix,
    LILMatrix,
    CSR,  # Alias
    DOK,  # Alias
    LIL,  # Alias
    DenseVector,
    DenseMatrix,
    ReadOnlySparseMatrix,

    # Value types
    Coordinates,
    SparseEntry,

    # Conversion
    convert_format,
    from_dense,
    from_scipy,
    to_scipy,
    read_only,
)

__all__ = [
    '__version__',
    'sparse',

    # Configuration
    'config',
    'get_config',
    'set_column_sort',
    'ColumnSortStrategy',
    'ComputeConfig',
    'DisplayConfig',
    'SparseConfig',

    # Errors
    'SparseError',
    'IndexOutOfBoundsError',
    'DimensionMismatchError',
    'InvalidArgumentError',
    'UnsupportedOperationError',

    # Classes
    'SparseVector',
    'CSRMatrix',
    'DOKMatrix',
    'LILMatrix',
    'CSR',
    'DOK',
    'LIL',
    'DenseVector',
    'DenseMatrix',
    'ReadOnlySparseMatrix',
    'Coordinates',
    'SparseEntry',

    # Functions
    'convert_format',
    'from_dense',
    'from_scipy',
    'to_scipy',
    'read_only',
]
