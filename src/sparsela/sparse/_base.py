"""
Matrix and Vector Base Classes

This module defines the abstract base classes for the sparsela type system.
It establishes one algebraic contract that every storage format follows,
so that sparse and dense operands can be combined polymorphically.

Type Hierarchy:

    Vector (ABC)
    ├── SparseVector       - index-sorted non-zero entries
    └── DenseVector        - numpy-backed

    Matrix (ABC)
    ├── DenseMatrix        - numpy-backed
    └── SparseMatrix (ABC) = Matrix + SparseStructure + Densifiable
        ├── CSRMatrix      - compressed sparse row arrays
        ├── DOKMatrix      - dictionary of keys
        ├── LILMatrix      - list of per-row sparse vectors
        └── ReadOnlySparseMatrix - immutable view of any of the above

Design Philosophy:

1. Unified Interface: every matrix exposes shape, 1-based element access,
   row/column extraction and the same arithmetic (add, minus, multiply,
   scaled, opposite, t, zero, one, copy).

2. Fast Paths: binary operations between two operands of the same sparse
   format use a format-specific algorithm; any other combination falls
   back to the dense path in MatrixMathOperation.

3. Values In, Values Out: arithmetic never mutates its operands; only
   ``set`` mutates the receiver.

Example:

    for mat in [csr, dok, lil]:
        assert (mat + mat.opposite()).nnz == 0
"""

from abc import ABC, abstractmethod
from numbers import Real
from typing import Tuple, Union, TYPE_CHECKING, List

import numpy as np

if TYPE_CHECKING:
    from ._dense import DenseMatrix
    from ._entry import SparseEntry
    from ._vector import SparseVector

__all__ = [
    'Vector',
    'Matrix',
    'SparseStructure',
    'Densifiable',
    'SparseMatrix',
    'SparseFormat',
]


class SparseFormat:
    """Enumeration of sparse matrix formats."""
    CSR = 'csr'
    DOK = 'dok'
    LIL = 'lil'

    ALL = (CSR, DOK, LIL)


# =============================================================================
# Vector
# =============================================================================

class Vector(ABC):
    """
    Abstract base class for 1-based vectors.

    Required Methods (subclasses must implement):
        size, get, set, add, minus, multiply, divide, inner_product,
        pow, scaled, norm, zero, to_array, copy
    """

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of elements."""
        ...

    @abstractmethod
    def get(self, index: int) -> float:
        """Get the element at 1-based ``index``."""
        ...

    @abstractmethod
    def set(self, index: int, value: float) -> None:
        """Set the element at 1-based ``index``."""
        ...

    @abstractmethod
    def add(self, that: Union['Vector', float]) -> 'Vector':
        """Element-wise sum with a vector or a scalar."""
        ...

    @abstractmethod
    def minus(self, that: Union['Vector', float]) -> 'Vector':
        """Element-wise difference with a vector or a scalar."""
        ...

    @abstractmethod
    def multiply(self, that: 'Vector') -> 'Vector':
        """Element-wise (Hadamard) product."""
        ...

    @abstractmethod
    def divide(self, that: 'Vector') -> 'Vector':
        """Element-wise quotient."""
        ...

    @abstractmethod
    def inner_product(self, that: 'Vector') -> float:
        """Dot product."""
        ...

    @abstractmethod
    def pow(self, c: float) -> 'Vector':
        """Element-wise power."""
        ...

    @abstractmethod
    def scaled(self, c: float) -> 'Vector':
        """Multiply every element by ``c``."""
        ...

    @abstractmethod
    def norm(self, p: float = 2) -> float:
        """The p-norm; ``p`` may be ``math.inf`` or ``-math.inf``."""
        ...

    @abstractmethod
    def zero(self) -> 'Vector':
        """A zero vector of the same size and type."""
        ...

    @abstractmethod
    def to_array(self) -> np.ndarray:
        """Dense numpy copy of the elements."""
        ...

    @abstractmethod
    def copy(self) -> 'Vector':
        """Deep copy."""
        ...

    # =========================================================================
    # Derived Operations
    # =========================================================================

    def opposite(self) -> 'Vector':
        return self.scaled(-1.0)

    def angle(self, that: 'Vector') -> float:
        """Angle in radians between this vector and ``that``."""
        with np.errstate(divide='ignore', invalid='ignore'):
            cos = np.float64(self.inner_product(that)) / self.norm() / that.norm()
        # rounding can push |cos| slightly above 1
        return float(np.arccos(np.clip(cos, -1.0, 1.0)))

    def __len__(self) -> int:
        return self.size

    def __add__(self, other):
        if isinstance(other, (Vector, Real)):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (Vector, Real)):
            return self.minus(other)
        return NotImplemented

    def __neg__(self) -> 'Vector':
        return self.opposite()

    def __mul__(self, other):
        if isinstance(other, Real):
            return self.scaled(float(other))
        if isinstance(other, Vector):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.scaled(float(other))
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, Vector):
            return self.inner_product(other)
        return NotImplemented


# =============================================================================
# Matrix
# =============================================================================

class Matrix(ABC):
    """
    Abstract base class for 1-based matrices.

    Required Properties (subclasses must implement):
        shape: Matrix dimensions (rows, cols)

    Required Methods (subclasses must implement):
        get, set, get_row, get_column, add, minus, multiply, scaled, t,
        zero, one, copy, to_numpy
    """

    @property
    @abstractmethod
    def shape(self) -> Tuple[int, int]:
        """Matrix dimensions (rows, cols)."""
        ...

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self.shape[1]

    @property
    def ndim(self) -> int:
        """Number of dimensions (always 2)."""
        return 2

    @abstractmethod
    def get(self, i: int, j: int) -> float:
        """Get the element at row ``i``, column ``j`` (1-based)."""
        ...

    @abstractmethod
    def set(self, i: int, j: int, value: float) -> None:
        """Set the element at row ``i``, column ``j`` (1-based)."""
        ...

    @abstractmethod
    def get_row(self, i: int) -> Vector:
        ...

    @abstractmethod
    def get_column(self, j: int) -> Vector:
        ...

    @abstractmethod
    def add(self, that: 'Matrix') -> 'Matrix':
        ...

    @abstractmethod
    def minus(self, that: 'Matrix') -> 'Matrix':
        ...

    @abstractmethod
    def multiply(self, that: Union['Matrix', Vector]) -> Union['Matrix', Vector]:
        """Matrix product with a matrix, or matrix-vector product."""
        ...

    @abstractmethod
    def scaled(self, c: float) -> 'Matrix':
        ...

    @abstractmethod
    def t(self) -> 'Matrix':
        """Transpose."""
        ...

    @abstractmethod
    def zero(self) -> 'Matrix':
        """A zero matrix of the same shape and type."""
        ...

    @abstractmethod
    def one(self) -> 'Matrix':
        """An identity-like matrix of the same shape and type."""
        ...

    @abstractmethod
    def copy(self) -> 'Matrix':
        """Deep copy."""
        ...

    @abstractmethod
    def to_numpy(self) -> np.ndarray:
        """Dense 2-D numpy copy."""
        ...

    # =========================================================================
    # Derived Operations
    # =========================================================================

    def opposite(self) -> 'Matrix':
        return self.scaled(-1.0)

    @property
    def T(self) -> 'Matrix':
        return self.t()

    def __add__(self, other):
        if isinstance(other, Matrix):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Matrix):
            return self.minus(other)
        return NotImplemented

    def __neg__(self) -> 'Matrix':
        return self.opposite()

    def __mul__(self, other):
        if isinstance(other, Real):
            return self.scaled(float(other))
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __matmul__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return self.multiply(other)
        return NotImplemented


# =============================================================================
# Sparse Capabilities
# =============================================================================

class SparseStructure(ABC):
    """Anything that stores only its non-zero entries."""

    @property
    @abstractmethod
    def nnz(self) -> int:
        """Number of stored non-zero elements."""
        ...


class Densifiable(ABC):
    """Anything convertible to the common dense matrix type."""

    @abstractmethod
    def to_dense(self) -> 'DenseMatrix':
        ...


class SparseMatrix(Matrix, SparseStructure, Densifiable):
    """
    Abstract base class for the sparse matrix formats.

    Adds the entry-list export used for conversion between formats, plus
    value-based equality and the diagnostic string rendering shared by all
    formats.

    Required Properties (subclasses must implement):
        format: Sparse format ('csr', 'dok' or 'lil')

    Required Methods (subclasses must implement):
        get_entry_list(): all non-zeros as SparseEntry records
    """

    @property
    @abstractmethod
    def format(self) -> str:
        ...

    @abstractmethod
    def get_entry_list(self) -> List['SparseEntry']:
        """Export every non-zero as a ``SparseEntry`` (unordered)."""
        ...

    @property
    def size(self) -> int:
        """Total number of elements (rows * cols)."""
        return self.rows * self.cols

    @property
    def density(self) -> float:
        """Fraction of non-zero elements."""
        total = self.size
        return self.nnz / total if total > 0 else 0.0

    def to_numpy(self) -> np.ndarray:
        result = np.zeros(self.shape, dtype=np.float64)
        for (i, j), value in self.get_entry_list():
            result[i - 1, j - 1] = value
        return result

    def to_dense(self) -> 'DenseMatrix':
        from ._dense import DenseMatrix
        return DenseMatrix(self.to_numpy())

    # =========================================================================
    # Representation
    # =========================================================================

    def __eq__(self, other) -> bool:
        from ._utils import equals
        if other is self:
            return True
        if type(other) is not type(self):
            return False
        return equals(self, other)

    def __hash__(self) -> int:
        from ._utils import hash_code
        return hash_code(self)

    def __str__(self) -> str:
        from ._utils import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape}, nnz={self.nnz})"
