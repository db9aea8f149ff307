"""Generic matrix arithmetic used when operand types differ.

Each sparse format has fast paths for operands of its own format. Any
other combination (CSR + DOK, LIL @ DenseMatrix, ...) is computed here on
the dense numpy representation and returned as a DenseMatrix.
"""

import logging

from ._base import Matrix
from ._checks import (
    throw_if_different_dimension,
    throw_if_incompatible_for_multiplication,
)
from ._dense import DenseMatrix

__all__ = ['MatrixMathOperation']

logger = logging.getLogger("sparsela.sparse.math")


class MatrixMathOperation:
    """Dense-path implementation of add, minus and multiply."""

    def add(self, a: Matrix, b: Matrix) -> DenseMatrix:
        throw_if_different_dimension(a, b)
        self._log_fallback("add", a, b)
        return DenseMatrix(a.to_numpy() + b.to_numpy())

    def minus(self, a: Matrix, b: Matrix) -> DenseMatrix:
        throw_if_different_dimension(a, b)
        self._log_fallback("minus", a, b)
        return DenseMatrix(a.to_numpy() - b.to_numpy())

    def multiply(self, a: Matrix, b: Matrix) -> DenseMatrix:
        throw_if_incompatible_for_multiplication(a, b)
        self._log_fallback("multiply", a, b)
        return DenseMatrix(a.to_numpy() @ b.to_numpy())

    @staticmethod
    def _log_fallback(op: str, a: Matrix, b: Matrix) -> None:
        logger.debug(
            f"{op}: no fast path for {type(a).__name__} and {type(b).__name__}, "
            f"using dense arithmetic"
        )
