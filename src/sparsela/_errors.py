"""
Error handling for sparsela.

Every failure is reported synchronously to the caller as a typed exception.
Each exception carries an integer error code so callers can branch on the
cause ("bad input", "out of range", "shape mismatch") either by class or by
code.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# General errors (1-9)
SPARSE_ERROR_UNKNOWN = 1

# Argument errors (10-19)
SPARSE_ERROR_INVALID_ARGUMENT = 10
SPARSE_ERROR_DIMENSION_MISMATCH = 11
SPARSE_ERROR_INDEX_OUT_OF_BOUNDS = 14

# Feature errors (40-49)
SPARSE_ERROR_UNSUPPORTED_OPERATION = 42


# Error code to message mapping
_ERROR_MESSAGES = {
    SPARSE_ERROR_UNKNOWN: "Unknown error",
    SPARSE_ERROR_INVALID_ARGUMENT: "Invalid argument",
    SPARSE_ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    SPARSE_ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
    SPARSE_ERROR_UNSUPPORTED_OPERATION: "Unsupported operation",
}


# =============================================================================
# Exception Classes
# =============================================================================

class SparseError(Exception):
    """
    Base exception for all sparsela errors.

    Attributes:
        code: Integer error code (one of the SPARSE_ERROR_* constants)
        message: Human readable description
    """

    ERROR_UNKNOWN = SPARSE_ERROR_UNKNOWN
    ERROR_INVALID_ARGUMENT = SPARSE_ERROR_INVALID_ARGUMENT
    ERROR_DIMENSION_MISMATCH = SPARSE_ERROR_DIMENSION_MISMATCH
    ERROR_INDEX_OUT_OF_BOUNDS = SPARSE_ERROR_INDEX_OUT_OF_BOUNDS
    ERROR_UNSUPPORTED_OPERATION = SPARSE_ERROR_UNSUPPORTED_OPERATION

    default_code = SPARSE_ERROR_UNKNOWN

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None):
        """
        Create a sparsela exception.

        Args:
            message: Optional detailed message (defaults to the code's message)
            code: Error code; subclasses supply their own default
        """
        if code is None:
            code = self.default_code
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(message)


class IndexOutOfBoundsError(SparseError, IndexError):
    """Raised when a row, column or vector index is outside its valid range."""

    default_code = SPARSE_ERROR_INDEX_OUT_OF_BOUNDS


class DimensionMismatchError(SparseError, ValueError):
    """Raised when operand shapes are incompatible for an operation."""

    default_code = SPARSE_ERROR_DIMENSION_MISMATCH


class InvalidArgumentError(SparseError, ValueError):
    """Raised for malformed construction input."""

    default_code = SPARSE_ERROR_INVALID_ARGUMENT


class UnsupportedOperationError(SparseError, TypeError):
    """Raised when mutating through a read-only view or iterator."""

    default_code = SPARSE_ERROR_UNSUPPORTED_OPERATION


# =============================================================================
# Error Checking Functions
# =============================================================================

def assert_argument(condition: bool, message: str, *args) -> None:
    """
    Raise InvalidArgumentError unless ``condition`` holds.

    Args:
        condition: Condition that must be true
        message: printf-style message
        *args: Message arguments
    """
    if not condition:
        raise InvalidArgumentError(message % args if args else message)


__all__ = [
    "SPARSE_ERROR_UNKNOWN",
    "SPARSE_ERROR_INVALID_ARGUMENT",
    "SPARSE_ERROR_DIMENSION_MISMATCH",
    "SPARSE_ERROR_INDEX_OUT_OF_BOUNDS",
    "SPARSE_ERROR_UNSUPPORTED_OPERATION",
    "SparseError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "assert_argument",
]
