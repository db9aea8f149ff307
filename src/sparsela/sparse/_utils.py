"""Value-based equality, hashing and string rendering for sparse matrices.

All three operate on the canonically sorted entry list, so they agree for
any physical layout of the same logical matrix.
"""

from typing import TYPE_CHECKING

from .._config import config
from ._entry import sort_entries

if TYPE_CHECKING:
    from ._base import SparseMatrix

__all__ = ['equals', 'hash_code', 'to_string']


def equals(a: 'SparseMatrix', b: 'SparseMatrix') -> bool:
    """Same shape and the same non-zeros at the same coordinates."""
    if a.shape != b.shape or a.nnz != b.nnz:
        return False
    return sort_entries(a.get_entry_list()) == sort_entries(b.get_entry_list())


def hash_code(a: 'SparseMatrix') -> int:
    return hash((a.shape, tuple(sort_entries(a.get_entry_list()))))


def to_string(a: 'SparseMatrix') -> str:
    """Render ``"{rows}x{cols} nnz = {n}"`` plus one line per non-zero.

    Values are formatted with ``config.display.value_format``.
    """
    fmt = config.display.value_format
    lines = [f"{a.rows}x{a.cols} nnz = {a.nnz}"]
    for coordinates, value in sort_entries(a.get_entry_list()):
        lines.append(f"{coordinates}: {fmt.format(value)}")
    return "\n".join(lines)
