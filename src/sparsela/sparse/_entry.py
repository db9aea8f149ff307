"""Coordinate and entry value types.

``SparseEntry`` is the interchange record between the three storage
formats: any format can export its non-zeros as a list of entries and any
format can be rebuilt from such a list.
"""

from typing import Iterable, List, NamedTuple

__all__ = [
    'Coordinates',
    'SparseEntry',
    'top_left_first',
    'sort_entries',
]


class Coordinates(NamedTuple):
    """1-based (row, column) position in a matrix."""

    i: int
    j: int

    def __str__(self) -> str:
        return f"({self.i}, {self.j})"


class SparseEntry(NamedTuple):
    """A non-zero value together with its coordinates."""

    coordinates: Coordinates
    value: float

    @property
    def row(self) -> int:
        return self.coordinates.i

    @property
    def col(self) -> int:
        return self.coordinates.j

    @classmethod
    def of(cls, i: int, j: int, value: float) -> 'SparseEntry':
        """Shorthand for ``SparseEntry(Coordinates(i, j), value)``."""
        return cls(Coordinates(int(i), int(j)), float(value))


def top_left_first(entry: SparseEntry) -> Coordinates:
    """Sort key ordering entries row-major, then by column."""
    return entry.coordinates


def sort_entries(entries: Iterable[SparseEntry]) -> List[SparseEntry]:
    """Return a new list of ``entries`` in top-left-first order."""
    return sorted(entries, key=top_left_first)
