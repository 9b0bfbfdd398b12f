"""
Row mappings: ordered lists of row identifiers into a root table.

A Mapping is a plain index structure. It does not know which table it
refers to, so identifiers are not validated at construction; the caller
guarantees they are valid positions in the table the mapping is used with.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List

import numpy as np


class Mapping:
    """Ordered sequence of row identifiers.

    Order is significant (it defines the row order of a view built on
    the mapping) and duplicates are allowed.
    """

    def __init__(self, rows: Iterable[int] | None = None) -> None:
        self._rows: List[int] = [] if rows is None else [int(r) for r in rows]

    @classmethod
    def empty(cls) -> Mapping:
        """Create an empty mapping."""
        return cls()

    @classmethod
    def wrap(cls, rows: Iterable[int]) -> Mapping:
        """Create a mapping from an existing ordered sequence of row ids."""
        return cls(rows)

    @classmethod
    def range(cls, start: int, end: int) -> Mapping:
        """Create the mapping [start, start+1, ..., end-1]."""
        return cls(range(start, end))

    def append(self, row: int) -> None:
        self._rows.append(int(row))

    add = append

    def add_all(self, rows: Iterable[int]) -> None:
        self._rows.extend(int(r) for r in rows)

    def size(self) -> int:
        return len(self._rows)

    def get(self, pos: int) -> int:
        """Return the row identifier at position `pos`.

        Raises:
            IndexError: If pos is outside [0, size()).
        """
        if pos < 0 or pos >= len(self._rows):
            raise IndexError(f"Mapping position {pos} out of range [0, {len(self._rows)})")
        return self._rows[pos]

    def compose(self, inner: Mapping | Iterable[int]) -> Mapping:
        """Translate positions in `inner` through this mapping.

        If this mapping takes view rows to root ids and `inner` selects
        view rows, the result takes the selected rows straight to root ids.
        """
        return Mapping(self.get(pos) for pos in inner)

    def to_array(self) -> np.ndarray:
        """Return the row ids as an int64 numpy array."""
        return np.asarray(self._rows, dtype=np.int64)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[int]:
        return iter(self._rows)

    def __getitem__(self, pos: int) -> int:
        return self.get(pos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        head = ", ".join(str(r) for r in self._rows[:10])
        suffix = ", ..." if len(self._rows) > 10 else ""
        return f"Mapping([{head}{suffix}], size={len(self._rows)})"
