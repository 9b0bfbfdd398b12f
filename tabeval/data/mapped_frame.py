"""
Mapped views: zero-copy row selections over a root table.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np
import pandas as pd

from tabeval.data.mapping import Mapping
from tabeval.data.table import Column, Table


class MappedFrame(Table):
    """Read-only view over a root table, renumbered through a Mapping.

    Row i of the view is row `mapping.get(i)` of the root. The view never
    copies or owns the root table; the root must outlive the view and must
    not be mutated while the view is in use.

    Building a view over another view composes the two mappings at
    construction time, so `source_table()` is always the root and row
    lookup costs the same at any nesting depth.
    """

    def __init__(self, source: Table, mapping: Mapping) -> None:
        root = source.source_table()
        if root is not source:
            # Mapping holds positions in `source`; translate them to root ids.
            mapping = Mapping.wrap(source.row_id(pos) for pos in mapping)
        else:
            mapping = Mapping.wrap(mapping)
        self._source = root
        self._mapping = mapping
        self._ids: np.ndarray | None = None

    @classmethod
    def by_row(cls, source: Table, *rows: int) -> MappedFrame:
        """View over the given positions of `source`."""
        return cls(source, Mapping.wrap(rows))

    @property
    def mapping(self) -> Mapping:
        """Copy of the root-id mapping; changing it does not affect the view."""
        return Mapping.wrap(self._mapping)

    def _root_row(self, row: int) -> int:
        return self._mapping.get(row)

    def _id_array(self) -> np.ndarray:
        if self._ids is None:
            ids = self._mapping.to_array()
            n = self._source.row_count()
            if ids.size and (ids.min() < 0 or ids.max() >= n):
                raise IndexError(f"Mapping holds row ids outside [0, {n})")
            self._ids = ids
        return self._ids

    def row_count(self) -> int:
        return self._mapping.size()

    def column_names(self) -> List[str]:
        return self._source.column_names()

    def get_value(self, row: int, column: Column):
        return self._source.get_value(self._root_row(row), column)

    def get_index(self, row: int, column: Column) -> int:
        return self._source.get_index(self._root_row(row), column)

    def levels(self, column: Column) -> List:
        return self._source.levels(column)

    def get_column(self, column: Column) -> np.ndarray:
        return self._source.get_column(column)[self._id_array()]

    def row_id(self, row: int) -> int:
        return self._root_row(row)

    def row_ids(self) -> np.ndarray:
        return self._id_array().copy()

    def source_table(self) -> Table:
        return self._source

    def to_frame(self, columns: Sequence[str] | None = None) -> pd.DataFrame:
        return self._source.to_frame(columns).iloc[self._id_array()]

    def __repr__(self) -> str:
        return f"MappedFrame(rows={self.row_count()}, source={self._source!r})"
