"""
Abstract table interface and the pandas-backed root table.

Defines the contract that both root tables and mapped views fulfil, so the
split strategies and the evaluation loop never care which one they hold.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from tabeval.errors import InvalidArgumentError

if TYPE_CHECKING:
    from tabeval.data.mapped_frame import MappedFrame
    from tabeval.data.mapping import Mapping

Column = Union[str, int]


class Table(ABC):
    """Read-only tabular data with root row identity.

    Every table can tell, for each of its rows, which row of the root table
    it stands for (`row_id`), and can hand out that root (`source_table`).
    """

    @abstractmethod
    def row_count(self) -> int:
        """Number of rows."""
        pass

    @abstractmethod
    def column_names(self) -> List[str]:
        """Ordered column names."""
        pass

    @abstractmethod
    def get_value(self, row: int, column: Column):
        """Value at (row, column).

        Raises:
            IndexError: If row is outside [0, row_count()).
            InvalidArgumentError: If the column does not exist.
        """
        pass

    @abstractmethod
    def get_index(self, row: int, column: Column) -> int:
        """Categorical index of the value at (row, column)."""
        pass

    @abstractmethod
    def levels(self, column: Column) -> List:
        """Sorted distinct values of a column, as seen by `get_index`."""
        pass

    @abstractmethod
    def get_column(self, column: Column) -> np.ndarray:
        """Values of a column in this table's row order."""
        pass

    @abstractmethod
    def row_id(self, row: int) -> int:
        """Root row identifier of the given row."""
        pass

    @abstractmethod
    def row_ids(self) -> np.ndarray:
        """Root row identifiers of all rows, in order."""
        pass

    @abstractmethod
    def source_table(self) -> Table:
        """The root table (never an intermediate view)."""
        pass

    @abstractmethod
    def to_frame(self, columns: Sequence[str] | None = None) -> pd.DataFrame:
        """Materialise as a DataFrame indexed by root row ids."""
        pass

    def column_count(self) -> int:
        return len(self.column_names())

    def has_column(self, name: str) -> bool:
        return name in self.column_names()

    def is_empty(self) -> bool:
        return self.row_count() == 0

    def map_rows(self, mapping: Mapping | Sequence[int]) -> MappedFrame:
        """Build a view selecting rows of this table by position.

        The result is always a view directly over the root table.
        """
        from tabeval.data.mapped_frame import MappedFrame
        from tabeval.data.mapping import Mapping

        if not isinstance(mapping, Mapping):
            mapping = Mapping.wrap(mapping)
        return MappedFrame(self, mapping)

    def __len__(self) -> int:
        return self.row_count()


class FrameTable(Table):
    """Root table backed by a pandas DataFrame.

    The frame index is reset so that root row ids are positions 0..n-1.
    The frame is not copied; callers must not mutate it while views over
    this table are in use.
    """

    def __init__(self, df: pd.DataFrame, name: str = "table") -> None:
        if not isinstance(df, pd.DataFrame):
            raise InvalidArgumentError(f"FrameTable needs a pandas DataFrame, got {type(df).__name__}")
        if not isinstance(df.index, pd.RangeIndex) or df.index.start != 0 or df.index.step != 1:
            df = df.reset_index(drop=True)
        self._df = df
        self.name = name
        self._codes: Dict[str, Tuple[np.ndarray, List]] = {}

    @property
    def data(self) -> pd.DataFrame:
        """Underlying DataFrame."""
        return self._df

    def _column_name(self, column: Column) -> str:
        if isinstance(column, (int, np.integer)) and not isinstance(column, bool):
            if column < 0 or column >= len(self._df.columns):
                raise InvalidArgumentError(
                    f"Column position {column} out of range [0, {len(self._df.columns)})"
                )
            return self._df.columns[column]
        if column not in self._df.columns:
            raise InvalidArgumentError(
                f"Unknown column '{column}'. Available: {list(self._df.columns)}"
            )
        return column

    def _check_row(self, row: int) -> None:
        if row < 0 or row >= len(self._df):
            raise IndexError(f"Row {row} out of range [0, {len(self._df)})")

    def _categorical(self, column: Column) -> Tuple[np.ndarray, List]:
        name = self._column_name(column)
        if name not in self._codes:
            codes, uniques = pd.factorize(self._df[name], sort=True)
            self._codes[name] = (codes, list(uniques))
        return self._codes[name]

    def row_count(self) -> int:
        return len(self._df)

    def column_names(self) -> List[str]:
        return list(self._df.columns)

    def get_value(self, row: int, column: Column):
        self._check_row(row)
        name = self._column_name(column)
        return self._df[name].iat[row]

    def get_index(self, row: int, column: Column) -> int:
        self._check_row(row)
        codes, _ = self._categorical(column)
        return int(codes[row])

    def levels(self, column: Column) -> List:
        return list(self._categorical(column)[1])

    def get_column(self, column: Column) -> np.ndarray:
        return self._df[self._column_name(column)].to_numpy()

    def row_id(self, row: int) -> int:
        self._check_row(row)
        return row

    def row_ids(self) -> np.ndarray:
        return np.arange(len(self._df), dtype=np.int64)

    def source_table(self) -> Table:
        return self

    def to_frame(self, columns: Sequence[str] | None = None) -> pd.DataFrame:
        if columns is None:
            return self._df
        return self._df[[self._column_name(c) for c in columns]]

    def __repr__(self) -> str:
        return f"FrameTable(name={self.name!r}, rows={self.row_count()}, columns={self.column_count()})"
