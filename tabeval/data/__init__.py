"""
Tables, row mappings and split strategies.

This module provides:
- Table / FrameTable: root table interface and pandas-backed implementation
- Mapping / MappedFrame: zero-copy row selections over a root table
- shuffle: random row order as a view
- SplitStrategy: KFold, LeaveOneOut and RandomSubsampling
- read_csv_table: load a CSV file as a root table
"""

from tabeval.data.csv_loader import read_csv_table
from tabeval.data.mapped_frame import MappedFrame
from tabeval.data.mapping import Mapping
from tabeval.data.row_filters import ensure_rng, shuffle
from tabeval.data.splitters import (
    KFold,
    LeaveOneOut,
    RandomSubsampling,
    Split,
    SplitStrategy,
    build_strategy,
)
from tabeval.data.table import FrameTable, Table

__all__ = [
    "FrameTable",
    "KFold",
    "LeaveOneOut",
    "MappedFrame",
    "Mapping",
    "RandomSubsampling",
    "Split",
    "SplitStrategy",
    "Table",
    "build_strategy",
    "ensure_rng",
    "read_csv_table",
    "shuffle",
]
