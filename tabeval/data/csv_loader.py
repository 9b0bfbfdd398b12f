"""
CSV loading into root tables.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from tabeval.data.table import FrameTable
from tabeval.errors import InvalidArgumentError


def read_csv_table(path: Path | str, target: str | None = None) -> FrameTable:
    """Load a CSV file as a root table.

    Args:
        path: CSV file with a header row.
        target: If given, the column must exist and hold at least one label.

    Returns:
        FrameTable named after the file stem.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidArgumentError: If the file has no rows or lacks the target.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    df = pd.read_csv(path)
    if df.empty:
        raise InvalidArgumentError(f"{path} has no data rows")

    if target is not None:
        if target not in df.columns:
            raise InvalidArgumentError(
                f"{path.name} must have '{target}' column, got {list(df.columns)}"
            )
        if df[target].isna().all():
            raise InvalidArgumentError(f"Column '{target}' in {path.name} has no labels")

    return FrameTable(df, name=path.stem)
