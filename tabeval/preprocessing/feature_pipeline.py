"""
Minimal feature pipeline: table view -> numeric feature matrix.

Keeps the numeric columns other than the target. Extend with transformers
(imputation, scaling, encoding) when categorical features need support.
"""

from __future__ import annotations

from typing import List

import numpy as np
import pandas as pd

from tabeval.data.table import Table


class FeaturePipeline:
    """Converts a table to a float64 numpy matrix of feature columns."""

    def __init__(self, feature_cols: List[str] | None = None):
        """Initialize pipeline.

        Args:
            feature_cols: List of feature column names to use.
                If None, uses every numeric column except the target.
        """
        self.feature_cols = feature_cols
        self._fitted_cols: List[str] | None = None

    def fit(self, df: Table, target: str) -> "FeaturePipeline":
        """Fit pipeline (store feature columns).

        Args:
            df: Training table.
            target: Target column, always excluded from features.

        Returns:
            Self for chaining.
        """
        if self.feature_cols is not None:
            cols = [c for c in self.feature_cols if c != target]
        else:
            dtypes = df.source_table().to_frame().dtypes
            cols = [
                c for c, dtype in dtypes.items()
                if c != target
                and pd.api.types.is_numeric_dtype(dtype)
                and not pd.api.types.is_bool_dtype(dtype)
            ]

        if not cols:
            raise ValueError(f"No numeric feature columns besides target '{target}'")
        self._fitted_cols = cols
        return self

    def transform(self, df: Table) -> np.ndarray:
        """Transform table to numpy array, rows in the table's order."""
        if self._fitted_cols is None:
            raise RuntimeError("Pipeline not fitted. Call fit() first.")

        return df.to_frame(self._fitted_cols).to_numpy(dtype=np.float64)

    def fit_transform(self, df: Table, target: str) -> np.ndarray:
        """Fit and transform in one step."""
        return self.fit(df, target).transform(df)

    @property
    def feature_names(self) -> List[str]:
        """Get fitted feature column names."""
        if self._fitted_cols is None:
            raise RuntimeError("Pipeline not fitted.")
        return self._fitted_cols
