"""
Synthetic data generator for classification experiments.

Each class c gets a Gaussian blob centred at c * class_separation on every
feature axis; labels are the strings "c0", "c1", ...
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from tabeval.config import SyntheticDataConfig
from tabeval.data.table import FrameTable


class SyntheticGenerator:
    """Generates labelled Gaussian-class tables."""

    def __init__(self, cfg: SyntheticDataConfig):
        self.cfg = cfg
        self.rng = np.random.default_rng(cfg.random_seed)

    def _sample_rows(self, n_rows: int) -> pd.DataFrame:
        """
        Sample rows from the class-conditional Gaussians.

        Steps:
        1. Sample class uniformly from n_classes
        2. Sample features from N(class * separation, noise^2 I)

        Args:
            n_rows: Number of rows to generate.

        Returns:
            DataFrame with feature columns (x0, x1, ...) and 'y' label.
        """
        n_feat = self.cfg.n_features
        labels = self.rng.integers(0, self.cfg.n_classes, size=n_rows)

        centres = labels[:, None] * self.cfg.class_separation
        features = centres + self.rng.normal(0.0, self.cfg.noise, size=(n_rows, n_feat))

        feature_cols = [f"x{i}" for i in range(n_feat)]
        df = pd.DataFrame(features, columns=feature_cols)
        df["y"] = [f"c{label}" for label in labels]

        return df

    def generate_frame(self, n_rows: int | None = None) -> pd.DataFrame:
        """Generate a DataFrame of `n_rows` rows (default: cfg.n_rows)."""
        return self._sample_rows(self.cfg.n_rows if n_rows is None else n_rows)

    def generate_table(self, n_rows: int | None = None) -> FrameTable:
        """Generate a root table of `n_rows` rows (default: cfg.n_rows)."""
        return FrameTable(self.generate_frame(n_rows), name="synthetic")
