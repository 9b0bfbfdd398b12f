"""
Majority-class baseline classifier.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from tabeval.data.table import Table
from tabeval.models.base import Classifier, ClassifierResult


class MajorityClassifier(Classifier):
    """Predicts the most frequent training label for every row.

    Ties are broken by the smallest label.
    """

    def __init__(self) -> None:
        self._label = None
        self._fitted = False

    def name(self) -> str:
        return "MajorityClassifier"

    @property
    def label(self):
        return self._label

    def train(self, df: Table, target: str) -> None:
        y = pd.Series(df.get_column(target)).dropna()
        if y.empty:
            raise ValueError(f"No labelled rows in column '{target}' to train on")
        counts = y.value_counts()
        top = counts[counts == counts.max()].index
        self._label = sorted(top)[0]
        self._fitted = True

    def predict(self, df: Table) -> ClassifierResult:
        if not self._fitted:
            raise RuntimeError("Model has not been fitted. Call train() first.")
        classes = np.full(df.row_count(), self._label, dtype=object)
        return ClassifierResult(test_frame=df, classes=classes)
