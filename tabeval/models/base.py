"""
Classifier interface consumed by the evaluation loop.

A classifier learns from a table view and a target column name, then
predicts one label per row of another view.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from tabeval.data.table import Table


@dataclass
class ClassifierResult:
    """Predictions for one table, aligned positionally with its rows.

    Attributes:
        test_frame: Table the predictions were made on.
        classes: Predicted label for each row of `test_frame`.
    """

    test_frame: Table
    classes: np.ndarray

    def __post_init__(self) -> None:
        self.classes = np.asarray(self.classes)
        if self.classes.ndim != 1 or len(self.classes) != self.test_frame.row_count():
            raise ValueError(
                f"Predictions must have one label per test row: "
                f"got {self.classes.shape}, test rows={self.test_frame.row_count()}"
            )

    def row_ids(self) -> np.ndarray:
        """Root row ids of the predicted rows."""
        return self.test_frame.row_ids()


class Classifier(ABC):
    """Trainable classifier.

    Calling `train` again discards previously learned state. Instances are
    not reentrant; do not share one across concurrent evaluations.
    """

    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def train(self, df: Table, target: str) -> None:
        """Learn from `df`, predicting column `target`."""
        pass

    @abstractmethod
    def predict(self, df: Table) -> ClassifierResult:
        """Predict a label for every row of `df`.

        Raises:
            RuntimeError: If the classifier has not been trained.
        """
        pass

    def __repr__(self) -> str:
        return self.name()
