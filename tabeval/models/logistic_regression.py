"""
Logistic Regression classifier over table views.
"""

from __future__ import annotations

from sklearn.linear_model import LogisticRegression

from tabeval.config import LogisticRegressionConfig
from tabeval.data.table import Table
from tabeval.models.base import Classifier, ClassifierResult
from tabeval.preprocessing.feature_pipeline import FeaturePipeline


class LogisticRegressionModel(Classifier):
    """Multinomial logistic regression on the numeric feature columns."""

    def __init__(self, cfg: LogisticRegressionConfig | None = None):
        """Initialize model with config.

        Args:
            cfg: Configuration. Uses defaults if None.
        """
        self.cfg = cfg or LogisticRegressionConfig()
        self._pipeline: FeaturePipeline | None = None
        self._model: LogisticRegression | None = None

    def name(self) -> str:
        return f"LogisticRegression(C={self.cfg.C})"

    def train(self, df: Table, target: str) -> None:
        """Fit model on the rows of `df`.

        Args:
            df: Training table (usually a fold's train view).
            target: Name of the label column.
        """
        pipeline = FeaturePipeline(self.cfg.feature_cols).fit(df, target)
        model = LogisticRegression(
            C=self.cfg.C,
            solver=self.cfg.solver,
            max_iter=self.cfg.max_iter,
            random_state=self.cfg.random_seed,
        )
        model.fit(pipeline.transform(df), df.get_column(target))
        self._pipeline = pipeline
        self._model = model

    def predict(self, df: Table) -> ClassifierResult:
        if self._model is None:
            raise RuntimeError("Model has not been fitted. Call train() first.")
        classes = self._model.predict(self._pipeline.transform(df))
        return ClassifierResult(test_frame=df, classes=classes)
