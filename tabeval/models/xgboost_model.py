"""
XGBoost classifier over table views.

Labels are encoded to 0..k-1 for xgboost and decoded back on prediction,
so any hashable label type works.
"""

from __future__ import annotations

import xgboost as xgb
from sklearn.preprocessing import LabelEncoder

from tabeval.config import XGBoostConfig
from tabeval.data.table import Table
from tabeval.models.base import Classifier, ClassifierResult
from tabeval.preprocessing.feature_pipeline import FeaturePipeline


class XGBoostModel(Classifier):
    """Wraps xgboost.XGBClassifier behind the Classifier interface.

    The objective (binary or multi-class) is picked by xgboost from the
    number of encoded classes. Training data must contain at least two
    classes.
    """

    def __init__(self, cfg: XGBoostConfig | None = None) -> None:
        self.cfg = cfg or XGBoostConfig()
        self._model: xgb.XGBClassifier | None = None
        self._encoder: LabelEncoder | None = None
        self._pipeline: FeaturePipeline | None = None

    def name(self) -> str:
        return f"XGBoost(n_estimators={self.cfg.n_estimators}, max_depth={self.cfg.max_depth})"

    def train(self, df: Table, target: str) -> None:
        """Train the model on the rows of `df`.

        Args:
            df: Training table (usually a fold's train view).
            target: Name of the label column.
        """
        pipeline = FeaturePipeline(self.cfg.feature_cols).fit(df, target)
        encoder = LabelEncoder()
        y = encoder.fit_transform(df.get_column(target))
        if len(encoder.classes_) < 2:
            raise ValueError(
                f"XGBoost needs at least 2 classes in training data, got {list(encoder.classes_)}"
            )

        model = xgb.XGBClassifier(
            n_estimators=self.cfg.n_estimators,
            max_depth=self.cfg.max_depth,
            learning_rate=self.cfg.learning_rate,
            subsample=self.cfg.subsample,
            colsample_bytree=self.cfg.colsample_bytree,
            random_state=self.cfg.random_seed,
        )
        model.fit(pipeline.transform(df), y)
        self._pipeline = pipeline
        self._encoder = encoder
        self._model = model

    def predict(self, df: Table) -> ClassifierResult:
        """Predict one label per row of `df`.

        Raises:
            RuntimeError: If model has not been fitted.
        """
        if self._model is None:
            raise RuntimeError("Model has not been fitted. Call train() first.")
        encoded = self._model.predict(self._pipeline.transform(df))
        classes = self._encoder.inverse_transform(encoded.astype(int))
        return ClassifierResult(test_frame=df, classes=classes)
