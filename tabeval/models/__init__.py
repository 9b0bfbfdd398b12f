"""Classifier interface and model implementations."""

from tabeval.config import LogisticRegressionConfig, ModelConfig, XGBoostConfig
from tabeval.errors import InvalidArgumentError
from tabeval.models.base import Classifier, ClassifierResult
from tabeval.models.logistic_regression import LogisticRegressionModel
from tabeval.models.majority import MajorityClassifier
from tabeval.models.xgboost_model import XGBoostModel


def build_classifier(cfg: ModelConfig) -> Classifier:
    """Create the classifier described by `cfg`."""
    if cfg.name == "majority":
        return MajorityClassifier()
    if cfg.name == "logistic_regression":
        return LogisticRegressionModel(cfg.logistic_regression)
    if cfg.name == "xgboost":
        return XGBoostModel(cfg.xgboost)
    raise InvalidArgumentError(f"Unknown model: {cfg.name}")


__all__ = [
    "Classifier",
    "ClassifierResult",
    "LogisticRegressionConfig",
    "LogisticRegressionModel",
    "MajorityClassifier",
    "ModelConfig",
    "XGBoostConfig",
    "XGBoostModel",
    "build_classifier",
]
