"""Evaluation module: cross-validation driver and classification metrics."""

from tabeval.evaluation.cross_validation import CrossValidation, CVResult, FoldResult, cv
from tabeval.evaluation.metrics import Aggregate, aggregate, compute_accuracy, compute_metrics

__all__ = [
    "Aggregate",
    "CVResult",
    "CrossValidation",
    "FoldResult",
    "aggregate",
    "compute_accuracy",
    "compute_metrics",
    "cv",
]
