"""
Classification metrics and fold aggregation.

Implements:
- Accuracy: fraction of rows whose predicted label equals the actual label
- Error: 1 - accuracy
- Balanced accuracy and macro F1 (scikit-learn)
- aggregate: mean / variance over per-fold scores
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np
from sklearn.metrics import balanced_accuracy_score, f1_score

from tabeval.errors import InvalidArgumentError


def _as_label_arrays(y_true, y_pred) -> tuple[np.ndarray, np.ndarray]:
    y_true = np.asarray(y_true, dtype=object)
    y_pred = np.asarray(y_pred, dtype=object)
    if len(y_true) != len(y_pred):
        raise InvalidArgumentError(
            f"y_true and y_pred length mismatch: {len(y_true)} != {len(y_pred)}"
        )
    if len(y_true) == 0:
        raise InvalidArgumentError("Cannot score an empty set of predictions")
    return y_true, y_pred


def compute_accuracy(y_true: Sequence, y_pred: Sequence) -> float:
    """Compute accuracy = matches / count.

    Labels are compared position by position with ==, so predictions must
    be aligned with the rows they were made for.

    Args:
        y_true: Actual labels.
        y_pred: Predicted labels.

    Returns:
        Accuracy in [0, 1].
    """
    y_true, y_pred = _as_label_arrays(y_true, y_pred)
    matches = np.array([t == p for t, p in zip(y_true, y_pred)], dtype=bool)
    return float(matches.sum() / len(matches))


def compute_balanced_accuracy(y_true: Sequence, y_pred: Sequence) -> float:
    """Mean per-class recall."""
    y_true, y_pred = _as_label_arrays(y_true, y_pred)
    return float(balanced_accuracy_score(y_true.astype(str), y_pred.astype(str)))


def compute_f1_macro(y_true: Sequence, y_pred: Sequence) -> float:
    """Unweighted mean of per-class F1 scores."""
    y_true, y_pred = _as_label_arrays(y_true, y_pred)
    return float(f1_score(y_true.astype(str), y_pred.astype(str), average="macro", zero_division=0))


METRIC_FUNCS = {
    "accuracy": compute_accuracy,
    "error": lambda y_true, y_pred: 1.0 - compute_accuracy(y_true, y_pred),
    "balanced_accuracy": compute_balanced_accuracy,
    "f1_macro": compute_f1_macro,
}


def compute_metrics(
    y_true: Sequence,
    y_pred: Sequence,
    metrics: Sequence[str] = ("accuracy",),
) -> Dict[str, float]:
    """Compute multiple evaluation metrics.

    Args:
        y_true: Actual labels.
        y_pred: Predicted labels, aligned with y_true.
        metrics: Metric names to compute.
            Supported: "accuracy", "error", "balanced_accuracy", "f1_macro".

    Returns:
        Dictionary mapping metric name to value.
    """
    results = {}

    for metric in metrics:
        metric_lower = metric.lower()
        if metric_lower in METRIC_FUNCS:
            results[metric_lower] = METRIC_FUNCS[metric_lower](y_true, y_pred)
        else:
            raise ValueError(f"Unknown metric: {metric}. Supported: {list(METRIC_FUNCS.keys())}")

    return results


@dataclass(frozen=True)
class Aggregate:
    """Summary of per-fold scores.

    Attributes:
        mean: Sum of scores divided by their count.
        variance: Sample variance (ddof=1); 0.0 for a single score.
        std: Square root of variance.
        n: Number of scores.
    """

    mean: float
    variance: float
    std: float
    n: int


def aggregate(values: Sequence[float] | List[float]) -> Aggregate:
    """Aggregate per-fold scores into mean and variance."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        raise InvalidArgumentError("Cannot aggregate an empty list of scores")
    mean = float(arr.sum() / arr.size)
    variance = float(arr.var(ddof=1)) if arr.size > 1 else 0.0
    return Aggregate(mean=mean, variance=variance, std=float(np.sqrt(variance)), n=int(arr.size))
