"""
Cross-validation driver.

For each split produced by a SplitStrategy:
- train the classifier on the split's train view
- predict on the split's test view
- score predictions against the target column read through the test view

Folds run sequentially. A classifier error on any fold aborts the run
(no partial aggregate) and is reported with the fold where it happened.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from tabeval.data.row_filters import RandomSource
from tabeval.data.splitters import KFold, Split, SplitStrategy
from tabeval.data.table import Table
from tabeval.errors import ClassifierFailure, InvalidArgumentError
from tabeval.evaluation.metrics import METRIC_FUNCS, Aggregate, aggregate, compute_metrics
from tabeval.models.base import Classifier

logger = logging.getLogger(__name__)


@dataclass
class FoldResult:
    """Outcome of one split.

    `predictions` and `test_row_ids` are aligned: predictions[j] was made
    for root row test_row_ids[j].
    """

    round: int
    fold: int
    train_size: int
    test_size: int
    test_row_ids: np.ndarray
    predictions: np.ndarray
    accuracy: float
    metrics: Dict[str, float] = field(default_factory=dict)


@dataclass
class CVResult:
    """Per-fold results plus aggregate statistics for one run."""

    strategy: str
    classifier: str
    folds: List[FoldResult]

    @property
    def accuracies(self) -> List[float]:
        return [f.accuracy for f in self.folds]

    @property
    def summary(self) -> Aggregate:
        return aggregate(self.accuracies)

    @property
    def mean_accuracy(self) -> float:
        return self.summary.mean

    @property
    def variance(self) -> float:
        return self.summary.variance

    @property
    def std(self) -> float:
        return self.summary.std

    def metric_mean(self, name: str) -> float:
        """Mean of a per-fold metric across all splits."""
        if not all(name in f.metrics for f in self.folds):
            raise KeyError(f"Metric '{name}' was not computed for every fold")
        return aggregate([f.metrics[name] for f in self.folds]).mean

    def to_frame(self) -> pd.DataFrame:
        """One row per fold: round, fold, sizes, accuracy and metrics."""
        rows = []
        for f in self.folds:
            row = {
                "round": f.round,
                "fold": f.fold,
                "train_size": f.train_size,
                "test_size": f.test_size,
                "accuracy": f.accuracy,
            }
            row.update(f.metrics)
            rows.append(row)
        return pd.DataFrame(rows)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation."""
        summary = self.summary
        return {
            "strategy": self.strategy,
            "classifier": self.classifier,
            "mean_accuracy": summary.mean,
            "variance": summary.variance,
            "std": summary.std,
            "n_splits": summary.n,
            "folds": self.to_frame().to_dict(orient="records"),
        }


class CrossValidation:
    """Runs a classifier through the splits of a strategy and scores it.

    Args:
        strategy: Split strategy; overridden when `run` is given `folds`.
        metrics: Extra metrics to compute per fold (accuracy is always computed).
        show_progress: Whether to show a tqdm progress bar.
        sink: Callable receiving report lines. Defaults to logger.info.

    Raises:
        InvalidArgumentError: If a metric name is not supported.
    """

    def __init__(
        self,
        strategy: Optional[SplitStrategy] = None,
        metrics: Sequence[str] = ("accuracy",),
        show_progress: bool = False,
        sink: Optional[Callable[[str], None]] = None,
    ) -> None:
        unknown = [m for m in metrics if m.lower() not in METRIC_FUNCS]
        if unknown:
            raise InvalidArgumentError(
                f"Unknown metrics: {unknown}. Supported: {list(METRIC_FUNCS.keys())}"
            )
        self.strategy = strategy
        self.metrics = list(metrics)
        self.show_progress = show_progress
        self.sink = sink or logger.info

    def _score_fold(self, split: Split, target: str, classifier: Classifier) -> FoldResult:
        try:
            classifier.train(split.train, target)
            result = classifier.predict(split.test)
        except Exception as e:
            raise ClassifierFailure(split.fold, split.round, e) from e

        actual = result.test_frame.get_column(target)
        scores = compute_metrics(actual, result.classes, ["accuracy"] + self.metrics)
        return FoldResult(
            round=split.round,
            fold=split.fold,
            train_size=split.train.row_count(),
            test_size=split.test.row_count(),
            test_row_ids=result.row_ids(),
            predictions=result.classes,
            accuracy=scores.pop("accuracy"),
            metrics=scores,
        )

    def run(
        self,
        df: Table,
        target: str,
        classifier: Classifier,
        folds: Optional[int] = None,
        random: RandomSource = None,
        weights: Optional[Sequence[float]] = None,
    ) -> CVResult:
        """Evaluate `classifier` on `df` predicting column `target`.

        Args:
            df: Table to evaluate on.
            target: Name of the label column.
            classifier: Classifier to train and test on each split.
            folds: If given, use KFold(folds) instead of the configured strategy.
            random: Random source for the split strategy.
            weights: Optional per-row weights passed to the split strategy.

        Returns:
            CVResult with per-fold results and aggregate accuracy.

        Raises:
            InvalidArgumentError: Empty table, unknown target, bad fold count,
                or no strategy configured.
            ClassifierFailure: Training or prediction failed on a fold.
        """
        strategy = KFold(folds) if folds is not None else self.strategy
        if strategy is None:
            raise InvalidArgumentError("No split strategy configured and no fold count given")
        if df is None or df.row_count() == 0:
            raise InvalidArgumentError("Cannot evaluate on an empty table")
        if not df.has_column(target):
            raise InvalidArgumentError(
                f"Unknown target column '{target}'. Available: {df.column_names()}"
            )

        splits = strategy.generate_splits(df, weights, random)
        self.sink(f"CrossValidation with {len(splits)} folds")

        iterator = splits
        if self.show_progress:
            from tqdm import tqdm
            iterator = tqdm(splits, desc=f"CV {classifier.name()}")

        fold_results: List[FoldResult] = []
        for i, split in enumerate(iterator):
            fold_result = self._score_fold(split, target, classifier)
            fold_results.append(fold_result)
            self.sink(f"CV {i + 1}, accuracy:{fold_result.accuracy:.6f}")

        result = CVResult(
            strategy=strategy.name(),
            classifier=classifier.name(),
            folds=fold_results,
        )
        self.sink(f"Mean accuracy:{result.mean_accuracy:.6f}")
        return result


def cv(
    df: Table,
    target: str,
    classifier: Classifier,
    folds: int,
    random: RandomSource = None,
) -> CVResult:
    """Run k-fold cross-validation with default settings."""
    return CrossValidation().run(df, target, classifier, folds=folds, random=random)
