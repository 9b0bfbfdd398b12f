"""
Split strategies for building train/test partitions.

Implements:
- KFold: shuffled k-fold, optionally repeated over several rounds
- LeaveOneOut: one test row per split, no shuffling
- RandomSubsampling: repeated random train/test holdout

Splits are index mappings over the root table; no data is copied.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from tabeval.config import SplitConfig
from tabeval.data.mapped_frame import MappedFrame
from tabeval.data.mapping import Mapping
from tabeval.data.row_filters import RandomSource, ensure_rng, shuffle_positions
from tabeval.data.table import Table
from tabeval.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DEGENERATE_POLICIES = ("preserve", "leave_one_out")


@dataclass(frozen=True)
class Split:
    """A single train/test partition (one fold of one round).

    Attributes:
        round: Round index (0 unless the strategy repeats).
        fold: Fold index within the round.
        train: Training view over the root table.
        test: Test view over the root table.
        train_weights: Row weights aligned with `train`, if weights were given.
        test_weights: Row weights aligned with `test`, if weights were given.
    """

    round: int
    fold: int
    train: MappedFrame
    test: MappedFrame
    train_weights: Optional[np.ndarray] = None
    test_weights: Optional[np.ndarray] = None


def _make_split(
    df: Table,
    weights: Optional[np.ndarray],
    round_id: int,
    fold_id: int,
    train_positions: Sequence[int],
    test_positions: Sequence[int],
) -> Split:
    """Wrap positions of `df` into a Split of views over the root."""
    train_positions = np.asarray(train_positions, dtype=np.int64)
    test_positions = np.asarray(test_positions, dtype=np.int64)
    return Split(
        round=round_id,
        fold=fold_id,
        train=MappedFrame(df, Mapping.wrap(train_positions)),
        test=MappedFrame(df, Mapping.wrap(test_positions)),
        train_weights=None if weights is None else weights[train_positions],
        test_weights=None if weights is None else weights[test_positions],
    )


class SplitStrategy(ABC):
    """How a data set is split to perform evaluation."""

    @abstractmethod
    def name(self) -> str:
        """Readable name used in reports."""
        pass

    @abstractmethod
    def _generate(self, df: Table, weights: Optional[np.ndarray], rng) -> List[Split]:
        pass

    def generate_splits(
        self,
        df: Table,
        weights: Optional[Sequence[float]] = None,
        random: RandomSource = None,
    ) -> List[Split]:
        """Produce the ordered list of splits for `df`.

        Each call draws fresh randomness from `random`, so two calls with
        the same unseeded generator give different splits.

        Args:
            df: Table to split (root table or view).
            weights: Optional per-row weights aligned with `df`.
            random: numpy Generator, int seed, or object with permutation(n).

        Returns:
            List of Split objects in evaluation order.

        Raises:
            InvalidArgumentError: On an empty table or mismatched weights.
        """
        if df is None or df.row_count() == 0:
            raise InvalidArgumentError("Cannot split an empty table")
        w = None
        if weights is not None:
            w = np.asarray(weights, dtype=np.float64)
            if w.ndim != 1 or len(w) != df.row_count():
                raise InvalidArgumentError(
                    f"weights must have one entry per row ({df.row_count()}), got shape {w.shape}"
                )
        splits = self._generate(df, w, ensure_rng(random))
        logger.debug(f"{self.name()} produced {len(splits)} splits over {df.row_count()} rows")
        return splits

    def __repr__(self) -> str:
        return self.name()


class KFold(SplitStrategy):
    """Shuffled k-fold cross-validation.

    In the normal case fold i tests the shuffled rows at positions j with
    j % folds == i and trains on the rest, so test sets partition the table
    and fold sizes differ by at most one row.

    When folds >= row_count - 1 there is not enough data for proper folds,
    and the degenerate branch runs one row per test set. Two policies exist:

    - "preserve": test is shuffled position i, train is every row of the
      unshuffled input except position i. Train and test can overlap.
    - "leave_one_out": test is shuffled position i, train is every other
      shuffled row.
    """

    def __init__(self, folds: int, rounds: int = 1, degenerate: str = "preserve") -> None:
        if folds <= 0:
            raise InvalidArgumentError(f"folds must be positive, got {folds}")
        if rounds <= 0:
            raise InvalidArgumentError(f"rounds must be positive, got {rounds}")
        if degenerate not in DEGENERATE_POLICIES:
            raise InvalidArgumentError(
                f"degenerate must be one of {DEGENERATE_POLICIES}, got {degenerate!r}"
            )
        self.folds = folds
        self.rounds = rounds
        self.degenerate = degenerate

    def name(self) -> str:
        if self.rounds == 1:
            return f"KFold(folds={self.folds})"
        return f"KFold(folds={self.folds}, rounds={self.rounds})"

    def is_degenerate(self, n_rows: int) -> bool:
        """Whether the one-row-per-fold branch applies for `n_rows` rows."""
        return self.folds >= n_rows - 1

    def _generate(self, df: Table, weights: Optional[np.ndarray], rng) -> List[Split]:
        n = df.row_count()
        if self.folds > n:
            raise InvalidArgumentError(f"folds ({self.folds}) cannot exceed row count ({n})")

        degenerate = self.is_degenerate(n)
        if degenerate and self.degenerate == "preserve":
            logger.warning(
                f"KFold with {self.folds} folds on {n} rows: using one row per fold; "
                "train rows follow the unshuffled order and may overlap the test row"
            )

        splits: List[Split] = []
        all_positions = np.arange(n, dtype=np.int64)
        for round_id in range(self.rounds):
            perm = shuffle_positions(n, rng)
            for i in range(self.folds):
                if degenerate:
                    test = perm[i:i + 1]
                    if self.degenerate == "preserve":
                        train = all_positions[all_positions != i]
                    else:
                        train = np.delete(perm, i)
                else:
                    in_fold = (all_positions % self.folds) == i
                    test = perm[in_fold]
                    train = perm[~in_fold]
                splits.append(_make_split(df, weights, round_id, i, train, test))
        return splits


class LeaveOneOut(SplitStrategy):
    """One split per row: test on that row, train on all others.

    Rows keep their input order; no randomness is used.
    """

    def name(self) -> str:
        return "LeaveOneOut"

    def _generate(self, df: Table, weights: Optional[np.ndarray], rng) -> List[Split]:
        n = df.row_count()
        if n < 2:
            raise InvalidArgumentError(f"LeaveOneOut needs at least 2 rows, got {n}")
        positions = np.arange(n, dtype=np.int64)
        return [
            _make_split(df, weights, 0, i, np.delete(positions, i), positions[i:i + 1])
            for i in range(n)
        ]


class RandomSubsampling(SplitStrategy):
    """Repeated random holdout.

    Each round shuffles the rows, takes the first floor(n * train_fraction)
    as train and the remainder as test.
    """

    def __init__(self, rounds: int = 10, train_fraction: float = 0.7) -> None:
        if rounds <= 0:
            raise InvalidArgumentError(f"rounds must be positive, got {rounds}")
        if not 0.0 < train_fraction < 1.0:
            raise InvalidArgumentError(f"train_fraction must be in (0, 1), got {train_fraction}")
        self.rounds = rounds
        self.train_fraction = train_fraction

    def name(self) -> str:
        return f"RandomSubsampling(rounds={self.rounds}, train_fraction={self.train_fraction})"

    def _generate(self, df: Table, weights: Optional[np.ndarray], rng) -> List[Split]:
        n = df.row_count()
        n_train = int(np.floor(n * self.train_fraction))
        if n_train == 0 or n_train == n:
            raise InvalidArgumentError(
                f"train_fraction {self.train_fraction} on {n} rows leaves an empty train or test set"
            )
        splits: List[Split] = []
        for round_id in range(self.rounds):
            perm = shuffle_positions(n, rng)
            splits.append(_make_split(df, weights, round_id, 0, perm[:n_train], perm[n_train:]))
        return splits


def build_strategy(cfg: SplitConfig) -> SplitStrategy:
    """Create the split strategy described by `cfg`."""
    if cfg.strategy == "kfold":
        return KFold(cfg.folds, rounds=cfg.rounds, degenerate=cfg.degenerate)
    if cfg.strategy == "leave_one_out":
        return LeaveOneOut()
    if cfg.strategy == "random_subsampling":
        return RandomSubsampling(rounds=cfg.rounds, train_fraction=cfg.train_fraction)
    raise InvalidArgumentError(f"Unknown split strategy: {cfg.strategy}")
