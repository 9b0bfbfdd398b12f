"""
Shared fixtures for tabeval tests.

Provides small labelled tables, deterministic random sources and stub
classifiers so split and evaluation behavior can be checked exactly.
"""
import numpy as np
import pandas as pd
import pytest

from tabeval.data.table import FrameTable, Table
from tabeval.models.base import Classifier, ClassifierResult


LABELS_10 = ["A", "A", "B", "B", "A", "B", "A", "B", "A", "B"]


class IdentityRandom:
    """Random source whose permutations are the identity."""

    def permutation(self, n):
        return np.arange(n)


class ReverseRandom:
    """Random source whose permutations reverse the row order."""

    def permutation(self, n):
        return np.arange(n)[::-1]


class ConstantClassifier(Classifier):
    """Always predicts the same label; records the train views it saw."""

    def __init__(self, label):
        self.label = label
        self.trained_on = []
        self.targets = []

    def name(self):
        return f"Constant({self.label})"

    def train(self, df: Table, target: str) -> None:
        self.trained_on.append(df.row_ids())
        self.targets.append(target)

    def predict(self, df: Table) -> ClassifierResult:
        return ClassifierResult(test_frame=df, classes=[self.label] * df.row_count())


class OracleClassifier(Classifier):
    """Predicts the true label by reading it through the view."""

    def name(self):
        return "Oracle"

    def train(self, df, target):
        self.target = target

    def predict(self, df):
        return ClassifierResult(test_frame=df, classes=df.get_column(self.target))


class FailingClassifier(Classifier):
    """Raises during training on the n-th call (0-based)."""

    def __init__(self, fail_on: int):
        self.fail_on = fail_on
        self.calls = 0

    def name(self):
        return "Failing"

    def train(self, df, target):
        call = self.calls
        self.calls += 1
        if call == self.fail_on:
            raise RuntimeError("class missing from training data")

    def predict(self, df):
        return ClassifierResult(test_frame=df, classes=["A"] * df.row_count())


class ShortPredictionClassifier(Classifier):
    """Returns one prediction too few."""

    def name(self):
        return "Short"

    def train(self, df, target):
        pass

    def predict(self, df):
        return ClassifierResult(test_frame=df, classes=["A"] * (df.row_count() - 1))


@pytest.fixture
def labels_10():
    return list(LABELS_10)


@pytest.fixture
def table_10():
    """Ten-row table: id column equal to the row number, x = id * 10, label y."""
    df = pd.DataFrame({
        "id": np.arange(10),
        "x": np.arange(10) * 10.0,
        "y": LABELS_10,
    })
    return FrameTable(df, name="ten")


@pytest.fixture
def small_table():
    """Table with n rows, built on demand."""
    def _make(n):
        return FrameTable(pd.DataFrame({"id": np.arange(n), "y": ["A"] * n}))
    return _make


@pytest.fixture
def identity_random():
    return IdentityRandom()


@pytest.fixture
def reverse_random():
    return ReverseRandom()


@pytest.fixture
def separable_table():
    """Two well separated numeric classes, 40 rows."""
    rng = np.random.default_rng(0)
    n = 40
    labels = np.array(["neg", "pos"] * (n // 2))
    x0 = np.where(labels == "pos", 5.0, -5.0) + rng.normal(0, 0.5, size=n)
    x1 = np.where(labels == "pos", 5.0, -5.0) + rng.normal(0, 0.5, size=n)
    return FrameTable(pd.DataFrame({"x0": x0, "x1": x1, "label": labels}))
