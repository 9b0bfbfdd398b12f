"""
Unit tests for classifiers and the feature pipeline.
"""
import numpy as np
import pandas as pd
import pytest

from tabeval.config import LogisticRegressionConfig, ModelConfig, XGBoostConfig
from tabeval.data.mapped_frame import MappedFrame
from tabeval.data.table import FrameTable
from tabeval.evaluation.cross_validation import cv
from tabeval.models import (
    LogisticRegressionModel,
    MajorityClassifier,
    XGBoostModel,
    build_classifier,
)
from tabeval.models.base import ClassifierResult
from tabeval.preprocessing.feature_pipeline import FeaturePipeline


class TestClassifierResult:
    """Test suite for ClassifierResult."""

    def test_aligned(self, table_10):
        """Test that aligned predictions are accepted."""
        view = table_10.map_rows([3, 4])
        res = ClassifierResult(test_frame=view, classes=["A", "B"])

        assert list(res.classes) == ["A", "B"]
        assert list(res.row_ids()) == [3, 4]

    def test_misaligned(self, table_10):
        """Test that the prediction count must match the test rows."""
        with pytest.raises(ValueError):
            ClassifierResult(test_frame=table_10.map_rows([3, 4]), classes=["A"])


class TestMajorityClassifier:
    """Test suite for MajorityClassifier."""

    def test_predicts_majority(self, table_10):
        """Test that the most frequent training label is predicted."""
        clf = MajorityClassifier()
        clf.train(table_10.map_rows([0, 1, 2, 4]), "y")
        res = clf.predict(table_10.map_rows([5, 6, 7]))

        assert clf.label == "A"
        assert list(res.classes) == ["A", "A", "A"]

    def test_tie_breaks_to_smallest(self, table_10):
        """Test that ties pick the smallest label."""
        clf = MajorityClassifier()
        clf.train(table_10, "y")

        assert clf.label == "A"

    def test_predict_before_train(self, table_10):
        """Test that predicting before training raises RuntimeError."""
        with pytest.raises(RuntimeError):
            MajorityClassifier().predict(table_10)

    def test_retrain_replaces_state(self, table_10):
        """Test that training again forgets the previous label."""
        clf = MajorityClassifier()
        clf.train(table_10.map_rows([0, 1]), "y")
        clf.train(table_10.map_rows([2, 3]), "y")

        assert clf.label == "B"

    def test_cross_validation_mean(self, table_10):
        """Test majority baseline inside cross-validation."""
        res = cv(table_10, "y", MajorityClassifier(), folds=5, random=0)

        assert 0.0 <= res.mean_accuracy <= 1.0
        assert len(res.folds) == 5


class TestFeaturePipeline:
    """Test suite for FeaturePipeline."""

    def test_numeric_columns_without_target(self, separable_table):
        """Test default feature selection."""
        pipeline = FeaturePipeline().fit(separable_table, "label")

        assert pipeline.feature_names == ["x0", "x1"]

    def test_fit_on_view_does_not_materialise_rows(self, separable_table, monkeypatch):
        """Test that column selection reads dtypes from the root, not a view copy."""
        view = separable_table.map_rows(range(10))

        def fail_to_frame(self, columns=None):
            raise AssertionError("view was materialised")

        monkeypatch.setattr(MappedFrame, "to_frame", fail_to_frame)
        pipeline = FeaturePipeline().fit(view, "label")

        assert pipeline.feature_names == ["x0", "x1"]

    def test_transform_follows_view_order(self, table_10):
        """Test that feature rows follow the view's row order."""
        pipeline = FeaturePipeline(["x"]).fit(table_10, "y")
        X = pipeline.transform(table_10.map_rows([4, 1]))

        assert X.dtype == np.float64
        np.testing.assert_array_equal(X, [[40.0], [10.0]])

    def test_not_fitted(self, table_10):
        """Test transform before fit."""
        with pytest.raises(RuntimeError):
            FeaturePipeline().transform(table_10)

    def test_no_features(self):
        """Test that a table with only the target is rejected."""
        table = FrameTable(pd.DataFrame({"y": ["a", "b"]}))

        with pytest.raises(ValueError):
            FeaturePipeline().fit(table, "y")


class TestLogisticRegressionModel:
    """Test suite for LogisticRegressionModel."""

    def test_separable_data(self, separable_table):
        """Test near-perfect cross-validated accuracy on separable data."""
        res = cv(separable_table, "label", LogisticRegressionModel(), folds=4, random=0)

        assert res.mean_accuracy >= 0.95

    def test_predictions_are_labels(self, separable_table):
        """Test that predictions use the original label values."""
        clf = LogisticRegressionModel(LogisticRegressionConfig(C=0.5))
        clf.train(separable_table.map_rows(range(30)), "label")
        res = clf.predict(separable_table.map_rows(range(30, 40)))

        assert set(res.classes) <= {"neg", "pos"}
        assert len(res.classes) == 10

    def test_predict_before_train(self, separable_table):
        """Test that predicting before training raises RuntimeError."""
        with pytest.raises(RuntimeError):
            LogisticRegressionModel().predict(separable_table)


class TestXGBoostModel:
    """Test suite for XGBoostModel."""

    def test_separable_data(self, separable_table):
        """Test high cross-validated accuracy on separable data."""
        cfg = XGBoostConfig(n_estimators=20, subsample=1.0, colsample_bytree=1.0)
        res = cv(separable_table, "label", XGBoostModel(cfg), folds=4, random=0)

        assert res.mean_accuracy >= 0.9

    def test_single_class_rejected(self, separable_table):
        """Test that training data with one class is rejected."""
        only_neg = [i for i in range(40) if i % 2 == 0]

        with pytest.raises(ValueError):
            XGBoostModel().train(separable_table.map_rows(only_neg), "label")

    def test_predict_before_train(self, separable_table):
        """Test that predicting before training raises RuntimeError."""
        with pytest.raises(RuntimeError):
            XGBoostModel().predict(separable_table)


class TestBuildClassifier:
    """Test suite for build_classifier."""

    @pytest.mark.parametrize("name,cls", [
        ("majority", MajorityClassifier),
        ("logistic_regression", LogisticRegressionModel),
        ("xgboost", XGBoostModel),
    ])
    def test_build(self, name, cls):
        """Test classifier construction from config."""
        assert isinstance(build_classifier(ModelConfig(name=name)), cls)
