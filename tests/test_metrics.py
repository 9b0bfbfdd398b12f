"""
Unit tests for metrics and aggregation.
"""
import numpy as np
import pytest

from tabeval.errors import InvalidArgumentError
from tabeval.evaluation.metrics import aggregate, compute_accuracy, compute_metrics


class TestAccuracy:
    """Test suite for compute_accuracy."""

    def test_matches_over_count(self):
        """Test accuracy on string labels."""
        assert compute_accuracy(["A", "B", "A", "B"], ["A", "A", "A", "B"]) == pytest.approx(0.75)

    def test_mixed_types_never_match(self):
        """Test that labels of different types are not equal."""
        assert compute_accuracy([1, 0], ["1", "0"]) == 0.0

    def test_numeric_labels(self):
        """Test accuracy on numeric labels."""
        assert compute_accuracy(np.array([0, 1, 1]), np.array([0, 1, 0])) == pytest.approx(2 / 3)

    def test_empty(self):
        """Test that empty input is rejected."""
        with pytest.raises(InvalidArgumentError):
            compute_accuracy([], [])

    def test_length_mismatch(self):
        """Test that misaligned inputs are rejected."""
        with pytest.raises(InvalidArgumentError):
            compute_accuracy(["A"], ["A", "B"])


class TestComputeMetrics:
    """Test suite for compute_metrics."""

    def test_multiple(self):
        """Test several metrics at once."""
        out = compute_metrics(["A", "B"], ["A", "A"], ["accuracy", "error", "f1_macro"])

        assert out["accuracy"] == pytest.approx(0.5)
        assert out["error"] == pytest.approx(0.5)
        assert 0.0 <= out["f1_macro"] <= 1.0

    def test_case_insensitive(self):
        """Test metric names are case-insensitive."""
        assert "accuracy" in compute_metrics(["A"], ["A"], ["Accuracy"])

    def test_unknown_metric(self):
        """Test that unknown metrics raise ValueError."""
        with pytest.raises(ValueError, match="Unknown metric"):
            compute_metrics(["A"], ["A"], ["auc"])


class TestAggregate:
    """Test suite for aggregate."""

    def test_mean_and_variance(self):
        """Test mean and sample variance."""
        agg = aggregate([0.5, 1.0, 0.0, 0.5, 0.5])

        assert agg.mean == pytest.approx(0.5)
        assert agg.variance == pytest.approx(0.125)
        assert agg.std == pytest.approx(np.sqrt(0.125))
        assert agg.n == 5

    def test_single_value(self):
        """Test that one value has zero variance."""
        agg = aggregate([0.7])

        assert agg.mean == pytest.approx(0.7)
        assert agg.variance == 0.0

    def test_empty(self):
        """Test that nothing to aggregate is rejected."""
        with pytest.raises(InvalidArgumentError):
            aggregate([])
