"""
Unit tests for CSV loading and synthetic data generation.
"""
import pandas as pd
import pytest

from tabeval.config import SyntheticDataConfig
from tabeval.data.csv_loader import read_csv_table
from tabeval.errors import InvalidArgumentError
from tabeval.evaluation.cross_validation import cv
from tabeval.io.synthetic_generator import SyntheticGenerator
from tabeval.models import LogisticRegressionModel


class TestReadCsvTable:
    """Test suite for read_csv_table."""

    def test_load(self, tmp_path):
        """Test that a CSV becomes a root table named after the file."""
        path = tmp_path / "iris.csv"
        pd.DataFrame({"x": [1.0, 2.0, 3.0], "y": ["a", "b", "a"]}).to_csv(path, index=False)

        table = read_csv_table(path, target="y")

        assert table.row_count() == 3
        assert table.name == "iris"
        assert table.get_value(1, "y") == "b"

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_csv_table(tmp_path / "nope.csv")

    def test_missing_target(self, tmp_path):
        """Test that an absent target column is rejected."""
        path = tmp_path / "data.csv"
        pd.DataFrame({"x": [1.0]}).to_csv(path, index=False)

        with pytest.raises(InvalidArgumentError):
            read_csv_table(path, target="y")

    def test_no_rows(self, tmp_path):
        """Test that a header-only CSV is rejected."""
        path = tmp_path / "empty.csv"
        path.write_text("x,y\n")

        with pytest.raises(InvalidArgumentError):
            read_csv_table(path)


class TestSyntheticGenerator:
    """Test suite for SyntheticGenerator."""

    def test_shape_and_labels(self):
        """Test generated columns and label values."""
        cfg = SyntheticDataConfig(n_rows=50, n_features=3, n_classes=3)
        table = SyntheticGenerator(cfg).generate_table()

        assert table.row_count() == 50
        assert table.column_names() == ["x0", "x1", "x2", "y"]
        assert set(table.get_column("y")) <= {"c0", "c1", "c2"}

    def test_reproducible(self):
        """Test that equal seeds give equal data."""
        a = SyntheticGenerator(SyntheticDataConfig(random_seed=3)).generate_frame(20)
        b = SyntheticGenerator(SyntheticDataConfig(random_seed=3)).generate_frame(20)

        pd.testing.assert_frame_equal(a, b)

    def test_separable_classes_learnable(self):
        """Test end to end on well separated synthetic classes."""
        cfg = SyntheticDataConfig(n_rows=120, class_separation=6.0, noise=0.5)
        table = SyntheticGenerator(cfg).generate_table()

        res = cv(table, "y", LogisticRegressionModel(), folds=5, random=1)

        assert res.mean_accuracy >= 0.95
