"""
Configuration management using pydantic.

All config classes use pydantic for validation and YAML loading.
Config files are stored in configs/ directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Literal, Optional

import yaml
from pydantic import BaseModel, Field


# Base path for config files
CONFIGS_DIR = Path(__file__).parent.parent / "configs"


def load_yaml(path: Path | str) -> dict[str, Any]:
    """Load a YAML file and return as dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


class SplitConfig(BaseModel):
    """Configuration for the split strategy."""

    strategy: Literal["kfold", "leave_one_out", "random_subsampling"] = "kfold"
    folds: int = 10
    rounds: int = 1
    train_fraction: float = 0.7
    degenerate: Literal["preserve", "leave_one_out"] = "preserve"


class LogisticRegressionConfig(BaseModel):
    """Configuration for Logistic Regression."""

    C: float = 1.0  # Inverse regularization strength
    solver: str = "lbfgs"
    max_iter: int = 1000
    random_seed: int = 42
    feature_cols: Optional[List[str]] = None


class XGBoostConfig(BaseModel):
    """Configuration for XGBoost model."""

    n_estimators: int = 100
    max_depth: int = 3
    learning_rate: float = 0.1
    subsample: float = 0.8
    colsample_bytree: float = 0.8
    random_seed: int = 42
    feature_cols: Optional[List[str]] = None


class ModelConfig(BaseModel):
    """Which classifier to evaluate, with its settings."""

    name: Literal["majority", "logistic_regression", "xgboost"] = "majority"
    logistic_regression: LogisticRegressionConfig = Field(default_factory=LogisticRegressionConfig)
    xgboost: XGBoostConfig = Field(default_factory=XGBoostConfig)


class SyntheticDataConfig(BaseModel):
    """Configuration for synthetic classification data."""

    random_seed: int = 42
    n_rows: int = 200
    n_features: int = 2
    n_classes: int = 2
    class_separation: float = 2.0
    noise: float = 1.0


class CrossValidationConfig(BaseModel):
    """Configuration for a cross-validation run."""

    random_seed: int = 42
    target: str = "y"
    metrics: List[str] = Field(default=["accuracy"])
    show_progress: bool = False
    split: SplitConfig = Field(default_factory=SplitConfig)
    model: ModelConfig = Field(default_factory=ModelConfig)

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> CrossValidationConfig:
        """Load config from YAML file.

        Args:
            path: Path to YAML file. If None, uses configs/cross_validation.yaml.
        """
        if path is None:
            path = CONFIGS_DIR / "cross_validation.yaml"
        return cls(**load_yaml(path))
