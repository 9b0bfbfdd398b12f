#!/usr/bin/env python
"""
Run cross-validation of a classifier on a CSV file or synthetic data.

Usage:
    python scripts/run_cross_validation.py --synthetic
    python scripts/run_cross_validation.py --data iris.csv --target species --folds 5
    python scripts/run_cross_validation.py --config configs/cross_validation.yaml --output cv.json

Settings come from the YAML config; command-line flags override them.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np

from tabeval.config import CrossValidationConfig, SyntheticDataConfig
from tabeval.data import build_strategy, read_csv_table
from tabeval.errors import ClassifierFailure, InvalidArgumentError
from tabeval.evaluation import CrossValidation
from tabeval.io import SyntheticGenerator
from tabeval.models import build_classifier

logger = logging.getLogger("run_cross_validation")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cross-validate a classifier on tabular data")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--data", type=Path, help="CSV file with a header row")
    source.add_argument("--synthetic", action="store_true", help="Use generated Gaussian-class data")
    parser.add_argument("--config", type=Path, default=None, help="YAML config (default: configs/cross_validation.yaml)")
    parser.add_argument("--target", type=str, default=None, help="Label column name")
    parser.add_argument("--folds", type=int, default=None, help="Number of folds for k-fold")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--model",
        choices=["majority", "logistic_regression", "xgboost"],
        default=None,
        help="Classifier to evaluate",
    )
    parser.add_argument(
        "--strategy",
        choices=["kfold", "leave_one_out", "random_subsampling"],
        default=None,
        help="Split strategy",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write results as JSON here")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> CrossValidationConfig:
    """Load YAML config and apply command-line overrides."""
    default_path = PROJECT_ROOT / "configs" / "cross_validation.yaml"
    if args.config is not None:
        cfg = CrossValidationConfig.from_yaml(args.config)
    elif default_path.exists():
        cfg = CrossValidationConfig.from_yaml(default_path)
    else:
        cfg = CrossValidationConfig()

    if args.target is not None:
        cfg.target = args.target
    if args.seed is not None:
        cfg.random_seed = args.seed
    if args.folds is not None:
        cfg.split.folds = args.folds
    if args.strategy is not None:
        cfg.split.strategy = args.strategy
    if args.model is not None:
        cfg.model.name = args.model
    if args.progress:
        cfg.show_progress = True
    return cfg


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )
    args = parse_args(argv)
    cfg = load_config(args)

    if args.synthetic:
        table = SyntheticGenerator(SyntheticDataConfig(random_seed=cfg.random_seed)).generate_table()
        target = "y"
    else:
        table = read_csv_table(args.data, target=cfg.target)
        target = cfg.target

    logger.info(f"Loaded {table!r}")

    classifier = build_classifier(cfg.model)
    try:
        runner = CrossValidation(
            strategy=build_strategy(cfg.split),
            metrics=cfg.metrics,
            show_progress=cfg.show_progress,
        )
        result = runner.run(table, target, classifier, random=np.random.default_rng(cfg.random_seed))
    except (InvalidArgumentError, ClassifierFailure) as e:
        logger.error(str(e))
        return 1

    logger.info(f"{result.strategy} / {result.classifier}: mean accuracy {result.mean_accuracy:.4f} "
                f"(std {result.std:.4f})")

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w") as f:
            json.dump(result.to_dict(), f, indent=2, default=str)
        logger.info(f"Results saved to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
