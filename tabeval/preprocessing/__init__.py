"""Feature preparation for model training."""

from tabeval.preprocessing.feature_pipeline import FeaturePipeline

__all__ = ["FeaturePipeline"]
