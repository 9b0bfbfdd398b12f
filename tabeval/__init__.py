"""
Cross-validation over zero-copy table views.

Datasets are split into train/test views that share one root table; every
view keeps the root row id of each of its rows so predictions can be
matched back to ground truth.
"""

from tabeval.data import FrameTable, KFold, LeaveOneOut, MappedFrame, Mapping, RandomSubsampling, shuffle
from tabeval.errors import ClassifierFailure, InvalidArgumentError
from tabeval.evaluation import CrossValidation, CVResult, cv

__version__ = "0.1.0"

__all__ = [
    "ClassifierFailure",
    "CrossValidation",
    "CVResult",
    "FrameTable",
    "InvalidArgumentError",
    "KFold",
    "LeaveOneOut",
    "MappedFrame",
    "Mapping",
    "RandomSubsampling",
    "cv",
    "shuffle",
]
