"""
Error taxonomy for the evaluation engine.

- InvalidArgumentError: bad configuration or input (fold count, empty table,
  unknown column). Subclasses ValueError.
- ClassifierFailure: training or prediction failed on a fold. The run stops
  at that fold; no partial aggregate is returned.

Out-of-range row access raises the builtin IndexError.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised for invalid configuration or input data."""


class ClassifierFailure(RuntimeError):
    """Raised when the classifier fails during a cross-validation fold.

    Attributes:
        fold: Zero-based fold index where the failure happened.
        round: Zero-based round index (repeated strategies).
    """

    def __init__(self, fold: int, round: int = 0, cause: BaseException | None = None):
        self.fold = fold
        self.round = round
        self.cause = cause
        super().__init__(
            f"classifier failed on fold {fold} (round {round}): {cause}"
        )
