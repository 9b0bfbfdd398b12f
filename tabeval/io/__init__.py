"""Data input/output utilities."""

from tabeval.config import SyntheticDataConfig
from tabeval.io.synthetic_generator import SyntheticGenerator

__all__ = [
    "SyntheticDataConfig",
    "SyntheticGenerator",
]
