"""
Row-level filters over tables.

All randomness comes from an explicitly passed random source; nothing here
touches numpy's or Python's global generator state.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from tabeval.data.mapped_frame import MappedFrame
from tabeval.data.mapping import Mapping
from tabeval.data.table import Table

RandomSource = Any  # np.random.Generator, int seed, or anything with permutation(n)


def ensure_rng(random: RandomSource = None):
    """Normalise a random source argument.

    Ints and None go through `np.random.default_rng`; objects that already
    provide `permutation(n)` (numpy Generators, or test doubles) pass through.
    """
    if random is None or isinstance(random, (int, np.integer)):
        return np.random.default_rng(random)
    if not hasattr(random, "permutation"):
        raise TypeError(f"random source must provide permutation(n), got {type(random).__name__}")
    return random


def shuffle_positions(n: int, random: RandomSource = None) -> np.ndarray:
    """Uniformly random permutation of [0, n)."""
    return np.asarray(ensure_rng(random).permutation(n), dtype=np.int64)


def shuffle(df: Table, random: RandomSource = None) -> MappedFrame:
    """Return a view over the same root with the rows of `df` in random order.

    The permutation is applied to the positions of `df` and translated to
    root ids, so every shuffled row still traces back to its root row.
    """
    positions = shuffle_positions(df.row_count(), random)
    return MappedFrame(df, Mapping.wrap(positions))

