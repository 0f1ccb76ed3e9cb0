"""Randomness sources used by the assembler."""
from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np


def weighted_index(weights: Sequence[float], draw: float) -> int:
    """Index of the first cumulative weight strictly greater than ``draw``.

    Args:
        weights: Positive, unnormalised weights
        draw: Value in ``[0, sum(weights))``

    Returns:
        int: Selected index
    """
    cumulative = np.cumsum(np.asarray(weights, dtype=np.float64))
    index = int(np.searchsorted(cumulative, draw, side='right'))
    # Guard against a draw rounding up to the total
    return min(index, len(cumulative) - 1)


class RandomSource(ABC):
    """Capability providing the random draws the assembler needs."""

    @abstractmethod
    def uniform(self, low: float, high: float) -> float:
        """Sample uniformly from ``[low, high)``."""

    @abstractmethod
    def weighted_index(self, weights: Sequence[float]) -> int:
        """Pick an index with probability proportional to its weight."""


class NumpyRandomSource(RandomSource):
    """Random source backed by a ``numpy.random.Generator``."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))

    def weighted_index(self, weights: Sequence[float]) -> int:
        if len(weights) == 0:
            raise ValueError("Cannot pick from an empty set of weights")
        if any(w <= 0 for w in weights):
            raise ValueError(f"Weights must be positive: {list(weights)}")
        total = float(np.sum(weights))
        return weighted_index(weights, self.rng.uniform(0.0, total))
