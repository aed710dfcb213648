"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import Sequence


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def weighted_index(self, weights: Sequence[float], *, remainder: float = 0.0) -> int | None:
        """
        Return an index drawn with probability proportional to its weight.

        ``remainder`` is extra mass past the last weight; a roll landing in it
        returns None. Draws through ``random`` so exactly one roll is consumed.
        """

        if not weights:
            raise ValueError("Cannot choose from an empty sequence.")
        if remainder < 0 or any(weight < 0 for weight in weights):
            raise ValueError("Weights must be non-negative.")
        total = sum(weights)
        if total <= 0:
            raise ValueError("At least one weight must be positive.")
        roll = self.random() * (total + remainder)
        for index, weight in enumerate(weights):
            if roll < weight:
                return index
            roll -= weight
        if remainder > 0:
            return None
        # Float drift can leave a sliver past the final bucket.
        return max(i for i, weight in enumerate(weights) if weight > 0)
