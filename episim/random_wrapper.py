"""A thin holder around a random generator shared through the simulation."""

from __future__ import annotations

import random


class RandomWrapper:
    """Owns a ``random.Random`` instance; pass a seed for reproducible runs."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def get(self) -> random.Random:
        """The underlying generator."""
        return self._rng

    def gen_bool(self, probability: float) -> bool:
        """Return True with the given probability, which must lie in [0, 1]."""
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be between 0 and 1, got {probability!r}")
        return self._rng.random() < probability