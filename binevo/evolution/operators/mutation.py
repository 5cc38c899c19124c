from __future__ import annotations

import numpy as np

from binevo.genome.individual import Individual

__all__ = ["BitFlipMutation"]


class BitFlipMutation:
    """Independent per-bit flip with probability ``rate``.

    The chromosome is always reassigned, so the cached fitness is cleared
    even when no bit flipped and the individual gets re-evaluated.
    """

    def __init__(self, rate: float):
        self.rate = rate

    def __call__(self, individual: Individual, rng: np.random.Generator) -> int:
        """Mutate *individual* in place and return the number of flipped bits."""
        mask = rng.random(len(individual)) < self.rate
        individual.chromosome = individual.chromosome.flip(mask)
        return int(np.count_nonzero(mask))
