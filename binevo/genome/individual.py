from __future__ import annotations

import numpy as np

from binevo.exceptions import FitnessNotEvaluatedError
from binevo.genome.chromosome import Chromosome

__all__ = ["Individual"]


class Individual:
    """A chromosome plus its cached raw fitness and fitness percentage.

    ``None`` in the fitness cache means "not evaluated". Assigning a new
    chromosome always clears the cache and resets the percentage to 0.
    """

    __slots__ = ("_chromosome", "_fitness", "_fitness_percentage")

    def __init__(self, chromosome: Chromosome):
        self._chromosome = chromosome
        self._fitness: float | None = None
        self._fitness_percentage = 0.0

    @classmethod
    def random(cls, length: int, rng: np.random.Generator) -> Individual:
        return cls(Chromosome.random(length, rng))

    @classmethod
    def from_string(cls, text: str) -> Individual:
        return cls(Chromosome.from_string(text))

    @property
    def chromosome(self) -> Chromosome:
        return self._chromosome

    @chromosome.setter
    def chromosome(self, chromosome: Chromosome) -> None:
        self._chromosome = chromosome
        self.invalidate_fitness()

    @property
    def is_evaluated(self) -> bool:
        return self._fitness is not None

    @property
    def fitness(self) -> float:
        if self._fitness is None:
            raise FitnessNotEvaluatedError("Fitness has not been calculated yet")
        return self._fitness

    @fitness.setter
    def fitness(self, value: float) -> None:
        self._fitness = float(value)

    @property
    def fitness_percentage(self) -> float:
        return self._fitness_percentage

    @fitness_percentage.setter
    def fitness_percentage(self, value: float) -> None:
        self._fitness_percentage = max(0.0, min(100.0, float(value)))

    def invalidate_fitness(self) -> None:
        self._fitness = None
        self._fitness_percentage = 0.0

    def decode(self, min_value: float, max_value: float) -> float:
        return self._chromosome.decode(min_value, max_value)

    def copy(self) -> Individual:
        """Independent copy that keeps the cached fitness."""
        clone = Individual(self._chromosome)
        clone._fitness = self._fitness
        clone._fitness_percentage = self._fitness_percentage
        return clone

    def __len__(self) -> int:
        return len(self._chromosome)

    def __str__(self) -> str:
        return str(self._chromosome)

    def __repr__(self) -> str:
        fitness = "unevaluated" if self._fitness is None else f"{self._fitness:.6g}"
        return f"Individual({self._chromosome}, fitness={fitness})"
