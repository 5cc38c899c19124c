from __future__ import annotations

from abc import ABC, abstractmethod

from loguru import logger
import numpy as np

from binevo.evolution.population import Population, better_than
from binevo.genome.individual import Individual

__all__ = [
    "ParentSelector",
    "TournamentSelector",
    "RouletteWheelSelector",
    "ElitistPoolSelector",
    "DEFAULT_TOURNAMENT_SIZE",
]

DEFAULT_TOURNAMENT_SIZE = 3


class ParentSelector(ABC):
    """Picks one parent from a population. Never mutates the population."""

    @abstractmethod
    def __call__(self, population: Population, rng: np.random.Generator) -> Individual:
        """Return a copy of the selected individual."""


class TournamentSelector(ParentSelector):
    """Best of ``size`` uniform draws with replacement.

    Ties keep the earlier draw. A size of 1 is a plain uniform draw.
    """

    def __init__(self, size: int = DEFAULT_TOURNAMENT_SIZE, is_maximization: bool = True):
        self.size = size
        self.is_maximization = is_maximization

    def effective_size(self, population_size: int) -> int:
        if self.size <= 0 or self.size > population_size:
            return min(DEFAULT_TOURNAMENT_SIZE, population_size)
        return self.size

    def __call__(self, population: Population, rng: np.random.Generator) -> Individual:
        n = len(population)
        size = self.effective_size(n)
        contestants = rng.integers(0, n, size=size)

        best = population[int(contestants[0])]
        for idx in contestants[1:]:
            competitor = population[int(idx)]
            if better_than(competitor.fitness, best.fitness, self.is_maximization):
                best = competitor
        return best.copy()


class RouletteWheelSelector(ParentSelector):
    """Fitness-proportionate selection that tolerates negative fitness.

    Weights are ``f + offset`` with ``offset = max(0, -min f) + 1``. For
    minimization they are inverted against the largest adjusted value so lower
    raw fitness gets the larger slice.
    """

    def __init__(self, is_maximization: bool = True):
        self.is_maximization = is_maximization

    def weights(self, population: Population) -> np.ndarray:
        values = population.fitness_values()
        offset = max(0.0, -float(values.min())) + 1.0
        adjusted = values + offset
        if self.is_maximization:
            return adjusted
        return adjusted.max() - adjusted

    def __call__(self, population: Population, rng: np.random.Generator) -> Individual:
        weights = self.weights(population)
        total = float(weights.sum())
        if total <= 0.0:
            # flat minimization population: every inverted weight is zero
            return population[int(rng.integers(0, len(population)))].copy()

        point = rng.random() * total
        cumulative = np.cumsum(weights)
        idx = int(np.searchsorted(cumulative, point, side="left"))
        if idx >= len(population):
            logger.debug(
                "RouletteWheelSelector: rounding fallback (point={:.6g}, total={:.6g})",
                point,
                total,
            )
            idx = len(population) - 1
        return population[idx].copy()


class ElitistPoolSelector(ParentSelector):
    """Uniform draw from the top ranks ``0 ..= min(2 * elite_count, n - 1)``."""

    def __init__(self, elite_count: int, is_maximization: bool = True):
        self.elite_count = elite_count
        self.is_maximization = is_maximization

    def pool_bound(self, population_size: int) -> int:
        return min(2 * max(self.elite_count, 0), population_size - 1)

    def __call__(self, population: Population, rng: np.random.Generator) -> Individual:
        ranked = Population(population, is_maximization=self.is_maximization)
        ranked.sort_by_fitness()
        idx = int(rng.integers(0, self.pool_bound(len(ranked)) + 1))
        return ranked[idx].copy()

