from __future__ import annotations

from abc import ABC, abstractmethod
import copy
import math

import numpy as np

from binevo.genome.individual import Individual

__all__ = ["FitnessFunction", "OPTIMUM_TOLERANCE"]

OPTIMUM_TOLERANCE = 1e-10


class FitnessFunction(ABC):
    """
    Abstract base class for scalar functions of one real variable.

    Subclasses implement ``evaluate`` and may override ``optimal_value`` /
    ``optimal_x`` when the optimum is known analytically. Unknown optima are
    reported as NaN and percentage normalization then falls back to the
    empirical population range.
    """

    def __init__(self, name: str, expression: str, maximize: bool = True):
        self.name = name
        self.expression = expression
        self.maximize = maximize

    @abstractmethod
    def evaluate(self, x: float) -> float:
        """Return the raw fitness at *x*."""

    def is_maximization_problem(self) -> bool:
        return self.maximize

    def optimal_value(self) -> float:
        return math.nan

    def optimal_x(self) -> float:
        return math.nan

    def clone(self) -> FitnessFunction:
        """Deep copy, used when the engine takes ownership."""
        return copy.deepcopy(self)

    def evaluate_individual(
        self, individual: Individual, min_value: float, max_value: float
    ) -> float:
        return float(self.evaluate(individual.decode(min_value, max_value)))

    def fitness_percentage(
        self,
        fitness_value: float,
        best_known: float,
        worst_known: float,
        is_maximization: bool | None = None,
    ) -> float:
        """Convert a raw fitness into a [0, 100] score.

        Args:
            fitness_value: Raw fitness to convert
            best_known: Best raw fitness in the current population
            worst_known: Worst raw fitness in the current population
            is_maximization: Direction used to rank the population; defaults
                to this function's own. The known optimum only applies when it
                matches the function's direction.

        Returns:
            100 at the known optimum, otherwise a linear position between the
            worst value and the optimum (or the population best when the
            optimum is unknown). A flat population scores 50. With infinite
            values in play only the best scores 100 and the rest score 0.
        """
        maximize = self.maximize if is_maximization is None else is_maximization

        if not all(map(math.isfinite, (fitness_value, best_known, worst_known))):
            if best_known == worst_known:
                return 50.0
            return 100.0 if fitness_value == best_known else 0.0

        optimum = self.optimal_value() if maximize == self.maximize else math.nan
        if not math.isnan(optimum):
            if abs(fitness_value - optimum) < OPTIMUM_TOLERANCE:
                return 100.0
            if maximize:
                span = optimum - worst_known
                if span > OPTIMUM_TOLERANCE:
                    return _clamp((fitness_value - worst_known) / span * 100.0)
            else:
                span = worst_known - optimum
                if span > OPTIMUM_TOLERANCE:
                    return _clamp((worst_known - fitness_value) / span * 100.0)

        span = abs(best_known - worst_known)
        if span < OPTIMUM_TOLERANCE:
            return 50.0
        if maximize:
            return _clamp((fitness_value - worst_known) / span * 100.0)
        return _clamp((worst_known - fitness_value) / span * 100.0)

    def theoretical_range(
        self, min_value: float, max_value: float, samples: int = 1000
    ) -> tuple[float, float]:
        """Sample the domain and return ``(best, worst)`` observed values."""
        xs = np.linspace(min_value, max_value, samples + 1)
        values = np.array([self.evaluate(float(x)) for x in xs], dtype=float)
        lo, hi = float(values.min()), float(values.max())
        return (hi, lo) if self.maximize else (lo, hi)

    def __repr__(self) -> str:
        direction = "max" if self.maximize else "min"
        return f"{type(self).__name__}({self.expression!r}, {direction})"


def _clamp(percentage: float) -> float:
    return max(0.0, min(100.0, percentage))
