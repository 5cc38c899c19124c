"""
Shared fixtures for binevo tests.

Every random draw in the tests goes through a seeded generator so results
are reproducible run to run.
"""

from typing import Callable

import numpy as np
import pytest

from binevo.evolution.engine import GAConfig
from binevo.evolution.population import Population
from binevo.fitness.functions import LinearFunction, QuadraticFunction
from binevo.genome.individual import Individual


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def small_config() -> GAConfig:
    """A quick maximization run that never stops on convergence."""
    return GAConfig(
        population_size=20,
        chromosome_length=16,
        max_generations=15,
        crossover_rate=0.8,
        mutation_rate=0.02,
        elitism_rate=0.1,
        is_maximization=True,
        min_value=0.0,
        max_value=10.0,
        convergence_threshold=0.0,
    )


@pytest.fixture
def linear() -> LinearFunction:
    """f(x) = x, maximized."""
    return LinearFunction(a=1.0, b=0.0)


@pytest.fixture
def parabola() -> QuadraticFunction:
    """f(x) = x^2, minimized at x = 0."""
    return QuadraticFunction(a=1.0, b=0.0, c=0.0, maximize=False)


@pytest.fixture
def make_population() -> Callable[..., Population]:
    """
    Factory fixture building an evaluated population.

    Takes ``(bit_strings, fitness_values, is_maximization=True)``; fitness is
    assigned directly so no evaluator is involved.
    """

    def _make(bit_strings, fitness_values, is_maximization: bool = True) -> Population:
        individuals = []
        for bits, value in zip(bit_strings, fitness_values):
            individual = Individual.from_string(bits)
            individual.fitness = value
            individuals.append(individual)
        return Population(individuals, is_maximization=is_maximization)

    return _make
