"""Crossover operators over bit-string individuals.

The module-level functions are the deterministic primitives: they take the
cut points (or mask) explicitly and fail fast on bad input. The operator
classes draw those arguments from the engine's random generator.

Every primitive returns two new, unevaluated offspring whose bits are
complementary at each position: one child takes parent 1's bit, the other
takes parent 2's.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

import numpy as np

from binevo.exceptions import ChromosomeLengthError, CrossoverPointError
from binevo.genome.chromosome import Chromosome
from binevo.genome.individual import Individual

__all__ = [
    "single_point_crossover",
    "two_point_crossover",
    "uniform_crossover",
    "CrossoverOperator",
    "SinglePointCrossover",
    "TwoPointCrossover",
    "UniformCrossover",
]

Offspring = tuple[Individual, Individual]


def _check_lengths(parent1: Individual, parent2: Individual) -> int:
    length = len(parent1)
    if len(parent2) != length:
        raise ChromosomeLengthError(
            f"Parents differ in length: {length} vs {len(parent2)}"
        )
    return length


def _swap_where(parent1: Individual, parent2: Individual, take_from_2: np.ndarray) -> Offspring:
    a, b = parent1.chromosome.bits, parent2.chromosome.bits
    child1 = np.where(take_from_2, b, a)
    child2 = np.where(take_from_2, a, b)
    return Individual(Chromosome(child1)), Individual(Chromosome(child2))


def single_point_crossover(parent1: Individual, parent2: Individual, point: int) -> Offspring:
    """Child 1 = parent1[:point] + parent2[point:], child 2 the complement."""
    length = _check_lengths(parent1, parent2)
    if point < 0 or point >= length:
        raise CrossoverPointError(
            f"Crossover point {point} is out of bounds for length {length}"
        )
    take_from_2 = np.arange(length) >= point
    return _swap_where(parent1, parent2, take_from_2)


def two_point_crossover(
    parent1: Individual, parent2: Individual, point1: int, point2: int
) -> Offspring:
    """Swap the closed interval ``[point1, point2]`` between the parents."""
    length = _check_lengths(parent1, parent2)
    if point1 < 0 or point2 >= length or point1 >= point2:
        raise CrossoverPointError(
            f"Invalid crossover points ({point1}, {point2}) for length {length}"
        )
    positions = np.arange(length)
    take_from_2 = (positions >= point1) & (positions <= point2)
    return _swap_where(parent1, parent2, take_from_2)


def uniform_crossover(
    parent1: Individual, parent2: Individual, mask: Iterable[bool] | np.ndarray
) -> Offspring:
    """Child 1 takes parent 1's bit where *mask* is true, else parent 2's."""
    length = _check_lengths(parent1, parent2)
    mask_arr = np.asarray(list(mask) if not isinstance(mask, np.ndarray) else mask, dtype=bool)
    if mask_arr.size != length:
        raise ChromosomeLengthError(
            f"Mask size {mask_arr.size} does not match chromosome size {length}"
        )
    return _swap_where(parent1, parent2, ~mask_arr)


def _copy_unevaluated(parent1: Individual, parent2: Individual) -> Offspring:
    return Individual(parent1.chromosome), Individual(parent2.chromosome)


class CrossoverOperator(ABC):
    """Recombines two parents using points drawn from *rng*."""

    @abstractmethod
    def __call__(
        self, parent1: Individual, parent2: Individual, rng: np.random.Generator
    ) -> Offspring:
        ...


class SinglePointCrossover(CrossoverOperator):
    def __call__(self, parent1, parent2, rng):
        length = _check_lengths(parent1, parent2)
        if length < 2:
            return _copy_unevaluated(parent1, parent2)
        point = int(rng.integers(1, length))
        return single_point_crossover(parent1, parent2, point)


class TwoPointCrossover(CrossoverOperator):
    """Two distinct cut points in ``[1, L - 1]``; degrades to single-point for L < 3."""

    def __call__(self, parent1, parent2, rng):
        length = _check_lengths(parent1, parent2)
        if length < 3:
            return SinglePointCrossover()(parent1, parent2, rng)
        point1, point2 = sorted(int(p) for p in rng.choice(np.arange(1, length), size=2, replace=False))
        return two_point_crossover(parent1, parent2, point1, point2)


class UniformCrossover(CrossoverOperator):
    def __call__(self, parent1, parent2, rng):
        length = _check_lengths(parent1, parent2)
        if length < 2:
            return _copy_unevaluated(parent1, parent2)
        mask = rng.integers(0, 2, size=length).astype(bool)
        return uniform_crossover(parent1, parent2, mask)
