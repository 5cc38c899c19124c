from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

import numpy as np

from binevo.exceptions import EmptyPopulationError
from binevo.genome.individual import Individual

__all__ = ["Population", "better_than"]


def better_than(a: float, b: float, is_maximization: bool) -> bool:
    """Strict comparison of two raw fitness values in the problem's direction."""
    return a > b if is_maximization else a < b


class Population(Sequence[Individual]):
    """Ordered collection of individuals evolved together.

    The population never merges generations; the engine replaces it as a
    whole. Ordering helpers take the optimization direction into account so
    index 0 after ``sort_by_fitness`` is always the best individual.
    """

    def __init__(
        self, individuals: Iterable[Individual] = (), *, is_maximization: bool = True
    ):
        self._individuals: list[Individual] = list(individuals)
        self.is_maximization = is_maximization

    def __len__(self) -> int:
        return len(self._individuals)

    def __getitem__(self, index):
        return self._individuals[index]

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._individuals)

    def append(self, individual: Individual) -> None:
        self._individuals.append(individual)

    def as_tuple(self) -> tuple[Individual, ...]:
        return tuple(self._individuals)

    def unevaluated(self) -> list[Individual]:
        return [ind for ind in self._individuals if not ind.is_evaluated]

    def fitness_values(self) -> np.ndarray:
        """Raw fitness of every member; raises if any member is unevaluated."""
        return np.array([ind.fitness for ind in self._individuals], dtype=float)

    def sorted_by_fitness(self) -> list[Individual]:
        """Members best-first without touching the population order (stable)."""
        return sorted(
            self._individuals,
            key=lambda ind: ind.fitness,
            reverse=self.is_maximization,
        )

    def sort_by_fitness(self) -> None:
        self._individuals = self.sorted_by_fitness()

    def best(self) -> Individual:
        self._require_members("best individual")
        values = self.fitness_values()
        idx = int(np.argmax(values) if self.is_maximization else np.argmin(values))
        return self._individuals[idx]

    def worst(self) -> Individual:
        self._require_members("worst individual")
        values = self.fitness_values()
        idx = int(np.argmin(values) if self.is_maximization else np.argmax(values))
        return self._individuals[idx]

    def gene_matrix(self) -> np.ndarray:
        """``(n, L)`` boolean matrix of all chromosomes."""
        if not self._individuals:
            return np.zeros((0, 0), dtype=bool)
        return np.stack([ind.chromosome.bits for ind in self._individuals])

    def diversity(self) -> float:
        """Mean pairwise normalized Hamming distance in [0, 1].

        Compares all C(n, 2) pairs, so cost and memory are O(n^2 * L).
        Fine for tens to low hundreds of individuals.
        """
        n = len(self._individuals)
        if n < 2:
            return 0.0
        genes = self.gene_matrix()
        length = genes.shape[1]
        if length == 0:
            return 0.0
        distances = (genes[:, None, :] != genes[None, :, :]).sum(axis=-1) / length
        upper = np.triu_indices(n, k=1)
        return float(distances[upper].mean())

    def _require_members(self, what: str) -> None:
        if not self._individuals:
            raise EmptyPopulationError(f"Cannot compute {what}: population is empty")
