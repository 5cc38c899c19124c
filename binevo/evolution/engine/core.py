from __future__ import annotations

from typing import Callable

from loguru import logger
import numpy as np

from binevo.evolution.engine.config import CrossoverType, GAConfig, SelectionType
from binevo.evolution.engine.metrics import EngineMetrics, GenerationStats
from binevo.evolution.engine.state import (
    EngineState,
    has_population,
    validate_transition,
)
from binevo.evolution.engine.validation import (
    validate_config,
    validate_fitness_function,
)
from binevo.evolution.operators.crossover import (
    CrossoverOperator,
    SinglePointCrossover,
    TwoPointCrossover,
    UniformCrossover,
)
from binevo.evolution.operators.mutation import BitFlipMutation
from binevo.evolution.operators.selection import (
    ElitistPoolSelector,
    ParentSelector,
    RouletteWheelSelector,
    TournamentSelector,
)
from binevo.evolution.population import Population
from binevo.exceptions import EmptyPopulationError, StateError
from binevo.fitness.base import FitnessFunction
from binevo.genome.individual import Individual

__all__ = ["EvolutionEngine", "ProgressCallback"]

ProgressCallback = Callable[[int, GenerationStats], None]


def build_selector(config: GAConfig) -> ParentSelector:
    if config.selection_type == SelectionType.TOURNAMENT:
        return TournamentSelector(config.tournament_size, config.is_maximization)
    if config.selection_type == SelectionType.ROULETTE_WHEEL:
        return RouletteWheelSelector(config.is_maximization)
    if config.selection_type == SelectionType.ELITISM:
        return ElitistPoolSelector(config.elite_count, config.is_maximization)
    raise ValueError(f"Unknown selection type: {config.selection_type}")


def build_crossover(config: GAConfig) -> CrossoverOperator:
    if config.crossover_type == CrossoverType.SINGLE_POINT:
        return SinglePointCrossover()
    if config.crossover_type == CrossoverType.TWO_POINT:
        return TwoPointCrossover()
    if config.crossover_type == CrossoverType.UNIFORM:
        return UniformCrossover()
    raise ValueError(f"Unknown crossover type: {config.crossover_type}")


class EvolutionEngine:
    """
    Generational genetic algorithm over binary chromosomes:
    - The engine owns config, population, RNG, statistics and the fitness function.
    - Every operator receives the engine's generator explicitly; a fixed
      ``seed`` makes a run reproducible.
    - Populations are replaced wholesale; elites are copied, never shared.
    """

    def __init__(
        self,
        config: GAConfig,
        fitness_function: FitnessFunction,
        *,
        seed: int | None = None,
    ):
        self._config = validate_config(config)
        self._fitness_function = validate_fitness_function(fitness_function).clone()
        self._seed = seed
        self._rng = np.random.default_rng(seed)

        self._population = Population(is_maximization=self._config.is_maximization)
        self._statistics: list[GenerationStats] = []
        self._generation = 0
        self._state = EngineState.UNINITIALIZED
        self._stop_requested = False

        self.metrics = EngineMetrics()
        self._build_operators()
        self._check_direction()

        logger.info(
            "[EvolutionEngine] Init | fitness={}, selection={}, crossover={}, population={}, bits={}",
            self._fitness_function.name,
            self._config.selection_type.value,
            self._config.crossover_type.value,
            self._config.population_size,
            self._config.chromosome_length,
        )

    # -------- read-only views --------

    @property
    def config(self) -> GAConfig:
        return self._config

    @property
    def fitness_function(self) -> FitnessFunction:
        return self._fitness_function

    @property
    def population(self) -> tuple[Individual, ...]:
        return self._population.as_tuple()

    @property
    def statistics(self) -> tuple[GenerationStats, ...]:
        return tuple(self._statistics)

    @property
    def current_generation(self) -> int:
        return self._generation

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def seed(self) -> int | None:
        return self._seed

    # -------- run loop --------

    def run(self, progress_callback: ProgressCallback | None = None) -> GenerationStats:
        """Evolve from a fresh random population until a stop condition.

        Stops at ``max_generations``, when diversity drops below
        ``convergence_threshold``, or after ``stop()`` was requested. The
        callback is invoked synchronously for generation 0 and after every
        evolved generation.

        Returns:
            Statistics of the final generation; the full history stays in
            ``statistics``.
        """
        logger.info(
            "[EvolutionEngine] Start | max_generations={}, threshold={}",
            self._config.max_generations,
            self._config.convergence_threshold,
        )
        self.reset()
        stats = self.initialize_population()
        self._notify(progress_callback, stats)

        try:
            while self._generation < self._config.max_generations:
                if self._stop_requested:
                    logger.info(
                        "[EvolutionEngine] Stop requested at generation {}",
                        self._generation,
                    )
                    break
                stats = self.evolve_generation()
                self._notify(progress_callback, stats)
                if stats.diversity < self._config.convergence_threshold:
                    logger.info(
                        "[EvolutionEngine] Converged | generation={}, diversity={:.4f}",
                        self._generation,
                        stats.diversity,
                    )
                    break
        finally:
            self._transition(EngineState.TERMINATED)

        final = self._statistics[-1]
        logger.info(
            "[EvolutionEngine] Stopped | generations={}, best_fitness={:.6g}, best_x={:.6g}",
            final.generation,
            final.best_fitness,
            final.best_value,
        )
        return final

    def stop(self) -> None:
        """Request the run loop to exit before the next generation."""
        self._stop_requested = True

    def initialize_population(self) -> GenerationStats:
        """Create and evaluate a random population; records generation 0."""
        if self._state != EngineState.UNINITIALIZED:
            self.reset()

        length = self._config.chromosome_length
        self._population = Population(
            (Individual.random(length, self._rng) for _ in range(self._config.population_size)),
            is_maximization=self._config.is_maximization,
        )
        self.evaluate_population()

        stats = self.calculate_generation_stats()
        self._statistics.append(stats)
        self._transition(EngineState.POPULATION_READY)
        logger.debug(
            "[EvolutionEngine] Population ready | size={}, diversity={:.4f}",
            len(self._population),
            stats.diversity,
        )
        return stats

    def evaluate_population(self) -> None:
        """Evaluate stale individuals, then renormalize every percentage.

        Percentages are relative to the current population's best and worst,
        so they are recomputed for all members, cached or not.
        """
        cfg = self._config
        stale = self._population.unevaluated()
        for individual in stale:
            individual.fitness = self._fitness_function.evaluate_individual(
                individual, cfg.min_value, cfg.max_value
            )
        self.metrics.record_evaluations(len(stale))

        if not len(self._population):
            return

        values = self._population.fitness_values()
        if cfg.is_maximization:
            best, worst = float(values.max()), float(values.min())
        else:
            best, worst = float(values.min()), float(values.max())

        for individual in self._population:
            individual.fitness_percentage = self._fitness_function.fitness_percentage(
                individual.fitness, best, worst, cfg.is_maximization
            )

    def evolve_generation(self) -> GenerationStats:
        """Build, evaluate and record the next generation."""
        if not has_population(self._state):
            raise StateError("Population has not been initialized")
        self._transition(EngineState.EVOLVING)

        cfg = self._config
        self._population.sort_by_fitness()

        elite_count = cfg.elite_count
        next_generation = Population(
            (elite.copy() for elite in self._population[:elite_count]),
            is_maximization=cfg.is_maximization,
        )
        self.metrics.record_elites(len(next_generation))

        while len(next_generation) < cfg.population_size:
            for child in self._breed():
                if len(next_generation) < cfg.population_size:
                    next_generation.append(child)

        self._population = next_generation
        self.evaluate_population()

        self._generation += 1
        self.metrics.total_generations += 1
        stats = self.calculate_generation_stats()
        self._statistics.append(stats)

        logger.debug(
            "[EvolutionEngine] Generation {} | best={:.6g}, avg={:.6g}, worst={:.6g}, diversity={:.4f}",
            stats.generation,
            stats.best_fitness,
            stats.average_fitness,
            stats.worst_fitness,
            stats.diversity,
        )
        return stats

    def _breed(self) -> tuple[Individual, Individual]:
        parent1 = self._selector(self._population, self._rng)
        parent2 = self._selector(self._population, self._rng)

        crossed = self._rng.random() < self._config.crossover_rate
        if crossed:
            child1, child2 = self._crossover(parent1, parent2, self._rng)
        else:
            child1, child2 = parent1, parent2
        self.metrics.record_pairing(crossed)

        for child in (child1, child2):
            self.metrics.record_mutation(self._mutation(child, self._rng))
        return child1, child2

    # -------- statistics --------

    def calculate_generation_stats(self) -> GenerationStats:
        if not len(self._population):
            raise EmptyPopulationError("Cannot calculate statistics for empty population")

        cfg = self._config
        values = self._population.fitness_values()
        best = self._population.best()
        percentages = np.array(
            [ind.fitness_percentage for ind in self._population], dtype=float
        )

        return GenerationStats(
            generation=self._generation,
            best_fitness=best.fitness,
            average_fitness=float(values.mean()),
            worst_fitness=self._population.worst().fitness,
            best_value=best.decode(cfg.min_value, cfg.max_value),
            diversity=self._population.diversity(),
            best_fitness_percentage=float(percentages.max()),
            average_fitness_percentage=float(percentages.mean()),
        )

    def best_individual(self) -> Individual:
        return self._population.best().copy()

    def worst_individual(self) -> Individual:
        return self._population.worst().copy()

    def diversity(self) -> float:
        if not len(self._population):
            raise EmptyPopulationError("Cannot compute diversity: population is empty")
        return self._population.diversity()

    def has_converged(self, threshold: float | None = None) -> bool:
        """Diversity below *threshold* (default: the configured one).

        Raises ``EmptyPopulationError`` before a population exists.
        """
        if threshold is None:
            threshold = self._config.convergence_threshold
        return self.diversity() < threshold

    # -------- reconfiguration --------

    def reset(self) -> None:
        """Drop population, statistics and counters; keeps RNG state."""
        self._population = Population(is_maximization=self._config.is_maximization)
        self._statistics.clear()
        self._generation = 0
        self._stop_requested = False
        self.metrics = EngineMetrics()
        self._transition(EngineState.UNINITIALIZED)

    def set_fitness_function(self, fitness_function: FitnessFunction) -> None:
        """Swap the evaluator; every cached fitness is invalidated and recomputed."""
        self._fitness_function = validate_fitness_function(fitness_function).clone()
        self._check_direction()
        for individual in self._population:
            individual.invalidate_fitness()
        if len(self._population):
            self.evaluate_population()
        logger.info(
            "[EvolutionEngine] Fitness function set | {}", self._fitness_function.name
        )

    def update_config(self, config: GAConfig) -> None:
        """Replace the configuration.

        A change of population size or chromosome length resets the run. A
        change of domain or direction keeps the population but re-evaluates it.
        """
        new = validate_config(config)
        old = self._config
        self._config = new
        self._build_operators()
        self._check_direction()

        if (
            len(self._population) != new.population_size
            or new.chromosome_length != old.chromosome_length
        ):
            logger.info("[EvolutionEngine] Config changed population shape; resetting")
            self.reset()
            return

        self._population.is_maximization = new.is_maximization
        if (
            new.min_value != old.min_value
            or new.max_value != old.max_value
            or new.is_maximization != old.is_maximization
        ):
            for individual in self._population:
                individual.invalidate_fitness()
            self.evaluate_population()

    # -------- internals --------

    def _build_operators(self) -> None:
        self._selector = build_selector(self._config)
        self._crossover = build_crossover(self._config)
        self._mutation = BitFlipMutation(self._config.mutation_rate)

    def _check_direction(self) -> None:
        if self._fitness_function.is_maximization_problem() != self._config.is_maximization:
            logger.warning(
                "[EvolutionEngine] Direction mismatch | config.is_maximization={}, {}.maximize={}",
                self._config.is_maximization,
                self._fitness_function.name,
                self._fitness_function.is_maximization_problem(),
            )

    def _transition(self, new_state: EngineState) -> None:
        validate_transition(self._state, new_state)
        self._state = new_state

    @staticmethod
    def _notify(callback: ProgressCallback | None, stats: GenerationStats) -> None:
        if callback is not None:
            callback(stats.generation, stats)
