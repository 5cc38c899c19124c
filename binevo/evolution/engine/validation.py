from __future__ import annotations

import math

from loguru import logger

from binevo.evolution.engine.config import GAConfig
from binevo.exceptions import ConfigError
from binevo.fitness.base import FitnessFunction
from binevo.genome.chromosome import MAX_CHROMOSOME_LENGTH

__all__ = ["validate_config", "validate_fitness_function"]


def validate_config(config: GAConfig | None) -> GAConfig:
    """Fail fast on structurally invalid configuration; never corrects values."""
    if config is None:
        raise ConfigError("GA configuration cannot be None")

    problems: list[str] = []
    if config.population_size <= 0:
        problems.append(f"population_size must be positive, got {config.population_size}")
    if config.chromosome_length <= 0:
        problems.append(
            f"chromosome_length must be positive, got {config.chromosome_length}"
        )
    elif config.chromosome_length > MAX_CHROMOSOME_LENGTH:
        problems.append(
            f"chromosome_length must be at most {MAX_CHROMOSOME_LENGTH}, got {config.chromosome_length}"
        )
    if config.max_generations <= 0:
        problems.append(f"max_generations must be positive, got {config.max_generations}")
    if not (math.isfinite(config.min_value) and math.isfinite(config.max_value)):
        problems.append(
            f"domain bounds must be finite, got [{config.min_value}, {config.max_value}]"
        )
    elif config.min_value >= config.max_value:
        problems.append(
            f"min_value ({config.min_value}) must be < max_value ({config.max_value})"
        )

    if problems:
        raise ConfigError("Invalid GA configuration: " + "; ".join(problems))

    if config.tournament_size <= 0 or config.tournament_size > config.population_size:
        logger.warning(
            "[validation] tournament_size={} outside [1, {}]; tournaments will use {}",
            config.tournament_size,
            config.population_size,
            min(3, config.population_size),
        )
    return config


def validate_fitness_function(fitness_function: FitnessFunction | None) -> FitnessFunction:
    if fitness_function is None:
        raise ConfigError("Fitness function cannot be None")
    if not isinstance(fitness_function, FitnessFunction):
        raise ConfigError(
            f"Expected a FitnessFunction, got {type(fitness_function).__name__}"
        )
    return fitness_function
