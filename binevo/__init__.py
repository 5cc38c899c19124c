"""binevo: binary-encoded genetic algorithm for one-dimensional function optimization."""

from binevo.evolution.engine import (
    CrossoverType,
    EngineState,
    EvolutionEngine,
    GAConfig,
    GenerationStats,
    SelectionType,
)
from binevo.exceptions import BinEvoError, ConfigError, OperatorError, StateError
from binevo.fitness import FitnessFunction
from binevo.genome import Chromosome, Individual

__version__ = "0.1.0"

__all__ = [
    "BinEvoError",
    "Chromosome",
    "ConfigError",
    "CrossoverType",
    "EngineState",
    "EvolutionEngine",
    "FitnessFunction",
    "GAConfig",
    "GenerationStats",
    "Individual",
    "OperatorError",
    "SelectionType",
    "StateError",
]
