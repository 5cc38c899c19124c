from __future__ import annotations

from enum import Enum
import math

from pydantic import BaseModel, ConfigDict, Field


class SelectionType(str, Enum):
    TOURNAMENT = "tournament"
    ROULETTE_WHEEL = "roulette_wheel"
    ELITISM = "elitism"


class CrossoverType(str, Enum):
    SINGLE_POINT = "single_point"
    TWO_POINT = "two_point"
    UNIFORM = "uniform"


class GAConfig(BaseModel):
    """Configuration options controlling one EvolutionEngine run.

    Structural limits (sizes, domain ordering) are checked by the engine and
    raise ``ConfigError``; rates are bounded here by the model itself.
    """

    population_size: int = Field(default=50, description="Individuals per generation")
    chromosome_length: int = Field(
        default=20, description="Bits per chromosome (at most 64)"
    )
    max_generations: int = Field(
        default=100, description="Generations to evolve before stopping"
    )
    crossover_rate: float = Field(
        default=0.8, ge=0.0, le=1.0, description="Probability of crossover per pairing"
    )
    mutation_rate: float = Field(
        default=0.01, ge=0.0, le=1.0, description="Probability of flipping each bit"
    )
    elitism_rate: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Fraction of best individuals copied unchanged",
    )
    is_maximization: bool = Field(
        default=True, description="True to maximize fitness, False to minimize"
    )
    selection_type: SelectionType = Field(default=SelectionType.TOURNAMENT)
    crossover_type: CrossoverType = Field(default=CrossoverType.SINGLE_POINT)
    tournament_size: int = Field(
        default=3, description="Contestants per tournament (invalid sizes fall back to 3)"
    )
    min_value: float = Field(default=-10.0, description="Lower bound of the domain")
    max_value: float = Field(default=10.0, description="Upper bound of the domain")
    convergence_threshold: float = Field(
        default=0.01,
        ge=0.0,
        le=1.0,
        description="Stop once population diversity drops below this value",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def elite_count(self) -> int:
        return int(math.floor(self.population_size * self.elitism_rate))

    @property
    def resolution(self) -> float:
        """Smallest representable step of the decoded domain."""
        return (self.max_value - self.min_value) / ((1 << self.chromosome_length) - 1)
