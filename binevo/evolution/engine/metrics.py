from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GenerationStats(BaseModel):
    """Immutable snapshot of one generation."""

    generation: int = Field(description="Generation index (0 = initial population)")
    best_fitness: float = Field(description="Best raw fitness in the population")
    average_fitness: float = Field(description="Mean raw fitness")
    worst_fitness: float = Field(description="Worst raw fitness in the population")
    best_value: float = Field(description="Decoded x of the best individual")
    diversity: float = Field(
        ge=0.0, le=1.0, description="Mean pairwise normalized Hamming distance"
    )
    best_fitness_percentage: float = Field(ge=0.0, le=100.0)
    average_fitness_percentage: float = Field(ge=0.0, le=100.0)

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, float | int]:
        return self.model_dump()


class EngineMetrics(BaseModel):
    """Running counters for one engine (reset with the run)."""

    total_generations: int = Field(
        default=0, description="Total number of generations evolved"
    )
    evaluations: int = Field(
        default=0, description="Total fitness function evaluations"
    )
    crossovers_applied: int = Field(
        default=0, description="Pairings where crossover was applied"
    )
    crossovers_skipped: int = Field(
        default=0, description="Pairings copied forward without crossover"
    )
    bits_flipped: int = Field(default=0, description="Total bits flipped by mutation")
    elites_preserved: int = Field(
        default=0, description="Total elites copied across all generations"
    )

    def record_evaluations(self, count: int) -> None:
        self.evaluations += count

    def record_pairing(self, crossed: bool) -> None:
        if crossed:
            self.crossovers_applied += 1
        else:
            self.crossovers_skipped += 1

    def record_mutation(self, bits_flipped: int) -> None:
        self.bits_flipped += bits_flipped

    def record_elites(self, count: int) -> None:
        self.elites_preserved += count

    def to_dict(self) -> dict[str, int]:
        return self.model_dump()
