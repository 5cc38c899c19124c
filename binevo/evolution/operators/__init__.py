from binevo.evolution.operators.crossover import (
    CrossoverOperator,
    SinglePointCrossover,
    TwoPointCrossover,
    UniformCrossover,
    single_point_crossover,
    two_point_crossover,
    uniform_crossover,
)
from binevo.evolution.operators.mutation import BitFlipMutation
from binevo.evolution.operators.selection import (
    DEFAULT_TOURNAMENT_SIZE,
    ElitistPoolSelector,
    ParentSelector,
    RouletteWheelSelector,
    TournamentSelector,
)

__all__ = [
    "BitFlipMutation",
    "CrossoverOperator",
    "DEFAULT_TOURNAMENT_SIZE",
    "ElitistPoolSelector",
    "ParentSelector",
    "RouletteWheelSelector",
    "SinglePointCrossover",
    "TournamentSelector",
    "TwoPointCrossover",
    "UniformCrossover",
    "single_point_crossover",
    "two_point_crossover",
    "uniform_crossover",
]
