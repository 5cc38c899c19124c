from binevo.fitness.base import OPTIMUM_TOLERANCE, FitnessFunction
from binevo.fitness.functions import (
    CosineFunction,
    ExponentialFunction,
    LinearFunction,
    PolynomialFunction,
    QuadraticFunction,
    RastriginFunction,
    SinusoidalFunction,
)

__all__ = [
    "OPTIMUM_TOLERANCE",
    "FitnessFunction",
    "CosineFunction",
    "ExponentialFunction",
    "LinearFunction",
    "PolynomialFunction",
    "QuadraticFunction",
    "RastriginFunction",
    "SinusoidalFunction",
]
