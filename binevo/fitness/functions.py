from __future__ import annotations

import math

import numpy as np

from binevo.fitness.base import FitnessFunction

__all__ = [
    "QuadraticFunction",
    "SinusoidalFunction",
    "RastriginFunction",
    "PolynomialFunction",
    "ExponentialFunction",
    "LinearFunction",
    "CosineFunction",
]


class QuadraticFunction(FitnessFunction):
    """f(x) = a*x^2 + b*x + c, optimum at the vertex when a != 0."""

    def __init__(self, a: float, b: float, c: float, maximize: bool = False):
        super().__init__(
            "Quadratic Function", f"f(x) = {a:g}x^2 + {b:g}x + {c:g}", maximize
        )
        self.a, self.b, self.c = a, b, c

    def evaluate(self, x: float) -> float:
        return self.a * x * x + self.b * x + self.c

    def optimal_x(self) -> float:
        if abs(self.a) < 1e-10:
            return math.nan
        return -self.b / (2.0 * self.a)

    def optimal_value(self) -> float:
        x = self.optimal_x()
        if math.isnan(x):
            return math.nan
        return self.evaluate(x)


class SinusoidalFunction(FitnessFunction):
    """f(x) = A*sin(B*x + C) + D"""

    def __init__(
        self,
        amplitude: float = 1.0,
        frequency: float = 1.0,
        phase: float = 0.0,
        offset: float = 0.0,
        maximize: bool = True,
    ):
        super().__init__(
            "Sinusoidal Function",
            f"f(x) = {amplitude:g} * sin({frequency:g} * x + {phase:g}) + {offset:g}",
            maximize,
        )
        self.amplitude = amplitude
        self.frequency = frequency
        self.phase = phase
        self.offset = offset

    def evaluate(self, x: float) -> float:
        return self.amplitude * math.sin(self.frequency * x + self.phase) + self.offset


class RastriginFunction(FitnessFunction):
    """One-dimensional Rastrigin: many local optima, global minimum 0 at x = 0."""

    def __init__(self, a: float = 10.0, maximize: bool = False):
        super().__init__(
            "Rastrigin Function", f"f(x) = {a:g} + x^2 - {a:g} * cos(2*pi*x)", maximize
        )
        self.a = a

    def evaluate(self, x: float) -> float:
        return self.a + x * x - self.a * math.cos(2.0 * math.pi * x)

    def optimal_value(self) -> float:
        return 0.0

    def optimal_x(self) -> float:
        return 0.0


class PolynomialFunction(FitnessFunction):
    """f(x) = a*x^3 + b*x^2 + c*x + d"""

    def __init__(
        self,
        a: float = 1.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 0.0,
        maximize: bool = True,
    ):
        super().__init__(
            "Polynomial Function",
            f"f(x) = {a:g}x^3 + {b:g}x^2 + {c:g}x + {d:g}",
            maximize,
        )
        self.a, self.b, self.c, self.d = a, b, c, d

    def evaluate(self, x: float) -> float:
        return ((self.a * x + self.b) * x + self.c) * x + self.d


class ExponentialFunction(FitnessFunction):
    """f(x) = A*e^(B*x) + C

    Overflows to +/-inf instead of raising once B*x passes ~709.
    """

    def __init__(
        self, a: float = 1.0, b: float = 0.1, c: float = 0.0, maximize: bool = True
    ):
        super().__init__(
            "Exponential Function", f"f(x) = {a:g} * e^({b:g} * x) + {c:g}", maximize
        )
        self.a, self.b, self.c = a, b, c

    def evaluate(self, x: float) -> float:
        if self.a == 0.0:
            return self.c
        with np.errstate(over="ignore"):
            growth = float(np.exp(self.b * x))
        return self.a * growth + self.c


class LinearFunction(FitnessFunction):
    def __init__(self, a: float = 1.0, b: float = 0.0, maximize: bool = True):
        super().__init__("Linear Function", f"f(x) = {a:g} * x + {b:g}", maximize)
        self.a, self.b = a, b

    def evaluate(self, x: float) -> float:
        return self.a * x + self.b


class CosineFunction(FitnessFunction):
    """f(x) = A*cos(B*x + C) + D"""

    def __init__(
        self,
        amplitude: float = 1.0,
        frequency: float = 1.0,
        phase: float = 0.0,
        offset: float = 0.0,
        maximize: bool = True,
    ):
        super().__init__(
            "Cosine Function",
            f"f(x) = {amplitude:g} * cos({frequency:g} * x + {phase:g}) + {offset:g}",
            maximize,
        )
        self.amplitude = amplitude
        self.frequency = frequency
        self.phase = phase
        self.offset = offset

    def evaluate(self, x: float) -> float:
        return self.amplitude * math.cos(self.frequency * x + self.phase) + self.offset
