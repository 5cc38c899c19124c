class BinEvoError(Exception):
    """Base for all binevo exceptions."""

    pass


# High-level families
class ConfigError(BinEvoError):
    """Invalid engine configuration or missing collaborators."""

    pass


class StateError(BinEvoError):
    """Operation not allowed in the current engine or individual state."""

    pass


class OperatorError(BinEvoError):
    """Genetic operator called with invalid arguments."""

    pass


# State subtypes
class FitnessNotEvaluatedError(StateError):
    """Raised when reading fitness of an individual that was never evaluated."""

    pass


class EmptyPopulationError(StateError):
    """Raised when statistics or best/worst are requested on an empty population."""

    pass


# Operator subtypes
class CrossoverPointError(OperatorError):
    """Crossover points out of range or misordered."""

    pass


class ChromosomeLengthError(OperatorError):
    """Chromosomes or masks of mismatching length."""

    pass
