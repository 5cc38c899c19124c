from enum import Enum

from binevo.exceptions import StateError


class EngineState(str, Enum):
    UNINITIALIZED = "uninitialized"
    POPULATION_READY = "population_ready"
    EVOLVING = "evolving"
    TERMINATED = "terminated"


STATES_WITH_POPULATION = {
    EngineState.POPULATION_READY,
    EngineState.EVOLVING,
    EngineState.TERMINATED,
}

VALID_TRANSITIONS: dict[EngineState, set[EngineState]] = {
    EngineState.UNINITIALIZED: {
        EngineState.POPULATION_READY,
    },
    EngineState.POPULATION_READY: {
        EngineState.EVOLVING,
        EngineState.TERMINATED,
        EngineState.UNINITIALIZED,
    },
    EngineState.EVOLVING: {
        EngineState.TERMINATED,
        EngineState.UNINITIALIZED,
    },
    EngineState.TERMINATED: {
        EngineState.EVOLVING,
        EngineState.UNINITIALIZED,
    },
}


def is_valid_transition(current: EngineState, new: EngineState) -> bool:
    if current == new:
        return True
    return new in VALID_TRANSITIONS.get(current, set())


def validate_transition(current: EngineState, new: EngineState) -> None:
    if not is_valid_transition(current, new):
        valid_next = VALID_TRANSITIONS.get(current, set())
        raise StateError(
            f"Invalid engine state transition: {current.value} -> {new.value}. "
            f"Valid transitions from {current.value}: {sorted(s.value for s in valid_next)}"
        )


def has_population(state: EngineState) -> bool:
    return state in STATES_WITH_POPULATION
