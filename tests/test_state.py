"""Tests for the engine state machine."""

import pytest

from binevo.evolution.engine.state import (
    VALID_TRANSITIONS,
    EngineState,
    has_population,
    is_valid_transition,
    validate_transition,
)
from binevo.exceptions import StateError


@pytest.mark.parametrize(
    ("current", "new"),
    [
        (EngineState.UNINITIALIZED, EngineState.POPULATION_READY),
        (EngineState.POPULATION_READY, EngineState.EVOLVING),
        (EngineState.EVOLVING, EngineState.TERMINATED),
        (EngineState.TERMINATED, EngineState.EVOLVING),
        (EngineState.EVOLVING, EngineState.UNINITIALIZED),
        (EngineState.EVOLVING, EngineState.EVOLVING),
    ],
)
def test_allowed_transitions(current: EngineState, new: EngineState) -> None:
    assert is_valid_transition(current, new)
    validate_transition(current, new)


@pytest.mark.parametrize(
    ("current", "new"),
    [
        (EngineState.UNINITIALIZED, EngineState.EVOLVING),
        (EngineState.UNINITIALIZED, EngineState.TERMINATED),
        (EngineState.EVOLVING, EngineState.POPULATION_READY),
    ],
)
def test_rejected_transitions(current: EngineState, new: EngineState) -> None:
    assert not is_valid_transition(current, new)
    with pytest.raises(StateError, match="Invalid engine state transition"):
        validate_transition(current, new)


def test_every_state_has_an_entry() -> None:
    assert set(VALID_TRANSITIONS) == set(EngineState)


def test_only_uninitialized_lacks_population() -> None:
    assert not has_population(EngineState.UNINITIALIZED)
    assert all(
        has_population(state) for state in EngineState if state is not EngineState.UNINITIALIZED
    )
