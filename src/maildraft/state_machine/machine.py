"""GenerationStateMachine class with trigger, history, and valid_events."""

from __future__ import annotations

from maildraft.domain.errors import InvalidTransitionError
from maildraft.domain.types import GenerationState
from maildraft.state_machine.transitions import SUCCEEDED_STATES, TRANSITIONS


class GenerationStateMachine:
    """Finite state machine for one orchestrator's generation cycles.

    The machine being in ``GENERATING`` is the orchestrator's in-flight
    flag: at most one generation is outstanding at a time.

    Usage::

        sm = GenerationStateMachine()
        sm.trigger("start")             # -> GENERATING
        sm.trigger("fallback_used")     # -> SUCCEEDED_FALLBACK
        sm.trigger("reset")             # -> IDLE
    """

    def __init__(self, initial_state: GenerationState = GenerationState.IDLE) -> None:
        self._state: GenerationState = initial_state
        self._history: list[tuple[GenerationState, str, GenerationState]] = []

    @property
    def state(self) -> GenerationState:
        """Return the current generation state."""
        return self._state

    @property
    def is_generating(self) -> bool:
        """Return True while a generation is in flight."""
        return self._state == GenerationState.GENERATING

    @property
    def has_succeeded(self) -> bool:
        """Return True if the last cycle finished with a result."""
        return self._state in SUCCEEDED_STATES

    @property
    def history(self) -> list[tuple[GenerationState, str, GenerationState]]:
        """Return a copy of the transition history.

        Each entry is a ``(from_state, event, to_state)`` tuple recorded in
        chronological order.
        """
        return list(self._history)

    def trigger(self, event: str) -> GenerationState:
        """Apply an event to the current state and transition.

        Args:
            event: The event string (e.g. ``"start"``).

        Returns:
            The new state after the transition.

        Raises:
            InvalidTransitionError: If the transition is not allowed from
                the current state.
        """
        key = (self._state, event)
        if key not in TRANSITIONS:
            raise InvalidTransitionError(self._state, event)

        old_state = self._state
        new_state = TRANSITIONS[key]
        self._history.append((old_state, event, new_state))
        self._state = new_state
        return new_state

    def get_valid_events(self) -> list[str]:
        """Return a sorted list of events valid from the current state."""
        return sorted(event for state, event in TRANSITIONS if state == self._state)
