"""Transition map defining all valid (state, event) -> state mappings."""

from enum import StrEnum

from maildraft.domain.types import GenerationState


class GenerationEvent(StrEnum):
    """Events that move a generation cycle between states."""

    START = "start"
    MODEL_SUCCEEDED = "model_succeeded"
    FALLBACK_USED = "fallback_used"
    RESET = "reset"
    ABORT = "abort"


# All valid (current_state, event_string) -> next_state mappings.
# Any pair not in this dict is an invalid transition.
TRANSITIONS: dict[tuple[GenerationState, str], GenerationState] = {
    # From IDLE
    (GenerationState.IDLE, GenerationEvent.START): GenerationState.GENERATING,
    # From GENERATING
    (GenerationState.GENERATING, GenerationEvent.MODEL_SUCCEEDED): (
        GenerationState.SUCCEEDED_MODEL
    ),
    (GenerationState.GENERATING, GenerationEvent.FALLBACK_USED): (
        GenerationState.SUCCEEDED_FALLBACK
    ),
    # Awaiting task cancelled before either outcome was reached
    (GenerationState.GENERATING, GenerationEvent.ABORT): GenerationState.IDLE,
    # Succeeded states return to IDLE on the next invocation
    (GenerationState.SUCCEEDED_MODEL, GenerationEvent.RESET): GenerationState.IDLE,
    (GenerationState.SUCCEEDED_FALLBACK, GenerationEvent.RESET): GenerationState.IDLE,
}

SUCCEEDED_STATES: frozenset[GenerationState] = frozenset(
    {GenerationState.SUCCEEDED_MODEL, GenerationState.SUCCEEDED_FALLBACK}
)
