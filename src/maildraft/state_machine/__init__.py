"""Generation state machine with transition validation."""

from maildraft.state_machine.machine import GenerationStateMachine
from maildraft.state_machine.transitions import (
    SUCCEEDED_STATES,
    TRANSITIONS,
    GenerationEvent,
)

__all__ = [
    "GenerationEvent",
    "GenerationStateMachine",
    "SUCCEEDED_STATES",
    "TRANSITIONS",
]
