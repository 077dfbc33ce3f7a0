"""Domain types, models, and errors for the drafting pipeline."""

from maildraft.domain.errors import (
    ConfigurationError,
    DraftingError,
    DraftValidationError,
    EmptyModelResponseError,
    InvalidTransitionError,
    RemoteServiceError,
)
from maildraft.domain.models import (
    ClassifiedError,
    GenerationRequest,
    GenerationResult,
    ParsedEmail,
    Recipient,
)
from maildraft.domain.types import GenerationState, ResultSource, Tone

__all__ = [
    "ClassifiedError",
    "ConfigurationError",
    "DraftValidationError",
    "DraftingError",
    "EmptyModelResponseError",
    "GenerationRequest",
    "GenerationResult",
    "GenerationState",
    "InvalidTransitionError",
    "ParsedEmail",
    "Recipient",
    "RemoteServiceError",
    "ResultSource",
    "Tone",
]
