"""Domain-specific exception classes for the drafting pipeline."""

from maildraft.domain.types import GenerationState


class DraftingError(Exception):
    """Base class for all domain errors in the drafting pipeline."""


class DraftValidationError(DraftingError):
    """Raised when a generation request is missing recipients or a prompt.

    This is the only error surfaced to callers of ``generate``; nothing has
    been sent to the model when it is raised.
    """


class ConfigurationError(DraftingError):
    """Raised when a required setting (the API credential) is absent."""


class RemoteServiceError(DraftingError):
    """Raised when the generation service returns a non-success response.

    Attributes:
        status_code: HTTP status returned by the service, if any.
        body: Response body text, kept for error classification.
    """

    def __init__(self, status_code: int | None, body: str, message: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"OpenRouter error {status_code}: {body}")


class EmptyModelResponseError(RemoteServiceError):
    """Raised when the service answered but produced no usable content."""

    def __init__(self, content: str = "") -> None:
        super().__init__(None, content, "Empty response from AI")


class InvalidTransitionError(DraftingError):
    """Raised when an invalid state transition is attempted.

    Attributes:
        current_state: The state the machine was in when the transition was attempted.
        event: The event that was rejected.
    """

    def __init__(self, current_state: GenerationState, event: str) -> None:
        self.current_state = current_state
        self.event = event
        super().__init__(
            f"Cannot apply event '{event}' in state '{current_state}'"
        )
