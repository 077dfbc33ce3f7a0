"""Domain enumerations for the email drafting pipeline."""

from enum import StrEnum


class Tone(StrEnum):
    """Tone modifiers offered for a draft.

    The value is the display name: it is lower-cased into the prompt and
    used verbatim as the fallback subject prefix.
    """

    PROFESSIONAL = "Professional"
    CASUAL = "Casual"
    FRIENDLY = "Friendly"
    URGENT = "Urgent"
    CONCISE = "Concise"


class ResultSource(StrEnum):
    """Provenance of a generated draft."""

    MODEL = "model"
    FALLBACK = "fallback"


class GenerationState(StrEnum):
    """States of a single generation cycle."""

    IDLE = "idle"
    GENERATING = "generating"
    SUCCEEDED_MODEL = "succeeded_model"
    SUCCEEDED_FALLBACK = "succeeded_fallback"
