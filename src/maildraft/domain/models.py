"""Pydantic v2 models for the records that flow through the drafting pipeline."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from maildraft.domain.types import ResultSource, Tone


class Recipient(BaseModel):
    """A single destination address.

    No address-syntax validation is performed; any non-blank token is
    accepted.
    """

    model_config = ConfigDict(frozen=True)

    email: str

    @field_validator("email")
    @classmethod
    def email_must_not_be_blank(cls, v: str) -> str:
        """Reject addresses that are empty after trimming."""
        if not v.strip():
            raise ValueError("email must not be blank")
        return v


class GenerationRequest(BaseModel):
    """Inputs for one draft generation.

    Empty recipients or a blank prompt are accepted here and rejected by the
    orchestrator, so callers get a ``DraftValidationError`` rather than a
    pydantic error.
    """

    model_config = ConfigDict(frozen=True)

    recipients: list[Recipient] = Field(default_factory=list)
    tone: Tone = Tone.PROFESSIONAL
    user_prompt: str = ""


class ParsedEmail(BaseModel):
    """Subject and body extracted from model output."""

    subject: str
    body: str


class GenerationResult(BaseModel):
    """A populated draft together with its provenance."""

    subject: str = Field(description="Draft subject line, never empty")
    body: str = Field(description="Draft body text, never empty")
    raw_model_output: str = Field(
        description="Literal model text, or a JSON dump of the fallback fields",
    )
    source: ResultSource
    advisory: str | None = Field(
        default=None,
        description="Why the fallback was used; None for model results",
    )


class ClassifiedError(BaseModel):
    """Outcome of inspecting a failed model call."""

    is_rate_limited: bool
    user_message: str
