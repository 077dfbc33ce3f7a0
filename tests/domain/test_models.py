"""Tests for domain models, enums, and the error hierarchy."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from maildraft.domain.errors import (
    ConfigurationError,
    DraftingError,
    DraftValidationError,
    EmptyModelResponseError,
    InvalidTransitionError,
    RemoteServiceError,
)
from maildraft.domain.models import GenerationRequest, GenerationResult, Recipient
from maildraft.domain.types import GenerationState, ResultSource, Tone


class TestRecipient:
    """Recipient accepts any non-blank token."""

    def test_accepts_unvalidated_address(self) -> None:
        assert Recipient(email="not-an-address").email == "not-an-address"

    @pytest.mark.parametrize("email", ["", "   ", "\n"])
    def test_rejects_blank_email(self, email: str) -> None:
        with pytest.raises(ValidationError):
            Recipient(email=email)

    def test_is_frozen(self) -> None:
        recipient = Recipient(email="a@b.c")
        with pytest.raises(ValidationError):
            recipient.email = "x@y.z"  # type: ignore[misc]


class TestGenerationRequest:
    """GenerationRequest leaves precondition checks to the orchestrator."""

    def test_defaults(self) -> None:
        request = GenerationRequest()
        assert request.recipients == []
        assert request.tone == Tone.PROFESSIONAL
        assert request.user_prompt == ""

    def test_tone_from_display_name(self) -> None:
        request = GenerationRequest(tone="Urgent")  # type: ignore[arg-type]
        assert request.tone is Tone.URGENT


class TestGenerationResult:
    def test_advisory_defaults_to_none(self) -> None:
        result = GenerationResult(
            subject="S", body="B", raw_model_output="raw", source=ResultSource.MODEL
        )
        assert result.advisory is None

    def test_source_serializes_as_plain_string(self) -> None:
        result = GenerationResult(
            subject="S", body="B", raw_model_output="{}", source=ResultSource.FALLBACK
        )
        assert result.model_dump(mode="json")["source"] == "fallback"


class TestEnums:
    def test_tone_values_are_display_names(self) -> None:
        assert [t.value for t in Tone] == [
            "Professional",
            "Casual",
            "Friendly",
            "Urgent",
            "Concise",
        ]

    def test_generation_states(self) -> None:
        assert {s.value for s in GenerationState} == {
            "idle",
            "generating",
            "succeeded_model",
            "succeeded_fallback",
        }


class TestErrors:
    """All domain errors share the DraftingError base."""

    @pytest.mark.parametrize(
        "error",
        [
            DraftValidationError("missing"),
            ConfigurationError("no key"),
            RemoteServiceError(500, "boom"),
            EmptyModelResponseError(),
            InvalidTransitionError(GenerationState.IDLE, "reset"),
        ],
        ids=lambda e: type(e).__name__,
    )
    def test_hierarchy(self, error: DraftingError) -> None:
        assert isinstance(error, DraftingError)

    def test_remote_service_error_message_carries_status_and_body(self) -> None:
        error = RemoteServiceError(429, '{"error":"Rate limit exceeded"}')
        assert error.status_code == 429
        assert error.body == '{"error":"Rate limit exceeded"}'
        assert str(error) == 'OpenRouter error 429: {"error":"Rate limit exceeded"}'

    def test_empty_response_is_a_remote_service_error(self) -> None:
        error = EmptyModelResponseError("   ")
        assert isinstance(error, RemoteServiceError)
        assert error.status_code is None
        assert str(error) == "Empty response from AI"

    def test_invalid_transition_message(self) -> None:
        error = InvalidTransitionError(GenerationState.GENERATING, "start")
        assert "start" in str(error)
        assert "generating" in str(error)
