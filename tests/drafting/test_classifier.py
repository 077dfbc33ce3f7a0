"""Tests for model-call failure classification."""

from __future__ import annotations

import httpx
import pytest

from maildraft.domain.errors import (
    ConfigurationError,
    EmptyModelResponseError,
    RemoteServiceError,
)
from maildraft.drafting.classifier import RATE_LIMIT_MESSAGE, classify_error


class TestRateLimitDetection:
    """is_rate_limited is driven purely by the error message."""

    @pytest.mark.parametrize(
        "message",
        [
            "OpenRouter error 429: Too Many Requests",
            "429",
            "Rate limit exceeded",
            "RATE-LIMIT reached for model",
            "ratelimit hit",
            "temporarily rate-limited upstream",
            "You are being Rate Limited",
        ],
    )
    def test_rate_limited_messages(self, message: str) -> None:
        classified = classify_error(message)
        assert classified.is_rate_limited is True
        assert classified.user_message == RATE_LIMIT_MESSAGE

    @pytest.mark.parametrize(
        "message",
        [
            "network unreachable",
            "OpenRouter error 500: Internal Server Error",
            "OPENROUTER_API_KEY not set in env",
            "Empty response from AI",
            "rate of change too high",
        ],
    )
    def test_generic_messages(self, message: str) -> None:
        classified = classify_error(message)
        assert classified.is_rate_limited is False
        assert classified.user_message == f"AI generation failed ({message}). Using local fallback."


class TestExceptionInputs:
    """Exceptions are classified by their string form."""

    def test_remote_429_is_rate_limited(self) -> None:
        error = RemoteServiceError(429, '{"error":{"message":"Provider returned error"}}')
        assert classify_error(error).is_rate_limited is True

    def test_rate_limit_in_body_only(self) -> None:
        error = RemoteServiceError(503, "upstream is temporarily rate-limited")
        assert classify_error(error).is_rate_limited is True

    def test_configuration_error_is_generic(self) -> None:
        classified = classify_error(ConfigurationError("OPENROUTER_API_KEY not set in env"))
        assert classified.is_rate_limited is False
        assert "OPENROUTER_API_KEY not set in env" in classified.user_message

    def test_empty_response_is_generic(self) -> None:
        classified = classify_error(EmptyModelResponseError(""))
        assert classified.is_rate_limited is False
        assert "Empty response from AI" in classified.user_message

    def test_transport_error(self) -> None:
        classified = classify_error(httpx.ConnectError("network unreachable"))
        assert classified.is_rate_limited is False

    def test_exception_without_message_uses_type_name(self) -> None:
        classified = classify_error(TimeoutError())
        assert classified.user_message == "AI generation failed (TimeoutError). Using local fallback."
