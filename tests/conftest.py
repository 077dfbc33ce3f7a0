"""Shared pytest fixtures for the maildraft test suite."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import pytest

from maildraft.domain.models import GenerationRequest, Recipient
from maildraft.domain.types import Tone


class ScriptedModelClient:
    """Deterministic ``ModelClient`` double.

    Returns *response* or raises *error*, recording every prompt.  When
    *gate* is given, ``invoke`` waits for it before answering, which keeps a
    generation in flight for as long as a test needs.
    """

    def __init__(
        self,
        response: str = "",
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.response = response
        self.error = error
        self.gate = gate
        self.prompts: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    async def invoke(self, prompt_text: str) -> str:
        self.prompts.append(prompt_text)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def make_client() -> Callable[..., ScriptedModelClient]:
    """Factory for ``ScriptedModelClient`` instances."""
    return ScriptedModelClient


@pytest.fixture
def sample_request() -> GenerationRequest:
    """A representative casual request to a single recipient."""
    return GenerationRequest(
        recipients=[Recipient(email="jane.doe@x.com")],
        tone=Tone.CASUAL,
        user_prompt="need the report by friday please",
    )


@pytest.fixture
def multi_recipient_request() -> GenerationRequest:
    """A professional request to two recipients."""
    return GenerationRequest(
        recipients=[Recipient(email="ops_lead@corp.io"), Recipient(email="sam@corp.io")],
        tone=Tone.PROFESSIONAL,
        user_prompt="Please confirm the deployment window for next Tuesday.",
    )


@pytest.fixture
def anyio_backend() -> str:
    """Run ``@pytest.mark.anyio`` tests on asyncio, which the suite relies on."""
    return "asyncio"
