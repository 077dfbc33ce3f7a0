"""Generation service boundary: the ``ModelClient`` protocol and its
OpenRouter chat-completions implementation.

One request, one response: no retries and no streaming.  Failure handling
belongs to the orchestrator, which falls back to the local generator.
"""

from __future__ import annotations

from typing import Any, Protocol

import httpx
import structlog
from pydantic import SecretStr

from maildraft.config import Settings
from maildraft.domain.errors import ConfigurationError, RemoteServiceError
from maildraft.llm.prompts import SYSTEM_PROMPT

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "mistralai/mistral-small-3.2-24b-instruct:free"
DEFAULT_MAX_TOKENS = 700
DEFAULT_TEMPERATURE = 0.2
DEFAULT_TIMEOUT_SECONDS = 60.0

# Returned when the service answers without message content.
NO_ANSWER_PLACEHOLDER = "No answer from model."


class ModelClient(Protocol):
    """Anything that can turn a prompt into model text."""

    async def invoke(self, prompt_text: str) -> str:
        """Send *prompt_text* and return the model's raw text."""
        ...


def extract_content(payload: Any) -> str:
    """Return the first completion's message content from a response envelope.

    Falls back to ``NO_ANSWER_PLACEHOLDER`` when the envelope has no
    choices, no message, or non-string content.
    """
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return NO_ANSWER_PLACEHOLDER
    if not isinstance(content, str):
        return NO_ANSWER_PLACEHOLDER
    return content


class OpenRouterClient:
    """``ModelClient`` backed by the OpenRouter chat-completions API.

    Args:
        api_key: Bearer credential.  A blank key is accepted here and
            reported as ``ConfigurationError`` on ``invoke``, before any
            network I/O.
        model: Model identifier.
        base_url: API root; ``/chat/completions`` is appended.
        max_tokens: Completion token cap.
        temperature: Sampling temperature.
        timeout: Request timeout in seconds.
        http_client: Optional shared ``httpx.AsyncClient``.  When omitted a
            client is opened per call.
    """

    def __init__(
        self,
        api_key: SecretStr | str,
        *,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key if isinstance(api_key, SecretStr) else SecretStr(api_key)
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: httpx.AsyncClient | None = None
    ) -> OpenRouterClient:
        """Build a client from application settings."""
        return cls(
            settings.openrouter_api_key,
            model=settings.openrouter_model,
            base_url=settings.openrouter_base_url,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            timeout=settings.request_timeout_seconds,
            http_client=http_client,
        )

    @property
    def is_configured(self) -> bool:
        """Return True when a non-blank API key is present."""
        return bool(self._api_key.get_secret_value().strip())

    def build_payload(self, prompt_text: str) -> dict[str, Any]:
        """Build the JSON request body for *prompt_text*."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt_text},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    async def invoke(self, prompt_text: str) -> str:
        """Send one chat-completion request.

        Args:
            prompt_text: The composed user message.

        Returns:
            The first choice's message content, or ``NO_ANSWER_PLACEHOLDER``.

        Raises:
            ConfigurationError: If no API key is configured.
            RemoteServiceError: If the service returns a non-2xx status.
            httpx.HTTPError: On transport failures.
        """
        if not self.is_configured:
            raise ConfigurationError("OPENROUTER_API_KEY not set in env")

        if self._http_client is not None:
            response = await self._post(self._http_client, prompt_text)
        else:
            async with httpx.AsyncClient() as client:
                response = await self._post(client, prompt_text)

        if not response.is_success:
            logger.warning(
                "Generation service returned an error",
                status_code=response.status_code,
                model=self.model,
            )
            raise RemoteServiceError(response.status_code, response.text)

        return extract_content(response.json())

    async def _post(self, client: httpx.AsyncClient, prompt_text: str) -> httpx.Response:
        return await client.post(
            f"{self.base_url}/chat/completions",
            headers={
                "Authorization": f"Bearer {self._api_key.get_secret_value()}",
                "Content-Type": "application/json",
            },
            json=self.build_payload(prompt_text),
            timeout=self.timeout,
        )
