"""Centralized, typed configuration using pydantic-settings.

Provides a single ``Settings`` class backed by ``.env`` file and environment
variables, a cached ``get_settings()`` accessor, and a ``validate_credentials()``
startup gate that enforces credential presence in production mode.

This module has no imports from the rest of the ``maildraft`` package so
that any module can depend on it.
"""

from __future__ import annotations

import sys
from functools import lru_cache

import structlog
from pydantic import SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()


class Settings(BaseSettings):
    """Application settings loaded from environment variables and ``.env`` file.

    ``SecretStr`` keeps the API key out of logs and reprs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- General ---------------------------------------------------------------
    production: bool = False
    http_port: int = 8000

    # -- OpenRouter ------------------------------------------------------------
    openrouter_api_key: SecretStr = SecretStr("")
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "mistralai/mistral-small-3.2-24b-instruct:free"
    max_tokens: int = 700
    temperature: float = 0.2
    request_timeout_seconds: float = 60.0

    # -- Heartbeat -------------------------------------------------------------
    heartbeat_enabled: bool = True
    heartbeat_interval_seconds: float = 30.0

    # -- Observability ---------------------------------------------------------
    sentry_dsn: str = ""


@lru_cache
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    Call ``get_settings.cache_clear()`` in tests to reset.

    Returns:
        The application ``Settings``.
    """
    try:
        return Settings()
    except ValidationError as exc:
        # Log only the structured errors list, never the exception text,
        # which may echo SecretStr input.
        logger.error("settings_validation_failed", errors=exc.errors())
        sys.exit(1)


def validate_credentials(settings: Settings) -> None:
    """Enforce credential presence at startup.

    In **production** mode a missing ``OPENROUTER_API_KEY`` stops the
    process.  In **development** mode it is logged as a warning; every draft
    will then come from the local fallback generator.

    Args:
        settings: The loaded application settings.
    """
    if settings.openrouter_api_key.get_secret_value().strip():
        logger.info("credential_validation_passed")
        return

    detail = "OPENROUTER_API_KEY is empty or not set"
    if settings.production:
        logger.error("credential_missing", detail=detail)
        print("\n=== STARTUP FAILED ===", file=sys.stderr)
        print("Missing required credentials for production mode:", file=sys.stderr)
        print(f"  - {detail}", file=sys.stderr)
        print("======================\n", file=sys.stderr)
        sys.exit(1)
    else:
        logger.warning("credential_missing_dev", detail=detail)
