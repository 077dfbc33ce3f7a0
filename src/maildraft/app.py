"""Application entry point: the drafting HTTP service.

Configures:
- **structlog** with JSON rendering (production) or colored console (development)
- **Sentry** error forwarding when ``SENTRY_DSN`` is set
- **OpenRouter client** and the **generation orchestrator** shared by all requests
- **Prometheus** ``/metrics``, request IDs, ``/health`` and ``/ready``
- A **heartbeat** task that logs a liveness line at a fixed interval
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager, suppress
from datetime import UTC, datetime
from typing import Any

import httpx
import structlog
import uvicorn
from fastapi import FastAPI

from maildraft.config import Settings, get_settings, validate_credentials
from maildraft.drafting.orchestrator import GenerationOrchestrator
from maildraft.health import register_health_routes
from maildraft.llm.client import OpenRouterClient
from maildraft.observability.metrics import setup_metrics
from maildraft.observability.middleware import SERVICE_NAME, RequestIdMiddleware
from maildraft.observability.sentry import get_sentry_processor, init_sentry
from maildraft.routes import router as drafts_router

logger = structlog.get_logger()


def configure_logging(production: bool = False, sentry_enabled: bool = False) -> None:
    """Configure structlog for production (JSON) or development (console).

    Production mode (*production=True*): JSON rendering at INFO level.
    Development mode: colored console rendering at DEBUG level.

    Args:
        production: Enable production mode if ``True``.
        sentry_enabled: Forward ERROR events to Sentry if ``True``.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
    ]
    if sentry_enabled:
        shared_processors.append(get_sentry_processor())
    shared_processors += [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        log_level = logging.INFO
    else:
        renderer = structlog.dev.ConsoleRenderer()
        log_level = logging.DEBUG

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service=SERVICE_NAME)


def initialize_services(settings: Settings | None = None) -> dict[str, Any]:
    """Create the shared HTTP client, model client and orchestrator.

    Args:
        settings: Application settings.  If ``None``, ``get_settings()`` is used.

    Returns:
        A dict of initialized service instances keyed by name.
    """
    if settings is None:
        settings = get_settings()

    http_client = httpx.AsyncClient()
    model_client = OpenRouterClient.from_settings(settings, http_client=http_client)
    if not model_client.is_configured:
        logger.info("OPENROUTER_API_KEY not set, all drafts will use the local fallback")

    return {
        "_settings": settings,
        "http_client": http_client,
        "model_client": model_client,
        "orchestrator": GenerationOrchestrator(model_client),
        "last_heartbeat": None,
    }


async def run_heartbeat(services: dict[str, Any], interval_seconds: float) -> None:
    """Record and log a liveness tick every *interval_seconds*.

    Args:
        services: The initialized services dict; ``last_heartbeat`` is updated.
        interval_seconds: Delay between ticks.
    """
    while True:
        now = datetime.now(UTC)
        services["last_heartbeat"] = now
        logger.debug("heartbeat", at=now.isoformat())
        await asyncio.sleep(interval_seconds)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Start the heartbeat on startup; stop it and close the HTTP client on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application.
    """
    services = app.state.services
    settings: Settings = app.state.settings

    heartbeat_task: asyncio.Task[None] | None = None
    if settings.heartbeat_enabled:
        heartbeat_task = asyncio.create_task(
            run_heartbeat(services, settings.heartbeat_interval_seconds)
        )
    logger.info("FastAPI application starting")
    yield
    if heartbeat_task is not None:
        heartbeat_task.cancel()
        with suppress(asyncio.CancelledError):
            await heartbeat_task
    http_client = services.get("http_client")
    if http_client is not None:
        await http_client.aclose()
        logger.info("HTTP client closed")


def create_app(services: dict[str, Any]) -> FastAPI:
    """Create the FastAPI app with draft routes, health probes and metrics.

    Args:
        services: The initialized services dict from ``initialize_services``.

    Returns:
        The configured FastAPI application.
    """
    fastapi_app = FastAPI(title="maildraft", lifespan=lifespan)
    fastapi_app.state.services = services
    fastapi_app.state.settings = services.get("_settings") or get_settings()
    fastapi_app.add_middleware(RequestIdMiddleware)
    fastapi_app.include_router(drafts_router)
    register_health_routes(fastapi_app)
    setup_metrics(fastapi_app)
    return fastapi_app


async def main() -> None:
    """Main entry point: configure logging and serve the app with uvicorn."""
    settings = get_settings()
    sentry_enabled = init_sentry(settings.sentry_dsn, production=settings.production)
    configure_logging(production=settings.production, sentry_enabled=sentry_enabled)
    logger.info("Application starting")

    validate_credentials(settings)

    services = initialize_services(settings)
    fastapi_app = create_app(services)

    config = uvicorn.Config(
        fastapi_app,
        host="0.0.0.0",
        port=settings.http_port,
        log_level="info",
    )
    server = uvicorn.Server(config)
    await server.serve()


def run_server() -> None:
    """Console-script entry point for ``maildraft-server``."""
    asyncio.run(main())


if __name__ == "__main__":
    run_server()
