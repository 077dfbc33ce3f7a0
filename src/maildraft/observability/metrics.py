"""Prometheus metrics instrumentation for the drafting service.

Provides:
- ``setup_metrics(app)``: Attach prometheus-fastapi-instrumentator to a FastAPI app,
  exposing ``/metrics`` with HTTP request duration/count plus the draft counters.
- ``GENERATIONS``: Counter of completed generations, labelled by result source.
- ``RATE_LIMITED``: Counter of model calls classified as rate-limited.
- ``GENERATION_IN_PROGRESS``: Gauge that is 1 while a generation is in flight.

The orchestrator updates the business metrics at state transitions.
"""

from __future__ import annotations

from fastapi import FastAPI
from prometheus_client import Counter, Gauge
from prometheus_fastapi_instrumentator import Instrumentator

GENERATIONS: Counter = Counter(
    "maildraft_generations_total",
    "Total number of completed draft generations",
    ["source"],
)

RATE_LIMITED: Counter = Counter(
    "maildraft_rate_limited_total",
    "Total number of model calls classified as rate-limited",
)

GENERATION_IN_PROGRESS: Gauge = Gauge(
    "maildraft_generation_in_progress",
    "Number of draft generations currently awaiting the model",
)


def setup_metrics(app: FastAPI) -> None:
    """Instrument *app* with Prometheus HTTP metrics and expose ``/metrics``.

    Excludes health/ready/metrics endpoints from instrumentation to avoid
    noise in dashboards.

    Args:
        app: The FastAPI application to instrument.
    """
    Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        excluded_handlers=["/health", "/ready", "/metrics"],
    ).instrument(app).expose(app, include_in_schema=False, should_gzip=True)
