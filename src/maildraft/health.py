"""Health and readiness endpoints.

- ``GET /health``: Liveness probe.  Returns 200 while the process is alive,
  with the time of the last heartbeat tick.
- ``GET /ready``: Readiness probe.  Returns 200 only when the generation
  service credential is configured; 503 otherwise.  Drafts still work
  without it, but every one of them comes from the local fallback.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


def register_health_routes(app: FastAPI) -> None:
    """Register ``/health`` and ``/ready`` endpoints on *app*.

    Args:
        app: The FastAPI application instance.
    """

    @app.get("/health")
    async def health(request: Request) -> dict[str, Any]:
        """Liveness probe -- always returns 200 if the process is running."""
        last_beat = request.app.state.services.get("last_heartbeat")
        return {
            "status": "healthy",
            "last_heartbeat": last_beat.isoformat() if last_beat else None,
        }

    @app.get("/ready")
    async def ready(request: Request) -> JSONResponse:
        """Readiness probe -- checks that the model client has a credential."""
        services: dict[str, Any] = request.app.state.services
        checks: dict[str, str] = {}

        model_client = services.get("model_client")
        if model_client is not None and getattr(model_client, "is_configured", False):
            checks["openrouter"] = "ok"
        else:
            checks["openrouter"] = "fail"

        all_ok = all(v == "ok" for v in checks.values())
        status = "ready" if all_ok else "not_ready"
        code = 200 if all_ok else 503

        return JSONResponse(content={"status": status, "checks": checks}, status_code=code)
