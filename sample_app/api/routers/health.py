"""Health and readiness endpoint router composition."""

from datetime import datetime
from typing import Callable

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from sample_app.api.rendering import api_render_json
from sample_app.domain import domain_format_rfc3339


def api_create_health_router(clock: Callable[[], datetime]) -> APIRouter:
    """Create liveness and readiness router.

    Args:
        clock: Callable returning the current timezone-aware instant.

    Returns:
        APIRouter: Router exposing `/health` and `/ready` endpoints.

    Raises:
        ValueError: Raised when clock is invalid.
    """

    if clock is None:
        raise ValueError("clock must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return liveness state with the current timestamp.

        Returns:
            JSONResponse: Healthy payload for operational checks.

        Raises:
            RuntimeError: Raised if the clock cannot produce a timestamp.
        """

        payload = {"status": "healthy", "time": domain_format_rfc3339(clock())}
        return api_render_json(payload, response_name="health")

    @router.get("/ready")
    def api_ready_status() -> JSONResponse:
        """Return readiness state with the current timestamp.

        The service has no downstream dependencies, so it always reports ready.

        Returns:
            JSONResponse: Ready payload for traffic admission checks.

        Raises:
            RuntimeError: Raised if the clock cannot produce a timestamp.
        """

        payload = {"status": "ready", "time": domain_format_rfc3339(clock())}
        return api_render_json(payload, response_name="ready")

    return router
