"""Application info and API status router composition."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from sample_app.api.rendering import api_render_json
from sample_app.domain import AppIdentity, domain_build_info_snapshot, domain_build_status_payload


def api_create_info_router(identity: AppIdentity, clock: Callable[[], datetime]) -> APIRouter:
    """Create router exposing runtime info and API status payloads.

    Args:
        identity: Process-wide application identity.
        clock: Callable returning the current timezone-aware instant.

    Returns:
        APIRouter: Router exposing `/info` and `/api/status` endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if identity is None:
        raise ValueError("identity must not be None")
    if clock is None:
        raise ValueError("clock must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/info")
    def api_info() -> JSONResponse:
        """Return application, runtime and uptime details.

        Returns:
            JSONResponse: Info snapshot payload.

        Raises:
            ValueError: Raised when uptime cannot be computed.
        """

        snapshot = domain_build_info_snapshot(identity=identity, now=clock())
        return api_render_json(snapshot.to_payload(), response_name="info")

    @router.get("/api/status")
    def api_status() -> JSONResponse:
        """Return API status with endpoint list and platform components.

        Returns:
            JSONResponse: Status payload.

        Raises:
            RuntimeError: Raised if the clock cannot produce a timestamp.
        """

        payload = domain_build_status_payload(identity=identity, now=clock())
        return api_render_json(payload, response_name="status")

    return router
