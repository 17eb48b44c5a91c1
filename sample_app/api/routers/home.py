"""Home page router composition."""

from __future__ import annotations

import logging
from datetime import datetime
from html import escape
from string import Template
from typing import Callable

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from sample_app.api.rendering import INTERNAL_ERROR_DETAIL
from sample_app.domain import (
    PLATFORM_COMPONENT_DESCRIPTIONS,
    AppIdentity,
    domain_format_rfc3339,
    domain_format_uptime,
)

logger = logging.getLogger(__name__)

HOME_ENDPOINTS: tuple[tuple[str, str], ...] = (
    ("/", "This homepage"),
    ("/health", "Health check endpoint"),
    ("/ready", "Readiness check endpoint"),
    ("/info", "Application information (JSON)"),
    ("/api/status", "API status endpoint (JSON)"),
)

HOME_PAGE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html>
<head>
    <title>apqx-platform Sample App</title>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <style>
        body { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; background-color: #f5f5f5; }
        .container { background-color: white; padding: 30px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
        h1 { color: #333; }
        .info { background-color: #e7f3ff; padding: 15px; border-radius: 4px; margin: 20px 0; }
        .endpoint { background-color: #f8f9fa; padding: 10px; margin: 10px 0; border-left: 4px solid #007bff; }
    </style>
</head>
<body>
    <div class="container">
        <h1>apqx-platform Sample Application</h1>

        <div class="info">
            <strong>GitOps Platform Status:</strong> Running successfully!<br>
            <strong>Application:</strong> $name v$version<br>
            <strong>Started:</strong> $started<br>
            <strong>Uptime:</strong> $uptime
        </div>

        <h2>Available Endpoints</h2>
$endpoints

        <h2>Platform Components</h2>
        <ul>
$components
        </ul>

        <p><em>This application is deployed using GitOps principles with immutable container images.</em></p>
    </div>
</body>
</html>
"""
)


def api_render_home_page(identity: AppIdentity, now: datetime) -> str:
    """Render the home page HTML for one request.

    Args:
        identity: Process-wide application identity.
        now: Current instant used for uptime computation.

    Returns:
        str: Complete HTML document.

    Raises:
        KeyError: Raised when a template placeholder is not supplied.
        ValueError: Raised when uptime cannot be computed.
    """

    endpoint_rows = "\n".join(
        f'        <div class="endpoint"><strong>GET {escape(path)}</strong> - {escape(description)}</div>'
        for path, description in HOME_ENDPOINTS
    )
    component_rows = "\n".join(
        f"            <li><strong>{escape(label)}</strong> - {escape(description)}</li>"
        for label, description in PLATFORM_COMPONENT_DESCRIPTIONS.items()
    )
    return HOME_PAGE_TEMPLATE.substitute(
        name=escape(identity.name),
        version=escape(identity.version),
        started=domain_format_rfc3339(identity.start_time),
        uptime=domain_format_uptime(now - identity.start_time),
        endpoints=endpoint_rows,
        components=component_rows,
    )


def api_create_home_router(identity: AppIdentity, clock: Callable[[], datetime]) -> APIRouter:
    """Create router exposing the HTML home page.

    Args:
        identity: Process-wide application identity.
        clock: Callable returning the current timezone-aware instant.

    Returns:
        APIRouter: Router exposing `/` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if identity is None:
        raise ValueError("identity must not be None")
    if clock is None:
        raise ValueError("clock must not be None")

    router = APIRouter(tags=["home"])

    @router.get("/", response_class=HTMLResponse)
    def api_home_page() -> Response:
        """Return the home page with identity and uptime details.

        Returns:
            Response: HTML page, or plain-text 500 when rendering fails.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        try:
            html_page = api_render_home_page(identity=identity, now=clock())
        except (KeyError, TypeError, ValueError) as error:
            logger.error("Error writing home page response: %s", error)
            return PlainTextResponse(INTERNAL_ERROR_DETAIL, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return HTMLResponse(content=html_page, status_code=status.HTTP_200_OK)

    return router
