"""FastAPI application factory for the sample application service.

This module composes the health, home and info routers and mounts the
read-only static file directory.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from sample_app.domain import AppIdentity, domain_utc_now

from .routers import api_create_health_router, api_create_home_router, api_create_info_router

logger = logging.getLogger(__name__)

STATIC_URL_PREFIX = "/static"


def create_api_application(
    identity: AppIdentity,
    static_directory: Path | str = "static",
    clock: Callable[[], datetime] = domain_utc_now,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        identity: Process-wide application identity shared by all handlers.
        static_directory: Directory served read-only under `/static/`.
        clock: Callable returning the current timezone-aware instant.

    Returns:
        FastAPI: Framework application instance with all routes registered.

    Raises:
        ValueError: Raised when identity is missing.
    """

    if identity is None:
        raise ValueError("identity must not be None")

    application = FastAPI(title=identity.name, version=identity.version, redirect_slashes=False)
    application.include_router(api_create_health_router(clock=clock))
    application.include_router(api_create_home_router(identity=identity, clock=clock))
    application.include_router(api_create_info_router(identity=identity, clock=clock))

    static_path = Path(static_directory)
    if static_path.is_dir():
        application.mount(STATIC_URL_PREFIX, StaticFiles(directory=static_path), name="static")
    else:
        logger.warning("Static directory %s not found; %s/ requests will return 404", static_path, STATIC_URL_PREFIX)

    return application
