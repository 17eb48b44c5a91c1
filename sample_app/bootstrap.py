"""Application bootstrap wiring for process identity and dependency assembly."""

from fastapi import FastAPI

from sample_app import __version__
from sample_app.api import create_api_application
from sample_app.domain import AppIdentity, domain_utc_now

APPLICATION_NAME = "sample-app"

# Captured once at import so uptime covers the whole process lifetime.
PROCESS_START_TIME = domain_utc_now()


def bootstrap_create_identity() -> AppIdentity:
    """Build the process-wide application identity.

    Returns:
        AppIdentity: Immutable name, version and process start time.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return AppIdentity(name=APPLICATION_NAME, version=__version__, start_time=PROCESS_START_TIME)


def bootstrap_create_application(identity: AppIdentity | None = None) -> FastAPI:
    """Assemble the runtime application.

    Args:
        identity: Optional prebuilt identity; the process identity is used when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        ValueError: Raised when application composition fails.
    """

    return create_api_application(identity=identity or bootstrap_create_identity(), static_directory="static")
