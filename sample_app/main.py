"""Main module entrypoint for local runtime execution.

This module validates startup configuration, binds the listener socket and
launches the FastAPI service under uvicorn.
"""

import argparse
import logging
import socket

import uvicorn

from sample_app.bootstrap import bootstrap_create_application, bootstrap_create_identity
from sample_app.config import SettingsLoadError, config_configure_logging, config_load_settings

logger = logging.getLogger(__name__)

LISTEN_HOST = "0.0.0.0"


def main_bind_listener(host: str, port: int) -> socket.socket:
    """Bind and listen on the service TCP socket.

    Args:
        host: Interface address to bind.
        port: TCP port to bind.

    Returns:
        socket.socket: Listening socket handed to uvicorn.

    Raises:
        SystemExit: Raised with status 1 when the port cannot be bound.
    """

    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        listener.bind((host, port))
        listener.listen(socket.SOMAXCONN)
    except OSError as error:
        listener.close()
        logger.critical("Failed to listen on %s:%s: %s", host, port, error)
        raise SystemExit(1) from error
    return listener


def main(argv: list[str] | None = None) -> None:
    """Run the HTTP service with validated startup configuration.

    Args:
        argv: Optional command-line arguments; `sys.argv` is used when omitted.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised when configuration is invalid or the listener cannot bind.
    """

    argument_parser = argparse.ArgumentParser(description="Sample application HTTP service")
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=int,
        help="TCP port override; defaults to the PORT environment variable or 8080",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    try:
        settings = config_load_settings(port=parsed_arguments.port)
    except SettingsLoadError as error:
        config_configure_logging("INFO")
        logger.critical("%s", error)
        raise SystemExit(1) from error

    config_configure_logging(settings.log_level)
    identity = bootstrap_create_identity()
    application = bootstrap_create_application(identity=identity)

    logger.info("Starting %s v%s on port %s", identity.name, identity.version, settings.port)
    listener = main_bind_listener(LISTEN_HOST, settings.port)
    server = uvicorn.Server(uvicorn.Config(application, log_level=settings.log_level.lower()))
    server.run(sockets=[listener])


if __name__ == "__main__":
    main()
