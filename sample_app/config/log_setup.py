"""Process-wide logging setup."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def config_configure_logging(log_level: str) -> None:
    """Configure root logging once for the service process.

    Args:
        log_level: Validated logging level name such as `INFO`.

    Returns:
        None: Configures the root logger as a side effect.

    Raises:
        ValueError: Raised when the level name is unknown.
    """

    logging.basicConfig(level=log_level, format=LOG_FORMAT)
