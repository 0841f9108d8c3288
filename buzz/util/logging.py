"""Stdlib logging setup for scripts and host applications.

Engine events go through Logfire; this only decides how much of the
plain-logging output (ours and the HTTP stack's) reaches stderr.
"""

import logging

from buzz.config import Settings

# Libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def log_level(settings: Settings) -> int:
    """Pick the log level for an environment (debug overrides it)."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger and quiet the HTTP client.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).debug(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
