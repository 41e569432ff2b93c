"""Standard-library logging setup.

Routers and the error handlers log through `logging`; spans and service
events go through logfire directly. Both end up in the same place once
the root logger forwards to logfire.
"""

import logging
import sys

import logfire

from commentkit.config import Settings

QUIET_LOGGERS = ("httpx", "httpcore", "asyncio", "sqlalchemy.engine")


def log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the API process.

    Records go to stdout and are forwarded to logfire. Call after
    configure_logfire so the forwarding handler has somewhere to send to.

    Args:
        settings: Application settings
    """
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout), logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("commentkit").setLevel(level)
    logging.getLogger(__name__).info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )
