"""
Logging configuration for Stylebot.

Loggers are bound with a ``logger_name`` so records from the commenter and
the pull request collaborator can be told apart in the serialized output.
"""

import sys
from typing import Optional

from loguru import logger

from stylebot.config import settings

DEFAULT_LOGGER_NAME = "stylebot"

DEVELOPMENT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> | "
    "<blue>{name}</blue>:<blue>{function}</blue>:<blue>{line}</blue> - "
    "<level>{message}</level>"
)

PLAIN_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[logger_name]} | "
    "{name}:{function}:{line} - {message}"
)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the loguru sink for the current environment.

    Args:
        level: Explicit log level; defaults to DEBUG when ``settings.debug``
            is set and INFO otherwise.
    """
    logger.remove()
    logger.configure(extra={"logger_name": DEFAULT_LOGGER_NAME})

    log_level = level or ("DEBUG" if settings.debug else "INFO")

    if settings.environment == "development":
        logger.add(
            sys.stderr,
            format=DEVELOPMENT_FORMAT,
            level=log_level,
            colorize=True,
            backtrace=True,
            diagnose=True,
        )
    else:
        logger.add(
            sys.stderr,
            format=PLAIN_FORMAT,
            level=log_level,
            serialize=True,
        )


configure_logging()


def get_logger(name: Optional[str] = None):
    """Get a logger instance with optional name binding."""
    if name:
        return logger.bind(logger_name=f"{DEFAULT_LOGGER_NAME}.{name}")
    return logger
