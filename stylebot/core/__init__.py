"""Shared library utilities."""

from stylebot.core.exceptions import InvalidPayloadError, StylebotError
from stylebot.core.logging import get_logger

__all__ = [
    "get_logger",
    "InvalidPayloadError",
    "StylebotError",
]
