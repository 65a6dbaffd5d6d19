"""Structured logging module for screencap.

Provides configurable logging with JSON format support and file rotation.
"""

from screencap.logging.config import configure_logging
from screencap.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
