"""
Logging for fault boundaries.

Usage:
    from faults.logger import get_logger

    logger = get_logger("billing-api")
    logger.failure("request failed", err, level="warning")

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FORMAT: "text" (default) or "json"
    {PREFIX}_LOG_FILE: Optional file path for log output

    Where {PREFIX} is derived from the logger name (e.g., BILLING_API for "billing-api")
"""

from typing import Optional

from faults.config import LogSettings

from .formatters import JsonFormatter, TextFormatter
from .interface import LEVELS, Logger, describe
from .structured_logger import StructuredLogger


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix ("billing-api" -> "BILLING_API")."""
    return name.upper().replace("-", "_").replace(".", "_")


def get_logger(name: str = "faults", settings: Optional[LogSettings] = None) -> Logger:
    """Get a logger for failure reports.

    Args:
        name: Logger name, also the source of the environment prefix
        settings: Explicit settings (default: read from {PREFIX}_LOG_*)
    """
    if settings is None:
        settings = LogSettings.from_env(_get_env_prefix(name))
    return StructuredLogger(name, settings)


__all__ = [
    "LEVELS",
    "Logger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "describe",
    "get_logger",
]
