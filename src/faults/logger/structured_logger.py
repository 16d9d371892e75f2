"""
Structured logger for failure reports.

Writes through the standard library ``logging`` module to stdout and an
optional file, as text or one JSON object per line, configured by
``faults.config.LogSettings``.
"""

import logging
import sys
from typing import Any, Dict, Optional

from faults.config import LogSettings

from .formatters import RESERVED_KEYS, JsonFormatter, TextFormatter
from .interface import Logger


class StructuredLogger(Logger):
    """Logger implementation rendering fault records as text or JSON.

    Example:
        logger = StructuredLogger("billing-api", LogSettings(format="json"))
        logger.failure("request failed", err, path="/invoices/42")
    """

    def __init__(self, name: str = "faults", settings: Optional[LogSettings] = None):
        """Initialize the structured logger.

        Args:
            name: Logger name
            settings: Level, format and file (default: LogSettings())
        """
        self.settings = settings if settings is not None else LogSettings()
        self._logger = logging.getLogger(name)
        self._logger.setLevel(self.settings.numeric_level)

        # Clear existing handlers to avoid duplication if re-initialized
        if self._logger.hasHandlers():
            self._logger.handlers.clear()

        self._logger.propagate = False

        if self.settings.format == "json":
            formatter: logging.Formatter = JsonFormatter()
        else:
            formatter = TextFormatter()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        self._logger.addHandler(console_handler)

        if self.settings.file:
            try:
                file_handler = logging.FileHandler(self.settings.file)
            except OSError as e:
                print(f"Failed to setup log file {self.settings.file}: {e}", file=sys.stderr)
            else:
                file_handler.setFormatter(formatter)
                self._logger.addHandler(file_handler)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        extra: Dict[str, Any] = {}
        for k, v in kwargs.items():
            # Prefix reserved keys to preserve them but avoid collision
            extra[f"_{k}" if k in RESERVED_KEYS else k] = v
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)
