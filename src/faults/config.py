"""Dataclass-based settings for fault responses.

Controls how faults.web renders failures at an HTTP boundary and how
faults.logger reports them. Every setting can be overridden from the
environment using a project-specific prefix.

Example:
    from faults.config import FaultResponseSettings, LogSettings

    settings = FaultResponseSettings.from_env(prefix="BILLING")
    log_settings = LogSettings.from_env(prefix="BILLING")
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_PREFIX = "FAULTS"


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class FaultResponseSettings:
    """HTTP error response configuration

    Attributes:
        expose_cause: Include the wrapped cause text in response bodies
        retry_after_header: Emit Retry-After when a retry delay is known
        default_status: Status for errors that carry no failure kind
    """

    expose_cause: bool = False
    retry_after_header: bool = True
    default_status: int = 500

    def __post_init__(self):
        """Validate response settings"""
        if not 100 <= self.default_status <= 599:
            raise ValueError(
                f"default_status must be a valid HTTP status code, got {self.default_status}"
            )

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_PREFIX) -> "FaultResponseSettings":
        """Load response settings from environment variables

        Args:
            prefix: Environment variable prefix (e.g., FAULTS, BILLING)

        Environment variables:
            {prefix}_EXPOSE_CAUSE: "true" to include cause text in bodies
            {prefix}_RETRY_AFTER: "false" to suppress the Retry-After header
            {prefix}_DEFAULT_STATUS: Status for uncategorized errors
        """
        return cls(
            expose_cause=_env_flag(f"{prefix}_EXPOSE_CAUSE", False),
            retry_after_header=_env_flag(f"{prefix}_RETRY_AFTER", True),
            default_status=int(os.environ.get(f"{prefix}_DEFAULT_STATUS", "500")),
        )


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass
class LogSettings:
    """Logging configuration for failure reports

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log format (text or json)
        file: Optional file path, written in addition to stdout
    """

    level: str = "INFO"
    format: str = "text"
    file: Optional[str] = None

    def __post_init__(self):
        """Validate logging settings"""
        self.level = self.level.upper()
        self.format = self.format.lower()
        if self.level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}, got {self.level!r}")
        if self.format not in LOG_FORMATS:
            raise ValueError(f"format must be one of {', '.join(LOG_FORMATS)}, got {self.format!r}")

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level)

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_PREFIX) -> "LogSettings":
        """Load logging settings from environment variables

        Environment variables:
            {prefix}_LOG_LEVEL: Logging level
            {prefix}_LOG_FORMAT: "text" or "json"
            {prefix}_LOG_FILE: Optional file path
        """
        return cls(
            level=os.environ.get(f"{prefix}_LOG_LEVEL", "INFO"),
            format=os.environ.get(f"{prefix}_LOG_FORMAT", "text"),
            file=os.environ.get(f"{prefix}_LOG_FILE") or None,
        )


__all__ = ["DEFAULT_PREFIX", "FaultResponseSettings", "LogSettings"]
