"""
Logger interface for faults.

Abstract base class defining the logging contract used at error boundaries,
plus ``failure()``, which reports an error as a structured ``fault`` record.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from faults.matching import failures

LEVELS = ("debug", "info", "warning", "error", "critical")


def describe(err: Optional[BaseException]) -> Dict[str, Any]:
    """Structured description of an error's failure chain.

    Returns:
        Dictionary with:
        - code: outermost failure kind, or None when uncategorized
        - chain: codes of every failure in the chain, outermost first
        - details: payload of the outermost failure (violations, retry delay)
        - error: rendered error message, or None
    """
    found = failures(err)
    return {
        "code": found[0].code if found else None,
        "chain": [f.code for f in found],
        "details": found[0].details() if found else {},
        "error": str(err) if err is not None else None,
    }


class Logger(ABC):
    """Abstract base class for logging interface.

    Example:
        class MyLogger(Logger):
            def info(self, message: str, **kwargs: Any) -> None:
                print(f"INFO: {message}")
            # ... implement other methods
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message.

        Args:
            message: The message to log
            **kwargs: Additional key-value pairs to include in the log
        """

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""

    def failure(
        self,
        message: str,
        err: Optional[BaseException],
        level: str = "error",
        **kwargs: Any,
    ) -> None:
        """Log an error together with its failure chain.

        The error is attached as a ``fault`` field (see ``describe``).

        Args:
            message: The message to log
            err: The error being reported
            level: One of debug, info, warning, error, critical
            **kwargs: Additional key-value pairs to include in the log

        Raises:
            ValueError: If level is not a known level name
        """
        if level not in LEVELS:
            raise ValueError(f"level must be one of {', '.join(LEVELS)}, got {level!r}")
        getattr(self, level)(message, fault=describe(err), **kwargs)
