"""
Formatters that render ``fault`` records.

A record logged through ``Logger.failure`` carries a ``fault`` attribute
(code, chain, details, error). JsonFormatter nests it as an object;
TextFormatter renders it inline after the message:

    2026-01-05 10:00:00,000 [WARNING] [billing] request failed [BAD_REQUEST<-NOT_FOUND]
    violation="email - Invalid" error="Invalid: resource not found" status=400
"""

import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

from faults.violations import format_duration

# LogRecord attributes that must not be overwritten by extra kwargs
RESERVED_KEYS = frozenset({
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module",
    "msecs", "message", "msg", "name", "pathname", "process",
    "processName", "relativeCreated", "stack_info", "thread",
    "threadName", "taskName",
})

UNCATEGORIZED = "uncategorized"


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in RESERVED_KEYS and key != "fault"
    }


def _pair(key: str, value: Any) -> str:
    text = str(value)
    if not text or " " in text or '"' in text:
        text = json.dumps(text)
    return f"{key}={text}"


def fault_parts(fault: Dict[str, Any]) -> List[str]:
    """Inline text segments for a fault record."""
    chain = fault.get("chain") or [UNCATEGORIZED]
    parts = ["[" + "<-".join(chain) + "]"]

    details = fault.get("details") or {}
    for violation in details.get("violations", ()):
        parts.append(_pair("violation", " - ".join(str(v) for v in violation.values())))
    seconds = details.get("retry_delay_seconds")
    if seconds:
        parts.append(_pair("retry_in", format_duration(timedelta(seconds=seconds))))

    if fault.get("error") is not None:
        parts.append(_pair("error", fault["error"]))
    return parts


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON objects, with the fault as a nested object."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        fault = getattr(record, "fault", None)
        if fault is not None:
            log_data["fault"] = fault

        log_data.update(_extras(record))
        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Text formatter that renders the fault chain and extra kwargs inline."""

    def __init__(self, fmt: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"):
        super().__init__(fmt)

    def format(self, record: logging.LogRecord) -> str:
        parts = [super().format(record)]

        fault = getattr(record, "fault", None)
        if fault is not None:
            parts.extend(fault_parts(fault))

        parts.extend(_pair(k, v) for k, v in _extras(record).items())
        return " ".join(parts)
