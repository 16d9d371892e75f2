"""Violation records attached to failures.

Plain data describing one specific detail of a failure: a bad field, a failed
precondition, a conflicting resource or an exhausted quota. Each record has a
display form joining its fields with " - ".
"""

from dataclasses import asdict, dataclass, field
from datetime import timedelta
from typing import Any, Dict, Union

# Accepted for retry delays; plain numbers are seconds.
DelayLike = Union[timedelta, int, float]


@dataclass(frozen=True)
class FieldViolation:
    """A single bad request field.

    Attributes:
        field: Path to the offending field (e.g. "address.postcode")
        description: Why the field is bad
    """

    field: str
    description: str

    def __str__(self) -> str:
        return " - ".join([self.field, self.description])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PreconditionViolation:
    """A single failed precondition.

    Attributes:
        type: Service-specific precondition type (e.g. "TOS")
        subject: What failed, relative to the type (e.g. "user:42")
        description: How the precondition failed and how to fix it
    """

    type: str
    subject: str
    description: str

    def __str__(self) -> str:
        return " - ".join([self.type, self.subject, self.description])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ConflictViolation:
    """A conflict on a single resource.

    Attributes:
        resource: Resource the conflict occurred on (e.g. "invoice:<uuid>")
        description: Why the request conflicts
    """

    resource: str
    description: str

    def __str__(self) -> str:
        return " - ".join([self.resource, self.description])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class QuotaViolation:
    """A single quota check that failed.

    Attributes:
        subject: Subject the quota check failed on (e.g. "clientip:10.0.0.1")
        description: How the quota check failed (e.g. "Daily limit exceeded")
    """

    subject: str
    description: str

    def __str__(self) -> str:
        return " - ".join([self.subject, self.description])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RetryInfo:
    """When a client may retry a failed call.

    A zero or negative delay means no recommendation. Clients should still
    back off exponentially when retries keep failing.
    """

    retry_delay: timedelta = field(default_factory=timedelta)

    @property
    def has_delay(self) -> bool:
        return self.retry_delay > timedelta(0)

    def to_dict(self) -> Dict[str, Any]:
        return {"retry_delay_seconds": self.retry_delay.total_seconds()}


def as_timedelta(delay: DelayLike) -> timedelta:
    """Normalize a retry delay to a timedelta. Numbers are seconds."""
    if isinstance(delay, timedelta):
        return delay
    return timedelta(seconds=delay)


def format_duration(delay: timedelta) -> str:
    """Render a duration in compact form.

    Examples:
        timedelta(seconds=2)         -> "2s"
        timedelta(seconds=1.5)       -> "1.5s"
        timedelta(seconds=90)        -> "1m30s"
        timedelta(hours=1)           -> "1h0m0s"
        timedelta(milliseconds=500)  -> "500ms"
    """
    micros = (delay.days * 86400 + delay.seconds) * 1_000_000 + delay.microseconds
    if micros == 0:
        return "0s"
    if micros < 0:
        return "-" + format_duration(-delay)

    if micros < 1000:
        return f"{micros}µs"
    if micros < 1_000_000:
        whole, frac = divmod(micros, 1000)
        return f"{whole}{_fraction(frac, 3)}ms"

    total_seconds, frac = divmod(micros, 1_000_000)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    secs = f"{seconds}{_fraction(frac, 6)}s"
    if hours:
        return f"{hours}h{minutes}m{secs}"
    if minutes:
        return f"{minutes}m{secs}"
    return secs


def _fraction(value: int, width: int) -> str:
    digits = f"{value:0{width}d}".rstrip("0")
    return f".{digits}" if digits else ""


__all__ = [
    "ConflictViolation",
    "DelayLike",
    "FieldViolation",
    "PreconditionViolation",
    "QuotaViolation",
    "RetryInfo",
    "as_timedelta",
    "format_duration",
]
