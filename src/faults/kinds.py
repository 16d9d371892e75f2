"""Failure kinds.

The closed set of categories every failure belongs to. Values are upper-case
snake_case and are used verbatim as machine-readable error codes, so they are
a stable public contract for logs and wire formats.
"""

from enum import Enum
from typing import Dict, Tuple


class FailureKind(str, Enum):
    """Enumerated failure categories."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    FAILED_PRECONDITION = "FAILED_PRECONDITION"
    ABORTED = "ABORTED"
    UNAVAILABLE = "UNAVAILABLE"
    RESOURCE_EXHAUSTED = "RESOURCE_EXHAUSTED"
    UNIMPLEMENTED = "UNIMPLEMENTED"

    @property
    def retryable(self) -> bool:
        """Whether the same call may succeed later without being changed."""
        return _RETRY_GUIDANCE[self][0]

    @property
    def guidance(self) -> str:
        """Human-readable retry guidance for this kind."""
        return _RETRY_GUIDANCE[self][1]


# (retryable, guidance)
_RETRY_GUIDANCE: Dict[FailureKind, Tuple[bool, str]] = {
    FailureKind.UNAUTHENTICATED: (
        False,
        "caller must supply valid credentials",
    ),
    FailureKind.PERMISSION_DENIED: (
        False,
        "authorization must change before retrying",
    ),
    FailureKind.NOT_FOUND: (
        False,
        "not retryable until the resource exists",
    ),
    FailureKind.BAD_REQUEST: (
        False,
        "the request must be changed before retrying",
    ),
    FailureKind.FAILED_PRECONDITION: (
        False,
        "retry only after the system state has been explicitly fixed",
    ),
    FailureKind.ABORTED: (
        False,
        "retry at a higher level, e.g. restart the read-modify-write sequence",
    ),
    FailureKind.UNAVAILABLE: (
        True,
        "safe to retry the same call, optionally after the retry delay",
    ),
    FailureKind.RESOURCE_EXHAUSTED: (
        True,
        "retry after the quota or resource replenishes",
    ),
    FailureKind.UNIMPLEMENTED: (
        False,
        "never retryable",
    ),
}


__all__ = ["FailureKind"]
