"""HTTP mapping for failure kinds.

Translates a failure chain into an HTTP status, a JSON error body and an
optional Retry-After header value. The outermost failure in the chain decides
the status; violations and retry delays are read from that same failure.
"""

import math
from typing import Any, Dict, Optional

from faults.failures import AvailabilityFailure
from faults.kinds import FailureKind
from faults.matching import failures

HTTP_STATUS: Dict[FailureKind, int] = {
    FailureKind.UNAUTHENTICATED: 401,
    FailureKind.PERMISSION_DENIED: 403,
    FailureKind.NOT_FOUND: 404,
    FailureKind.BAD_REQUEST: 400,
    FailureKind.FAILED_PRECONDITION: 412,
    FailureKind.ABORTED: 409,
    FailureKind.UNAVAILABLE: 503,
    FailureKind.RESOURCE_EXHAUSTED: 429,
    FailureKind.UNIMPLEMENTED: 501,
}

INTERNAL_ERROR_CODE = "INTERNAL"
INTERNAL_ERROR_MESSAGE = "internal server error"


def http_status(err: Optional[BaseException], default: int = 500) -> int:
    """Status code for the outermost failure in the chain.

    Args:
        err: Error to map
        default: Status for errors without any failure in their chain

    Example:
        >>> http_status(faults.NOT_FOUND)
        404
    """
    found = failures(err)
    if not found:
        return default
    return HTTP_STATUS[found[0].kind]


def error_body(err: Optional[BaseException], expose_cause: bool = False) -> Dict[str, Any]:
    """Create a standardized JSON error body.

    Uncategorized errors render as a generic internal error so their text
    never leaks to clients.

    Args:
        err: Error to render
        expose_cause: Include the text of the failure's wrapped cause

    Returns:
        Dict with status, error_code, message and details keys

    Example:
        >>> error_body(faults.bad(FieldViolation("email", "Field required")))
        {"status": "error", "error_code": "BAD_REQUEST", "message": "Field required",
         "details": {"violations": [{"field": "email", "description": "Field required"}]}}
    """
    found = failures(err)
    if not found:
        return {
            "status": "error",
            "error_code": INTERNAL_ERROR_CODE,
            "message": INTERNAL_ERROR_MESSAGE,
            "details": {},
        }

    failure = found[0]
    details = failure.details()
    message = failure.summary
    if expose_cause and failure.cause is not None:
        details["cause"] = str(failure.cause)
        message = failure.message

    return {
        "status": "error",
        "error_code": failure.code,
        "message": message,
        "details": details,
    }


def retry_after(err: Optional[BaseException]) -> Optional[str]:
    """Retry-After header value in whole seconds, rounded up.

    Only an outermost unavailable failure with a positive delay yields a
    value; an unavailable cause under another kind does not.
    """
    found = failures(err)
    if not found or not isinstance(found[0], AvailabilityFailure):
        return None
    retry_info = found[0].retry_info
    if not retry_info.has_delay:
        return None
    return str(math.ceil(retry_info.retry_delay.total_seconds()))


__all__ = [
    "HTTP_STATUS",
    "INTERNAL_ERROR_CODE",
    "INTERNAL_ERROR_MESSAGE",
    "error_body",
    "http_status",
    "retry_after",
]
