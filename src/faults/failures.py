"""Failure exception classes.

Every failure is an exception carrying:
- kind: the FailureKind discriminant, fixed per class
- cause: optional underlying exception, read-only once constructed
- violations: kind-specific detail records, in insertion order

Matching by kind never looks at cause or violations. See faults.matching.
"""

from typing import Any, ClassVar, Dict, Iterable, Optional, Tuple

from faults.kinds import FailureKind
from faults.violations import (
    ConflictViolation,
    FieldViolation,
    PreconditionViolation,
    QuotaViolation,
    RetryInfo,
    format_duration,
)


class Failure(Exception):
    """Base class for all categorized failures.

    Subclasses set ``kind`` and ``default_message``. Instances are immutable:
    cause and violations are exposed through read-only properties.

    Attributes:
        kind: Failure category of this class
        cause: Underlying exception, or None
        violations: Tuple of detail records (possibly empty)
        code: Machine-readable error code (the kind's value)
        message: Rendered human-readable message
    """

    kind: ClassVar[FailureKind]
    default_message: ClassVar[str] = "failure"

    def __init__(
        self,
        cause: Optional[BaseException] = None,
        violations: Iterable[Any] = (),
    ):
        self._cause = cause
        self._violations: Tuple[Any, ...] = tuple(violations)
        super().__init__(self.message)
        if cause is not None:
            # Keeps tracebacks showing the wrapped error.
            self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @property
    def violations(self) -> Tuple[Any, ...]:
        return self._violations

    @property
    def code(self) -> str:
        return self.kind.value

    @property
    def message(self) -> str:
        return self._render()

    @property
    def summary(self) -> str:
        """Own text of this failure, without the cause."""
        return self._text()

    def _text(self) -> str:
        if self._violations:
            return ". ".join(v.description for v in self._violations)
        return self.default_message

    def _render(self) -> str:
        if self._cause is not None:
            return f"{self._text()}: {self._cause}"
        return self._text()

    def details(self) -> Dict[str, Any]:
        """Structured payload for wire formats."""
        if not self._violations:
            return {}
        return {"violations": [v.to_dict() for v in self._violations]}

    def to_dict(self) -> Dict[str, Any]:
        """Convert failure to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details(),
        }

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def __reduce__(self) -> Any:
        return (type(self), (self._cause, self._violations))


class _BareFailure(Failure):
    """A failure kind without a violation schema.

    The message is always the fixed phrase; the cause is kept for chain
    walking but never rendered.
    """

    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__(cause)

    def _render(self) -> str:
        return self._text()

    def __reduce__(self) -> Any:
        return (type(self), (self._cause,))


class AuthenticationFailure(_BareFailure):
    """The request does not have valid authentication credentials."""

    kind = FailureKind.UNAUTHENTICATED
    default_message = "failed to authenticate request"


class PermissionFailure(_BareFailure):
    """The caller is identified but not allowed to run the operation.

    Not for exhausted resources (use QuotaFailure) nor for unidentified
    callers (use AuthenticationFailure).
    """

    kind = FailureKind.PERMISSION_DENIED
    default_message = "permission denied"


class MissingFailure(_BareFailure):
    """Some requested entity was not found."""

    kind = FailureKind.NOT_FOUND
    default_message = "resource not found"


class UnimplementedFailure(_BareFailure):
    """The operation is not implemented or not supported."""

    kind = FailureKind.UNIMPLEMENTED
    default_message = "unimplemented (yet)"


class BadRequest(Failure):
    """Violations in a client request.

    Focuses on the syntactic aspects of the request: arguments that are
    problematic regardless of the state of the system.
    """

    kind = FailureKind.BAD_REQUEST
    default_message = "bad request"

    def __init__(
        self,
        cause: Optional[BaseException] = None,
        violations: Iterable[FieldViolation] = (),
    ):
        super().__init__(cause, violations)


class PreconditionFailure(Failure):
    """The system is not in a state required for the operation.

    Clients should not retry until the state has been explicitly fixed,
    e.g. a directory must be emptied before it can be removed.
    """

    kind = FailureKind.FAILED_PRECONDITION
    default_message = "precondition failure"

    def __init__(
        self,
        cause: Optional[BaseException] = None,
        violations: Iterable[PreconditionViolation] = (),
    ):
        super().__init__(cause, violations)


class ConflictFailure(Failure):
    """The request conflicts with the current state of the target resource.

    The caller usually has to restart a sequence of operations from the
    beginning.
    """

    kind = FailureKind.ABORTED
    default_message = "conflict"

    def __init__(
        self,
        cause: Optional[BaseException] = None,
        violations: Iterable[ConflictViolation] = (),
    ):
        super().__init__(cause, violations)


class QuotaFailure(Failure):
    """Some resource has been exhausted: a per-user quota, disk space, etc."""

    kind = FailureKind.RESOURCE_EXHAUSTED
    default_message = "quota failure"

    def __init__(
        self,
        cause: Optional[BaseException] = None,
        violations: Iterable[QuotaViolation] = (),
    ):
        super().__init__(cause, violations)


class AvailabilityFailure(Failure):
    """The service is currently unavailable.

    Most likely transient; the same call can be retried with a backoff,
    starting from ``retry_info.retry_delay`` when one is given.
    """

    kind = FailureKind.UNAVAILABLE
    default_message = "service temporarily unavailable"

    def __init__(
        self,
        cause: Optional[BaseException] = None,
        retry_info: Optional[RetryInfo] = None,
    ):
        self._retry_info = retry_info if retry_info is not None else RetryInfo()
        super().__init__(cause)

    @property
    def retry_info(self) -> RetryInfo:
        return self._retry_info

    def _text(self) -> str:
        if self._retry_info.has_delay:
            return f"{self.default_message}, retry in {format_duration(self._retry_info.retry_delay)}"
        return self.default_message

    def _render(self) -> str:
        return self._text()

    def details(self) -> Dict[str, Any]:
        if not self._retry_info.has_delay:
            return {}
        return self._retry_info.to_dict()

    def __reduce__(self) -> Any:
        return (type(self), (self._cause, self._retry_info))


# Shared instances for returning and comparing. Raising an instance makes
# Python write __traceback__ and __context__ onto it, so raise the fresh
# instances from faults.not_found() and friends instead.
PERMISSION_DENIED: Failure = PermissionFailure()
UNAUTHENTICATED: Failure = AuthenticationFailure()
NOT_FOUND: Failure = MissingFailure()
UNIMPLEMENTED: Failure = UnimplementedFailure()


__all__ = [
    "AuthenticationFailure",
    "AvailabilityFailure",
    "BadRequest",
    "ConflictFailure",
    "Failure",
    "MissingFailure",
    "NOT_FOUND",
    "PERMISSION_DENIED",
    "PreconditionFailure",
    "PermissionFailure",
    "QuotaFailure",
    "UNAUTHENTICATED",
    "UNIMPLEMENTED",
    "UnimplementedFailure",
]
