"""Constructors and wrappers.

Constructors create a fresh failure with no cause. Wrappers attach a category
to an existing error, keeping it as the cause. Neither ever fails and neither
validates its payload.

Raise the result of a constructor, never a shared singleton such as
faults.NOT_FOUND: raising writes traceback and context onto the instance.

Usage:
    from faults import bad, not_found, with_not_found, FieldViolation

    raise bad(FieldViolation("email", "Field required"))
    raise not_found()

    try:
        row = repo.load(key)
    except KeyError as e:
        raise with_not_found(e) from e
"""

from typing import Optional

from faults.failures import (
    AuthenticationFailure,
    AvailabilityFailure,
    BadRequest,
    ConflictFailure,
    MissingFailure,
    PermissionFailure,
    PreconditionFailure,
    QuotaFailure,
    UnimplementedFailure,
)
from faults.violations import (
    ConflictViolation,
    DelayLike,
    FieldViolation,
    PreconditionViolation,
    QuotaViolation,
    RetryInfo,
    as_timedelta,
)

Cause = Optional[BaseException]


def permission_denied() -> PermissionFailure:
    """A fresh PermissionFailure, safe to raise."""
    return PermissionFailure()


def unauthenticated() -> AuthenticationFailure:
    """A fresh AuthenticationFailure, safe to raise."""
    return AuthenticationFailure()


def not_found() -> MissingFailure:
    """A fresh MissingFailure, safe to raise.

    Compares equal in kind to faults.NOT_FOUND but is a separate instance,
    so raising it leaves the shared value untouched.
    """
    return MissingFailure()


def unimplemented() -> UnimplementedFailure:
    """A fresh UnimplementedFailure, safe to raise."""
    return UnimplementedFailure()


def bad(*violations: FieldViolation) -> BadRequest:
    """The client specified an invalid argument.

    Unlike failed_precondition, the arguments are problematic regardless of
    the state of the system (e.g. a malformed file name).
    """
    return BadRequest(violations=violations)


def failed_precondition(*violations: PreconditionViolation) -> PreconditionFailure:
    """The system is not in a state required for the operation.

    Choosing between failed_precondition, aborted and unavailable:

    (a) unavailable if the client can retry just the failing call.
    (b) aborted if the client should retry at a higher level
        (e.g. restarting a read-modify-write sequence).
    (c) failed_precondition if the client should not retry until the system
        state has been explicitly fixed, e.g. an "rmdir" on a non-empty
        directory.
    (d) failed_precondition if a conditional REST get/update/delete does not
        match the current state of the resource.
    """
    return PreconditionFailure(violations=violations)


def aborted(*violations: ConflictViolation) -> ConflictFailure:
    """The operation was aborted, typically by a concurrency issue.

    Sequencer check failures, transaction aborts, etc.
    """
    return ConflictFailure(violations=violations)


def unavailable(retry_delay: DelayLike = 0) -> AvailabilityFailure:
    """The service is currently unavailable.

    Args:
        retry_delay: Suggested delay before retrying, as a timedelta or a
            number of seconds. Zero or negative means no recommendation.
    """
    return AvailabilityFailure(retry_info=RetryInfo(as_timedelta(retry_delay)))


def resource_exhausted(*violations: QuotaViolation) -> QuotaFailure:
    """Some resource has been exhausted, e.g. a per-user quota."""
    return QuotaFailure(violations=violations)


def with_permission_denied(cause: Cause) -> PermissionFailure:
    """Wrap ``cause`` with a PermissionFailure."""
    return PermissionFailure(cause)


def with_unauthenticated(cause: Cause) -> AuthenticationFailure:
    """Wrap ``cause`` with an AuthenticationFailure."""
    return AuthenticationFailure(cause)


def with_not_found(cause: Cause) -> MissingFailure:
    """Wrap ``cause`` with a MissingFailure."""
    return MissingFailure(cause)


def with_unimplemented(cause: Cause) -> UnimplementedFailure:
    """Wrap ``cause`` with an UnimplementedFailure."""
    return UnimplementedFailure(cause)


def with_bad(cause: Cause, *violations: FieldViolation) -> BadRequest:
    """Wrap ``cause`` with a BadRequest."""
    return BadRequest(cause, violations)


def with_failed_precondition(
    cause: Cause, *violations: PreconditionViolation
) -> PreconditionFailure:
    """Wrap ``cause`` with a PreconditionFailure."""
    return PreconditionFailure(cause, violations)


def with_aborted(cause: Cause, *violations: ConflictViolation) -> ConflictFailure:
    """Wrap ``cause`` with a ConflictFailure."""
    return ConflictFailure(cause, violations)


def with_unavailable(cause: Cause, retry_delay: DelayLike = 0) -> AvailabilityFailure:
    """Wrap ``cause`` with an AvailabilityFailure."""
    return AvailabilityFailure(cause, RetryInfo(as_timedelta(retry_delay)))


def with_resource_exhausted(cause: Cause, *violations: QuotaViolation) -> QuotaFailure:
    """Wrap ``cause`` with a QuotaFailure."""
    return QuotaFailure(cause, violations)


__all__ = [
    "aborted",
    "bad",
    "failed_precondition",
    "not_found",
    "permission_denied",
    "resource_exhausted",
    "unauthenticated",
    "unavailable",
    "unimplemented",
    "with_aborted",
    "with_bad",
    "with_failed_precondition",
    "with_not_found",
    "with_permission_denied",
    "with_resource_exhausted",
    "with_unauthenticated",
    "with_unavailable",
    "with_unimplemented",
]
