"""Classifiers and extractors.

Both walk the cause chain starting at the given error, outermost first:

- a Failure links to its ``cause``; a Failure built without one links to its
  explicit ``__cause__``, so ``raise bad(v) from err`` keeps ``err`` reachable
- any other exception links to its explicit ``__cause__`` (``raise ... from``)

The shared singletons (NOT_FOUND and friends) end the chain: their
``__cause__`` is never followed.

Implicit ``__context__`` is not followed. A node seen twice ends the walk.

Classifiers (``is_<kind>``) answer whether any node in the chain has the
kind. Extractors (``as_<kind>``) return the first such node, so the failure
closest to the propagation point wins when a kind is nested under itself.
Both compare the kind discriminant only; payload and cause of the matched
node are never inspected.
"""

from datetime import timedelta
from typing import Iterator, List, Optional, Tuple, Type, TypeVar, cast

from faults.failures import (
    NOT_FOUND,
    PERMISSION_DENIED,
    UNAUTHENTICATED,
    UNIMPLEMENTED,
    AuthenticationFailure,
    AvailabilityFailure,
    BadRequest,
    ConflictFailure,
    Failure,
    MissingFailure,
    PermissionFailure,
    PreconditionFailure,
    QuotaFailure,
    UnimplementedFailure,
)
from faults.kinds import FailureKind

F = TypeVar("F", bound=Failure)

_SHARED = frozenset(
    id(f) for f in (NOT_FOUND, PERMISSION_DENIED, UNAUTHENTICATED, UNIMPLEMENTED)
)


def walk(err: Optional[BaseException]) -> Iterator[BaseException]:
    """Yield every node of the cause chain, starting with ``err`` itself."""
    seen = set()
    node = err
    while node is not None and id(node) not in seen:
        seen.add(id(node))
        yield node
        if isinstance(node, Failure):
            if node.cause is not None:
                node = node.cause
            elif id(node) in _SHARED:
                node = None
            else:
                node = node.__cause__
        else:
            node = node.__cause__


def failures(err: Optional[BaseException]) -> List[Failure]:
    """All failures in the chain, outermost first."""
    return [node for node in walk(err) if isinstance(node, Failure)]


def is_kind(err: Optional[BaseException], kind: FailureKind) -> bool:
    """Check whether the chain contains a failure of ``kind``."""
    return any(f.kind is kind for f in failures(err))


def as_kind(
    err: Optional[BaseException], kind: FailureKind
) -> Tuple[Optional[Failure], bool]:
    """Return the first failure of ``kind`` in the chain.

    Returns:
        ``(failure, True)`` on a match, ``(None, False)`` otherwise.
    """
    for f in failures(err):
        if f.kind is kind:
            return f, True
    return None, False


def kind_of(err: Optional[BaseException]) -> Optional[FailureKind]:
    """Kind of the outermost failure in the chain, or None."""
    found = failures(err)
    return found[0].kind if found else None


def is_retryable(err: Optional[BaseException]) -> bool:
    """Whether the outermost failure allows retrying the same call.

    Uncategorized errors are not retryable.
    """
    kind = kind_of(err)
    return kind is not None and kind.retryable


def retry_delay(err: Optional[BaseException]) -> Optional[timedelta]:
    """Positive retry delay of the first unavailable failure, else None."""
    failure, ok = as_unavailable(err)
    if ok and failure is not None and failure.retry_info.has_delay:
        return failure.retry_info.retry_delay
    return None


def _as(err: Optional[BaseException], cls: Type[F]) -> Tuple[Optional[F], bool]:
    failure, ok = as_kind(err, cls.kind)
    return cast(Optional[F], failure), ok


def is_permission_denied(err: Optional[BaseException]) -> bool:
    return is_kind(err, FailureKind.PERMISSION_DENIED)


def is_unauthenticated(err: Optional[BaseException]) -> bool:
    return is_kind(err, FailureKind.UNAUTHENTICATED)


def is_not_found(err: Optional[BaseException]) -> bool:
    return is_kind(err, FailureKind.NOT_FOUND)


def is_bad(err: Optional[BaseException]) -> bool:
    return is_kind(err, FailureKind.BAD_REQUEST)


def is_failed_precondition(err: Optional[BaseException]) -> bool:
    return is_kind(err, FailureKind.FAILED_PRECONDITION)


def is_aborted(err: Optional[BaseException]) -> bool:
    return is_kind(err, FailureKind.ABORTED)


def is_unavailable(err: Optional[BaseException]) -> bool:
    return is_kind(err, FailureKind.UNAVAILABLE)


def is_resource_exhausted(err: Optional[BaseException]) -> bool:
    return is_kind(err, FailureKind.RESOURCE_EXHAUSTED)


def is_unimplemented(err: Optional[BaseException]) -> bool:
    return is_kind(err, FailureKind.UNIMPLEMENTED)


def as_permission_denied(
    err: Optional[BaseException],
) -> Tuple[Optional[PermissionFailure], bool]:
    return _as(err, PermissionFailure)


def as_unauthenticated(
    err: Optional[BaseException],
) -> Tuple[Optional[AuthenticationFailure], bool]:
    return _as(err, AuthenticationFailure)


def as_not_found(err: Optional[BaseException]) -> Tuple[Optional[MissingFailure], bool]:
    return _as(err, MissingFailure)


def as_bad(err: Optional[BaseException]) -> Tuple[Optional[BadRequest], bool]:
    return _as(err, BadRequest)


def as_failed_precondition(
    err: Optional[BaseException],
) -> Tuple[Optional[PreconditionFailure], bool]:
    return _as(err, PreconditionFailure)


def as_aborted(err: Optional[BaseException]) -> Tuple[Optional[ConflictFailure], bool]:
    return _as(err, ConflictFailure)


def as_unavailable(
    err: Optional[BaseException],
) -> Tuple[Optional[AvailabilityFailure], bool]:
    return _as(err, AvailabilityFailure)


def as_resource_exhausted(
    err: Optional[BaseException],
) -> Tuple[Optional[QuotaFailure], bool]:
    return _as(err, QuotaFailure)


def as_unimplemented(
    err: Optional[BaseException],
) -> Tuple[Optional[UnimplementedFailure], bool]:
    return _as(err, UnimplementedFailure)


__all__ = [
    "as_aborted",
    "as_bad",
    "as_failed_precondition",
    "as_kind",
    "as_not_found",
    "as_permission_denied",
    "as_resource_exhausted",
    "as_unauthenticated",
    "as_unavailable",
    "as_unimplemented",
    "failures",
    "is_aborted",
    "is_bad",
    "is_failed_precondition",
    "is_kind",
    "is_not_found",
    "is_permission_denied",
    "is_resource_exhausted",
    "is_retryable",
    "is_unauthenticated",
    "is_unavailable",
    "is_unimplemented",
    "kind_of",
    "retry_delay",
    "walk",
]
