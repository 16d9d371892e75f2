"""faults - categorized failures for Python services.

A closed set of failure kinds, each an exception type carrying structured
detail records, with uniform helpers to construct, wrap, classify and extract
them from any exception chain:

- kinds: FailureKind enumeration and retry guidance
- violations: structured detail records (field, precondition, conflict, quota)
- failures: exception classes and shared singletons (return or compare them,
  raise the fresh instances from not_found() and friends)
- factories: constructors (not_found, bad, unavailable, ...) and wrappers (with_*)
- matching: classifiers (is_*) and extractors (as_*)

Optional integrations (not imported here):
- faults.web: HTTP status mapping and Starlette handlers
- faults.logger: structured logging of failure chains
- faults.config: environment-driven response and logging settings

Usage:
    import faults
    from faults import FieldViolation

    def create_user(payload):
        if not payload.get("firstname"):
            raise faults.bad(FieldViolation("firstname", "Field required"))

    try:
        create_user({})
    except Exception as e:
        bad, ok = faults.as_bad(e)
        if ok:
            print([v.field for v in bad.violations])
"""

__version__ = "1.0.0"

from faults.factories import (
    aborted,
    bad,
    failed_precondition,
    not_found,
    permission_denied,
    resource_exhausted,
    unauthenticated,
    unavailable,
    unimplemented,
    with_aborted,
    with_bad,
    with_failed_precondition,
    with_not_found,
    with_permission_denied,
    with_resource_exhausted,
    with_unauthenticated,
    with_unavailable,
    with_unimplemented,
)
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
from faults.matching import (
    as_aborted,
    as_bad,
    as_failed_precondition,
    as_kind,
    as_not_found,
    as_permission_denied,
    as_resource_exhausted,
    as_unauthenticated,
    as_unavailable,
    as_unimplemented,
    failures,
    is_aborted,
    is_bad,
    is_failed_precondition,
    is_kind,
    is_not_found,
    is_permission_denied,
    is_resource_exhausted,
    is_retryable,
    is_unauthenticated,
    is_unavailable,
    is_unimplemented,
    kind_of,
    retry_delay,
    walk,
)
from faults.violations import (
    ConflictViolation,
    FieldViolation,
    PreconditionViolation,
    QuotaViolation,
    RetryInfo,
    format_duration,
)

__all__ = [
    "__version__",
    # Kinds
    "FailureKind",
    # Violations
    "FieldViolation",
    "PreconditionViolation",
    "ConflictViolation",
    "QuotaViolation",
    "RetryInfo",
    "format_duration",
    # Failures
    "Failure",
    "AuthenticationFailure",
    "PermissionFailure",
    "MissingFailure",
    "BadRequest",
    "PreconditionFailure",
    "ConflictFailure",
    "AvailabilityFailure",
    "QuotaFailure",
    "UnimplementedFailure",
    # Singletons
    "NOT_FOUND",
    "PERMISSION_DENIED",
    "UNAUTHENTICATED",
    "UNIMPLEMENTED",
    # Constructors
    "permission_denied",
    "unauthenticated",
    "not_found",
    "unimplemented",
    "bad",
    "failed_precondition",
    "aborted",
    "unavailable",
    "resource_exhausted",
    # Wrappers
    "with_unauthenticated",
    "with_permission_denied",
    "with_not_found",
    "with_bad",
    "with_failed_precondition",
    "with_aborted",
    "with_unavailable",
    "with_resource_exhausted",
    "with_unimplemented",
    # Classifiers
    "is_kind",
    "is_unauthenticated",
    "is_permission_denied",
    "is_not_found",
    "is_bad",
    "is_failed_precondition",
    "is_aborted",
    "is_unavailable",
    "is_resource_exhausted",
    "is_unimplemented",
    # Extractors
    "as_kind",
    "as_unauthenticated",
    "as_permission_denied",
    "as_not_found",
    "as_bad",
    "as_failed_precondition",
    "as_aborted",
    "as_unavailable",
    "as_resource_exhausted",
    "as_unimplemented",
    # Chain helpers
    "walk",
    "failures",
    "kind_of",
    "is_retryable",
    "retry_delay",
]
