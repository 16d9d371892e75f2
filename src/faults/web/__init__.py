"""HTTP boundary helpers for failures.

Maps failure kinds to HTTP statuses and JSON error bodies, and plugs into
Starlette/FastAPI applications as an exception handler or ASGI middleware.
"""

from faults.web.handlers import (
    FaultMiddleware,
    create_fault_handler,
    create_fault_response,
    install_fault_handlers,
)
from faults.web.status import (
    HTTP_STATUS,
    error_body,
    http_status,
    retry_after,
)

__all__ = [
    # Mapping
    "HTTP_STATUS",
    "error_body",
    "http_status",
    "retry_after",
    # Starlette integration
    "FaultMiddleware",
    "create_fault_handler",
    "create_fault_response",
    "install_fault_handlers",
]
