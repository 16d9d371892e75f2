"""Starlette integration for failures.

Two ways to turn failures into JSON responses:

- install_fault_handlers registers an exception handler for Failure on a
  Starlette (or FastAPI) app.
- FaultMiddleware is plain ASGI middleware that also catches uncategorized
  exceptions whose cause chain contains a failure
  (``raise RuntimeError(...) from faults.NOT_FOUND``). Exceptions without
  any failure in their chain are re-raised untouched.

Example:
    from starlette.applications import Starlette
    from faults.logger import get_logger
    from faults.web import FaultMiddleware, install_fault_handlers

    app = Starlette(routes=[...])
    install_fault_handlers(app, logger=get_logger("billing-api"))
    app.add_middleware(FaultMiddleware, logger=get_logger("billing-api"))
"""

from typing import Any, Awaitable, Callable, Optional

from starlette.requests import Request
from starlette.responses import JSONResponse

from faults.config import FaultResponseSettings
from faults.failures import Failure
from faults.logger import Logger
from faults.matching import failures
from faults.web.status import error_body, http_status, retry_after

FaultHandler = Callable[[Request, Exception], Awaitable[JSONResponse]]


def create_fault_response(
    err: BaseException,
    settings: Optional[FaultResponseSettings] = None,
) -> JSONResponse:
    """Render an error as a JSON response.

    Args:
        err: Error to render
        settings: Response settings (default: read from the environment)

    Returns:
        JSONResponse with the mapped status, the error body and, when a retry
        delay is known, a Retry-After header
    """
    if settings is None:
        settings = FaultResponseSettings.from_env()

    headers = {}
    if settings.retry_after_header:
        value = retry_after(err)
        if value is not None:
            headers["Retry-After"] = value

    return JSONResponse(
        error_body(err, expose_cause=settings.expose_cause),
        status_code=http_status(err, default=settings.default_status),
        headers=headers or None,
    )


def _log_outcome(
    logger: Optional[Logger], err: BaseException, status: int, **kwargs: Any
) -> None:
    if logger is None:
        return
    level = "error" if status >= 500 else "warning"
    logger.failure(f"request failed with status {status}", err, level=level, status=status, **kwargs)


def create_fault_handler(
    settings: Optional[FaultResponseSettings] = None,
    logger: Optional[Logger] = None,
) -> FaultHandler:
    """Create a Starlette exception handler for failures.

    Args:
        settings: Response settings (default: read from the environment)
        logger: Logger for handled failures (optional)

    Returns:
        Async handler suitable for ``app.add_exception_handler``
    """
    if settings is None:
        settings = FaultResponseSettings.from_env()

    async def handle(request: Request, exc: Exception) -> JSONResponse:
        response = create_fault_response(exc, settings)
        _log_outcome(
            logger,
            exc,
            response.status_code,
            method=request.method,
            path=request.url.path,
        )
        return response

    return handle


def install_fault_handlers(
    app: Any,
    settings: Optional[FaultResponseSettings] = None,
    logger: Optional[Logger] = None,
) -> None:
    """Register the failure exception handler on a Starlette or FastAPI app."""
    app.add_exception_handler(Failure, create_fault_handler(settings, logger))


class FaultMiddleware:
    """ASGI middleware converting escaping failures into JSON responses.

    Only acts when the response has not started yet; otherwise, or when the
    exception chain holds no failure, the exception propagates.
    """

    def __init__(
        self,
        app: Any,
        settings: Optional[FaultResponseSettings] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application to wrap
            settings: Response settings (default: read from the environment)
            logger: Logger for handled failures (optional)
        """
        self.app = app
        self.settings = settings if settings is not None else FaultResponseSettings.from_env()
        self.logger = logger

    async def __call__(self, scope: dict, receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started or not failures(exc):
                raise
            response = create_fault_response(exc, self.settings)
            _log_outcome(
                self.logger,
                exc,
                response.status_code,
                method=scope.get("method", "UNKNOWN"),
                path=scope.get("path", "/"),
            )
            await response(scope, receive, send)
