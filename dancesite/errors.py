"""
Domain exceptions and the JSON error envelope.

Services raise ``ValidationError`` or ``BusinessRuleError``; routers raise
``NotFoundError`` when a service reports an absent row. Every failure is
returned to the caller as::

    {"statusCode": 409, "message": "...", "traceId": "..."}

Unexpected exceptions are logged with their traceback and answered with a
generic 500 message so internals never reach the client.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .request_context import TRACE_ID_HEADER, get_trace_id

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


class DomainError(Exception):
    """Base exception for all domain-specific errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainError):
    """Raised when input fails a business validation rule."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, key: Any) -> None:
        super().__init__(f"{resource} with ID {key} was not found.")


class BusinessRuleError(DomainError):
    """Raised when an operation would break a business rule, e.g. a status change."""

    status_code = status.HTTP_409_CONFLICT


def request_trace_id(request: Request) -> str:
    return getattr(request.state, "trace_id", None) or get_trace_id()


def error_envelope(status_code: int, message: str, request: Request, errors: Any = None) -> JSONResponse:
    trace_id = request_trace_id(request)
    body: dict[str, Any] = {
        "statusCode": status_code,
        "message": message,
        "traceId": trace_id,
    }
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers={TRACE_ID_HEADER: trace_id},
    )


def _describe_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    problems = []
    for error in exc.errors():
        # ("body", "preferredDateTime") -> "preferredDateTime"
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        problems.append({"field": ".".join(location), "message": error.get("msg", "Invalid value")})
    return problems


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        logger.warning(f"{request.method} {request.url.path} - {exc.code}: {exc.message}")
        return error_envelope(exc.status_code, exc.message, request)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        problems = _describe_validation_errors(exc)
        logger.warning(f"Validation error for {request.url.path}: {problems}")
        message = "; ".join(
            f"{p['field']}: {p['message']}" if p["field"] else p["message"] for p in problems
        )
        return error_envelope(
            status.HTTP_400_BAD_REQUEST,
            message or "The request was malformed.",
            request,
            errors=problems,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed."
        return error_envelope(exc.status_code, message, request)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        # Runs outside the trace-id middleware, so the id comes from request state
        logger.exception(
            f"Unhandled exception on {request.method} {request.url.path}",
            exc_info=exc,
            extra={"trace_id": request_trace_id(request)},
        )
        return error_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE, request)
