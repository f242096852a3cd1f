"""
Error responses.

Domain exceptions, request validation failures and HTTP errors all leave the
API as an ``ErrorResponse`` body: ``error_code``, ``message``, a ``hint``
and the request path.
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from src.application.dto.responses import ErrorResponse
from src.config import get_logger
from src.core.exceptions import (
    ConfigurationError,
    InvalidStateError,
    NotFoundError,
    RestockError,
    StorageError,
    ValidationError,
)

logger = get_logger(__name__)


# First match wins, so subclasses come before their bases
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidStateError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ValueError: status.HTTP_400_BAD_REQUEST,
}

HINT_MAP: dict[str, str] = {
    "ITEM_NOT_FOUND": "Check the item ID; items are scoped to the X-Organization-Id header.",
    "ALERT_NOT_FOUND": "Check the alert ID and try GET /api/inventory/reorder-alerts.",
    "VENDOR_NOT_FOUND": "The vendor must exist in this organization and be tagged VENDOR or BOTH.",
    "INVALID_ALERT_TRANSITION": "Only PENDING alerts can be acknowledged; only open alerts resolved.",
    "ALERT_CLOSED": "The alert is already resolved or has a purchase order.",
    "MISSING_VENDOR": "Set preferred_vendor_id in reorder settings or pass vendor_id.",
    "VALIDATION_ERROR": "Check the request body and query parameters against the API schema.",
    "DATABASE_ERROR": "A database operation failed. Check server logs.",
    "ValueError": "A parameter value is invalid. Check the request.",
}

STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    404: "The requested resource was not found. Verify the ID.",
    409: "The resource is not in a state that allows this action.",
    422: "The request could not be processed. Check the input format.",
    500: "An internal error occurred. Check server logs.",
}

HTTP_ERROR_CODES: dict[int, str] = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    422: "UNPROCESSABLE_ENTITY",
}


def _hint(error_code: str, status_code: int) -> str:
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def _status_for(exc: Exception) -> int:
    for exc_type, code in EXCEPTION_STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_json(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    detail: str | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        hint=_hint(error_code, status_code),
        detail=detail,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def build_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Map an exception to its status and error body, logging it on the way."""
    status_code = _status_for(exc)
    if isinstance(exc, RestockError):
        error_code, message = exc.code, exc.message
    else:
        error_code, message = exc.__class__.__name__, str(exc)

    server_side = status_code >= 500
    (logger.error if server_side else logger.warning)(
        "request_error",
        error_type=error_code,
        error=message,
        traceback=traceback.format_exc() if server_side else None,
    )
    return _error_json(request, status_code, error_code, message)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Last line of defence for exceptions that escape the route handlers."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            return build_error_response(request, e)


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RestockError)
    async def domain_exception_handler(request: Request, exc: RestockError) -> JSONResponse:
        return build_error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        problems = [
            f"{' -> '.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        return _error_json(
            request,
            422,
            "VALIDATION_ERROR",
            "Request validation failed",
            detail="; ".join(problems),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        error_code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
        return _error_json(request, exc.status_code, error_code, exc.detail or "An error occurred")
