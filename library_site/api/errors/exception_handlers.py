"""
Exception Handlers

Dedicated module for FastAPI-bound exception handling. Every error leaves
the API as {"success": false, "error": "<message>"}.
"""

import traceback
from typing import Any, Dict, Sequence

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from library_site.api.schemas.error import ErrorResponse
from library_site.core.config import settings
from library_site.core.exceptions import ApplicationException
from library_site.core.logger import get_logger

logger = get_logger(__name__)

_REQUEST_SOURCES = ("body", "path", "query", "header")


def _log_exception(request: Request, exc: Exception, status_code: int) -> None:
    """Log exception with appropriate level based on status code."""
    msg = "Request %s %s failed with %d: %s"
    args = (request.method, request.url.path, status_code, str(exc))

    if status_code >= 500:
        logger.error(msg, *args, exc_info=True)
    else:
        logger.warning(msg, *args)


def _build_response(
    request: Request, status_code: int, error: ErrorResponse
) -> JSONResponse:
    """Build the error envelope, echoing the request ID header."""
    headers = {}
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        headers["X-Request-ID"] = request_id

    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(exclude_none=True),
        headers=headers,
    )


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """Summarize request validation errors as one message naming the field."""
    if not errors:
        return "Invalid request"

    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"

    location = [
        str(part) for part in first.get("loc", ()) if part not in _REQUEST_SOURCES
    ]
    field = ".".join(location) or "body"
    return f"Invalid {field}: {first.get('msg', 'invalid value')}"


async def application_exception_handler(
    request: Request, exc: ApplicationException
) -> JSONResponse:
    status_code = exc.http_status
    _log_exception(request, exc, status_code)
    error = ErrorResponse(error=exc.message)
    if settings.debug:
        error.debug = exc.to_dict()
    return _build_response(request, status_code, error)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    _log_exception(request, exc, exc.status_code)
    return _build_response(request, exc.status_code, ErrorResponse(error=str(exc.detail)))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    _log_exception(request, exc, 400)
    message = describe_validation_errors(exc.errors())
    return _build_response(request, 400, ErrorResponse(error=message))


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last-resort handler: internals never reach the client.

    Args:
        request: FastAPI request object
        exc: Exception that was raised

    Returns:
        JSONResponse with a generic 500 error
    """
    _log_exception(request, exc, 500)
    error = ErrorResponse(error="Internal server error")

    if settings.debug:
        error.debug = {
            "exception_type": exc.__class__.__name__,
            "exception_message": str(exc),
            "traceback": traceback.format_exc(),
        }

    return _build_response(request, 500, error)
