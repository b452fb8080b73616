"""
API Error Handling

FastAPI-specific error handling.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from library_site.core.exceptions import ApplicationException

from .exception_handlers import (
    application_exception_handler,
    describe_validation_errors,
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ApplicationException, application_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)


__all__ = [
    "describe_validation_errors",
    "global_exception_handler",
    "register_exception_handlers",
]
