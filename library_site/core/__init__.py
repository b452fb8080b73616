"""
Core Package

Configuration, error handling, and logging for library-site.
"""

# ruff: noqa: F401  # All imports are re-exported via __all__

from .config import Settings, settings
from .error_codes import (
    ERROR_CODE_MAP,
    APIErrorCode,
    AuthErrorCode,
    DatabaseErrorCode,
    ValidationErrorCode,
    get_http_status_code,
)
from .exceptions import (
    ApplicationException,
    AuthException,
    DatabaseException,
    NotFoundException,
    ValidationException,
)
from .logger import get_logger

__all__ = [
    # Configuration
    "Settings",
    "settings",
    # Error handling
    "APIErrorCode",
    "AuthErrorCode",
    "DatabaseErrorCode",
    "ValidationErrorCode",
    "ERROR_CODE_MAP",
    "get_http_status_code",
    # Exceptions
    "ApplicationException",
    "AuthException",
    "DatabaseException",
    "NotFoundException",
    "ValidationException",
    # Logger
    "get_logger",
]
