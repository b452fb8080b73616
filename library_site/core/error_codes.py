"""
Error Codes

String error codes for library-site, grouped by the layer that raises them,
and the HTTP status each one maps to.
"""

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping


class ErrorCode(StrEnum):
    """Base error code enum (string-based)."""


class DatabaseErrorCode(ErrorCode):
    CONNECTION_FAILED = "DATABASE_CONNECTION_FAILED"
    QUERY_FAILED = "DATABASE_QUERY_FAILED"


class APIErrorCode(ErrorCode):
    NOT_FOUND = "API_NOT_FOUND"


class ValidationErrorCode(ErrorCode):
    MISSING_FIELD = "VALIDATION_MISSING_FIELD"


class AuthErrorCode(ErrorCode):
    MISSING_CREDENTIALS = "AUTH_MISSING_CREDENTIALS"
    INVALID_CREDENTIALS = "AUTH_INVALID_CREDENTIALS"


# Every code needs an entry; unmapped codes render as 500.
ERROR_CODE_MAP: Mapping[str, int] = MappingProxyType(
    {
        DatabaseErrorCode.CONNECTION_FAILED: 503,
        DatabaseErrorCode.QUERY_FAILED: 500,
        APIErrorCode.NOT_FOUND: 404,
        ValidationErrorCode.MISSING_FIELD: 400,
        AuthErrorCode.MISSING_CREDENTIALS: 401,
        AuthErrorCode.INVALID_CREDENTIALS: 401,
    }
)


def get_http_status_code(error_code: ErrorCode | str) -> int:
    """HTTP status for an error code, 500 when the code is unknown."""
    return ERROR_CODE_MAP.get(str(error_code), 500)
