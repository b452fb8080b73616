"""
Custom Exceptions

Every domain failure is an ApplicationException carrying an ErrorCode. The
global handler turns it into {"success": false, "error": message} with the
status ERROR_CODE_MAP assigns to the code.
"""

import json
from typing import Any, Dict, Optional

from library_site.core.error_codes import ErrorCode, get_http_status_code


def _json_safe(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)
    return value


class ApplicationException(Exception):
    """Base exception for library-site errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[ErrorCode | str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    @property
    def code(self) -> Optional[str]:
        return str(self.error_code) if self.error_code is not None else None

    @property
    def http_status(self) -> int:
        if self.error_code is None:
            return 500
        return get_http_status_code(self.error_code)

    def to_dict(self) -> Dict[str, Any]:
        """Debug view of the exception, including its underlying cause."""
        result: Dict[str, Any] = {
            "message": self.message,
            "code": self.code,
            "details": {key: _json_safe(value) for key, value in self.details.items()},
        }
        cause = self.cause or self.__cause__ or self.__context__
        if cause is not None:
            result["cause"] = {"type": type(cause).__name__, "message": str(cause)}
        return result

    def __str__(self) -> str:
        text = self.message if self.code is None else f"{self.message} [{self.code}]"
        if self.details:
            text += f" Details: {self.details}"
        return text

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"error_code={self.error_code!r}, details={self.details!r})"
        )


class DatabaseException(ApplicationException):
    """A store could not read or write its table."""


class ValidationException(ApplicationException):
    """A request payload is missing required content."""


class AuthException(ApplicationException):
    """Admin credentials are missing or do not match."""


class NotFoundException(ApplicationException):
    """A directly addressed record does not exist."""
