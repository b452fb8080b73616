"""Admin credential checks for the admin API."""

from __future__ import annotations

import base64
import binascii
import secrets
from dataclasses import dataclass
from typing import Optional, Tuple

from library_site.core.config import Settings
from library_site.core.error_codes import AuthErrorCode
from library_site.core.exceptions import AuthException
from library_site.core.logger import get_logger

logger = get_logger(__name__)

BASIC_SCHEME = "Basic "


@dataclass(frozen=True)
class AdminCredentials:
    """The single admin identity, as configured for the deployment."""

    username: str
    password: Optional[str]

    @classmethod
    def from_settings(cls, config: Settings) -> "AdminCredentials":
        password = config.admin__password
        return cls(
            username=config.admin__username,
            password=password.get_secret_value() if password is not None else None,
        )

    def __repr__(self) -> str:
        return f"AdminCredentials(username={self.username!r}, password='***')"


def parse_basic_authorization(header: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Extract (username, password) from a ``Basic`` Authorization header.

    The decoded payload is split at the first colon, so passwords may contain
    colons. Returns None when the header is missing, uses another scheme, or
    does not decode.
    """
    if not header or not header.startswith(BASIC_SCHEME):
        return None

    try:
        decoded = base64.b64decode(header[len(BASIC_SCHEME) :], validate=True)
        username, separator, password = decoded.decode("utf-8").partition(":")
    except (binascii.Error, UnicodeDecodeError):
        return None

    if not separator:
        return None
    return username, password


class AuthService:
    """Stateless comparison of caller credentials against the admin identity."""

    def __init__(self, credentials: AdminCredentials) -> None:
        self.credentials = credentials

    def verify(self, username: Optional[str], password: Optional[str]) -> bool:
        """True iff both values match the configured pair exactly."""
        expected_password = self.credentials.password
        if expected_password is None or username is None or password is None:
            return False

        username_ok = secrets.compare_digest(
            username.encode("utf-8"), self.credentials.username.encode("utf-8")
        )
        password_ok = secrets.compare_digest(
            password.encode("utf-8"), expected_password.encode("utf-8")
        )
        return username_ok and password_ok

    def authenticate_header(self, authorization: Optional[str]) -> str:
        """
        Gate a request on its Authorization header.

        Returns:
            str: The authenticated username

        Raises:
            AuthException: "Unauthorized" when no usable credentials were
                sent, "Invalid credentials" when they do not match
        """
        parsed = parse_basic_authorization(authorization)
        if parsed is None:
            raise AuthException("Unauthorized", AuthErrorCode.MISSING_CREDENTIALS)

        username, password = parsed
        if not self.verify(username, password):
            logger.warning("Rejected admin credentials for user '%s'", username)
            raise AuthException("Invalid credentials", AuthErrorCode.INVALID_CREDENTIALS)

        return username


__all__ = ["AdminCredentials", "AuthService", "parse_basic_authorization"]
