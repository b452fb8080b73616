"""
API Dependencies

FastAPI dependencies shared by the admin endpoints.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header

from library_site.core.config import settings
from library_site.services.auth_service import AdminCredentials, AuthService


@lru_cache(maxsize=1)
def get_auth_service() -> AuthService:
    """AuthService bound to the configured admin identity."""
    return AuthService(AdminCredentials.from_settings(settings))


def require_admin(
    authorization: Optional[str] = Header(default=None),
    auth_service: AuthService = Depends(get_auth_service),
) -> str:
    """
    Gate an endpoint behind the admin Basic credentials.

    Every request re-authenticates; no session state is kept.

    Raises:
        AuthException: 401 with "Unauthorized" or "Invalid credentials"
    """
    return auth_service.authenticate_header(authorization)


__all__ = ["get_auth_service", "require_admin"]
