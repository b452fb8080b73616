"""Admin login endpoint."""

from fastapi import APIRouter, Depends

from library_site.api.dependencies import get_auth_service
from library_site.api.schemas.error import ErrorResponse
from library_site.api.schemas.requests import LoginRequest
from library_site.api.schemas.responses import ApiResponse
from library_site.core.error_codes import AuthErrorCode
from library_site.core.exceptions import AuthException
from library_site.services.auth_service import AuthService

router = APIRouter(prefix="/admin", tags=["admin-auth"])


@router.post(
    "/login",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
    summary="Check admin credentials",
    responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
async def login(
    request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)
) -> ApiResponse:
    """
    Check a username/password pair without creating a session.

    Clients keep the pair and send it as Basic credentials on every admin call.
    """
    if not auth_service.verify(request.username, request.password):
        raise AuthException("Invalid credentials", AuthErrorCode.INVALID_CREDENTIALS)
    return ApiResponse(message="Login successful")


__all__ = ["router"]
