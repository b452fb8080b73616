"""Site settings endpoints."""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException

from library_site.api.dependencies import require_admin
from library_site.api.schemas.requests import SettingUpdateRequest
from library_site.api.schemas.responses import ApiResponse
from library_site.core.exceptions import ValidationException
from library_site.core.logger import get_logger
from library_site.services.site_settings_service import (
    SiteSettingData,
    SiteSettingsService,
)

logger = get_logger(__name__)

public_router = APIRouter(tags=["settings"])
admin_router = APIRouter(
    prefix="/admin", tags=["admin-settings"], dependencies=[Depends(require_admin)]
)
site_settings_service = SiteSettingsService()


@public_router.get(
    "/settings",
    response_model=ApiResponse[Dict[str, str]],
    response_model_exclude_none=True,
)
async def get_public_settings() -> ApiResponse:
    try:
        return ApiResponse(data=site_settings_service.get_public_settings())
    except Exception as exc:
        logger.error("API: Failed to read settings: %s", exc)
        raise HTTPException(status_code=500, detail="Database error") from exc


@admin_router.get(
    "/settings",
    response_model=ApiResponse[List[SiteSettingData]],
    response_model_exclude_none=True,
)
async def list_settings() -> ApiResponse:
    try:
        return ApiResponse(data=site_settings_service.list_settings())
    except Exception as exc:
        logger.error("API: Failed to list settings: %s", exc)
        raise HTTPException(status_code=500, detail="Database error") from exc


@admin_router.put(
    "/settings/{key}",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
)
async def update_setting(key: str, request: SettingUpdateRequest) -> ApiResponse:
    try:
        site_settings_service.update_setting(key, request.value)
        return ApiResponse(message="Setting updated")
    except ValidationException:
        raise
    except Exception as exc:
        logger.error("API: Failed to update setting %s: %s", key, exc)
        raise HTTPException(status_code=500, detail="Update failed") from exc


__all__ = ["admin_router", "public_router", "site_settings_service"]
