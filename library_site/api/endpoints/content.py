"""
Content Endpoints

Public listing and admin CRUD routes for the ordered content collections
(slides, gallery, shifts, facilities). Every collection gets the same set of
routes, built from its ContentCollection description.
"""

from typing import Any, Dict, List, Tuple, Type, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from library_site.api.converters import convert_content_request
from library_site.api.dependencies import require_admin
from library_site.api.schemas.error import ErrorResponse
from library_site.api.schemas.requests import (
    FacilityRequest,
    GalleryImageRequest,
    ShiftRequest,
    SlideRequest,
)
from library_site.api.schemas.responses import ApiResponse
from library_site.core.error_codes import APIErrorCode
from library_site.core.exceptions import NotFoundException, ValidationException
from library_site.core.logger import get_logger
from library_site.services.collections import (
    FACILITIES,
    GALLERY,
    SHIFTS,
    SLIDES,
    ContentCollection,
)
from library_site.services.content_service import ContentService

logger = get_logger(__name__)

ADMIN_RESPONSES: Dict[Union[int, str], Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or invalid field"},
    401: {"model": ErrorResponse, "description": "Missing or invalid credentials"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}


def build_content_routers(
    collection: ContentCollection, request_model: Type[BaseModel]
) -> Tuple[APIRouter, APIRouter]:
    """
    Build the public and admin routers for one content collection.

    Args:
        collection: Collection description (model, schemas, defaults)
        request_model: Request body schema for add and update

    Returns:
        (public_router, admin_router); the admin router is gated by require_admin
    """
    service = ContentService(collection)
    name = collection.name
    label = collection.label
    data_model: Any = collection.data_schema
    public_model: Any = collection.public_schema

    public_router = APIRouter(tags=[name])
    admin_router = APIRouter(
        prefix="/admin",
        tags=[f"admin-{name}"],
        dependencies=[Depends(require_admin)],
        responses=ADMIN_RESPONSES,
    )

    @public_router.get(
        f"/{name}",
        response_model=ApiResponse[List[public_model]],
        response_model_exclude_none=True,
        summary=f"List visible {name}",
    )
    async def list_public() -> ApiResponse:
        try:
            return ApiResponse(data=service.list_public())
        except Exception as exc:
            logger.error("API: Failed to list public %s: %s", name, exc)
            raise HTTPException(status_code=500, detail="Database error") from exc

    @admin_router.get(
        f"/{name}",
        response_model=ApiResponse[List[data_model]],
        response_model_exclude_none=True,
        summary=f"List all {name}",
    )
    async def list_all() -> ApiResponse:
        try:
            return ApiResponse(data=service.list_all())
        except Exception as exc:
            logger.error("API: Failed to list %s: %s", name, exc)
            raise HTTPException(status_code=500, detail="Database error") from exc

    @admin_router.get(
        f"/{name}/{{item_id}}",
        response_model=ApiResponse[data_model],
        response_model_exclude_none=True,
        summary=f"Get one {label.lower()}",
        responses={404: {"model": ErrorResponse, "description": f"{label} not found"}},
    )
    async def get_item(item_id: int) -> ApiResponse:
        try:
            item = service.get(item_id)
        except Exception as exc:
            logger.error("API: Failed to get %s %s: %s", name, item_id, exc)
            raise HTTPException(status_code=500, detail="Database error") from exc
        if item is None:
            raise NotFoundException(f"{label} not found", APIErrorCode.NOT_FOUND)
        return ApiResponse(data=item)

    @admin_router.post(
        f"/{name}",
        response_model=ApiResponse[None],
        response_model_exclude_none=True,
        summary=f"Add a {label.lower()}",
    )
    async def add_item(request: request_model) -> ApiResponse:  # type: ignore[valid-type]
        try:
            service.create(convert_content_request(request))
            return ApiResponse(message=f"{label} added")
        except ValidationException:
            raise
        except Exception as exc:
            logger.error("API: Failed to add %s: %s", name, exc)
            raise HTTPException(status_code=500, detail="Add failed") from exc

    @admin_router.put(
        f"/{name}/{{item_id}}",
        response_model=ApiResponse[None],
        response_model_exclude_none=True,
        summary=f"Replace a {label.lower()}",
    )
    async def update_item(
        item_id: int, request: request_model  # type: ignore[valid-type]
    ) -> ApiResponse:
        try:
            service.update(item_id, convert_content_request(request))
            return ApiResponse(message=f"{label} updated")
        except ValidationException:
            raise
        except Exception as exc:
            logger.error("API: Failed to update %s %s: %s", name, item_id, exc)
            raise HTTPException(status_code=500, detail="Update failed") from exc

    @admin_router.delete(
        f"/{name}/{{item_id}}",
        response_model=ApiResponse[None],
        response_model_exclude_none=True,
        summary=f"Delete a {label.lower()}",
    )
    async def delete_item(item_id: int) -> ApiResponse:
        try:
            service.delete(item_id)
            return ApiResponse(message=f"{label} deleted")
        except Exception as exc:
            logger.error("API: Failed to delete %s %s: %s", name, item_id, exc)
            raise HTTPException(status_code=500, detail="Delete failed") from exc

    return public_router, admin_router


public_router = APIRouter()
admin_router = APIRouter()

for _collection, _request_model in (
    (SLIDES, SlideRequest),
    (GALLERY, GalleryImageRequest),
    (SHIFTS, ShiftRequest),
    (FACILITIES, FacilityRequest),
):
    _public, _admin = build_content_routers(_collection, _request_model)
    public_router.include_router(_public)
    admin_router.include_router(_admin)


__all__ = ["admin_router", "build_content_routers", "public_router"]
