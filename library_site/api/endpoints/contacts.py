"""Contact form endpoints: public submit and admin triage."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from library_site.api.converters import convert_contact_submission_request
from library_site.api.dependencies import require_admin
from library_site.api.schemas.requests import ContactSubmissionRequest
from library_site.api.schemas.responses import ApiResponse
from library_site.core.exceptions import ValidationException
from library_site.core.logger import get_logger
from library_site.services.contact_service import ContactService, ContactSubmissionData

logger = get_logger(__name__)

public_router = APIRouter(tags=["contact"])
admin_router = APIRouter(
    prefix="/admin/contacts",
    tags=["admin-contacts"],
    dependencies=[Depends(require_admin)],
)
contact_service = ContactService()


@public_router.post(
    "/contact",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
)
async def submit_contact(request: ContactSubmissionRequest) -> ApiResponse:
    try:
        contact_service.submit(convert_contact_submission_request(request))
        return ApiResponse(message="Form submitted successfully")
    except ValidationException:
        raise
    except Exception as exc:
        logger.error("API: Failed to store contact submission: %s", exc)
        raise HTTPException(status_code=500, detail="Submission failed") from exc


@admin_router.get(
    "",
    response_model=ApiResponse[List[ContactSubmissionData]],
    response_model_exclude_none=True,
)
async def list_contacts() -> ApiResponse:
    try:
        return ApiResponse(data=contact_service.list_submissions())
    except Exception as exc:
        logger.error("API: Failed to list contact submissions: %s", exc)
        raise HTTPException(status_code=500, detail="Database error") from exc


@admin_router.put(
    "/{submission_id}/read",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
)
async def mark_contact_read(submission_id: int) -> ApiResponse:
    try:
        contact_service.mark_read(submission_id)
        return ApiResponse(message="Marked as read")
    except Exception as exc:
        logger.error("API: Failed to mark contact %s read: %s", submission_id, exc)
        raise HTTPException(status_code=500, detail="Update failed") from exc


@admin_router.delete(
    "/{submission_id}",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
)
async def delete_contact(submission_id: int) -> ApiResponse:
    try:
        contact_service.delete(submission_id)
        return ApiResponse(message="Contact deleted")
    except Exception as exc:
        logger.error("API: Failed to delete contact %s: %s", submission_id, exc)
        raise HTTPException(status_code=500, detail="Delete failed") from exc


__all__ = ["admin_router", "contact_service", "public_router"]
