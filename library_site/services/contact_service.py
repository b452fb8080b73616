"""Business logic for contact form submissions."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from library_site.core.error_codes import ValidationErrorCode
from library_site.core.exceptions import ValidationException
from library_site.core.logger import get_logger
from library_site.models import ContactSubmission
from library_site.models.base import utcnow
from library_site.services.content_service import is_blank
from library_site.stores.contact_store import ContactStore

logger = get_logger(__name__)


class ContactSubmissionCreateData(BaseModel):
    """Input payload from the public contact form."""

    name: Optional[str] = Field(None, description="Visitor name")
    phone: Optional[str] = Field(None, description="Visitor phone number")
    shift_preference: Optional[str] = Field(None, description="Preferred shift")
    message: Optional[str] = Field(None, description="Free-form message")


class ContactSubmissionData(BaseModel):
    """Full submission row for the admin console."""

    id: int = Field(..., description="Submission identifier")
    name: str = Field(..., description="Visitor name")
    phone: str = Field(..., description="Visitor phone number")
    shift_preference: str = Field("", description="Preferred shift")
    message: str = Field("", description="Free-form message")
    created_at: datetime = Field(..., description="Submission timestamp")
    is_read: bool = Field(False, description="Whether an admin has read it")

    model_config = ConfigDict(from_attributes=True)


class ContactService:
    """Accepts public submissions and exposes them for admin triage."""

    def __init__(self, store: Optional[ContactStore] = None) -> None:
        self.store = store or ContactStore()

    def submit(self, data: ContactSubmissionCreateData) -> None:
        """
        Store a new submission.

        Raises:
            ValidationException: If name or phone is blank
        """
        if is_blank(data.name) or is_blank(data.phone):
            raise ValidationException(
                "Name and phone are required", ValidationErrorCode.MISSING_FIELD
            )

        submission = ContactSubmission(
            name=data.name,
            phone=data.phone,
            shift_preference=data.shift_preference or "",
            message=data.message or "",
            created_at=utcnow(),
            is_read=False,
        )
        created = self.store.create(submission)
        logger.info("New contact submission %s", created.id)

    def list_submissions(self) -> List[ContactSubmissionData]:
        return [
            ContactSubmissionData.model_validate(row)
            for row in self.store.list_submissions()
        ]

    def mark_read(self, submission_id: int) -> None:
        if not self.store.mark_read(submission_id):
            logger.info("Contact submission %s not found for mark-read", submission_id)

    def delete(self, submission_id: int) -> None:
        self.store.delete(submission_id)


__all__ = [
    "ContactService",
    "ContactSubmissionCreateData",
    "ContactSubmissionData",
]
