"""Contact form request schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class ContactSubmissionRequest(BaseModel):
    """Public contact form body; name and phone are checked by the service."""

    name: Optional[str] = Field(None, description="Visitor name")
    phone: Optional[str] = Field(None, description="Phone number")
    shift_preference: Optional[str] = Field(None, description="Preferred shift")
    message: Optional[str] = Field(None, description="Free-form message")


__all__ = ["ContactSubmissionRequest"]
