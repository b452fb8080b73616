"""
Content Request Schemas

Request bodies for the admin content endpoints. Every field is optional at
the schema level: presence of required fields is checked by the content
service so the error can name the missing field.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class _OrderedContentRequest(BaseModel):
    is_active: Any = Field(
        None,
        description=(
            "Visibility; any truthy value shows the row. Ignored on create, "
            "false when omitted on update"
        ),
    )
    sort_order: Any = Field(
        None, description="Display position; non-numeric values are stored as 0"
    )


class SlideRequest(_OrderedContentRequest):
    """Request body for adding or replacing a hero slide."""

    image_url: Optional[str] = Field(None, description="Background image URL")
    title: Optional[str] = Field(None, description="Headline")
    subtitle: Optional[str] = Field(None, description="Secondary line")


class GalleryImageRequest(_OrderedContentRequest):
    """Request body for adding or replacing a gallery image."""

    image_url: Optional[str] = Field(None, description="Image URL")
    caption: Optional[str] = Field(None, description="Caption")


class ShiftRequest(_OrderedContentRequest):
    """Request body for adding or replacing a shift."""

    icon: Optional[str] = Field(None, description="Icon class")
    time_slot: Optional[str] = Field(None, description="Time range")
    description: Optional[str] = Field(None, description="Short description")


class FacilityRequest(_OrderedContentRequest):
    """Request body for adding or replacing a facility."""

    icon: Optional[str] = Field(None, description="Icon class")
    title: Optional[str] = Field(None, description="Facility name")
    description: Optional[str] = Field(None, description="Short description")


__all__ = [
    "FacilityRequest",
    "GalleryImageRequest",
    "ShiftRequest",
    "SlideRequest",
]
