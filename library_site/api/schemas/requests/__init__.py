"""
API Request Schemas

Request schemas for all API endpoints.
"""

from .auth_requests import LoginRequest
from .contact_requests import ContactSubmissionRequest
from .content_requests import (
    FacilityRequest,
    GalleryImageRequest,
    ShiftRequest,
    SlideRequest,
)
from .settings_requests import SettingUpdateRequest

__all__ = [
    "LoginRequest",
    "ContactSubmissionRequest",
    "SlideRequest",
    "GalleryImageRequest",
    "ShiftRequest",
    "FacilityRequest",
    "SettingUpdateRequest",
]
