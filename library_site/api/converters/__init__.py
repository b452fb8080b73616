"""
API Layer Converters

Converters between API layer schemas and service layer schemas.
"""

from .contact_converters import convert_contact_submission_request
from .content_converters import convert_content_request

__all__ = [
    "convert_contact_submission_request",
    "convert_content_request",
]
