"""Contact API converters."""

from library_site.api.schemas.requests import ContactSubmissionRequest
from library_site.services.contact_service import ContactSubmissionCreateData


def convert_contact_submission_request(
    request: ContactSubmissionRequest,
) -> ContactSubmissionCreateData:
    """Convert the public form body to service layer data."""

    return ContactSubmissionCreateData(
        name=request.name,
        phone=request.phone,
        shift_preference=request.shift_preference,
        message=request.message,
    )


__all__ = ["convert_contact_submission_request"]
