"""Content API converters."""

from typing import Any, Dict

from pydantic import BaseModel


def convert_content_request(request: BaseModel) -> Dict[str, Any]:
    """
    Convert a content request body to the service payload.

    Only keys the client actually sent are kept, so an omitted is_active
    stays absent rather than becoming an explicit value.
    """
    return request.model_dump(exclude_unset=True)


__all__ = ["convert_content_request"]
