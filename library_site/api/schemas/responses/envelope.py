"""
Response Envelope

Every JSON endpoint answers with {success, data?, message?}; errors use the
same shape with an "error" key (see library_site.api.schemas.error).
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Successful response envelope. Unset keys are omitted from the JSON."""

    success: bool = Field(True, description="Whether the operation succeeded")
    data: Optional[DataT] = Field(None, description="Operation payload")
    message: Optional[str] = Field(None, description="Human-readable outcome")


__all__ = ["ApiResponse"]
