"""
API Error Response Schemas

Pydantic model for error responses. Errors share the success envelope's
shape: {"success": false, "error": "<message>"}.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {"success": False, "error": "Unauthorized"},
                {"success": False, "error": "title is required"},
            ]
        },
    )

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Human-readable error message")
    debug: Optional[Dict[str, Any]] = Field(
        None, description="Debug information (only in debug mode)"
    )
