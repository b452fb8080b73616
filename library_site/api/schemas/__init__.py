"""
API Schemas

Pydantic models for API requests and responses.
"""

from .error import ErrorResponse

__all__ = ["ErrorResponse"]
