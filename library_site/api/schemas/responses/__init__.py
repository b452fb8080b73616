"""
API Response Schemas

Response envelope and health payloads.
"""

from .envelope import ApiResponse
from .health_response import HealthResponse

__all__ = ["ApiResponse", "HealthResponse"]
