"""
API Health Check Endpoint

Reports API status and, when enabled, database connectivity.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from library_site.api.schemas.error import ErrorResponse
from library_site.api.schemas.responses import HealthResponse
from library_site.core.config import settings
from library_site.core.logger import get_logger
from library_site.stores.database import test_connection

logger = get_logger(__name__)

router = APIRouter()


async def check_database_health() -> Dict[str, Any]:
    """Check database connection health."""
    try:
        status = test_connection()
        return {"status": "healthy", "details": status}
    except Exception as e:
        logger.warning("Database health check failed: %s", str(e))
        return {"status": "unhealthy", "error": str(e)}


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="API Health Check",
    description="Check the overall health of the API and its database",
    tags=["health"],
    responses={
        200: {"model": HealthResponse, "description": "Health check results"},
        503: {"model": ErrorResponse, "description": "Service unavailable"},
    },
)
async def health_check() -> HealthResponse:
    """
    Health check endpoint for the API.

    Returns:
        HealthResponse: Overall health status and component details
    """
    components: Dict[str, Any] = {}
    overall_healthy = True

    if settings.health__check_database:
        db_health = await check_database_health()
        components["database"] = db_health
        if db_health["status"] == "unhealthy":
            overall_healthy = False

    components["api"] = {
        "status": "healthy",
        "version": settings.api__version,
        "environment": settings.environment,
    }

    return HealthResponse(
        status="healthy" if overall_healthy else "unhealthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.api__version,
        environment=settings.environment,
        components=components,
    )


__all__ = ["router"]
