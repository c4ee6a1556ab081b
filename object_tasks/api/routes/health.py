"""Health Probe — liveness endpoint.

Invariants:
    - GET /health/ always returns 200 if process is up
"""

from fastapi import APIRouter, status

from object_tasks.config import get_settings

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
    }
