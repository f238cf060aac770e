"""Health check endpoints."""

from fastapi import APIRouter, Depends, Response, status

from lingam.app.api.deps import get_services
from lingam.app.services import ServiceRegistry

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness_check(response: Response, services: ServiceRegistry = Depends(get_services)):
    """
    Readiness check - fails with 503 when the storage database is unreachable.
    """
    health_status = {"status": "ready", "checks": {"database": "unknown"}}

    try:
        await services.storage.ping()
        health_status["checks"]["database"] = "ok"
    except Exception as e:
        health_status["checks"]["database"] = f"failed: {e}"
        health_status["status"] = "not_ready"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return health_status
