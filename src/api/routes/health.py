"""Health check endpoint."""

from datetime import datetime, timezone
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from adapter.mongodb.connection import ping

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(request: Request):
    """Health check endpoint with dependency status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    if ping(getattr(request.app.state, "mongo_client", None)):
        health_status["services"]["mongodb"] = {
            "status": "healthy",
            "message": "Connection successful"
        }
    else:
        health_status["services"]["mongodb"] = {
            "status": "unhealthy",
            "message": "Connection failed or not configured"
        }
        health_status["status"] = "degraded"

    status_code = status.HTTP_200_OK if health_status["status"] == "healthy" else status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(
        content=health_status,
        status_code=status_code
    )
