"""Health routes - Service health and readiness checks."""

from datetime import datetime, timezone

from fastapi import APIRouter

from globalwatch.core.config import settings
from globalwatch.schemas.api import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health():
    """
    Health check endpoint for load balancer and container health checks.

    The service keeps no state of its own; it reports its configuration.
    Source outages surface as empty lists, not as an unhealthy service.
    """
    return HealthResponse(
        status="healthy",
        env=settings.ENV,
        sources=list(settings.ENABLED_SOURCES),
        age_progression_configured=bool(settings.AGE_PROGRESSION_URL),
    )


@router.get("/ready")
def readiness():
    """Readiness probe - the service can serve as soon as it is up."""
    return {"status": "ready", "timestamp": datetime.now(timezone.utc).isoformat()}
