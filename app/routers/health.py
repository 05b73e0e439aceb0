# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# Static liveness payload for monitoring and load balancers.
# =============================================================================

from fastapi import APIRouter

from core.models.user import HealthStatus

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
async def health_check():
    """
    Health check endpoint.

    Always succeeds while the process is up.
    """
    return HealthStatus(status="ok", message="Server is running")
