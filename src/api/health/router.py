"""Health check endpoints."""

from fastapi import APIRouter

from src.api.core.constants import SERVICE_NAME

# Create separate routers for root and health endpoints
root_router = APIRouter()
router = APIRouter(prefix="/health", tags=["health"])


def _liveness() -> dict:
    return {"ok": True, "status": "alive", "service": SERVICE_NAME}


@root_router.get("/")
async def root():
    """Root endpoint, doubles as a liveness probe."""
    return _liveness()


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return _liveness()
