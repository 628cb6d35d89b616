from fastapi import APIRouter

from src.api.health.router import router as health_router, root_router
from src.api.rank.router import router as rank_router

# Main API router
api_router = APIRouter()
api_router.include_router(root_router)
api_router.include_router(health_router)
api_router.include_router(rank_router)
