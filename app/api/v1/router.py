"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, players, scouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    players.router, prefix="/players", tags=["Player profiles"]
)
api_router.include_router(
    scouts.router, prefix="/scouts", tags=["Scout profiles"]
)
