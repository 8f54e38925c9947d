"""
API v1 Router

Aggregates all v1 API routes.
"""
from fastapi import APIRouter
from app.api.v1 import profile, vehicles, history, search

# Create main v1 router
api_router = APIRouter()

# Include sub-routers
api_router.include_router(
    search.router,
    prefix="/search",
    tags=["Search - Repair Videos"]
)

api_router.include_router(
    history.router,
    prefix="/history",
    tags=["Search History"]
)

api_router.include_router(
    vehicles.router,
    prefix="/vehicles",
    tags=["Vehicles"]
)

api_router.include_router(
    profile.router,
    prefix="/profile",
    tags=["Profile"]
)
