"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import calendar, dashboard, progress, settings, snapshots, weights, workouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    weights.router, prefix="/weights", tags=["Exercise weights"]
)
api_router.include_router(
    workouts.router, prefix="/workouts", tags=["Training split"]
)
api_router.include_router(
    calendar.router, prefix="/calendar", tags=["Workout calendar"]
)
api_router.include_router(
    progress.router, prefix="/progress", tags=["Monthly progress"]
)
api_router.include_router(
    snapshots.router, prefix="/snapshots", tags=["Monthly snapshot"]
)
api_router.include_router(
    settings.router, prefix="/settings", tags=["User settings"]
)
api_router.include_router(
    dashboard.router, prefix="/dashboard", tags=["Dashboard"]
)
