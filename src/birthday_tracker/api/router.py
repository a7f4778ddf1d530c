"""Main router aggregation."""

from fastapi import APIRouter

from birthday_tracker.api.auth import router as auth_router
from birthday_tracker.api.birthdays import fallback_router
from birthday_tracker.api.birthdays import router as birthdays_router

# Main router; pages live at the site root
api_router = APIRouter()

# Include all sub-routers, the catch-all /{username} last
api_router.include_router(auth_router)
api_router.include_router(birthdays_router)
api_router.include_router(fallback_router)
