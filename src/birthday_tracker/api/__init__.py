"""HTTP route handlers."""

from birthday_tracker.api.router import api_router

__all__ = ["api_router"]
