"""API routers for Notekeeper."""

from .auth import router as auth_router
from .categories import router as categories_router
from .health import router as health_router
from .home import router as home_router
from .notes import router as notes_router

__all__ = ["auth_router", "home_router", "notes_router", "categories_router", "health_router"]
