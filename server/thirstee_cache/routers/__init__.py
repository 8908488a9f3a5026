"""API Routers for the Thirstee cache service."""

from .health import router as health_router
from .cache import router as cache_router

__all__ = [
    "health_router",
    "cache_router",
]
