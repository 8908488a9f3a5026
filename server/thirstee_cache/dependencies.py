"""Request-scoped access to the application's cache objects."""

from fastapi import Request

from .services.cache import TTLCache
from .services.invalidation import CacheInvalidator
from .services.sweeper import CacheSweeper


def get_cache(request: Request) -> TTLCache:
    return request.app.state.cache


def get_invalidator(request: Request) -> CacheInvalidator:
    return request.app.state.invalidator


def get_sweeper(request: Request) -> CacheSweeper:
    return request.app.state.sweeper
