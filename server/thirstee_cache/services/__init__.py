"""Caching services for Thirstee."""

from .cache import TTLCache, CacheEntry, CacheStats, InvalidCacheArgument
from .cache_keys import CacheKeys, CacheTTL
from .invalidation import CacheInvalidator
from .sweeper import CacheSweeper

__all__ = [
    "TTLCache",
    "CacheEntry",
    "CacheStats",
    "InvalidCacheArgument",
    "CacheKeys",
    "CacheTTL",
    "CacheInvalidator",
    "CacheSweeper",
]
