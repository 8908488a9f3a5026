"""TTL-based caching service."""

import logging
import time
from typing import Any, Awaitable, Callable, Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_TTL = 300.0  # 5 minutes


class InvalidCacheArgument(ValueError):
    """Raised in strict mode for a non-string key or a negative TTL."""


@dataclass
class CacheEntry:
    """A single cache entry with TTL."""
    value: Any
    inserted_at: float
    ttl: float  # TTL in seconds

    def is_expired(self, now: float) -> bool:
        return now - self.inserted_at > self.ttl


@dataclass
class CacheStats:
    """Cache statistics."""

    size: int = 0
    hits: int = 0
    misses: int = 0
    hit_rate: float = 0.0
    expired: int = 0
    default_ttl: float = DEFAULT_TTL

    def to_dict(self) -> dict:
        """Convert to dict."""
        return {
            "size": self.size,
            "hits": self.hits,
            "misses": self.misses,
            "hitRate": self.hit_rate,
            "expired": self.expired,
            "defaultTtl": self.default_ttl,
        }


class TTLCache:
    """In-memory cache with lazy expiration on read.

    Expired entries are dropped when they are read or when `cleanup()` runs;
    between sweeps they may still occupy the map. There is no size bound.
    The cache is meant for a single event loop: none of its methods suspend,
    so no locking is needed.

    `clock` returns the current time in seconds and can be replaced in tests.
    With `strict=True`, a non-string key or a negative TTL raises
    `InvalidCacheArgument`; otherwise the key is coerced with `str()` and the
    TTL falls back to the default, with a warning.
    """

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.time,
        strict: bool = False,
    ):
        self._strict = strict
        # Fallback used while the configured default itself is validated
        self.default_ttl = DEFAULT_TTL
        self.default_ttl = self._check_ttl(default_ttl)
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0

    def _check_key(self, key: Any) -> str:
        if isinstance(key, str):
            return key
        if self._strict:
            raise InvalidCacheArgument(f"Cache key must be a string, got {type(key).__name__}")
        logger.warning("Coercing non-string cache key %r to str", key)
        return str(key)

    def _check_ttl(self, ttl: Any) -> float:
        if ttl is None:
            return self.default_ttl
        valid = isinstance(ttl, (int, float)) and not isinstance(ttl, bool) and ttl >= 0
        if valid:
            return float(ttl)
        if self._strict:
            raise InvalidCacheArgument(f"Cache TTL must be a non-negative number, got {ttl!r}")
        logger.warning("Ignoring invalid cache TTL %r, using default %ss", ttl, self.default_ttl)
        return self.default_ttl

    def get(self, key: str) -> Optional[Any]:
        """Get cached value, or None if missing or expired."""
        key = self._check_key(key)
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None

        if entry.is_expired(self._clock()):
            # Expired
            del self._entries[key]
            self._misses += 1
            logger.debug("Cache entry expired: %s", key)
            return None

        self._hits += 1
        return entry.value

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """Set cache value, replacing any existing entry and its timestamp."""
        key = self._check_key(key)
        self._entries[key] = CacheEntry(
            value=value,
            inserted_at=self._clock(),
            ttl=self._check_ttl(ttl),
        )

    def delete(self, key: str) -> None:
        """Delete a cache entry if present."""
        self._entries.pop(self._check_key(key), None)

    def clear(self) -> None:
        """Clear all cache entries."""
        self._entries.clear()

    def cleanup(self) -> int:
        """Evict every expired entry. Returns the number evicted."""
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Cache cleanup evicted %d expired entries", len(expired))
        return len(expired)

    def delete_where(self, predicate: Callable[[str], bool]) -> int:
        """Delete every key for which `predicate(key)` is true. Returns the count."""
        matched = [key for key in self._entries if predicate(key)]
        for key in matched:
            del self._entries[key]
        return len(matched)

    def keys(self) -> list[str]:
        """Snapshot of stored keys, including expired ones not yet swept."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        """Raw presence check: no expiry check and no hit/miss counting."""
        return self._check_key(key) in self._entries

    def stats(self) -> CacheStats:
        """Get cache statistics."""
        now = self._clock()
        total = self._hits + self._misses
        return CacheStats(
            size=len(self._entries),
            hits=self._hits,
            misses=self._misses,
            hit_rate=self._hits / total if total > 0 else 0.0,
            expired=sum(1 for entry in self._entries.values() if entry.is_expired(now)),
            default_ttl=self.default_ttl,
        )

    async def with_cache(
        self,
        key: str,
        fetcher: Callable[[], Awaitable[Any]],
        ttl: Optional[float] = None,
        force_refresh: bool = False,
    ) -> Any:
        """Return the cached value for `key`, or await `fetcher()` and cache its result.

        Failures are never cached: if `fetcher` raises, the exception reaches
        the caller unchanged and the next call fetches again. Concurrent
        callers on a cold key each run `fetcher`; the last result stored wins.
        """
        if not force_refresh:
            cached = self.get(key)
            if cached is not None:
                logger.debug("Cache hit for %s", key)
                return cached

        data = await fetcher()
        self.set(key, data, ttl)
        return data
