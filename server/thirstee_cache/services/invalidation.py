"""Invalidate related cache entries after data changes."""

import functools
import logging
from typing import Callable, Optional

from .cache import TTLCache
from .cache_keys import CacheKeys

logger = logging.getLogger(__name__)


def _fire_and_forget(func: Callable[..., int]) -> Callable[..., int]:
    """Log and swallow failures; invalidation runs after the mutation already happened."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> int:
        try:
            return func(*args, **kwargs)
        except Exception:
            logger.exception("Cache invalidation %s failed", func.__name__)
            return 0

    return wrapper


def _containing(*substrings: str) -> Callable[[str], bool]:
    return lambda key: any(s in key for s in substrings)


class CacheInvalidator:
    """Deletes every entry that may be stale after a mutation.

    All methods return the number of keys removed and never raise.
    """

    def __init__(self, cache: TTLCache):
        self.cache = cache

    def _delete_keys(self, keys: list[str]) -> int:
        removed = 0
        for key in keys:
            if key in self.cache:
                self.cache.delete(key)
                removed += 1
        return removed

    @_fire_and_forget
    def invalidate_user_caches(self, user_id: str) -> int:
        """Drop the per-user profile, follow-count and event-list entries."""
        removed = self._delete_keys([
            CacheKeys.user_profile(user_id),
            CacheKeys.follow_counts(user_id),
            CacheKeys.my_events(user_id),
            CacheKeys.user_accessible_events(user_id),
        ])
        logger.debug("Invalidated %d cache entries for user %s", removed, user_id)
        return removed

    @_fire_and_forget
    def invalidate_event_caches(self) -> int:
        """Drop the public event list and every per-user event list."""
        removed = self._delete_keys([CacheKeys.PUBLIC_EVENTS])
        removed += self.cache.delete_where(_containing("accessible_events_", "my_events_"))
        logger.debug("Invalidated %d event list cache entries", removed)
        return removed

    @_fire_and_forget
    def invalidate_google_places_caches(self) -> int:
        removed = self.cache.delete_where(_containing("places_predictions_", "place_details_"))
        logger.debug("Invalidated %d Google Places cache entries", removed)
        return removed

    @_fire_and_forget
    def invalidate_event_attendance_caches(self, event_id: Optional[str] = None) -> int:
        """Drop attendance checks for one event, or for all events when no id is given."""
        if event_id:
            marker = f"event_attendance_{event_id}_"
        else:
            marker = "event_attendance_"
        removed = self.cache.delete_where(_containing(marker))
        logger.debug("Invalidated %d attendance cache entries (event=%s)", removed, event_id)
        return removed

    @_fire_and_forget
    def invalidate_pattern(self, pattern: str) -> int:
        """Drop every key containing `pattern`. An empty pattern matches nothing."""
        if not pattern:
            return 0
        return self.cache.delete_where(_containing(pattern))

    @_fire_and_forget
    def invalidate_key(self, key: str) -> int:
        return self._delete_keys([key])

    @_fire_and_forget
    def clear_all(self) -> int:
        removed = len(self.cache)
        self.cache.clear()
        logger.info("Cleared all %d cache entries", removed)
        return removed
