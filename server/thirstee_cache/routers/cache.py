"""Cache inspection and invalidation endpoints."""

from collections import defaultdict
from typing import Optional
from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_cache, get_invalidator, get_sweeper
from ..services.cache import TTLCache
from ..services.cache_keys import CacheKeys
from ..services.invalidation import CacheInvalidator
from ..services.sweeper import CacheSweeper

router = APIRouter(prefix="/cache", tags=["cache"])


class PatternRequest(BaseModel):
    """Request to invalidate every key containing a substring."""
    pattern: str = Field(..., description="Substring matched against cache keys")


def group_by_prefix(keys: list[str]) -> dict[str, int]:
    """Count keys per known prefix; unknown keys are counted as 'other'."""
    prefixes = CacheKeys.prefixes()
    counts: dict[str, int] = defaultdict(int)
    for key in keys:
        group = next((p.rstrip("_") for p in prefixes if key.startswith(p)), "other")
        counts[group] += 1
    return dict(counts)


@router.get("/stats")
async def get_stats(cache: TTLCache = Depends(get_cache)):
    """Get cache statistics."""
    return {
        **cache.stats().to_dict(),
        "byPrefix": group_by_prefix(cache.keys()),
    }


@router.get("/keys")
async def list_keys(
    prefix: Optional[str] = Query(None),
    cache: TTLCache = Depends(get_cache),
):
    """List stored keys, optionally only those starting with `prefix`."""
    keys = cache.keys()
    if prefix:
        keys = [k for k in keys if k.startswith(prefix)]
    return {"keys": sorted(keys), "total": len(keys)}


@router.get("/keys/{key:path}/exists")
async def key_exists(key: str, cache: TTLCache = Depends(get_cache)):
    """Check whether a key holds a fresh value."""
    if cache.get(key) is None:
        raise HTTPException(status_code=404, detail="Key not found")
    return {"key": key, "exists": True}


@router.delete("/keys/{key:path}")
async def delete_key(key: str, invalidator: CacheInvalidator = Depends(get_invalidator)):
    """Delete a single key."""
    return {"removed": invalidator.invalidate_key(key)}


@router.delete("")
async def clear_cache(invalidator: CacheInvalidator = Depends(get_invalidator)):
    """Clear all cache entries."""
    return {"removed": invalidator.clear_all()}


@router.post("/cleanup")
async def run_cleanup(sweeper: CacheSweeper = Depends(get_sweeper)):
    """Evict expired entries now instead of waiting for the next sweep."""
    return {"removed": sweeper.sweep_once()}


@router.post("/invalidate/users/{user_id}")
async def invalidate_user(user_id: str, invalidator: CacheInvalidator = Depends(get_invalidator)):
    return {"removed": invalidator.invalidate_user_caches(user_id)}


@router.post("/invalidate/events")
async def invalidate_events(invalidator: CacheInvalidator = Depends(get_invalidator)):
    return {"removed": invalidator.invalidate_event_caches()}


@router.post("/invalidate/places")
async def invalidate_places(invalidator: CacheInvalidator = Depends(get_invalidator)):
    return {"removed": invalidator.invalidate_google_places_caches()}


@router.post("/invalidate/attendance")
async def invalidate_attendance(
    event_id: Optional[str] = Query(None),
    invalidator: CacheInvalidator = Depends(get_invalidator),
):
    """Invalidate attendance checks for one event, or all events."""
    return {"removed": invalidator.invalidate_event_attendance_caches(event_id)}


@router.post("/invalidate/pattern")
async def invalidate_pattern(
    request: PatternRequest,
    invalidator: CacheInvalidator = Depends(get_invalidator),
):
    """Invalidate every key containing the given substring."""
    if not request.pattern:
        raise HTTPException(status_code=400, detail="Pattern must not be empty")
    return {"removed": invalidator.invalidate_pattern(request.pattern)}
