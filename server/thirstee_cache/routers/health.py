"""Health check endpoint."""

import platform
import sys
from fastapi import APIRouter, Depends

from .. import __version__
from ..dependencies import get_cache, get_sweeper
from ..services.cache import TTLCache
from ..services.sweeper import CacheSweeper

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    cache: TTLCache = Depends(get_cache),
    sweeper: CacheSweeper = Depends(get_sweeper),
):
    """Health check and status endpoint."""
    return {
        "status": "ok",
        "version": __version__,
        "cacheSize": len(cache),
        "sweeperRunning": sweeper.running,
        "platform": platform.system().lower(),
        "pythonVersion": sys.version,
    }
