"""Thirstee cache FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import Settings, get_settings
from .routers import health_router, cache_router
from .services.cache import TTLCache
from .services.invalidation import CacheInvalidator
from .services.sweeper import CacheSweeper

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    clock: Callable[[], float] = time.time,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns one cache. It is built when the app starts, swept
    periodically while it runs, and the sweep task is cancelled on shutdown.
    `clock` is handed to the cache.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        cache = TTLCache(
            default_ttl=settings.default_cache_ttl,
            clock=clock,
            strict=settings.strict_validation,
        )
        app.state.cache = cache
        app.state.invalidator = CacheInvalidator(cache)
        app.state.sweeper = CacheSweeper(cache, interval=settings.cache_cleanup_interval)
        async with app.state.sweeper:
            yield
        cache.clear()

    app = FastAPI(
        title="Thirstee Cache",
        description="In-memory TTL cache with statistics and invalidation endpoints",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers with /api prefix
    app.include_router(health_router, prefix="/api")
    app.include_router(cache_router, prefix="/api")

    return app


app = create_app()


def run():
    """Run the server."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Thirstee cache running at http://localhost:%s", settings.port)
    uvicorn.run(
        "thirstee_cache.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
