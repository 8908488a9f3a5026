"""Periodic cleanup of expired cache entries."""

import asyncio
import logging
from typing import Optional

from .cache import TTLCache

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL = 600.0  # 10 minutes


class CacheSweeper:
    """Runs `cache.cleanup()` every `interval` seconds on the running event loop.

    The sweep task only exists between `start()` and `stop()`; use it as an
    async context manager to guarantee the task is cancelled.
    """

    def __init__(self, cache: TTLCache, interval: float = DEFAULT_SWEEP_INTERVAL):
        if interval <= 0:
            raise ValueError(f"Sweep interval must be positive, got {interval!r}")
        self.cache = cache
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def sweep_once(self) -> int:
        """Run a single cleanup pass now."""
        evicted = self.cache.cleanup()
        logger.debug("Cache sweep evicted %d entries, %d remain", evicted, len(self.cache))
        return evicted

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                self.sweep_once()
            except Exception:
                logger.exception("Cache sweep failed")

    def start(self) -> None:
        """Schedule the sweep loop. Must be called from inside a running loop."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Cache sweeper started (every %ss)", self.interval)

    async def stop(self) -> None:
        """Cancel the sweep loop and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Cache sweeper stopped")

    async def __aenter__(self) -> "CacheSweeper":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
