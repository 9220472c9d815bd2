"""
Cache Maintenance Service

Periodic sweeping of expired entries for caches that support cleanup().
Nothing is scheduled automatically; the embedding application starts and
stops the sweep loop explicitly.
"""

import asyncio
from typing import Optional, Protocol

import structlog

from ...core.config import get_settings

logger = structlog.get_logger(__name__)


class SupportsCleanup(Protocol):
    """Any cache exposing an expired-entry sweep."""

    def cleanup(self) -> int: ...


class CacheMaintenance:
    """
    Runs cleanup() on a cache at a fixed interval.

    Usage:
        maintenance = CacheMaintenance(cache, interval_seconds=30)
        await maintenance.start()
        ...
        await maintenance.stop()
    """

    def __init__(
        self, cache: SupportsCleanup, interval_seconds: Optional[float] = None
    ):
        interval = (
            interval_seconds
            if interval_seconds is not None
            else get_settings().CLEANUP_INTERVAL_SECONDS
        )
        if interval <= 0:
            raise ValueError("Cleanup interval must be positive")

        self.cache = cache
        self.interval_seconds = float(interval)
        self.total_removed = 0
        self.sweeps = 0
        self._cleanup_task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        """Whether the sweep loop is active."""
        return self._cleanup_task is not None and not self._cleanup_task.done()

    async def start(self) -> None:
        """Start background cleanup."""
        if self._cleanup_task is None:
            self._cleanup_task = asyncio.create_task(self._cleanup_loop())
            logger.info(
                "Cache cleanup started", interval_seconds=self.interval_seconds
            )

    async def stop(self) -> None:
        """Stop background cleanup."""
        if self._cleanup_task:
            self._cleanup_task.cancel()
            try:
                await self._cleanup_task
            except asyncio.CancelledError:
                pass
            self._cleanup_task = None
            logger.info(
                "Cache cleanup stopped",
                sweeps=self.sweeps,
                total_removed=self.total_removed,
            )

    async def run_once(self) -> int:
        """Run a single sweep and return the number of removed entries."""
        removed = self.cache.cleanup()
        self.sweeps += 1
        self.total_removed += removed
        logger.debug("Cache cleanup sweep completed", removed=removed)
        return removed

    async def _cleanup_loop(self) -> None:
        """Background cleanup loop."""
        while True:
            try:
                await asyncio.sleep(self.interval_seconds)
                await self.run_once()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error("Cache cleanup error", error=str(e))
