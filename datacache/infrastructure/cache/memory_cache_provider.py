"""
In-Memory Cache Provider

Single-process cache with LRU eviction and lazy TTL expiration.

The table is an ordered mapping whose iteration order is the recency order:
the first key is the least recently touched one. A successful read or an
overwrite moves the key to the end. Expiration is evaluated lazily on read
and by explicit cleanup() sweeps; no background work happens here.

There is no internal locking. Instances are meant for sequential use by a
single owner; concurrent callers must serialize access themselves.
"""

import time
from collections import OrderedDict
from typing import Any, Callable, Optional

import structlog

from ...constants import DEFAULT_MAX_SIZE, DEFAULT_TTL_SECONDS
from ...core.logging import NullEventLogger, StructlogEventLogger
from ...domain.cache.entities import CacheEntry
from ...domain.cache.exceptions import CacheConfigurationException
from ...domain.cache.interfaces import CacheProvider, EventLogger
from ...domain.cache.value_objects import CacheStats

logger = structlog.get_logger(__name__)


class MemoryCacheProvider(CacheProvider):
    """
    In-memory cache provider with LRU eviction and TTL support.

    Features:
    - evicts the least recently used entry when max_size is reached
    - per-entry TTL override, falling back to the default TTL at read time
    - statistics and explicit cleanup of expired entries

    Usage:
        cache = MemoryCacheProvider(max_size=50, default_ttl=300)
        cache.set("key1", data, ttl=60)
        cached = cache.get("key1")
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        default_ttl: float = DEFAULT_TTL_SECONDS,
        enable_logging: bool = False,
        event_logger: Optional[EventLogger] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size < 1:
            raise CacheConfigurationException(
                "Cache max_size must be a positive integer",
                field="max_size",
                value=max_size,
            )
        if default_ttl is None or default_ttl <= 0:
            raise CacheConfigurationException(
                "Cache default_ttl must be positive",
                field="default_ttl",
                value=default_ttl,
            )

        self._max_size = max_size
        self._default_ttl = float(default_ttl)
        self._clock = clock
        self._cache: "OrderedDict[str, CacheEntry]" = OrderedDict()

        if event_logger is not None:
            self._events = event_logger
        elif enable_logging:
            self._events = StructlogEventLogger("MemoryCacheProvider")
        else:
            self._events = NullEventLogger()

        self._events.record(
            "cache_initialized", max_size=max_size, default_ttl=self._default_ttl
        )

    @property
    def max_size(self) -> int:
        """Configured capacity."""
        return self._max_size

    @property
    def default_ttl(self) -> float:
        """TTL applied to entries stored without their own TTL."""
        return self._default_ttl

    def get(self, key: str) -> Optional[Any]:
        """
        Get cached value by key.

        Returns None if the key is unknown or its entry has expired; an
        expired entry is removed on the way. A live entry becomes the most
        recently used one. Reading does not extend the entry's TTL.
        """
        entry = self._cache.get(key)
        if entry is None:
            self._events.record("cache_miss", key=key)
            return None

        if entry.is_expired(self._default_ttl, now=self._clock()):
            del self._cache[key]
            self._events.record("cache_expired", key=key)
            return None

        self._cache.move_to_end(key)
        self._events.record("cache_hit", key=key)
        return entry.value

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """
        Store value under key with an optional TTL in seconds.

        An existing entry for the key is replaced and moves to the most
        recently used position. When the table is full, the least recently
        used entry is evicted first.
        """
        if ttl is not None and ttl <= 0:
            raise CacheConfigurationException(
                "Cache entry ttl must be positive", field="ttl", value=ttl
            )

        self._cache.pop(key, None)

        if len(self._cache) >= self._max_size:
            oldest_key, _ = self._cache.popitem(last=False)
            self._events.record("cache_evicted", key=oldest_key, reason="lru")

        self._cache[key] = CacheEntry(value=value, stored_at=self._clock(), ttl=ttl)
        self._events.record(
            "cache_set", key=key, ttl=ttl if ttl is not None else self._default_ttl
        )

    def clear(self, key: Optional[str] = None) -> None:
        """Remove one entry (no-op when absent) or empty the whole table."""
        if key is None:
            count = len(self._cache)
            self._cache.clear()
            self._events.record("cache_cleared", entries=count)
            return

        if self._cache.pop(key, None) is not None:
            self._events.record("cache_key_cleared", key=key)

    def get_stats(self) -> CacheStats:
        """
        Get cache statistics.

        Expired entries that have not been reclaimed yet are still counted.
        """
        return CacheStats(
            size=len(self._cache),
            max_size=self._max_size,
            keys=list(self._cache.keys()),
        )

    def cleanup(self) -> int:
        """
        Remove every expired entry.

        Not called automatically; meant for periodic scheduling.

        Returns:
            Number of entries removed
        """
        now = self._clock()
        expired_keys = [
            key
            for key, entry in self._cache.items()
            if entry.is_expired(self._default_ttl, now=now)
        ]

        for key in expired_keys:
            del self._cache[key]

        if expired_keys:
            self._events.record("cache_cleanup", removed=len(expired_keys))
            logger.info(
                "Cleaned up expired cache entries",
                removed=len(expired_keys),
                remaining=len(self._cache),
            )

        return len(expired_keys)

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: object) -> bool:
        """Live-entry check that does not touch recency order."""
        entry = self._cache.get(key) if isinstance(key, str) else None
        if entry is None:
            return False
        return not entry.is_expired(self._default_ttl, now=self._clock())
