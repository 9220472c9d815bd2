"""
Cached Data Provider

Caching wrapper that can stand in for any data provider.

Cache keys are derived from the call parameters:

    get(slug)               -> "get:<slug>"
    select(schema, options) -> "select:<schema>:<canonical JSON of options>"

What happens on a hit is decided by the configured HitPolicy. With
METADATA_REFRESH the wrapped provider is still called so the response
envelope stays fresh, and only its data is replaced by the cached value.
With PURE_CACHE the wrapped provider is skipped and a minimal envelope is
returned.

Errors raised by the wrapped provider propagate unchanged.
"""

from typing import Any, Awaitable, Callable, Optional

import structlog

from ...core.telemetry import get_tracer
from ...domain.cache.interfaces import CacheProvider, EventLogger
from ...domain.cache.options import CacheOptions
from ...domain.cache.value_objects import (
    CachedProviderStats,
    CacheKey,
    CacheSettings,
    CacheStats,
    HitPolicy,
)
from ...domain.data.interfaces import DataProvider
from ...domain.data.models import DataResponse, SelectOptions
from .factory import build_cache, build_event_logger

logger = structlog.get_logger(__name__)
tracer = get_tracer(__name__)


class CachedDataProvider(DataProvider):
    """
    Wraps a data provider with transparent caching.

    Usage:
        provider = CachedDataProvider(JsonDataProvider(content))
        provider = CachedDataProvider(source, CacheOptions.disabled())
        provider = CachedDataProvider(
            source, CacheOptions.configured(max_size=50, default_ttl=1.0)
        )
        provider = CachedDataProvider(source, CacheOptions.custom(my_cache))
    """

    def __init__(
        self,
        provider: DataProvider,
        options: Optional[CacheOptions] = None,
        event_logger: Optional[EventLogger] = None,
    ):
        self._provider = provider
        self._settings, self._cache = build_cache(options, event_logger)
        self._events = build_event_logger(
            "CachedDataProvider", self._settings, event_logger
        )

    @property
    def provider(self) -> DataProvider:
        """Wrapped data provider."""
        return self._provider

    @property
    def cache_provider(self) -> Optional[CacheProvider]:
        """Attached cache, or None when caching is disabled."""
        return self._cache

    @property
    def settings(self) -> CacheSettings:
        """Resolved cache settings."""
        return self._settings

    @property
    def caching_enabled(self) -> bool:
        """Whether a cache is attached."""
        return self._cache is not None

    async def get(self, slug: str) -> DataResponse:
        """Get single data item by slug with caching."""
        if self._cache is None:
            return await self._provider.get(slug)

        key = CacheKey.for_get(slug)
        with tracer.start_as_current_span("cached_data_provider.get") as span:
            span.set_attribute("cache.key", key.value)
            span.set_attribute("data.slug", slug)
            return await self._read_through(
                key, lambda: self._provider.get(slug), span
            )

    async def select(
        self, schema: str, options: Optional[SelectOptions] = None
    ) -> DataResponse:
        """Select multiple data items with query options and caching."""
        if self._cache is None:
            return await self._provider.select(schema, options)

        key = CacheKey.for_select(schema, options)
        with tracer.start_as_current_span("cached_data_provider.select") as span:
            span.set_attribute("cache.key", key.value)
            span.set_attribute("data.schema", schema)
            return await self._read_through(
                key, lambda: self._provider.select(schema, options), span
            )

    async def _read_through(
        self,
        key: CacheKey,
        fetch: Callable[[], Awaitable[DataResponse]],
        span: Any,
    ) -> DataResponse:
        cached = self._cache.get(key.value)

        if cached is not None:
            span.set_attribute("cache.hit", True)
            self._events.record(
                "cache_hit", key=key.value, hit_policy=self._settings.hit_policy.value
            )
            if self._settings.hit_policy == HitPolicy.PURE_CACHE:
                return DataResponse(data=cached, cached=True)

            response = await fetch()
            return response.with_cache_flag(True, data=cached)

        span.set_attribute("cache.hit", False)
        self._events.record("cache_miss", key=key.value)

        response = await fetch()
        if response.data is not None:
            self._cache.set(key.value, response.data, self._settings.default_ttl)

        return response.with_cache_flag(False)

    def _cache_stats(self) -> Optional[CacheStats]:
        # Structural providers may not define get_stats at all.
        get_stats = getattr(self._cache, "get_stats", None)
        return get_stats() if callable(get_stats) else None

    def clear_cache(self, key: Optional[str] = None) -> None:
        """
        Clear cache entries.

        Args:
            key: Exact key, a pattern where ``*`` matches any characters
                (``"select:products:*"``), or None to clear everything
        """
        if self._cache is None:
            self._events.record("cache_clear_skipped", reason="caching_disabled")
            return

        if not key:
            self._cache.clear()
            self._events.record("cache_cleared")
            return

        cache_key = CacheKey(key)
        if not cache_key.is_pattern:
            self._cache.clear(cache_key.value)
            self._events.record("cache_key_cleared", key=cache_key.value)
            return

        stats = self._cache_stats()
        if stats is None:
            logger.warning(
                "Cache provider does not support pattern clearing",
                pattern=key,
                cache_provider=type(self._cache).__name__,
            )
            return

        pattern = cache_key.to_regex()
        matched = [cached_key for cached_key in stats.keys if pattern.search(cached_key)]
        for cached_key in matched:
            self._cache.clear(cached_key)

        self._events.record("cache_pattern_cleared", pattern=key, cleared=len(matched))

    def get_cache_stats(self) -> CachedProviderStats:
        """
        Get cache statistics.

        Expiration is the cache provider's concern, so every held entry is
        reported as valid here.
        """
        if self._cache is None:
            return CachedProviderStats(
                max_size=self._settings.max_size,
                default_ttl=self._settings.default_ttl,
                caching_enabled=False,
            )

        stats = self._cache_stats()
        size = stats.size if stats else 0
        return CachedProviderStats(
            total_entries=size,
            valid_entries=size,
            expired_entries=0,
            max_size=stats.max_size if stats else self._settings.max_size,
            default_ttl=self._settings.default_ttl,
            caching_enabled=True,
            keys=list(stats.keys) if stats else [],
        )

    def set_cache_entry_manually(
        self, key: str, data: Any, ttl: Optional[float] = None
    ) -> None:
        """Store a value directly, bypassing the wrapped provider."""
        if self._cache is None:
            self._events.record("cache_set_skipped", key=key, reason="caching_disabled")
            return

        effective_ttl = ttl if ttl is not None else self._settings.default_ttl
        self._cache.set(CacheKey(key).value, data, effective_ttl)
        self._events.record("cache_set_manually", key=key, ttl=effective_ttl)
