"""
datacache

Pluggable single-process caching for data providers: an in-memory cache with
LRU eviction and TTL expiration, and a wrapper that puts any cache in front
of a data provider.
"""

from .constants import APP_VERSION
from .domain.cache.exceptions import CacheConfigurationException, CacheException
from .domain.cache.interfaces import CacheProvider, EventLogger
from .domain.cache.options import CacheMode, CacheOptions
from .domain.cache.value_objects import (
    CachedProviderStats,
    CacheSettings,
    CacheStats,
    HitPolicy,
)
from .domain.data.interfaces import DataProvider
from .domain.data.models import DataResponse, ResponseMeta, SelectOptions, SortOrder
from .infrastructure.cache.memory_cache_provider import MemoryCacheProvider
from .infrastructure.data.json_data_provider import JsonDataProvider
from .services.cache.cached_data_provider import CachedDataProvider
from .services.cache.maintenance import CacheMaintenance

__version__ = APP_VERSION

__all__ = [
    "CacheConfigurationException",
    "CacheException",
    "CacheMaintenance",
    "CacheMode",
    "CacheOptions",
    "CacheProvider",
    "CacheSettings",
    "CacheStats",
    "CachedDataProvider",
    "CachedProviderStats",
    "DataProvider",
    "DataResponse",
    "EventLogger",
    "HitPolicy",
    "JsonDataProvider",
    "MemoryCacheProvider",
    "ResponseMeta",
    "SelectOptions",
    "SortOrder",
]
