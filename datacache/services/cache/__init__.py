"""
Cache Services Module

Caching composition over data providers and cache maintenance.
"""

from .cached_data_provider import CachedDataProvider
from .factory import build_cache
from .maintenance import CacheMaintenance

__all__ = ["CachedDataProvider", "CacheMaintenance", "build_cache"]
