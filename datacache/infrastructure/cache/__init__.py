"""
Cache Infrastructure Module

Concrete cache provider implementations.
"""

from .memory_cache_provider import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
