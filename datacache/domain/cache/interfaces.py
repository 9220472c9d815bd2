"""
Cache Interfaces

Abstract contracts for cache providers and cache event logging.
Concrete implementations live in the infrastructure and core layers.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from .value_objects import CacheStats


class CacheProvider(ABC):
    """
    Abstract cache provider.

    Stores arbitrary values under string keys. Knows nothing about the
    meaning of the data it holds.

    Subclassing is optional: any class defining callable ``get``, ``set``
    and ``clear`` is recognised as a cache provider by ``isinstance``.
    """

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is CacheProvider:
            if all(
                callable(getattr(subclass, name, None))
                for name in ("get", "set", "clear")
            ):
                return True
        return NotImplemented

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get live value by key, or None on miss or expiry."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """Store value under key with optional TTL in seconds."""
        pass

    @abstractmethod
    def clear(self, key: Optional[str] = None) -> None:
        """Remove one entry, or every entry when no key is given."""
        pass

    def get_stats(self) -> Optional[CacheStats]:
        """
        Get table statistics.

        Optional capability: providers that cannot enumerate their keys keep
        this default and return None.
        """
        return None


class EventLogger(ABC):
    """Structured sink for cache events."""

    @abstractmethod
    def record(self, event: str, **fields: Any) -> None:
        """Record a named event with structured fields."""
        pass
