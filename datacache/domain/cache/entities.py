"""
Cache Domain Entities

Core domain entity held in the cache table of an in-memory cache provider.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class CacheEntry:
    """
    Cache entry entity.

    Holds an opaque payload with the monotonic time of its insertion (or last
    overwrite) and an optional per-entry TTL. The payload is never mutated by
    the cache.
    """

    value: Any
    stored_at: float = field(default_factory=time.monotonic)
    ttl: Optional[float] = None

    def effective_ttl(self, default_ttl: float) -> float:
        """TTL that applies to this entry given the cache default."""
        return self.ttl if self.ttl is not None else default_ttl

    def is_expired(self, default_ttl: float, now: Optional[float] = None) -> bool:
        """
        Check if the entry is past its TTL.

        An entry stays live while ``now - stored_at <= ttl``.
        """
        if now is None:
            now = time.monotonic()
        return now - self.stored_at > self.effective_ttl(default_ttl)

    def age_seconds(self, now: Optional[float] = None) -> float:
        """Seconds elapsed since the entry was stored."""
        if now is None:
            now = time.monotonic()
        return now - self.stored_at
