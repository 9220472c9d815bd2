"""
Cache Value Objects

Immutable value objects for the cache domain.
Provides type safety and validation for cache keys, settings and statistics.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...constants import (
    DEFAULT_MAX_SIZE,
    DEFAULT_TTL_SECONDS,
    GET_KEY_PREFIX,
    KEY_WILDCARD,
    SELECT_KEY_PREFIX,
)
from ..data.models import SelectOptions
from .exceptions import CacheConfigurationException


class HitPolicy(str, Enum):
    """What a cached data provider does when it finds a live entry."""

    # Call the wrapped provider anyway and serve the cached data inside its
    # fresh envelope.
    METADATA_REFRESH = "metadata_refresh"
    # Serve the cached data in a minimal envelope without calling the provider.
    PURE_CACHE = "pure_cache"


@dataclass(frozen=True)
class CacheKey:
    """
    Immutable cache key value object.

    Keys are caller-defined strings. The builders below derive keys for data
    provider operations deterministically from the call parameters.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate cache key format."""
        if not isinstance(self.value, str):
            raise CacheConfigurationException(
                "Cache key must be a string",
                field="key",
                value=type(self.value).__name__,
            )
        if not self.value:
            raise CacheConfigurationException(
                "Cache key cannot be empty", field="key", value=self.value
            )

    @classmethod
    def for_get(cls, slug: str) -> "CacheKey":
        """Create key for a single-item lookup."""
        return cls(f"{GET_KEY_PREFIX}:{slug}")

    @classmethod
    def for_select(
        cls, schema: str, options: Optional[SelectOptions] = None
    ) -> "CacheKey":
        """Create key for a multi-item query.

        Distinct option combinations produce distinct keys.
        """
        fragment = (options or SelectOptions()).cache_fragment()
        return cls(f"{SELECT_KEY_PREFIX}:{schema}:{fragment}")

    @property
    def is_pattern(self) -> bool:
        """Whether the key contains a wildcard."""
        return KEY_WILDCARD in self.value

    def to_regex(self) -> "re.Pattern[str]":
        """Translate a wildcard key into a search pattern.

        ``*`` matches any run of characters; everything else is literal. The
        pattern is unanchored, so it matches anywhere inside a key.
        """
        parts = [re.escape(part) for part in self.value.split(KEY_WILDCARD)]
        return re.compile(".*".join(parts))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of a cache provider's table.

    ``keys`` includes entries that are physically present but already
    expired; expiration is only evaluated on read or cleanup.
    """

    size: int
    max_size: int
    keys: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"size": self.size, "max_size": self.max_size, "keys": list(self.keys)}


class CacheSettings(BaseModel):
    """Resolved, immutable configuration of a cached data provider."""

    model_config = ConfigDict(frozen=True)

    default_ttl: float = Field(
        default=DEFAULT_TTL_SECONDS, gt=0, description="Default TTL in seconds"
    )
    max_size: int = Field(
        default=DEFAULT_MAX_SIZE, ge=1, description="Maximum number of entries"
    )
    enable_logging: bool = Field(default=False, description="Record cache events")
    hit_policy: HitPolicy = Field(
        default=HitPolicy.METADATA_REFRESH, description="Behaviour on cache hit"
    )


class CachedProviderStats(BaseModel):
    """Cache statistics reported by a cached data provider."""

    total_entries: int = Field(0, ge=0, description="Entries held by the cache")
    valid_entries: int = Field(0, ge=0, description="Entries considered live")
    expired_entries: int = Field(0, ge=0, description="Entries known to be expired")
    max_size: int = Field(..., ge=1, description="Configured capacity")
    default_ttl: float = Field(..., gt=0, description="Default TTL in seconds")
    caching_enabled: bool = Field(..., description="Whether a cache is attached")
    keys: Optional[List[str]] = Field(None, description="Currently held keys")
