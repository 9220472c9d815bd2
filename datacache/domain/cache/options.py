"""
Cache Options

Explicit, tagged choice of how a cached data provider gets its cache.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import CacheConfigurationException
from .interfaces import CacheProvider
from .value_objects import HitPolicy


class CacheMode(str, Enum):
    """How the cache of a cached data provider is obtained."""

    DISABLED = "disabled"
    DEFAULT = "default"
    CONFIGURED = "configured"
    CUSTOM = "custom"


@dataclass(frozen=True)
class CacheOptions:
    """
    Caching choice for a cached data provider.

    Use the named constructors rather than building instances directly:

        CacheOptions.disabled()
        CacheOptions.default()
        CacheOptions.configured(max_size=50, default_ttl=1.0)
        CacheOptions.custom(MemoryCacheProvider(max_size=10))

    Settings left as None fall back to the process settings when the cache
    is built.
    """

    mode: CacheMode
    max_size: Optional[int] = None
    default_ttl: Optional[float] = None
    enable_logging: Optional[bool] = None
    hit_policy: Optional[HitPolicy] = None
    provider: Optional[CacheProvider] = None

    def __post_init__(self) -> None:
        """Validate that the mode and the supplied fields agree."""
        if self.mode == CacheMode.CUSTOM and self.provider is None:
            raise CacheConfigurationException(
                "Custom cache mode requires a cache provider instance",
                field="provider",
            )
        if self.mode != CacheMode.CUSTOM and self.provider is not None:
            raise CacheConfigurationException(
                f"Cache provider instance is only accepted in custom mode, got {self.mode.value}",
                field="mode",
                value=self.mode.value,
            )
        if self.mode == CacheMode.CUSTOM and not isinstance(
            self.provider, CacheProvider
        ):
            raise CacheConfigurationException(
                "Custom cache provider must implement CacheProvider",
                field="provider",
                value=type(self.provider).__name__,
            )

    @classmethod
    def disabled(cls) -> "CacheOptions":
        """No cache; every call passes straight through."""
        return cls(mode=CacheMode.DISABLED)

    @classmethod
    def default(cls) -> "CacheOptions":
        """A fresh in-memory cache with the process default settings."""
        return cls(mode=CacheMode.DEFAULT)

    @classmethod
    def configured(
        cls,
        max_size: Optional[int] = None,
        default_ttl: Optional[float] = None,
        enable_logging: Optional[bool] = None,
        hit_policy: Optional[HitPolicy] = None,
    ) -> "CacheOptions":
        """A fresh in-memory cache with caller-supplied settings."""
        return cls(
            mode=CacheMode.CONFIGURED,
            max_size=max_size,
            default_ttl=default_ttl,
            enable_logging=enable_logging,
            hit_policy=hit_policy,
        )

    @classmethod
    def custom(
        cls,
        provider: CacheProvider,
        default_ttl: Optional[float] = None,
        enable_logging: Optional[bool] = None,
        hit_policy: Optional[HitPolicy] = None,
    ) -> "CacheOptions":
        """An already-constructed cache provider supplied by the caller."""
        return cls(
            mode=CacheMode.CUSTOM,
            provider=provider,
            default_ttl=default_ttl,
            enable_logging=enable_logging,
            hit_policy=hit_policy,
        )

    @property
    def enabled(self) -> bool:
        """Whether this choice attaches a cache at all."""
        return self.mode != CacheMode.DISABLED
