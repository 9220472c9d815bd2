"""
Cache Factory

Pure construction of the cache used by a cached data provider.
"""

from typing import Optional, Tuple

from pydantic import ValidationError

from ...core.config import Settings, get_settings
from ...core.logging import NullEventLogger, StructlogEventLogger
from ...domain.cache.exceptions import CacheConfigurationException
from ...domain.cache.interfaces import CacheProvider, EventLogger
from ...domain.cache.options import CacheMode, CacheOptions
from ...domain.cache.value_objects import CacheSettings, HitPolicy
from ...infrastructure.cache.memory_cache_provider import MemoryCacheProvider


def resolve_settings(
    options: CacheOptions, settings: Optional[Settings] = None
) -> CacheSettings:
    """
    Resolve the immutable cache settings for a caching choice.

    Only the configured and custom modes take values from the options;
    everything unset comes from the process settings.
    """
    settings = settings or get_settings()
    base = CacheSettings(
        default_ttl=settings.DEFAULT_TTL_SECONDS,
        max_size=settings.MAX_SIZE,
        enable_logging=settings.ENABLE_LOGGING,
        hit_policy=HitPolicy(settings.HIT_POLICY),
    )

    if options.mode in (CacheMode.DISABLED, CacheMode.DEFAULT):
        return base

    overrides = {
        "default_ttl": options.default_ttl,
        "max_size": options.max_size,
        "enable_logging": options.enable_logging,
        "hit_policy": options.hit_policy,
    }
    values = {
        **base.model_dump(),
        **{name: value for name, value in overrides.items() if value is not None},
    }
    try:
        return CacheSettings(**values)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(part) for part in first_error.get("loc", ()))
        raise CacheConfigurationException(
            f"Invalid cache setting {field}: {first_error.get('msg')}",
            field=field,
            value=values.get(field),
        ) from e


def build_event_logger(
    component: str, cache_settings: CacheSettings, event_logger: Optional[EventLogger]
) -> EventLogger:
    """Pick the injected event logger, or one matching the logging flag."""
    if event_logger is not None:
        return event_logger
    if cache_settings.enable_logging:
        return StructlogEventLogger(component)
    return NullEventLogger()


def build_cache(
    options: Optional[CacheOptions] = None,
    event_logger: Optional[EventLogger] = None,
    settings: Optional[Settings] = None,
) -> Tuple[CacheSettings, Optional[CacheProvider]]:
    """
    Build the cache for a caching choice.

    Args:
        options: Caching choice, defaults to CacheOptions.default()
        event_logger: Logger handed to a newly created in-memory cache
        settings: Process settings, defaults to get_settings()

    Returns:
        Resolved settings and the cache provider, or None when disabled
    """
    options = options or CacheOptions.default()
    cache_settings = resolve_settings(options, settings)

    if options.mode == CacheMode.DISABLED:
        return cache_settings, None

    if options.mode == CacheMode.CUSTOM:
        return cache_settings, options.provider

    provider = MemoryCacheProvider(
        max_size=cache_settings.max_size,
        default_ttl=cache_settings.default_ttl,
        event_logger=build_event_logger(
            "MemoryCacheProvider", cache_settings, event_logger
        ),
    )
    return cache_settings, provider
