"""
datacache Configuration

Configuration management with environment variable support.
Implements secure defaults and validation for all cache settings.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import (
    DEFAULT_CLEANUP_INTERVAL_SECONDS,
    DEFAULT_MAX_SIZE,
    DEFAULT_TTL_SECONDS,
)


class Settings(BaseSettings):
    """Cache settings with validation and sane defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DATACACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Cache configuration
    DEFAULT_TTL_SECONDS: float = Field(
        default=DEFAULT_TTL_SECONDS,
        gt=0,
        description="Default entry time-to-live in seconds",
    )
    MAX_SIZE: int = Field(
        default=DEFAULT_MAX_SIZE, ge=1, description="Maximum number of cached entries"
    )
    ENABLE_LOGGING: bool = Field(
        default=False, description="Record cache events through structlog"
    )
    HIT_POLICY: str = Field(
        default="metadata_refresh",
        description="Behaviour on cache hit: metadata_refresh or pure_cache",
    )
    CLEANUP_INTERVAL_SECONDS: float = Field(
        default=DEFAULT_CLEANUP_INTERVAL_SECONDS,
        gt=0,
        description="Interval between scheduled expired-entry sweeps",
    )

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="console", description="console or json")

    @field_validator("HIT_POLICY")
    @classmethod
    def validate_hit_policy(cls, v):
        """Validate hit policy value."""
        allowed = ["metadata_refresh", "pure_cache"]
        if v.lower() not in allowed:
            raise ValueError(f"HIT_POLICY must be one of: {allowed}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of: {allowed}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        """Validate log renderer name."""
        allowed = ["console", "json"]
        if v.lower() not in allowed:
            raise ValueError(f"LOG_FORMAT must be one of: {allowed}")
        return v.lower()

    @property
    def default_ttl(self) -> float:
        """Alias for DEFAULT_TTL_SECONDS."""
        return self.DEFAULT_TTL_SECONDS

    @property
    def max_size(self) -> int:
        """Alias for MAX_SIZE."""
        return self.MAX_SIZE

    @property
    def enable_logging(self) -> bool:
        """Alias for ENABLE_LOGGING."""
        return self.ENABLE_LOGGING


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
