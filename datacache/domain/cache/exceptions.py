"""
Cache Domain Exceptions

Domain-specific exceptions for cache construction and configuration.

Misses, expired entries and clears of unknown keys are regular outcomes and
never raise. Errors coming from a wrapped data provider are not wrapped in
these types; they propagate to the caller unchanged.
"""

from typing import Any, Dict, Optional


class CacheException(Exception):
    """Base exception for cache-related errors.

    Carries a stable error code and structured details for logging.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class CacheConfigurationException(CacheException):
    """Raised when a cache is built with invalid settings or options."""

    def __init__(
        self,
        message: str = "Invalid cache configuration",
        field: Optional[str] = None,
        value: Any = None,
    ):
        details = {}
        if field:
            details["field"] = field
            details["value"] = value

        super().__init__(
            message=message, error_code="CACHE_CONFIGURATION_ERROR", details=details
        )
