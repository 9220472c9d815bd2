"""
datacache Logging

structlog configuration and the injectable event logger implementations
used by the cache components.
"""

import logging
from typing import Any, Optional

import structlog

from ..domain.cache.interfaces import EventLogger
from .config import get_settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Log level name, defaults to ``Settings.LOG_LEVEL``
        fmt: ``console`` or ``json``, defaults to ``Settings.LOG_FORMAT``
    """
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    renderer_name = (fmt or settings.LOG_FORMAT).lower()

    if renderer_name == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


class NullEventLogger(EventLogger):
    """Event logger that discards everything."""

    def record(self, event: str, **fields: Any) -> None:
        return None


class StructlogEventLogger(EventLogger):
    """
    Event logger backed by structlog.

    Cache events are emitted at debug level with the component name bound,
    so they stay silent unless the process log level allows debug output.
    """

    def __init__(self, component: str, logger: Optional[Any] = None):
        self.component = component
        self._logger = (logger or structlog.get_logger(__name__)).bind(
            component=component
        )

    def record(self, event: str, **fields: Any) -> None:
        self._logger.debug(event, **fields)
