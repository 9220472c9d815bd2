"""
datacache OpenTelemetry Helpers

Thin access layer over the OpenTelemetry API for manual instrumentation.

The package only depends on the API. When the embedding application has not
installed and configured an SDK tracer provider, the API hands out no-op
tracers and spans, so instrumentation costs nothing.
"""

from typing import Optional

from opentelemetry import trace

from ..constants import APP_NAME, APP_VERSION


def get_tracer(name: str, version: Optional[str] = None):
    """
    Get tracer instance for manual instrumentation.

    Args:
        name: Instrumentation name (usually the module ``__name__``)
        version: Instrumentation version, defaults to the package version

    Returns:
        Tracer instance
    """
    return trace.get_tracer(name or APP_NAME, version or APP_VERSION)
