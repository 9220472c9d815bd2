"""
Main pytest configuration for datacache tests.

Fixtures and helpers shared by unit tests.
"""

from typing import Any, Dict, List, Tuple

import pytest

from datacache.core.config import get_settings
from datacache.domain.cache.interfaces import EventLogger
from datacache.infrastructure.data.json_data_provider import JsonDataProvider


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingEventLogger(EventLogger):
    """Event logger that keeps every recorded event."""

    def __init__(self):
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def record(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))

    def names(self) -> List[str]:
        return [name for name, _ in self.events]


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes made by tests apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_clock():
    """Provide a controllable clock."""
    return FakeClock()


@pytest.fixture
def event_logger():
    """Provide an event logger that records events."""
    return RecordingEventLogger()


@pytest.fixture
def sample_content():
    """Sample CMS content for data provider tests."""
    return {
        "company": {"name": "Q", "founded": 2025},
        "home-hero": {"title": "Welcome", "subtitle": "Get started"},
        "products": [
            {"name": "Product 1", "price": 100},
            {"name": "Product 2", "price": 200},
        ],
    }


@pytest.fixture
def json_provider(sample_content):
    """JSON data provider over the sample content."""
    return JsonDataProvider(sample_content)
