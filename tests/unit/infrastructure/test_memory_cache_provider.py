"""
Unit tests for the in-memory cache provider.

Covers LRU eviction, lazy TTL expiration, statistics and cleanup.
"""

import pytest

from datacache.domain.cache.exceptions import CacheConfigurationException
from datacache.domain.cache.interfaces import CacheProvider
from datacache.infrastructure.cache.memory_cache_provider import MemoryCacheProvider


@pytest.fixture
def cache(fake_clock):
    """Cache with a controllable clock."""
    return MemoryCacheProvider(max_size=3, default_ttl=10.0, clock=fake_clock)


class TestConstruction:
    """Test provider construction."""

    def test_defaults(self):
        """Test default capacity and TTL."""
        cache = MemoryCacheProvider()

        assert isinstance(cache, CacheProvider)
        assert cache.max_size == 100
        assert cache.default_ttl == 300.0

    @pytest.mark.parametrize("max_size", [0, -1, 1.5, True])
    def test_invalid_max_size(self, max_size):
        """Test invalid capacity is rejected."""
        with pytest.raises(CacheConfigurationException) as exc_info:
            MemoryCacheProvider(max_size=max_size)
        assert exc_info.value.details["field"] == "max_size"

    @pytest.mark.parametrize("default_ttl", [0, -5])
    def test_invalid_default_ttl(self, default_ttl):
        """Test non-positive default TTL is rejected."""
        with pytest.raises(CacheConfigurationException):
            MemoryCacheProvider(default_ttl=default_ttl)


class TestGetSet:
    """Test basic get/set behaviour."""

    def test_set_then_get(self, cache):
        """Test stored value is returned before expiry."""
        value = {"name": "Q"}
        cache.set("company", value)

        assert cache.get("company") is value

    def test_missing_key(self, cache):
        """Test unknown key is a miss, not an error."""
        assert cache.get("nope") is None

    def test_overwrite_does_not_grow(self, cache):
        """Test overwriting a key keeps size and replaces value."""
        cache.set("a", 1)
        cache.set("a", 2)

        assert len(cache) == 1
        assert cache.get("a") == 2

    def test_falsy_values_are_cached(self, cache):
        """Test falsy payloads are returned as stored."""
        cache.set("zero", 0)
        cache.set("empty", [])

        assert cache.get("zero") == 0
        assert cache.get("empty") == []

    def test_non_positive_entry_ttl_rejected(self, cache):
        """Test per-entry TTL must be positive."""
        with pytest.raises(CacheConfigurationException):
            cache.set("a", 1, ttl=0)


class TestLRUEviction:
    """Test least-recently-used eviction."""

    def test_evicts_oldest_when_full(self, cache):
        """Test inserting N+1 keys evicts exactly the first one."""
        for index, key in enumerate(["a", "b", "c", "d"]):
            cache.set(key, index)

        assert cache.get("a") is None
        assert cache.get("b") == 1
        assert cache.get("c") == 2
        assert cache.get("d") == 3
        assert len(cache) == 3

    def test_read_moves_entry_to_mru(self, fake_clock):
        """Test a read protects an entry from the next eviction."""
        cache = MemoryCacheProvider(max_size=2, clock=fake_clock)
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.get("a") == 1

        cache.set("c", 3)

        assert cache.get("b") is None
        assert cache.get("a") == 1
        assert cache.get("c") == 3

    def test_overwrite_moves_entry_to_mru(self, fake_clock):
        """Test overwriting refreshes recency."""
        cache = MemoryCacheProvider(max_size=2, clock=fake_clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 10)

        cache.set("c", 3)

        assert cache.get("b") is None
        assert cache.get("a") == 10

    def test_size_never_exceeds_capacity(self, cache):
        """Test capacity bound holds after every set."""
        for index in range(20):
            cache.set(f"key-{index}", index)
            assert cache.get_stats().size <= cache.max_size

    def test_overwrite_at_capacity_does_not_evict(self, cache):
        """Test overwriting an existing key in a full table keeps the others."""
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)

        cache.set("b", 20)

        assert cache.get_stats().keys == ["a", "c", "b"]


class TestTTLExpiration:
    """Test lazy TTL expiration."""

    def test_live_until_default_ttl(self, cache, fake_clock):
        """Test entry is returned while elapsed time is within the TTL."""
        cache.set("a", 1)
        fake_clock.advance(10.0)

        assert cache.get("a") == 1

    def test_expired_entry_removed_on_get(self, cache, fake_clock):
        """Test expired entry reads as absent and is removed."""
        cache.set("a", 1)
        fake_clock.advance(10.5)

        assert cache.get("a") is None
        assert "a" not in cache.get_stats().keys

    def test_per_entry_ttl_override(self, cache, fake_clock):
        """Test per-entry TTL overrides the default."""
        cache.set("short", 1, ttl=1.0)
        cache.set("long", 2, ttl=60.0)
        fake_clock.advance(30.0)

        assert cache.get("short") is None
        assert cache.get("long") == 2

    def test_read_does_not_refresh_ttl(self, cache, fake_clock):
        """Test reading does not extend an entry's life."""
        cache.set("a", 1)
        fake_clock.advance(8.0)
        assert cache.get("a") == 1

        fake_clock.advance(3.0)

        assert cache.get("a") is None

    def test_overwrite_refreshes_ttl(self, cache, fake_clock):
        """Test overwriting resets the stored timestamp."""
        cache.set("a", 1)
        fake_clock.advance(8.0)
        cache.set("a", 2)
        fake_clock.advance(8.0)

        assert cache.get("a") == 2

    def test_stats_include_expired_entries(self, cache, fake_clock):
        """Test expiration is lazy in statistics."""
        cache.set("a", 1)
        fake_clock.advance(20.0)

        stats = cache.get_stats()
        assert stats.size == 1
        assert stats.keys == ["a"]

    def test_contains_does_not_touch_order(self, cache, fake_clock):
        """Test membership checks liveness without changing recency."""
        cache.set("a", 1)
        cache.set("b", 2)

        assert "a" in cache
        assert cache.get_stats().keys == ["a", "b"]

        fake_clock.advance(11.0)
        assert "a" not in cache
        assert 42 not in cache


class TestClear:
    """Test clearing entries."""

    def test_clear_single_key(self, cache):
        """Test clearing one key leaves the others."""
        cache.set("a", 1)
        cache.set("b", 2)

        cache.clear("a")

        assert cache.get("a") is None
        assert cache.get("b") == 2

    def test_clear_is_idempotent(self, cache):
        """Test clearing an unknown key twice is a silent no-op."""
        cache.set("a", 1)

        cache.clear("a")
        cache.clear("a")

        assert len(cache) == 0

    def test_clear_all(self, cache):
        """Test clearing everything."""
        cache.set("a", 1)
        cache.set("b", 2)

        cache.clear()

        stats = cache.get_stats()
        assert stats.size == 0
        assert stats.keys == []
        assert stats.max_size == 3


class TestCleanup:
    """Test explicit expired-entry sweeps."""

    def test_cleanup_removes_expired(self, cache, fake_clock):
        """Test cleanup removes only expired entries and reports the count."""
        cache.set("old-1", 1, ttl=1.0)
        cache.set("old-2", 2, ttl=1.0)
        cache.set("fresh", 3)
        fake_clock.advance(5.0)

        removed = cache.cleanup()

        assert removed == 2
        assert cache.get_stats().keys == ["fresh"]

    def test_cleanup_nothing_expired(self, cache):
        """Test cleanup on a fresh table."""
        cache.set("a", 1)
        assert cache.cleanup() == 0


class TestEventLogging:
    """Test injected event logging."""

    def test_events_recorded(self, fake_clock, event_logger):
        """Test cache operations are recorded through the injected logger."""
        cache = MemoryCacheProvider(
            max_size=1, clock=fake_clock, event_logger=event_logger
        )
        cache.get("a")
        cache.set("a", 1)
        cache.get("a")
        cache.set("b", 2)

        names = event_logger.names()
        assert names[0] == "cache_initialized"
        assert "cache_miss" in names
        assert "cache_hit" in names
        assert ("cache_evicted", {"key": "a", "reason": "lru"}) in event_logger.events

    def test_logging_enabled_without_injection(self):
        """Test enabling logging builds a structlog-backed logger."""
        cache = MemoryCacheProvider(enable_logging=True)
        cache.set("a", 1)
        assert cache.get("a") == 1
