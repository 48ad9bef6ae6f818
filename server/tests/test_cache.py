"""Unit tests for the bounded caches."""

import threading

import pytest

from avatar_api.avatar_generator import build_avatar_response
from avatar_api.elements import Element
from avatar_api.plugins.cache import BoundedCache, CacheManager


class TestBoundedCache:
    """Test cases for the FIFO cache."""

    def test_missing_key(self):
        assert BoundedCache(10).get("nobody") is None

    def test_set_and_get(self):
        cache = BoundedCache(10)
        cache.set("u1", Element.FIRE)
        assert cache.get("u1") == Element.FIRE
        assert "u1" in cache
        assert len(cache) == 1

    def test_bound_evicts_first_inserted(self):
        cache = BoundedCache(10000)
        for i in range(10001):
            cache.set(f"user-{i}", i)
        assert len(cache) == 10000
        assert cache.get("user-0") is None
        assert cache.get("user-1") == 1
        assert cache.get("user-10000") == 10000

    def test_reads_do_not_refresh_entries(self):
        """Eviction is by insertion order, not by recent use."""
        cache = BoundedCache(3)
        for key in ["a", "b", "c"]:
            cache.set(key, key)
        assert cache.get("a") == "a"
        cache.set("d", "d")
        assert cache.get("a") is None
        assert [cache.get(k) for k in ["b", "c", "d"]] == ["b", "c", "d"]

    def test_overwrite_keeps_position(self):
        cache = BoundedCache(2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 3)
        assert len(cache) == 2
        assert cache.get("a") == 3
        cache.set("c", 4)
        assert cache.get("a") is None
        assert cache.get("b") == 2

    def test_clear(self):
        cache = BoundedCache(5)
        cache.set("a", 1)
        cache.clear()
        assert len(cache) == 0
        assert cache.get("a") is None

    @pytest.mark.parametrize("max_entries", [0, -1])
    def test_invalid_size(self, max_entries):
        with pytest.raises(ValueError):
            BoundedCache(max_entries)

    def test_concurrent_writers_respect_bound(self):
        cache = BoundedCache(100)

        def writer(prefix):
            for i in range(500):
                cache.set(f"{prefix}-{i}", i)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(cache) == 100


class TestCacheManager:
    """Test cases for the cache manager."""

    def test_independent_caches(self):
        manager = CacheManager(max_entries=5)
        manager.set_element("u1", Element.EARTH)
        assert manager.get_element("u1") == Element.EARTH
        assert manager.get_avatar("u1") is None

        response = build_avatar_response("u1")
        manager.set_avatar("u1", response)
        assert manager.get_avatar("u1") is response
        assert manager.stats() == {"elements": 1, "avatars": 1, "max_entries": 5}

    def test_clear(self):
        manager = CacheManager(max_entries=5)
        manager.set_element("u1", Element.EARTH)
        manager.set_avatar("u1", build_avatar_response("u1"))
        manager.clear()
        assert manager.stats()["elements"] == 0
        assert manager.stats()["avatars"] == 0

    def test_defaults_to_configured_size(self):
        from config import settings

        assert CacheManager().max_entries == settings.CACHE_MAX_ENTRIES

    @pytest.mark.parametrize("max_entries", [0, -1])
    def test_explicit_invalid_size(self, max_entries):
        """An explicit size is used as given, not replaced by the default."""
        with pytest.raises(ValueError):
            CacheManager(max_entries=max_entries)

    def test_explicit_size(self):
        assert CacheManager(max_entries=1).stats()["max_entries"] == 1
