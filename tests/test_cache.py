"""
Tests for core/cache.py - JSON object cache over a Redis client
"""
import pytest

from wputil.core.cache import MISS, ObjectCache, resolve_cache, set_cache


@pytest.mark.unit
class TestObjectCache:

    def test_miss_returns_sentinel(self, cache):
        assert cache.get("absent") is MISS
        assert cache.get("absent", default=None) is None

    def test_cached_none_is_a_hit(self, cache):
        cache.set("nothing", None)
        assert cache.get("nothing") is None

    def test_values_round_trip_as_json(self, cache, redis_client):
        cache.set("post", {"id": 1, "tags": ["a"]})
        assert redis_client.store["test:post"] == '{"id": 1, "tags": ["a"]}'
        assert cache.get("post") == {"id": 1, "tags": ["a"]}

    def test_ttl_uses_setex(self, cache, redis_client):
        cache.set("short", 1, ttl=60)
        cache.set("forever", 2)
        assert redis_client.ttls == {"test:short": 60}

    def test_delete(self, cache):
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.delete("a", "b", "c") == 2
        assert cache.delete() == 0
        assert cache.get("a") is MISS

    def test_namespaces_are_isolated(self, redis_client):
        one = ObjectCache(redis_client, namespace="one:")
        two = ObjectCache(redis_client, namespace="two:")
        one.set("k", 1)
        assert two.get("k") is MISS


@pytest.mark.unit
def test_resolve_cache_prefers_explicit_then_default(cache, redis_client):
    explicit = ObjectCache(redis_client, namespace="x:")
    assert resolve_cache(explicit) is explicit

    set_cache(cache)
    try:
        assert resolve_cache(None) is cache
    finally:
        set_cache(None)
