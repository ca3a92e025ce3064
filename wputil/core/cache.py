# wputil/core/cache.py
from __future__ import annotations
import json
from typing import Any, Optional
from wputil.core.config import settings
from wputil.core.redis import get_redis

# Returned by ObjectCache.get when the key is absent; a cached None is a hit.
MISS = object()


class ObjectCache:
    """JSON-encoded key/value cache over a Redis client."""

    def __init__(self, client=None, namespace: Optional[str] = None):
        self._client = client
        self.namespace = settings.CACHE_NAMESPACE if namespace is None else namespace

    @property
    def client(self):
        if self._client is None:
            self._client = get_redis()
        return self._client

    def _key(self, key: str) -> str:
        return f"{self.namespace}{key}"

    def get(self, key: str, default: Any = MISS) -> Any:
        hit = self.client.get(self._key(key))
        if hit is None:
            return default
        return json.loads(hit)

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        payload = json.dumps(value, default=str)
        if ttl:
            self.client.setex(self._key(key), ttl, payload)
        else:
            self.client.set(self._key(key), payload)

    def delete(self, *keys: str) -> int:
        return self.client.delete(*(self._key(k) for k in keys)) if keys else 0


_cache: Optional[ObjectCache] = None


def get_cache() -> ObjectCache:
    global _cache
    if _cache is None:
        _cache = ObjectCache()
    return _cache


def set_cache(cache: Optional[ObjectCache]) -> None:
    global _cache
    _cache = cache


def resolve_cache(cache: Optional[ObjectCache]) -> ObjectCache:
    return cache if cache is not None else get_cache()
