"""
Redis/Valkey client configuration.

- All configuration from centralized settings (config.py)
- Never use os.getenv directly
- The client is created on first use so importing the library needs no server
"""
from __future__ import annotations
from typing import Optional
import redis
from wputil.core.config import settings

_rds: Optional[redis.Redis] = None


def get_redis() -> redis.Redis:
    global _rds
    if _rds is None:
        _rds = redis.Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            password=settings.REDIS_PASSWORD,
            ssl=settings.redis_ssl,
            decode_responses=True,
            socket_keepalive=True,
        )
    return _rds
