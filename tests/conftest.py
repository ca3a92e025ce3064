"""
Shared fixtures: in-memory stand-ins for the psycopg2 connection and the Redis client.
"""
import pytest
from psycopg2 import sql

from wputil.core.cache import ObjectCache
from wputil.core.db import Database


def _raw(query):
    if isinstance(query, str):
        return query
    if isinstance(query, sql.Composed):
        return "".join(_raw(part) for part in query.seq)
    if isinstance(query, sql.Identifier):
        return ".".join(f'"{s}"' for s in query.strings)
    if isinstance(query, sql.SQL):
        return query.string
    raise TypeError(f"Unexpected query type: {type(query)!r}")


def render(query):
    """Flatten a psycopg2.sql composable into text without a live connection."""
    return " ".join(_raw(query).split())


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.rows = []
        self.rowcount = -1

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query, params=None):
        text = render(query)
        self.conn.executed.append((text, tuple(params) if params else None))
        self.rows = list(self.conn.handler(text, params) or [])
        self.rowcount = len(self.rows)

    def fetchone(self):
        return self.rows[0] if self.rows else None


class FakeConnection:
    """Records every statement; `handler(sql_text, params)` returns the rows."""

    def __init__(self, handler=None):
        self.handler = handler or (lambda text, params: [])
        self.executed = []
        self.autocommit = True

    def cursor(self):
        return FakeCursor(self)

    def statements(self, keyword):
        return [text for text, _ in self.executed if text == keyword]

    @property
    def selects(self):
        return [(text, params) for text, params in self.executed if text.startswith("SELECT")]


class FakeRedis:
    def __init__(self):
        self.store = {}
        self.ttls = {}

    def get(self, key):
        return self.store.get(key)

    def set(self, key, value):
        self.store[key] = value
        self.ttls.pop(key, None)

    def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl

    def delete(self, *keys):
        removed = 0
        for key in keys:
            if key in self.store:
                del self.store[key]
                removed += 1
        return removed


@pytest.fixture
def conn():
    return FakeConnection()


@pytest.fixture
def db(conn):
    return Database(conn, prefix="wp_")


@pytest.fixture
def redis_client():
    return FakeRedis()


@pytest.fixture
def cache(redis_client):
    return ObjectCache(redis_client, namespace="test:")
