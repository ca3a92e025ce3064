# wputil/core/db.py
from __future__ import annotations
import threading
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence, Union
from psycopg2 import sql
from psycopg2.pool import ThreadedConnectionPool
from .config import settings

Query = Union[str, sql.Composable]

_pool: Optional[ThreadedConnectionPool] = None

# Default handles are per thread; a transaction never spans two callers.
_local = threading.local()


def get_pool() -> ThreadedConnectionPool:
    global _pool
    if _pool is None:
        _pool = ThreadedConnectionPool(
            settings.PG_POOL_MIN, settings.PG_POOL_MAX,
            host=settings.PG_HOST,
            port=settings.PG_PORT,
            dbname=settings.PG_DB,
            user=settings.PG_USER,
            password=settings.PG_PASSWORD,
            sslmode=settings.PG_SSLMODE,
            options=f"-c search_path={settings.PG_SCHEMA}",
        )
    return _pool


class Database:
    """
    Thin handle over one psycopg2 connection.

    The connection runs in autocommit mode; transactions are delimited by
    explicit BEGIN / COMMIT / ROLLBACK statements issued through `query`.
    """

    def __init__(self, conn, prefix: Optional[str] = None):
        self.conn = conn
        self.prefix = settings.DB_TABLE_PREFIX if prefix is None else prefix

    def table(self, name: str) -> sql.Identifier:
        return sql.Identifier(self.prefix + name)

    @property
    def posts(self) -> sql.Identifier:
        return self.table("posts")

    @property
    def postmeta(self) -> sql.Identifier:
        return self.table("postmeta")

    @property
    def options(self) -> sql.Identifier:
        return self.table("options")

    def query(self, query: Query, params: Optional[Sequence[Any]] = None) -> int:
        """Execute a statement and return the affected/returned row count."""
        with self.conn.cursor() as cur:
            cur.execute(query, params)
            return cur.rowcount

    def get_var(self, query: Query, params: Optional[Sequence[Any]] = None) -> Any:
        """First column of the first row, or None when nothing matches."""
        with self.conn.cursor() as cur:
            cur.execute(query, params)
            row = cur.fetchone()
        if not row:
            return None
        return row[0]

    def begin(self) -> None:
        self.query("BEGIN")

    def commit(self) -> None:
        self.query("COMMIT")

    def rollback(self) -> None:
        self.query("ROLLBACK")


@contextmanager
def open_database() -> Iterator[Database]:
    """Borrow a pooled connection for the duration of a block."""
    pool = get_pool()
    conn = pool.getconn()
    try:
        conn.autocommit = True
        yield Database(conn)
    finally:
        pool.putconn(conn)


def get_db() -> Database:
    """Handle for the calling thread, backed by a connection borrowed on first use."""
    db = getattr(_local, "db", None)
    if db is None:
        conn = get_pool().getconn()
        conn.autocommit = True
        db = Database(conn)
        _local.db = db
        _local.pooled = True
    return db


def set_db(db: Optional[Database]) -> None:
    """Install (or clear with None) the calling thread's default handle."""
    release_db()
    _local.db = db
    _local.pooled = False


def release_db() -> None:
    """Return the calling thread's pooled connection, if it borrowed one."""
    db = getattr(_local, "db", None)
    if db is not None and getattr(_local, "pooled", False):
        get_pool().putconn(db.conn)
    _local.db = None
    _local.pooled = False


def resolve_db(db: Optional[Database]) -> Database:
    return db if db is not None else get_db()
