# wputil/repositories/postmeta_repo.py
from __future__ import annotations
from typing import Optional
from psycopg2 import sql
from wputil.core.db import Database, resolve_db
from wputil.core.sanitize import Sanitizer, resolve_sanitizer

_META_KEY_FROM_VALUE = sql.SQL("""
    SELECT pm.meta_key
    FROM {postmeta} AS pm
    WHERE pm.post_id = %s
      AND pm.meta_value = %s
    LIMIT 1
""")

_RAW_META_VALUE = sql.SQL("""
    SELECT meta_value
    FROM {postmeta}
    WHERE post_id = %s
      AND meta_key = %s
    LIMIT 1
""")


def get_meta_key_from_meta_value(
    post_id: int,
    meta_value: str,
    *,
    db: Optional[Database] = None,
    sanitize: Optional[Sanitizer] = None,
) -> Optional[str]:
    """
    Reverse lookup of a meta key from its value on one post.

    meta_value is not indexed, so this scans every meta row of the post.
    """
    db = resolve_db(db)
    clean = resolve_sanitizer(sanitize)
    return db.get_var(
        _META_KEY_FROM_VALUE.format(postmeta=db.postmeta),
        (int(post_id), clean(meta_value)),
    )


def get_raw_post_meta_value(
    post_id: int,
    key: str,
    *,
    db: Optional[Database] = None,
) -> Optional[str]:
    """Read a meta value straight from the table, bypassing any cache."""
    db = resolve_db(db)
    return db.get_var(
        _RAW_META_VALUE.format(postmeta=db.postmeta),
        (int(post_id), key),
    )
