"""
Repository for post lookups.

- Slug lookups only match published posts
- Slug → ID results are cached; everything else hits the database directly
- Free-text inputs pass through the sanitizer before binding
"""
from __future__ import annotations
import hashlib
from typing import Optional
from psycopg2 import sql
from wputil.core.cache import MISS, ObjectCache, resolve_cache
from wputil.core.config import settings
from wputil.core.db import Database, resolve_db
from wputil.core.logger import log_db_event
from wputil.core.sanitize import Sanitizer, resolve_sanitizer

_ID_FROM_SLUG = sql.SQL("""
    SELECT {id_col}
    FROM {posts}
    WHERE post_status = 'publish'
      AND post_name = %s
      AND post_type = %s
    LIMIT 1
""")

_POST_ID_BY_META = sql.SQL("""
    SELECT pm.post_id
    FROM {postmeta} AS pm
    WHERE pm.meta_key = %s
      AND pm.meta_value = %s
    LIMIT 1
""")


def slug_cache_key(slug: str, post_type: str = "post") -> str:
    """Cache key for a slug lookup: post_<md5(post_type + slug)>_id."""
    digest = hashlib.md5(f"{post_type}{slug}".encode()).hexdigest()
    return f"post_{digest}_id"


def get_id_from_slug(
    slug: str,
    post_type: str = "post",
    force: bool = False,
    *,
    db: Optional[Database] = None,
    cache: Optional[ObjectCache] = None,
    sanitize: Optional[Sanitizer] = None,
) -> Optional[int]:
    """
    Reverse lookup of a published post's ID from its slug.

    The raw query result is cached whether or not a row matched, so repeated
    misses stay off the database until `force` is passed or the entry is
    dropped with `forget_id_from_slug`.

    Args:
        slug: Post slug (post_name)
        post_type: Post type to match
        force: Skip the cache read and re-query

    Returns:
        Post ID or None if not found
    """
    cache = resolve_cache(cache)
    cache_key = slug_cache_key(slug, post_type)
    post_id = cache.get(cache_key)

    if post_id is MISS or force:
        db = resolve_db(db)
        clean = resolve_sanitizer(sanitize)
        post_id = db.get_var(
            _ID_FROM_SLUG.format(
                id_col=sql.Identifier(settings.POSTS_ID_COLUMN),
                posts=db.posts,
            ),
            (clean(slug), clean(post_type)),
        )
        cache.set(cache_key, post_id, ttl=settings.SLUG_CACHE_TTL or None)
        log_db_event(
            "slug_lookup",
            "found" if post_id else "not_found",
            meta={"post_type": post_type, "forced": force},
            level="debug",
        )

    if not post_id:
        return None
    return int(post_id)


def forget_id_from_slug(
    slug: str,
    post_type: str = "post",
    *,
    cache: Optional[ObjectCache] = None,
) -> None:
    """Drop the cached slug lookup so the next call re-queries."""
    resolve_cache(cache).delete(slug_cache_key(slug, post_type))


def get_post_id_by_meta_key_value(
    key: str,
    value: str,
    *,
    db: Optional[Database] = None,
    sanitize: Optional[Sanitizer] = None,
) -> Optional[int]:
    db = resolve_db(db)
    clean = resolve_sanitizer(sanitize)
    post_id = db.get_var(
        _POST_ID_BY_META.format(postmeta=db.postmeta),
        (clean(key), clean(value)),
    )
    if post_id is None:
        return None
    return int(post_id)
