"""
Repository for generic table probes.

- Table and column names cannot be bound as parameters, so they are
  sanitized, checked against the identifier pattern and the configured
  allow-lists, then quoted with psycopg2.sql.Identifier
- Lookup values are always bound parameters
"""
from __future__ import annotations
import re
from typing import Any, Optional
from psycopg2 import sql
from wputil.core.config import settings
from wputil.core.db import Database, resolve_db
from wputil.core.errors import InvalidIdentifierError
from wputil.core.logger import log_db_event
from wputil.core.sanitize import Sanitizer, resolve_sanitizer

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

_TABLE_EXISTS = """
    SELECT 1
    FROM information_schema.tables
    WHERE table_schema = ANY(current_schemas(false))
      AND table_name = %s
"""

_VAR_FROM_TABLE = sql.SQL("""
    SELECT {select}
    FROM {table}
    WHERE {where_col} = %s
    LIMIT 1
""")


def _check_identifier(kind: str, name: str, allowed: frozenset[str]) -> str:
    if not _IDENTIFIER.match(name) or (allowed and name not in allowed):
        log_db_event(
            "get_var_from_table",
            "rejected",
            meta={"kind": kind, "name": name},
            level="warning",
        )
        raise InvalidIdentifierError(kind, name)
    return name


def does_table_exist(table: str, *, db: Optional[Database] = None) -> bool:
    """
    Check whether `prefix + table` exists in the connection's search_path.

    Args:
        table: Table name without the prefix

    Returns:
        True if the table exists
    """
    db = resolve_db(db)
    return db.query(_TABLE_EXISTS, (db.prefix + table,)) > 0


def get_var_from_table(
    table: str,
    select: str,
    where_col: str,
    where_val: Any,
    *,
    db: Optional[Database] = None,
    sanitize: Optional[Sanitizer] = None,
) -> Any:
    """
    SELECT one column from `prefix + table` where `where_col` equals `where_val`.

    Args:
        table: Table name without the prefix
        select: Column to return
        where_col: Column to match on
        where_val: Value to match (bound parameter)

    Returns:
        The first matching scalar or None

    Raises:
        InvalidIdentifierError: If a table/column name fails validation
    """
    clean = resolve_sanitizer(sanitize)
    table = _check_identifier("table", clean(table), settings.allowed_tables)
    select = _check_identifier("column", clean(select), settings.allowed_columns)
    where_col = _check_identifier("column", clean(where_col), settings.allowed_columns)

    db = resolve_db(db)
    query = _VAR_FROM_TABLE.format(
        select=sql.Identifier(select),
        table=db.table(table),
        where_col=sql.Identifier(where_col),
    )
    return db.get_var(query, (where_val,))
