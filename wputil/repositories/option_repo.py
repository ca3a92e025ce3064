# wputil/repositories/option_repo.py
from __future__ import annotations
from typing import Optional
from psycopg2 import sql
from wputil.core.db import Database, resolve_db

_RAW_OPTION_VALUE = sql.SQL("""
    SELECT option_value
    FROM {options}
    WHERE option_name = %s
    LIMIT 1
""")


def get_raw_option_value(key: str, *, db: Optional[Database] = None) -> Optional[str]:
    """Read an option straight from the table, bypassing any cache."""
    db = resolve_db(db)
    return db.get_var(_RAW_OPTION_VALUE.format(options=db.options), (key,))
