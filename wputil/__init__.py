# wputil/__init__.py
from wputil.core.cache import MISS, ObjectCache
from wputil.core.db import Database, open_database, release_db
from wputil.core.errors import ErrorCode, InvalidIdentifierError, WPUtilError
from wputil.core.sanitize import sanitize_text_field
from wputil.repositories.option_repo import get_raw_option_value
from wputil.repositories.post_repo import (
    forget_id_from_slug,
    get_id_from_slug,
    get_post_id_by_meta_key_value,
)
from wputil.repositories.postmeta_repo import get_meta_key_from_meta_value, get_raw_post_meta_value
from wputil.repositories.table_repo import does_table_exist, get_var_from_table
from wputil.schemas.transaction import TransactionFailure, TransactionResult
from wputil.services.transaction import db_transaction, try_transaction

__all__ = [
    "MISS",
    "ObjectCache",
    "Database",
    "open_database",
    "release_db",
    "ErrorCode",
    "InvalidIdentifierError",
    "WPUtilError",
    "sanitize_text_field",
    "get_raw_option_value",
    "forget_id_from_slug",
    "get_id_from_slug",
    "get_post_id_by_meta_key_value",
    "get_meta_key_from_meta_value",
    "get_raw_post_meta_value",
    "does_table_exist",
    "get_var_from_table",
    "TransactionFailure",
    "TransactionResult",
    "db_transaction",
    "try_transaction",
]
