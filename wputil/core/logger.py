"""
Centralized logging module for wputil.

- Structured JSON logs suitable for Loki/ELK
- Appropriate log levels (info, warning, error)
- NEVER logs bound query values, passwords or connection strings
- Database events emit structured logs with action, result, timestamp
"""
import logging
import json
from typing import Any, Dict, Optional
from datetime import datetime, timezone

from wputil.core.config import settings

logger = logging.getLogger("wputil")
logger.setLevel(settings.LOG_LEVEL.upper())

_handler = logging.StreamHandler()


class JSONFormatter(logging.Formatter):
    """Formatter that outputs structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "action"):
            log_data["action"] = record.action
        if hasattr(record, "result"):
            log_data["result"] = record.result
        if hasattr(record, "meta"):
            log_data["meta"] = record.meta

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


_handler.setFormatter(JSONFormatter())
logger.addHandler(_handler)

# Prevent duplicate logs
logger.propagate = False


def log_db_event(
    action: str,
    result: str,
    meta: Optional[Dict[str, Any]] = None,
    level: str = "info",
    exc_info: Any = None,
) -> None:
    """
    Log a database-level event (transaction outcome, cache miss, rejected identifier).

    Args:
        action: Action name (e.g., "transaction", "slug_lookup", "get_var_from_table")
        result: Result status (e.g., "commit", "rollback", "cache_miss", "rejected")
        meta: Additional metadata dict (optional); must not contain bound values
        level: Log level ("debug", "info", "warning", "error")
        exc_info: Exception to attach as a formatted traceback (optional)
    """
    log_method = getattr(logger, level.lower(), logger.info)
    extra: Dict[str, Any] = {
        "action": action,
        "result": result,
    }
    if meta:
        extra["meta"] = meta

    log_method("DB event", extra=extra, exc_info=exc_info)
