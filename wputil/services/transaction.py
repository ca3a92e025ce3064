"""
Service layer for transactional execution.

- One flat transaction per call: BEGIN, then exactly one of COMMIT / ROLLBACK
- No retries, no nesting, no timeout
- The failure that caused a rollback always reaches the caller
"""
from __future__ import annotations
from typing import Any, Callable, Optional, Sequence
from wputil.core.db import Database, resolve_db
from wputil.core.logger import log_db_event
from wputil.schemas.transaction import TransactionResult


def _work_name(work: Callable[..., Any]) -> str:
    return getattr(work, "__name__", repr(work))


def _rollback(db: Database, work: Callable[..., Any], cause: BaseException) -> Optional[Exception]:
    """Issue ROLLBACK; return (and log) the error if ROLLBACK itself fails."""
    try:
        db.rollback()
    except Exception as exc:
        log_db_event(
            "transaction",
            "rollback_failed",
            meta={"work": _work_name(work), "error": type(cause).__name__},
            level="error",
            exc_info=exc,
        )
        return exc

    log_db_event(
        "transaction",
        "rollback",
        meta={"work": _work_name(work), "error": type(cause).__name__},
        level="warning",
    )
    return None


def _committed(work: Callable[..., Any]) -> None:
    log_db_event("transaction", "commit", meta={"work": _work_name(work)}, level="debug")


def db_transaction(
    work: Callable[..., Any],
    args: Sequence[Any] = (),
    *,
    db: Optional[Database] = None,
) -> Any:
    """
    Run `work(*args)` inside a database transaction.

    Commits and returns the result on success. On any exception, including
    one raised by BEGIN or COMMIT, issues ROLLBACK and re-raises the same
    exception object. A failing ROLLBACK is logged and does not replace it.

    Args:
        work: Callable performing the unit of work
        args: Positional arguments for `work`
        db: Database handle (defaults to the calling thread's handle)

    Returns:
        Whatever `work` returned
    """
    db = resolve_db(db)
    try:
        db.begin()
        result = work(*args)
        db.commit()
    except BaseException as exc:
        _rollback(db, work, exc)
        raise

    _committed(work)
    return result


def try_transaction(
    work: Callable[..., Any],
    args: Sequence[Any] = (),
    *,
    db: Optional[Database] = None,
) -> TransactionResult:
    """
    Like db_transaction, but returns a TransactionResult instead of raising.

    A failing ROLLBACK is raised (chained to the failure that triggered it),
    since the transaction state is then unknown. KeyboardInterrupt / SystemExit
    still roll back and propagate.
    """
    db = resolve_db(db)
    try:
        db.begin()
        value = work(*args)
        db.commit()
    except Exception as exc:
        rollback_error = _rollback(db, work, exc)
        if rollback_error is not None:
            raise rollback_error from exc
        return TransactionResult.failure(exc)
    except BaseException as exc:
        _rollback(db, work, exc)
        raise

    _committed(work)
    return TransactionResult.success(value)
