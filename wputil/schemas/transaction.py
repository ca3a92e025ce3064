"""
Pydantic schemas for transaction outcomes.
"""
from __future__ import annotations
from typing import Any, Optional
from pydantic import BaseModel, Field, PrivateAttr
from psycopg2 import Error as DatabaseError
from wputil.core.errors import ErrorCode


class TransactionFailure(BaseModel):
    """Structured description of why a transaction rolled back."""
    code: ErrorCode = Field(..., description="database_error for driver failures, work_failed otherwise")
    exception_type: str = Field(..., description="Class name of the raised exception")
    message: str = Field(..., description="str() of the raised exception")


class TransactionResult(BaseModel):
    """Either the committed value or the failure that caused a rollback."""
    ok: bool
    value: Any = None
    error: Optional[TransactionFailure] = None

    _exception: Optional[BaseException] = PrivateAttr(default=None)

    @classmethod
    def success(cls, value: Any) -> "TransactionResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, exc: Exception) -> "TransactionResult":
        code = ErrorCode.DATABASE_ERROR if isinstance(exc, DatabaseError) else ErrorCode.WORK_FAILED
        result = cls(
            ok=False,
            error=TransactionFailure(
                code=code,
                exception_type=type(exc).__name__,
                message=str(exc),
            ),
        )
        result._exception = exc
        return result

    @property
    def exception(self) -> Optional[BaseException]:
        return self._exception

    def unwrap(self) -> Any:
        """Return the committed value, or re-raise the original exception."""
        if self.ok:
            return self.value
        raise self._exception
