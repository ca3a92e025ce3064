# wputil/core/errors.py
from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    DATABASE_ERROR = "database_error"          # driver-level failure
    INVALID_IDENTIFIER = "invalid_identifier"  # table/column rejected before querying
    WORK_FAILED = "work_failed"                # transaction body raised


class WPUtilError(Exception):
    """
    Base error for the library.
    Callers should key on `code` rather than the message.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        meta: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta or {}

    def detail(self) -> Dict[str, Any]:
        detail: Dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.meta:
            detail["meta"] = self.meta
        return detail


class InvalidIdentifierError(WPUtilError):
    def __init__(self, kind: str, name: str) -> None:
        super().__init__(
            ErrorCode.INVALID_IDENTIFIER,
            f"Invalid {kind} identifier: {name!r}",
            meta={"kind": kind, "name": name},
        )
