"""
Wire models for SurrealDB HTTP responses.

Bodies are validated with pydantic so that a response which does not match
the expected shape is reported as a decode failure instead of leaking a
half-parsed value to the caller.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter


class ResponseStatus(str, Enum):
    """Status of a single statement result."""

    OK = "OK"
    ERR = "ERR"


class QueryResult(BaseModel):
    """
    Result of a single statement sent to ``/sql``.

    Attributes:
        result: The statement result (records, scalar, error message, ...)
        status: OK or ERR
        time: Execution time as reported by SurrealDB
    """

    model_config = ConfigDict(frozen=True)

    result: Any = None
    status: ResponseStatus
    time: str = ""

    @property
    def is_ok(self) -> bool:
        """Check if the statement succeeded."""
        return self.status == ResponseStatus.OK

    @property
    def is_error(self) -> bool:
        """Check if the statement failed."""
        return self.status == ResponseStatus.ERR

    @property
    def records(self) -> list[dict[str, Any]]:
        """Get result as list of records. Returns empty list if not applicable."""
        if isinstance(self.result, list):
            return [item for item in self.result if isinstance(item, dict)]
        return []

    @property
    def first(self) -> dict[str, Any] | None:
        """Get first record or None."""
        records = self.records
        return records[0] if records else None

    @property
    def scalar(self) -> str | int | float | bool | None:
        """Get result as scalar value."""
        if isinstance(self.result, (str, int, float, bool)):
            return self.result
        return None


class AuthResult(BaseModel):
    """Body returned by ``/signin`` and ``/signup``."""

    code: int
    details: str = ""
    token: str | None = None


class ErrorBody(BaseModel):
    """Error body returned by SurrealDB with a non-200 status."""

    code: int
    details: str = ""
    description: str = ""
    information: str = ""


QueryResults = TypeAdapter(list[QueryResult])


__all__ = [
    "ResponseStatus",
    "QueryResult",
    "AuthResult",
    "ErrorBody",
    "QueryResults",
]
