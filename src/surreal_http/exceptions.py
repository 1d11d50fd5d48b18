"""
SurrealDB HTTP Client Exceptions.

Every failed request surfaces as a ``RequestError`` carrying the same four
fields SurrealDB uses in its own error bodies (code, details, description,
information), so callers can branch on the exception class and still read
the server-shaped record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .types import ErrorBody

DEFAULT_CODE = 500
DEFAULT_DETAILS = "Request problems detected"
DEFAULT_DESCRIPTION = "There is a problem with your request. Refer to the documentation for further information."
READ_DETAILS = "Failed to read response body"
READ_DESCRIPTION = "There was an error reading the response body."


class SurrealDBError(Exception):
    """Base exception for all SurrealDB HTTP client errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(message)


class RequestError(SurrealDBError):
    """
    A failed request, normalised to SurrealDB's error record.

    Attributes:
        code: Error code (500 for locally synthesised errors)
        details: Short summary of the error
        description: Human-readable description
        information: Underlying error text or server-provided information
    """

    code: int

    def __init__(
        self,
        information: str = "",
        code: int = DEFAULT_CODE,
        details: str = DEFAULT_DETAILS,
        description: str = DEFAULT_DESCRIPTION,
    ):
        self.details = details
        self.description = description
        self.information = information
        super().__init__(information or details, code)

    def to_dict(self) -> dict[str, Any]:
        """Return the four-field error record."""
        return {
            "code": self.code,
            "details": self.details,
            "description": self.description,
            "information": self.information,
        }

    @staticmethod
    def from_body(body: ErrorBody, status_code: int | None = None) -> ServerError:
        """Build a ServerError from a decoded server error body."""
        return ServerError(
            information=body.information,
            code=body.code,
            details=body.details,
            description=body.description,
            status_code=status_code,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, details={self.details!r}, information={self.information!r})"


class RequestConstructionError(RequestError):
    """Raised when the HTTP request object cannot be built (e.g. malformed URL)."""

    pass


class EncodingError(RequestError):
    """Raised when a JSON request body cannot be encoded."""

    pass


class TransportError(RequestError):
    """Raised when no response was received from the server."""

    pass


class TimeoutError(TransportError):
    """Raised when a request exceeds the client timeout."""

    pass


class DecodeError(RequestError):
    """
    Raised when a response body does not match the expected shape.

    The raw body is kept on ``body`` for debugging.
    """

    def __init__(self, information: str = "", body: bytes = b"", **kwargs: Any):
        self.body = body
        super().__init__(information, **kwargs)


class ServerError(RequestError):
    """
    Raised when SurrealDB answers with a non-200 status and an error body.

    The server's record is kept verbatim; ``code`` is whatever the server
    reported and may differ from ``status_code``.
    """

    def __init__(self, information: str = "", status_code: int | None = None, **kwargs: Any):
        self.status_code = status_code
        super().__init__(information, **kwargs)


class AuthenticationError(RequestError):
    """Raised when signin/signup returns a result whose code is not 200."""

    pass


class MissingTokenError(AuthenticationError):
    """Raised when signin/signup succeeds but the result carries no token."""

    pass


__all__ = [
    "SurrealDBError",
    "RequestError",
    "RequestConstructionError",
    "EncodingError",
    "TransportError",
    "TimeoutError",
    "DecodeError",
    "ServerError",
    "AuthenticationError",
    "MissingTokenError",
]
