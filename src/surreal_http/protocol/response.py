"""
Response normalization for the SurrealDB HTTP interface.

A completed exchange is either a success (status 200, body decoded into the
expected shape) or exactly one ``RequestError``. Server error bodies are
propagated as-is; everything else is synthesised locally with code 500.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..exceptions import (
    READ_DESCRIPTION,
    READ_DETAILS,
    AuthenticationError,
    DecodeError,
    MissingTokenError,
    RequestError,
    TimeoutError,
    TransportError,
)
from ..types import AuthResult, ErrorBody, QueryResult, QueryResults

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def transport_error(exc: Exception) -> TransportError:
    """Map an httpx failure raised before a response arrived."""
    if isinstance(exc, httpx.TimeoutException):
        logger.warning(f"SurrealDB request timed out: {exc}")
        return TimeoutError(str(exc) or "Request timed out")
    logger.warning(f"SurrealDB request failed: {exc}")
    return TransportError(str(exc) or type(exc).__name__)


def read_error(exc: Exception) -> RequestError:
    """Map a failure while reading the response body."""
    logger.warning(f"Failed to read SurrealDB response body: {exc}")
    return RequestError(str(exc), details=READ_DETAILS, description=READ_DESCRIPTION)


def _decode(response: httpx.Response, model: type[M]) -> M:
    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(str(e), body=response.content) from e


def check_status(response: httpx.Response) -> None:
    """
    Raise the normalised error for a non-200 response.

    Raises:
        ServerError: If the body is a SurrealDB error record
        DecodeError: If the body is not
    """
    logger.debug(f"SurrealDB responded {response.status_code}")
    if response.status_code == httpx.codes.OK:
        return

    body = _decode(response, ErrorBody)
    logger.warning(f"SurrealDB error {body.code}: {body.details}")
    raise RequestError.from_body(body, status_code=response.status_code)


def normalize_query(response: httpx.Response) -> list[QueryResult]:
    """Decode a ``/sql`` response into one QueryResult per statement, in order."""
    check_status(response)
    try:
        return QueryResults.validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(str(e), body=response.content) from e


def normalize_auth(response: httpx.Response) -> str:
    """
    Decode a ``/signin`` or ``/signup`` response into its token.

    Raises:
        AuthenticationError: If the result code is not 200
        MissingTokenError: If the result is successful but carries no token
    """
    check_status(response)
    result = _decode(response, AuthResult)

    if result.code != httpx.codes.OK:
        logger.warning(f"SurrealDB authentication failed: {result.details}")
        raise AuthenticationError(result.details)
    if not result.token:
        raise MissingTokenError("Authentication succeeded but no token was returned")
    return result.token


def normalize_text(response: httpx.Response) -> str:
    """Return the trimmed text body of a successful response."""
    check_status(response)
    return response.text.strip()


__all__ = [
    "transport_error",
    "read_error",
    "check_status",
    "normalize_query",
    "normalize_auth",
    "normalize_text",
]
