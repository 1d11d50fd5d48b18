"""
Request construction for the SurrealDB HTTP interface.

Turns a target path, a method and a body into a fully-headered
``httpx.Request``. Two body policies exist: ``RawBody`` for SurrealQL text
sent verbatim to ``/sql`` and ``JsonBody`` for signin/signup payloads.
"""

import base64
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any
from uuid import UUID

import httpx

from ..config import ClientConfig, RootAuth, ScopeAuth, TokenAuth
from ..exceptions import EncodingError, RequestConstructionError

logger = logging.getLogger(__name__)


class SurrealJSONEncoder(json.JSONEncoder):
    """
    JSON encoder for values commonly passed in signin/signup variables.

    - datetime, date, time → ISO 8601 string
    - Decimal → float
    - UUID → string
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime, date, time)):
            return obj.isoformat()
        if isinstance(obj, Decimal):
            return float(obj)
        if isinstance(obj, UUID):
            return str(obj)
        return super().default(obj)


@dataclass(frozen=True)
class RawBody:
    """Body sent verbatim (SurrealQL text)."""

    text: str

    def encode(self) -> bytes:
        try:
            return self.text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodingError(str(e)) from e


@dataclass(frozen=True)
class JsonBody:
    """Body sent as a JSON object."""

    data: Mapping[str, Any]

    def encode(self) -> bytes:
        """
        Serialize the payload.

        Raises:
            EncodingError: If a value cannot be represented as JSON
        """
        try:
            return json.dumps(dict(self.data), cls=SurrealJSONEncoder, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(str(e)) from e


Body = RawBody | JsonBody


def build_headers(config: ClientConfig, auth: Any = None) -> dict[str, str]:
    """
    Build the headers for a request.

    Content headers are always JSON. Exactly one namespace/database pair is
    emitted, named after the protocol version. Root credentials with a
    namespace or database replace the client-level values.

    Raises:
        RequestConstructionError: If ``auth`` is not a known auth state
    """
    ns_header = config.version.namespace_header
    db_header = config.version.database_header
    headers = {
        "Accept": "application/json",
        "Content-Type": "application/json",
        ns_header: config.namespace,
        db_header: config.database,
    }

    if auth is None:
        return headers

    if isinstance(auth, RootAuth):
        credentials = f"{auth.username}:{auth.password}".encode("utf-8")
        headers["Authorization"] = "Basic " + base64.b64encode(credentials).decode("ascii")
        if auth.namespace:
            headers[ns_header] = auth.namespace
        if auth.database:
            headers[db_header] = auth.database
    elif isinstance(auth, TokenAuth):
        headers["Authorization"] = f"Bearer {auth.token}"
    elif isinstance(auth, ScopeAuth):
        headers.update(auth.to_headers())
    else:
        raise RequestConstructionError(f"Unsupported authentication state: {type(auth).__name__}")

    return headers


def stringify(value: Any) -> str:
    """Convert a query variable to its query-string representation."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, cls=SurrealJSONEncoder)
    return str(value)


def encode_query_vars(vars: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Turn query variables into query-string pairs, skipping None values."""
    if not vars:
        return []
    return [(key, stringify(value)) for key, value in vars.items() if value is not None]


def build_request(
    config: ClientConfig,
    auth: Any,
    method: str,
    path: str,
    body: Body | None = None,
    params: list[tuple[str, str]] | None = None,
) -> httpx.Request:
    """
    Build a fully-headered request against ``{config.url}{path}``.

    Raises:
        EncodingError: If a JSON body cannot be encoded
        RequestConstructionError: If the URL or headers are invalid
    """
    headers = build_headers(config, auth)
    content = body.encode() if body is not None else None
    url = f"{config.url}{path}"

    try:
        request = httpx.Request(method, url, params=params or None, headers=headers, content=content)
    except (httpx.InvalidURL, ValueError, TypeError) as e:
        raise RequestConstructionError(str(e)) from e

    if request.url.scheme not in ("http", "https") or not request.url.host:
        raise RequestConstructionError(f"Invalid SurrealDB URL: {url!r}")

    logger.debug(f"{method} {request.url} (auth={type(auth).__name__ if auth else 'none'})")
    return request


__all__ = [
    "SurrealJSONEncoder",
    "RawBody",
    "JsonBody",
    "Body",
    "build_headers",
    "stringify",
    "encode_query_vars",
    "build_request",
]
