"""
Synchronous HTTP Connection for the SurrealDB HTTP client.

Every operation issues one blocking request and returns its decoded result
or raises exactly one RequestError.
"""

from collections.abc import Mapping
from typing import Any, Self

import httpx

from .base import BaseHTTPConnection
from ..config import SigninVars, SignupVars
from ..exceptions import RequestError
from ..protocol.response import (
    check_status,
    normalize_auth,
    normalize_query,
    normalize_text,
    read_error,
    transport_error,
)
from ..types import QueryResult


class HTTPConnection(BaseHTTPConnection):
    """
    Blocking connection to SurrealDB's HTTP REST interface.

    Usage:
        with HTTPConnection("http://localhost:8000", "ns", "db") as db:
            token = db.signin(user="root", password="root")
            db.authenticate(TokenAuth(token))
            results = db.query("SELECT * FROM person WHERE age > $age", {"age": 18})
    """

    _client: httpx.Client | None = None

    @property
    def is_connected(self) -> bool:
        """Check if the underlying HTTP client is open."""
        return self._client is not None

    def connect(self) -> Self:
        """Open the underlying HTTP client. Returns self for fluent API."""
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(timeout=self.timeout, transport=self._transport)  # type: ignore[arg-type]
        return self

    def close(self) -> None:
        """Close the underlying HTTP client."""
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()

    def __enter__(self) -> Self:
        return self.connect()

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def _send(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request and read its body.

        Raises:
            TransportError: If no response was received
            TimeoutError: If the request timed out
            RequestError: If the body could not be read
        """
        client = self.connect()._client
        assert client is not None

        try:
            response = client.send(request, stream=True)
        except httpx.RequestError as e:
            raise transport_error(e) from e

        try:
            response.read()
        except httpx.HTTPError as e:
            raise read_error(e) from e
        finally:
            response.close()
        return response

    # Operations

    def query(self, sql: str, vars: Mapping[str, Any] | None = None) -> list[QueryResult]:
        """
        Execute SurrealQL via POST /sql.

        Args:
            sql: SurrealQL text, sent as the raw request body
            vars: Query variables, sent as query-string parameters (None values skipped)

        Returns:
            One QueryResult per statement, in statement order
        """
        return normalize_query(self._send(self._query_request(sql, vars)))

    def signin(self, credentials: SigninVars | Mapping[str, Any] | None = None, **fields: Any) -> str:
        """
        Sign in via POST /signin and return the issued token.

        Accepts a SigninVars, a mapping of its fields, or the fields as keywords
        (ns, db, ac, sc, user, password, vars). The token is not stored;
        pass it to ``authenticate(TokenAuth(token))`` to use it.
        """
        return normalize_auth(self._send(self._auth_request("/signin", credentials, fields)))

    def signup(self, credentials: SignupVars | Mapping[str, Any] | None = None, **fields: Any) -> str:
        """Sign up via POST /signup and return the issued token."""
        return normalize_auth(self._send(self._auth_request("/signup", credentials, fields)))

    def health(self) -> bool:
        """Check server health via GET /health."""
        return self._probe("/health")

    def status(self) -> bool:
        """Check server status via GET /status."""
        return self._probe("/status")

    def server_version(self) -> str:
        """Get the server version string via GET /version."""
        return normalize_text(self._send(self._build("GET", "/version")))

    def _probe(self, path: str) -> bool:
        try:
            check_status(self._send(self._build("GET", path)))
        except RequestError:
            return False
        return True
