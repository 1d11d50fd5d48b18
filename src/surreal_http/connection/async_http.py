"""
Async HTTP Connection for the SurrealDB HTTP client.

Same operations as HTTPConnection, awaited over ``httpx.AsyncClient``.
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


class AsyncHTTPConnection(BaseHTTPConnection):
    """
    Async connection to SurrealDB's HTTP REST interface.

    Usage:
        async with AsyncHTTPConnection("http://localhost:8000", "ns", "db") as db:
            token = await db.signin(user="root", password="root")
            db.authenticate(TokenAuth(token))
            results = await db.query("SELECT * FROM person")
    """

    _client: httpx.AsyncClient | None = None

    @property
    def is_connected(self) -> bool:
        """Check if the underlying HTTP client is open."""
        return self._client is not None

    async def connect(self) -> Self:
        """Open the underlying HTTP client. Returns self for fluent API."""
        with self._lock:
            if self._client is None:
                self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)  # type: ignore[arg-type]
        return self

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            await client.aclose()

    async def __aenter__(self) -> Self:
        return await self.connect()

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def _send(self, request: httpx.Request) -> httpx.Response:
        client = (await self.connect())._client
        assert client is not None

        try:
            response = await client.send(request, stream=True)
        except httpx.RequestError as e:
            raise transport_error(e) from e

        try:
            await response.aread()
        except httpx.HTTPError as e:
            raise read_error(e) from e
        finally:
            await response.aclose()
        return response

    # Operations

    async def query(self, sql: str, vars: Mapping[str, Any] | None = None) -> list[QueryResult]:
        """Execute SurrealQL via POST /sql. See HTTPConnection.query."""
        return normalize_query(await self._send(self._query_request(sql, vars)))

    async def signin(self, credentials: SigninVars | Mapping[str, Any] | None = None, **fields: Any) -> str:
        """Sign in via POST /signin and return the issued token."""
        return normalize_auth(await self._send(self._auth_request("/signin", credentials, fields)))

    async def signup(self, credentials: SignupVars | Mapping[str, Any] | None = None, **fields: Any) -> str:
        """Sign up via POST /signup and return the issued token."""
        return normalize_auth(await self._send(self._auth_request("/signup", credentials, fields)))

    async def health(self) -> bool:
        """Check server health via GET /health."""
        return await self._probe("/health")

    async def status(self) -> bool:
        """Check server status via GET /status."""
        return await self._probe("/status")

    async def server_version(self) -> str:
        """Get the server version string via GET /version."""
        return normalize_text(await self._send(self._build("GET", "/version")))

    async def _probe(self, path: str) -> bool:
        try:
            check_status(await self._send(self._build("GET", path)))
        except RequestError:
            return False
        return True
