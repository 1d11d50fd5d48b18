"""
Pytest configuration for surreal_http tests.

Provides a scripted stand-in for a SurrealDB server built on
``httpx.MockTransport``. Each test scripts the next reply and inspects the
requests the client actually sent.

Shared connection constants are defined here so every test file can import
them instead of hardcoding URLs and scope names.
"""

from collections.abc import Iterator
from typing import Any

import httpx
import pytest

from surreal_http import AsyncHTTPConnection, HTTPConnection

# ---------------------------------------------------------------------------
# Shared connection constants (import these in test files)
# ---------------------------------------------------------------------------
SURREALDB_URL = "http://localhost:8000"
SURREALDB_NAMESPACE = "test"
SURREALDB_DATABASE = "test"


class MockSurreal:
    """Scripted SurrealDB server recording every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = []
        self.content: bytes | None = None
        self.stream: httpx.SyncByteStream | None = None
        self.error: Exception | None = None

    def reply(self, status_code: int = 200, json: Any = None, content: bytes | None = None) -> None:
        """Script the next responses: a JSON body, or raw content if given."""
        self.status_code = status_code
        self.body = json
        self.content = content

    def fail(self, error: Exception) -> None:
        """Make the next requests fail before any response is produced."""
        self.error = error

    @property
    def last(self) -> httpx.Request:
        """The most recent request received."""
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.stream is not None:
            return httpx.Response(self.status_code, stream=self.stream)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def server() -> MockSurreal:
    """A fresh scripted server for each test."""
    return MockSurreal()


@pytest.fixture
def conn(server: MockSurreal) -> Iterator[HTTPConnection]:
    """Blocking connection (2.x protocol) wired to the scripted server."""
    connection = HTTPConnection(
        SURREALDB_URL,
        SURREALDB_NAMESPACE,
        SURREALDB_DATABASE,
        transport=server.transport,
    )
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture
def legacy_conn(server: MockSurreal) -> Iterator[HTTPConnection]:
    """Blocking connection (1.x protocol) wired to the scripted server."""
    connection = HTTPConnection(
        SURREALDB_URL,
        SURREALDB_NAMESPACE,
        SURREALDB_DATABASE,
        version="1.x <=",
        transport=server.transport,
    )
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture
def async_conn(server: MockSurreal) -> AsyncHTTPConnection:
    """Async connection (2.x protocol) wired to the scripted server. Tests close it."""
    return AsyncHTTPConnection(
        SURREALDB_URL,
        SURREALDB_NAMESPACE,
        SURREALDB_DATABASE,
        transport=server.transport,
    )
