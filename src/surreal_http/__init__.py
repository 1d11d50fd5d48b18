"""
SurrealDB HTTP - A Python client for SurrealDB's HTTP REST interface.

Sends SurrealQL to ``/sql`` and credentials to ``/signin``/``/signup``,
and decodes the JSON responses into typed results or RequestError
exceptions.

Supports:
- SurrealDB 1.x and 2.x header/field naming
- Root (Basic), token (Bearer) and scope authentication
- Blocking and async clients built on httpx
"""

from typing import Any

from .config import (
    AuthState,
    ClientConfig,
    ProtocolVersion,
    RootAuth,
    ScopeAuth,
    SigninVars,
    SignupVars,
    TokenAuth,
)
from .connection.async_http import AsyncHTTPConnection
from .connection.base import BaseHTTPConnection
from .connection.http import HTTPConnection
from .exceptions import (
    AuthenticationError,
    DecodeError,
    EncodingError,
    MissingTokenError,
    RequestConstructionError,
    RequestError,
    ServerError,
    SurrealDBError,
    TimeoutError,
    TransportError,
)
from .types import AuthResult, ErrorBody, QueryResult, ResponseStatus

__version__ = "0.1.0"
__all__ = [
    # Connections
    "BaseHTTPConnection",
    "HTTPConnection",
    "AsyncHTTPConnection",
    # Configuration
    "ClientConfig",
    "ProtocolVersion",
    "AuthState",
    "RootAuth",
    "TokenAuth",
    "ScopeAuth",
    "SigninVars",
    "SignupVars",
    # Response Types
    "ResponseStatus",
    "QueryResult",
    "AuthResult",
    "ErrorBody",
    # Exceptions
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


class SurrealDB:
    """
    Factory class for creating SurrealDB HTTP connections.

    Usage:
        # Blocking
        with SurrealDB.http("http://localhost:8000", "ns", "db") as db:
            token = db.signin(user="root", password="root")
            db.authenticate(TokenAuth(token))
            results = db.query("SELECT * FROM users")

        # SurrealDB 1.x server
        db = SurrealDB.http("http://localhost:8000", "ns", "db", version="1.x <=")

        # Async
        async with SurrealDB.async_http("http://localhost:8000", "ns", "db") as db:
            results = await db.query("RETURN 1 + 1")
    """

    @staticmethod
    def http(url: str, namespace: str, database: str, **kwargs: Any) -> HTTPConnection:
        """Create a blocking HTTP connection."""
        return HTTPConnection(url, namespace, database, **kwargs)

    @staticmethod
    def async_http(url: str, namespace: str, database: str, **kwargs: Any) -> AsyncHTTPConnection:
        """Create an async HTTP connection."""
        return AsyncHTTPConnection(url, namespace, database, **kwargs)

    @staticmethod
    def from_env(prefix: str = "SURREALDB_", **kwargs: Any) -> HTTPConnection:
        """Create a blocking HTTP connection configured from environment variables."""
        return HTTPConnection.from_config(ClientConfig.from_env(prefix), **kwargs)
