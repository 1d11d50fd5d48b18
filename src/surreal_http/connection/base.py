"""
Base Connection for the SurrealDB HTTP client.

Holds the connection configuration and the current authentication state,
and turns operations into requests. Sending them is left to the sync and
async subclasses.
"""

import logging
import threading
from collections.abc import Mapping
from typing import Any, Self

import httpx

from ..config import AuthState, ClientConfig, ProtocolVersion, SigninVars, SignupVars
from ..protocol.request import Body, JsonBody, RawBody, build_request, encode_query_vars

logger = logging.getLogger(__name__)


class BaseHTTPConnection:
    """
    Configuration holder shared by HTTPConnection and AsyncHTTPConnection.

    The namespace, database and URL are fixed at creation. The auth state is
    the only mutable part; reads during request building and writes through
    ``authenticate``/``invalidate`` are serialised by a lock so a request
    never sees a half-replaced state.
    """

    def __init__(
        self,
        url: str,
        namespace: str,
        database: str,
        version: ProtocolVersion | str | None = None,
        auth: AuthState | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the connection.

        Args:
            url: SurrealDB HTTP URL (e.g., "http://localhost:8000")
            namespace: Target namespace
            database: Target database
            version: "1.x <=" for SurrealDB 1.x, ">= 2.x" (default) otherwise
            auth: Optional initial authentication state
            timeout: Request timeout in seconds
            transport: Optional httpx transport (custom TLS, testing)
        """
        self.config = ClientConfig(
            url=url,
            namespace=namespace,
            database=database,
            version=ProtocolVersion.parse(version),
            timeout=timeout,
        )
        self._auth = auth
        self._lock = threading.RLock()
        self._transport = transport

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> Self:
        """Create a connection from an existing ClientConfig."""
        return cls(
            config.url,
            config.namespace,
            config.database,
            version=config.version,
            timeout=config.timeout,
            **kwargs,
        )

    @property
    def url(self) -> str:
        return self.config.url

    @property
    def namespace(self) -> str:
        return self.config.namespace

    @property
    def database(self) -> str:
        return self.config.database

    @property
    def version(self) -> ProtocolVersion:
        return self.config.version

    @property
    def timeout(self) -> float:
        return self.config.timeout

    @property
    def auth(self) -> AuthState | None:
        """Get the current authentication state."""
        with self._lock:
            return self._auth

    @property
    def is_authenticated(self) -> bool:
        """Check if an authentication state is stored."""
        return self.auth is not None

    # Authentication mutators

    def authenticate(self, auth: AuthState) -> None:
        """
        Replace the stored authentication state.

        The previous state is discarded entirely; nothing is merged.
        No request is sent.
        """
        with self._lock:
            self._auth = auth
        logger.info(f"Authentication set -> {type(auth).__name__}.")

    def invalidate(self) -> None:
        """Clear the stored authentication state. Safe to call repeatedly."""
        with self._lock:
            self._auth = None
        logger.info("Authentication cleared.")

    # Request building

    def _build(
        self,
        method: str,
        path: str,
        body: Body | None = None,
        params: list[tuple[str, str]] | None = None,
    ) -> httpx.Request:
        with self._lock:
            return build_request(self.config, self._auth, method, path, body=body, params=params)

    def _query_request(self, sql: str, vars: Mapping[str, Any] | None = None) -> httpx.Request:
        """POST /sql with the SurrealQL text as raw body and vars in the query string."""
        return self._build("POST", "/sql", RawBody(sql), encode_query_vars(vars))

    def _auth_request(
        self,
        path: str,
        credentials: SigninVars | Mapping[str, Any] | None,
        fields: dict[str, Any],
    ) -> httpx.Request:
        """
        POST /signin or /signup with the payload assembled for this protocol version.

        ``credentials`` may be a vars object or a mapping of its fields.

        Raises:
            TypeError: If both credentials and keyword fields are given, or
                credentials is neither a vars object nor a mapping
        """
        vars_class = SignupVars if path == "/signup" else SigninVars
        if credentials is not None and fields:
            raise TypeError("Pass either a credentials object or keyword fields, not both")
        if credentials is None:
            credentials = vars_class(**fields)
        elif isinstance(credentials, Mapping):
            credentials = vars_class(**credentials)
        elif not isinstance(credentials, SigninVars):
            raise TypeError(
                f"credentials must be {vars_class.__name__} or a mapping of its fields, got {type(credentials).__name__}"
            )
        return self._build("POST", path, JsonBody(credentials.to_payload(self.version)))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(url={self.url!r}, namespace={self.namespace!r}, "
            f"database={self.database!r}, version={self.version.value!r})"
        )
