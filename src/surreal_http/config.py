"""
Connection configuration for the SurrealDB HTTP client.

Holds the immutable connection target, the protocol version selector, the
three authentication shapes and the signin/signup payloads.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ProtocolVersion(StrEnum):
    """
    SurrealDB protocol generation.

    Only header names and a few payload keys differ between the two:
    ``NS``/``DB`` and ``sc`` for 1.x, ``surreal-ns``/``surreal-db`` and ``ac``
    for 2.x and later.
    """

    LEGACY = "1.x <="
    CURRENT = ">= 2.x"

    @classmethod
    def parse(cls, value: ProtocolVersion | str | None) -> ProtocolVersion:
        """Resolve a version selector, defaulting to CURRENT when unset or unknown."""
        if isinstance(value, ProtocolVersion):
            return value
        if value == cls.LEGACY.value:
            return cls.LEGACY
        return cls.CURRENT

    @property
    def namespace_header(self) -> str:
        return "NS" if self is ProtocolVersion.LEGACY else "surreal-ns"

    @property
    def database_header(self) -> str:
        return "DB" if self is ProtocolVersion.LEGACY else "surreal-db"


def normalize_url(url: str) -> str:
    """Strip the trailing slash and map WebSocket schemes to HTTP."""
    if url.startswith("ws://"):
        url = url.replace("ws://", "http://", 1)
    elif url.startswith("wss://"):
        url = url.replace("wss://", "https://", 1)
    return url.rstrip("/")


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable configuration for one SurrealDB HTTP connection.

    Attributes:
        url: Server root (e.g. "http://localhost:8000")
        namespace: Namespace sent on every request
        database: Database sent on every request
        version: Protocol version selector
        timeout: Per-request timeout in seconds
    """

    url: str
    namespace: str
    database: str
    version: ProtocolVersion = ProtocolVersion.CURRENT
    timeout: float = 30.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", normalize_url(self.url))
        object.__setattr__(self, "version", ProtocolVersion.parse(self.version))

    @classmethod
    def from_env(cls, prefix: str = "SURREALDB_") -> ClientConfig:
        """
        Build a configuration from environment variables.

        Reads ``{prefix}URL``, ``{prefix}NAMESPACE``, ``{prefix}DATABASE``,
        ``{prefix}VERSION`` and ``{prefix}TIMEOUT``.

        Raises:
            ValueError: If the namespace or database is missing
        """
        namespace = os.getenv(f"{prefix}NAMESPACE")
        database = os.getenv(f"{prefix}DATABASE")
        if not namespace or not database:
            raise ValueError(f"{prefix}NAMESPACE and {prefix}DATABASE must be set")
        return cls(
            url=os.getenv(f"{prefix}URL", "http://localhost:8000"),
            namespace=namespace,
            database=database,
            version=ProtocolVersion.parse(os.getenv(f"{prefix}VERSION")),
            timeout=float(os.getenv(f"{prefix}TIMEOUT", "30")),
        )


# Authentication states


@dataclass(frozen=True)
class RootAuth:
    """
    Username/password authentication sent as HTTP Basic credentials.

    A non-empty namespace or database replaces the client-level value.
    """

    username: str
    password: str
    namespace: str = ""
    database: str = ""

    def __repr__(self) -> str:
        return f"RootAuth(username={self.username!r}, namespace={self.namespace!r}, database={self.database!r})"


@dataclass(frozen=True)
class TokenAuth:
    """Pre-issued token sent as a Bearer credential."""

    token: str

    def __repr__(self) -> str:
        return "TokenAuth(token=***)"


@dataclass(frozen=True)
class ScopeAuth:
    """Credentials scoped to a named scope, sent as individual headers."""

    scope: str
    username: str
    password: str
    namespace: str = ""
    database: str = ""

    def to_headers(self) -> dict[str, str]:
        """Flatten the scope credentials into request headers."""
        return {
            "SC": self.scope,
            "username": self.username,
            "password": self.password,
            "namespace": self.namespace,
            "database": self.database,
        }

    def __repr__(self) -> str:
        return f"ScopeAuth(scope={self.scope!r}, username={self.username!r})"


AuthState = RootAuth | TokenAuth | ScopeAuth


# Signin / signup payloads


@dataclass
class SigninVars:
    """
    Payload for ``/signin``.

    Unset fields are left out of the request body entirely. ``ac`` is only
    sent to 2.x servers and ``sc`` only to 1.x servers. Entries of ``vars``
    are merged last and overwrite any colliding key.

    Attributes:
        ns: Namespace (namespace, database and record users)
        db: Database (database and record users)
        ac: Access method name (record users, 2.x)
        sc: Scope name (scope users, 1.x)
        user: Username (root, namespace and database users)
        password: Password, sent as ``pass``
        vars: Extra variables for record/scope access
    """

    ns: str | None = None
    db: str | None = None
    ac: str | None = None
    sc: str | None = None
    user: str | None = None
    password: str | None = None
    vars: dict[str, Any] | None = None

    def to_payload(self, version: ProtocolVersion | str | None = None) -> dict[str, Any]:
        """Assemble the JSON payload for the given protocol version."""
        version = ProtocolVersion.parse(version)
        payload: dict[str, Any] = {}
        if self.ns is not None:
            payload["ns"] = self.ns
        if self.db is not None:
            payload["db"] = self.db
        if self.user is not None:
            payload["user"] = self.user
        if self.password is not None:
            payload["pass"] = self.password

        if version is ProtocolVersion.CURRENT and self.ac is not None:
            payload["ac"] = self.ac
        elif version is ProtocolVersion.LEGACY and self.sc is not None:
            payload["sc"] = self.sc

        if self.vars:
            payload.update(self.vars)
        return payload


@dataclass
class SignupVars(SigninVars):
    """Payload for ``/signup``. Same fields and rules as SigninVars."""

    pass


__all__ = [
    "ProtocolVersion",
    "ClientConfig",
    "normalize_url",
    "RootAuth",
    "TokenAuth",
    "ScopeAuth",
    "AuthState",
    "SigninVars",
    "SignupVars",
]
