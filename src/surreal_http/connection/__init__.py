"""
SurrealDB HTTP Connection Module.

Provides synchronous and async connection implementations.
"""

from .async_http import AsyncHTTPConnection
from .base import BaseHTTPConnection
from .http import HTTPConnection

__all__ = [
    "AsyncHTTPConnection",
    "BaseHTTPConnection",
    "HTTPConnection",
]
