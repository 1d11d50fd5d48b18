"""
SurrealDB HTTP Protocol Module.

Request construction and response normalization, independent of the
transport that carries the exchange.
"""

from .request import (
    Body,
    JsonBody,
    RawBody,
    SurrealJSONEncoder,
    build_headers,
    build_request,
    encode_query_vars,
    stringify,
)
from .response import (
    check_status,
    normalize_auth,
    normalize_query,
    normalize_text,
    read_error,
    transport_error,
)

__all__ = [
    # Request
    "Body",
    "JsonBody",
    "RawBody",
    "SurrealJSONEncoder",
    "build_headers",
    "build_request",
    "encode_query_vars",
    "stringify",
    # Response
    "check_status",
    "normalize_auth",
    "normalize_query",
    "normalize_text",
    "read_error",
    "transport_error",
]
