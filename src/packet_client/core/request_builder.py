# src/packet_client/core/request_builder.py
"""
Request construction.

Turns (method, relative path, optional body) into a fully prepared
requests.PreparedRequest carrying the fixed Packet header set. Every failure
here happens before any network activity and is raised as RequestBuildError.
"""

import json
from typing import Any, Dict, Optional
from urllib.parse import urljoin, urlsplit

import requests

from .config import (
    HEADER_AUTH_TOKEN,
    HEADER_CONSUMER_TOKEN,
    MEDIA_TYPE,
    ClientConfig,
)
from .exceptions import RequestBuildError


def resolve_url(base_url: str, path: str) -> str:
    """
    Resolve ``path`` against ``base_url`` (RFC 3986 reference resolution).

    Relative paths are expected without a leading slash; an absolute URL in
    ``path`` replaces the base entirely.

    Raises:
        ValueError: ``path`` cannot be parsed as a URL reference

    Examples:
        >>> resolve_url("https://api.packet.net/", "plans")
        'https://api.packet.net/plans'
        >>> resolve_url("https://api.packet.net/", "https://other.example/x")
        'https://other.example/x'
    """
    if not isinstance(path, str):
        raise ValueError(f"path must be a string, got {type(path).__name__}")
    # urljoin is lenient; urlsplit surfaces malformed references
    # (e.g. an unterminated IPv6 host) as ValueError
    urlsplit(path)
    return urljoin(base_url, path)


def encode_body(body: Any) -> bytes:
    """
    Serialize ``body`` to strict JSON (NaN/Infinity rejected).

    Raises:
        TypeError: value is not JSON-serializable
        ValueError: circular reference or non-finite float
    """
    return json.dumps(body, allow_nan=False).encode("utf-8")


def default_headers(config: ClientConfig) -> Dict[str, str]:
    """Fixed header set sent with every request."""
    return {
        HEADER_AUTH_TOKEN: config.api_key,
        HEADER_CONSUMER_TOKEN: config.consumer_token,
        "Content-Type": MEDIA_TYPE,
        "Accept": MEDIA_TYPE,
        "User-Agent": config.user_agent,
        # one request per connection, nothing is pooled across calls
        "Connection": "close",
    }


def build_request(
    config: ClientConfig,
    method: str,
    path: str,
    body: Optional[Any] = None,
) -> requests.PreparedRequest:
    """
    Build a prepared request against the configured base URL.

    Args:
        config: Client configuration (base URL and credentials)
        method: HTTP method
        path: Path relative to the base URL, no leading slash
        body: Optional JSON-serializable value

    Returns:
        New requests.PreparedRequest, never shared between calls

    Raises:
        RequestBuildError: malformed path, unserializable body, or requests
            failed to prepare the request
    """
    try:
        url = resolve_url(config.base_url, path)
    except ValueError as e:
        raise RequestBuildError(f"Invalid request path: {e}", method, str(path)) from e

    data: Optional[bytes] = None
    if body is not None:
        try:
            data = encode_body(body)
        except (TypeError, ValueError) as e:
            raise RequestBuildError(f"Cannot encode request body as JSON: {e}", method, path) from e

    try:
        return requests.Request(
            method=method,
            url=url,
            headers=default_headers(config),
            data=data,
        ).prepare()
    except (requests.exceptions.RequestException, ValueError) as e:
        raise RequestBuildError(f"Cannot prepare request: {e}", method, path) from e
