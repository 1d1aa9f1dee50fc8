"""Request signing for private endpoints.

Every private request carries ``API-KEY``, ``API-TIMESTAMP`` (Unix ms) and
``API-SIGN``: the hex HMAC-SHA256 of ``timestamp + method + path + body``
keyed with the API secret. ``path`` excludes the query string, and ``body``
is empty for GET and the exact JSON text sent on the wire for POST.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from dataclasses import dataclass, field
from typing import Any

from .errors import CredentialError, SerializationError


@dataclass(frozen=True)
class Credentials:
    """API key pair. Supplied by the caller, never cached by the library."""

    api_key: str
    api_secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_secret:
            raise CredentialError("API key and API secret must both be non-empty")


def sign(secret: str, message: str) -> str:
    """Return the hex-encoded HMAC-SHA256 of ``message``."""
    return hmac.new(secret.encode(), message.encode(), hashlib.sha256).hexdigest()


def canonical_json(body: Any) -> str:
    """Serialize a request body to the one JSON text that is signed and sent."""
    try:
        return json.dumps(body, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Failed to encode request body: {exc}") from exc


def current_timestamp_ms() -> int:
    return int(time.time() * 1000)


def _signed_headers(api_key: str, api_secret: str, timestamp: int, message: str) -> dict[str, str]:
    return {
        "API-KEY": api_key,
        "API-TIMESTAMP": str(timestamp),
        "API-SIGN": sign(api_secret, message),
    }


def build_get_headers(
    api_key: str,
    api_secret: str,
    method: str,
    path: str,
    *,
    timestamp: int | None = None,
) -> dict[str, str]:
    """Build signed headers for a request without a body.

    Args:
        api_key: API key
        api_secret: API secret
        method: HTTP method (``GET``)
        path: Endpoint path without base URL or query, e.g. ``/v1/orders``
        timestamp: Unix milliseconds; the wall clock is read when omitted

    Returns:
        Header mapping to attach to the request
    """
    if timestamp is None:
        timestamp = current_timestamp_ms()
    message = f"{timestamp}{method.upper()}{path}"
    return _signed_headers(api_key, api_secret, timestamp, message)


def build_post_headers(
    api_key: str,
    api_secret: str,
    method: str,
    path: str,
    json_body: Any,
    *,
    timestamp: int | None = None,
) -> dict[str, str]:
    """Build signed headers for a JSON body request.

    The body is serialized with :func:`canonical_json`, the same encoder the
    transports use, so the signed text and the transmitted text match.
    """
    if timestamp is None:
        timestamp = current_timestamp_ms()
    message = f"{timestamp}{method.upper()}{path}{canonical_json(json_body)}"
    headers = _signed_headers(api_key, api_secret, timestamp, message)
    headers["Content-Type"] = "application/json"
    return headers


def get_headers_for(credentials: Credentials, path: str, *, timestamp: int | None = None) -> dict[str, str]:
    return build_get_headers(credentials.api_key, credentials.api_secret, "GET", path, timestamp=timestamp)


def post_headers_for(
    credentials: Credentials,
    path: str,
    json_body: Any,
    *,
    timestamp: int | None = None,
) -> dict[str, str]:
    return build_post_headers(
        credentials.api_key,
        credentials.api_secret,
        "POST",
        path,
        json_body,
        timestamp=timestamp,
    )
