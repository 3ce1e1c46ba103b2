"""
Session Authority - Request token extraction.

Works with any request object exposing ``cookies`` and ``headers``
mappings (aiohttp, Starlette, Werkzeug).
"""

from collections.abc import Mapping
from typing import Protocol

from vault.config.constants import SESSION_COOKIE_NAME, SESSION_HEADER_NAME


class RequestLike(Protocol):
    """Minimal request surface needed to find a session token."""

    @property
    def cookies(self) -> Mapping[str, str]: ...

    @property
    def headers(self) -> Mapping[str, str]: ...


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    # Plain dicts are case-sensitive, HTTP headers are not
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def extract_session_token(request: RequestLike) -> str | None:
    """
    Extract the session token from a request.

    The ``sessionId`` cookie wins over the ``x-session-id`` header.

    Args:
        request: Incoming request

    Returns:
        Token string or None if the request carries none
    """
    cookies = getattr(request, "cookies", None) or {}
    token = cookies.get(SESSION_COOKIE_NAME)
    if token:
        return token.strip() or None

    headers = getattr(request, "headers", None) or {}
    token = _header(headers, SESSION_HEADER_NAME)
    if token:
        return token.strip() or None

    return None
