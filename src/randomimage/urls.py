"""Redirect target validation.

Only absolute http/https URLs may leave the server as a ``Location`` header.
Anything else (``javascript:``, ``data:``, ``ftp:``, relative paths,
malformed input) is rejected here and never reaches a response.
"""

from __future__ import annotations

import ipaddress

import httpx

ALLOWED_SCHEMES: frozenset[str] = frozenset({"http", "https"})

# httpx passes these through in a host; a URL containing them is not a URL
_FORBIDDEN_HOST_CHARS: frozenset[str] = frozenset(" \t\n\r#%/:<>?@[\\]^|")

MAX_PORT = 65535


def _is_valid_host(host: str) -> bool:
    if not host:
        return False

    # httpx strips the brackets from IPv6 literals
    if ":" in host:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True

    return not any(
        char in _FORBIDDEN_HOST_CHARS or ord(char) < 0x20 or ord(char) == 0x7F
        for char in host
    )


def is_valid_url(value: str) -> bool:
    """Return True if ``value`` parses as an absolute http(s) URL."""
    try:
        url = httpx.URL(value)
        port = url.port
    except (httpx.InvalidURL, TypeError, ValueError):
        return False

    # httpx lowercases the scheme and host while parsing
    if url.scheme not in ALLOWED_SCHEMES:
        return False
    if port is not None and not 0 <= port <= MAX_PORT:
        return False
    return _is_valid_host(url.host)
