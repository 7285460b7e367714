"""URL signing: MD5 over token + encoded path + encoded query."""

from __future__ import annotations

import hashlib

SIGNATURE_KEY = "s"


def sign(token: str, path: str, query: str) -> str:
    """Return the lowercase hex signature for an already-encoded path and query.

    An empty path is signed as "/", the request path the service receives.
    The query must not contain the signature parameter itself.
    """
    message = token + (path or "/")
    if query:
        message += "?" + query
    return hashlib.md5(message.encode("utf-8")).hexdigest()
