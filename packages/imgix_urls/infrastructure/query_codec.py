"""Canonical query string encoding.

Parameters are sorted by key and form-encoded (space -> ``+``, ``,`` -> ``%2C``).
Keys ending in ``64`` carry URLs or free text; their values are base64url
encoded without padding before escaping, per the imgix blueprint.
"""

from __future__ import annotations

import base64
import urllib.parse
from collections.abc import Iterable

from packages.imgix_urls.domain.models import Param

BASE64_SUFFIX = "64"


def encode_base64_value(value: str) -> str:
    encoded = base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def encode_param(param: Param) -> str:
    value = param.value
    if param.key.endswith(BASE64_SUFFIX):
        value = encode_base64_value(value)
    key = urllib.parse.quote_plus(param.key, safe="")
    return f"{key}={urllib.parse.quote_plus(value, safe='')}"


def encode_query(params: Iterable[Param]) -> str:
    """Return ``k1=v1&k2=v2...`` sorted by key; "" when there are no params."""
    ordered = sorted(params, key=lambda p: p.key)
    return "&".join(encode_param(p) for p in ordered)
