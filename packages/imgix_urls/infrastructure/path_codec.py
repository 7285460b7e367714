"""Path encoding for the imgix rendering API.

Plain paths are escaped segment by segment so `/` keeps separating folders.
Proxied sources (a full URL used as the path of a web-proxy source) are escaped
as a single opaque segment. Everything outside ``A-Za-z0-9-_.~`` is escaped;
this includes `+`, which the service would otherwise read as a space.
"""

from __future__ import annotations

import re
import urllib.parse

# An escaped "/" means the caller already encoded a fully-qualified URL.
ENCODED_SEPARATOR_RE = re.compile(r"%2F", re.IGNORECASE)
# A "%" that does not start a valid escape must itself be escaped.
STRAY_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _is_raw_proxy(path: str) -> bool:
    return path.startswith(("http://", "https://"))


def encode_path(path: str) -> str:
    """Return the escaped path with its leading slash, or "" for an empty path."""
    if path.startswith("/"):
        path = path[1:]
    if not path:
        return ""

    if ENCODED_SEPARATOR_RE.search(path):
        # Keep existing escapes, escape whatever is still unsafe.
        encoded = urllib.parse.quote(STRAY_PERCENT_RE.sub("%25", path), safe="%")
    elif _is_raw_proxy(path):
        encoded = urllib.parse.quote(path, safe="")
    else:
        encoded = "/".join(urllib.parse.quote(segment, safe="") for segment in path.split("/"))
    return "/" + encoded
