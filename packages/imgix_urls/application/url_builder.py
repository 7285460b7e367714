"""URL builder: composes path/query encoding and signing into imgix URLs."""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from packages.imgix_urls.application.srcset_service import build_srcset, build_srcset_from_widths
from packages.imgix_urls.domain.errors import ConfigurationError, InvalidArgumentError
from packages.imgix_urls.domain.models import Param, SrcsetOptions
from packages.imgix_urls.domain.widths import (
    DEFAULT_MAX_WIDTH,
    DEFAULT_MIN_WIDTH,
    DEFAULT_TOLERANCE,
    validate_width_range,
)
from packages.imgix_urls.infrastructure.path_codec import encode_path
from packages.imgix_urls.infrastructure.query_codec import encode_query
from packages.imgix_urls.infrastructure.signer import SIGNATURE_KEY, sign
from packages.imgix_urls.version import LIB_CLIENT, __version__

logger = logging.getLogger(__name__)

LIB_PARAM_KEY = "ixlib"
# Bare host name, e.g. "demo.imgix.net" (no scheme, path, port or whitespace).
DOMAIN_RE = re.compile(
    r"(?:[a-z\d](?:[a-z\d\-_]{0,61}[a-z\d])?\.)*[a-z\d](?:[a-z\d\-]{0,61}[a-z\d])?",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class URLBuilder:
    """Builds (optionally signed) URLs and srcsets for one imgix source.

    The builder is immutable; ``with_*`` methods return modified copies, so a
    configured instance can be shared between threads.

    Raises:
        ConfigurationError: On construction, if the domain or the default
            srcset bounds are invalid.
    """

    domain: str
    use_https: bool = True
    token: str | None = dataclasses.field(default=None, repr=False)
    include_lib_param: bool = True
    min_width: int = DEFAULT_MIN_WIDTH
    max_width: int = DEFAULT_MAX_WIDTH
    tolerance: float = DEFAULT_TOLERANCE

    def __post_init__(self) -> None:
        if not isinstance(self.domain, str) or not self.domain.strip():
            raise ConfigurationError("domain is required")
        if not DOMAIN_RE.fullmatch(self.domain):
            raise ConfigurationError(
                f"domain must be a bare host name like 'demo.imgix.net', got {self.domain!r}"
            )
        try:
            validate_width_range(self.min_width, self.max_width, self.tolerance)
        except InvalidArgumentError as exc:
            raise ConfigurationError(f"invalid default srcset bounds: {exc}") from exc

    @property
    def scheme(self) -> str:
        return "https" if self.use_https else "http"

    @property
    def lib_param(self) -> Param:
        return Param(LIB_PARAM_KEY, f"{LIB_CLIENT}-{__version__}")

    def with_token(self, token: str | None) -> URLBuilder:
        return dataclasses.replace(self, token=token)

    def with_scheme(self, scheme: str) -> URLBuilder:
        if scheme not in ("http", "https"):
            raise ConfigurationError(f"scheme must be 'http' or 'https', got {scheme!r}")
        return dataclasses.replace(self, use_https=scheme == "https")

    def with_lib_param(self, include: bool) -> URLBuilder:
        return dataclasses.replace(self, include_lib_param=include)

    def with_srcset_defaults(
        self,
        min_width: int | None = None,
        max_width: int | None = None,
        tolerance: float | None = None,
    ) -> URLBuilder:
        return dataclasses.replace(
            self,
            min_width=self.min_width if min_width is None else min_width,
            max_width=self.max_width if max_width is None else max_width,
            tolerance=self.tolerance if tolerance is None else tolerance,
        )

    def create_url(self, path: str, *params: Param) -> str:
        """Return the URL for path with the given parameters.

        Parameters are sorted by key; the signature (when a token is set) is
        appended last and covers the lib param too.
        """
        working: list[Param] = list(params)
        if self.include_lib_param:
            working.append(self.lib_param)

        encoded_path = encode_path(path)
        query = encode_query(working)
        if self.token:
            signature = f"{SIGNATURE_KEY}={sign(self.token, encoded_path, query)}"
            query = f"{query}&{signature}" if query else signature

        url = f"{self.scheme}://{self.domain}{encoded_path}"
        if query:
            url = f"{url}?{query}"
        logger.debug(
            "url_built",
            extra={"event": "url_built", "path": encoded_path, "count": len(working)},
        )
        return url

    def create_srcset(
        self,
        path: str,
        params: Iterable[Param] = (),
        options: SrcsetOptions | None = None,
    ) -> str:
        """Return a srcset for path; fixed-dimension if w or h is pinned, else fluid."""
        return build_srcset(self, path, params, options or SrcsetOptions())

    def create_srcset_from_widths(
        self,
        path: str,
        params: Iterable[Param],
        widths: Sequence[int],
    ) -> str:
        """Return a fluid srcset using exactly the given widths, in order."""
        return build_srcset_from_widths(self, path, params, widths)
