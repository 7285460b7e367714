"""Deterministic imgix URL and srcset builder (no network I/O)."""

from packages.imgix_urls.application.url_builder import URLBuilder
from packages.imgix_urls.domain import (
    DPR_QUALITIES,
    ConfigurationError,
    ImgixError,
    InvalidArgumentError,
    Param,
    SrcsetOptions,
    target_widths,
)
from packages.imgix_urls.version import __version__

__all__ = [
    "DPR_QUALITIES",
    "ConfigurationError",
    "ImgixError",
    "InvalidArgumentError",
    "Param",
    "SrcsetOptions",
    "URLBuilder",
    "__version__",
    "target_widths",
]
