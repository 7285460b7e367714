from packages.imgix_urls.domain.errors import (
    ConfigurationError,
    ImgixError,
    InvalidArgumentError,
)
from packages.imgix_urls.domain.models import DPR_QUALITIES, Param, SrcsetOptions
from packages.imgix_urls.domain.widths import (
    DEFAULT_MAX_WIDTH,
    DEFAULT_MIN_WIDTH,
    DEFAULT_TOLERANCE,
    target_widths,
    validate_width_range,
)

__all__ = [
    "DEFAULT_MAX_WIDTH",
    "DEFAULT_MIN_WIDTH",
    "DEFAULT_TOLERANCE",
    "DPR_QUALITIES",
    "ConfigurationError",
    "ImgixError",
    "InvalidArgumentError",
    "Param",
    "SrcsetOptions",
    "target_widths",
    "validate_width_range",
]
