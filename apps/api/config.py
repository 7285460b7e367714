from __future__ import annotations

import os
from dataclasses import dataclass, field


def _to_bool(value: str, default: bool) -> bool:
    if not value:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class Settings:
    api_key: str
    require_api_key: bool
    log_level: str
    imgix_domain: str
    imgix_token: str = field(default="", repr=False)
    imgix_use_https: bool = True
    imgix_include_lib_param: bool = True


def get_settings() -> Settings:
    return Settings(
        api_key=os.getenv("API_KEY", ""),
        require_api_key=_to_bool(os.getenv("REQUIRE_API_KEY", "true"), True),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        imgix_domain=os.getenv("IMGIX_DOMAIN", ""),
        imgix_token=os.getenv("IMGIX_TOKEN", ""),
        imgix_use_https=_to_bool(os.getenv("IMGIX_USE_HTTPS", "true"), True),
        imgix_include_lib_param=_to_bool(os.getenv("IMGIX_INCLUDE_LIB_PARAM", "true"), True),
    )
