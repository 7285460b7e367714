from __future__ import annotations

import secrets
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from apps.api.config import Settings, get_settings


def _reject(status_code: int, code: str, message: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"code": code, "message": message})


def verify_api_key(
    x_api_key: Annotated[str | None, Header(alias="X-API-Key")] = None,
    settings: Annotated[Settings | None, Depends(get_settings)] = None,
) -> None:
    if settings is None:
        raise _reject(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "SETTINGS_MISSING",
            "Failed to load API settings.",
        )

    if not settings.require_api_key:
        return

    if not settings.api_key:
        raise _reject(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "API_KEY_NOT_CONFIGURED",
            "API key is required but missing.",
        )

    # Signed URLs are only handed out to callers holding the key.
    if x_api_key is None or not secrets.compare_digest(x_api_key, settings.api_key):
        raise _reject(
            status.HTTP_401_UNAUTHORIZED,
            "INVALID_API_KEY",
            "Invalid X-API-Key header.",
        )
