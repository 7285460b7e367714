from __future__ import annotations

import logging
from typing import Annotated

from dotenv import load_dotenv

load_dotenv(override=False)

from fastapi import Depends, FastAPI, HTTPException, status

from apps.api.auth import verify_api_key
from apps.api.config import Settings, get_settings
from apps.api.schemas import SrcsetRequest, SrcsetResponse, UrlRequest, UrlResponse
from packages.imgix_urls import URLBuilder, __version__
from packages.imgix_urls.domain import ConfigurationError, InvalidArgumentError
from packages.imgix_urls.logging_utils import setup_logging

app = FastAPI(title="imgix URL signing API", version=__version__)
logger = logging.getLogger(__name__)


def get_builder(settings: Annotated[Settings, Depends(get_settings)]) -> URLBuilder:
    try:
        return URLBuilder(
            domain=settings.imgix_domain,
            use_https=settings.imgix_use_https,
            token=settings.imgix_token or None,
            include_lib_param=settings.imgix_include_lib_param,
        )
    except ConfigurationError as exc:
        logger.error("builder_not_configured", extra={"event": "config"})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"code": "BUILDER_NOT_CONFIGURED", "message": str(exc)},
        ) from exc


def _invalid_argument(exc: InvalidArgumentError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"code": "INVALID_ARGUMENT", "message": str(exc)},
    )


@app.on_event("startup")
def on_startup() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("api_started", extra={"event": "startup"})
    logger.info(
        "signing_check",
        extra={
            "event": "startup",
            "domain_configured": bool(settings.imgix_domain.strip()),
            "signing_enabled": bool(settings.imgix_token),
        },
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/url", response_model=UrlResponse, dependencies=[Depends(verify_api_key)])
def create_url(
    request: UrlRequest,
    builder: Annotated[URLBuilder, Depends(get_builder)],
) -> UrlResponse:
    try:
        return UrlResponse(url=builder.create_url(request.path, *request.to_params()))
    except InvalidArgumentError as exc:
        raise _invalid_argument(exc) from exc


@app.post("/srcset", response_model=SrcsetResponse, dependencies=[Depends(verify_api_key)])
def create_srcset(
    request: SrcsetRequest,
    builder: Annotated[URLBuilder, Depends(get_builder)],
) -> SrcsetResponse:
    try:
        params = request.to_params()
        if request.widths is not None:
            srcset = builder.create_srcset_from_widths(request.path, params, request.widths)
        else:
            srcset = builder.create_srcset(request.path, params, request.to_options())
    except InvalidArgumentError as exc:
        raise _invalid_argument(exc) from exc
    return SrcsetResponse(srcset=srcset)
