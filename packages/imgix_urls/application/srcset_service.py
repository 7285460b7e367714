"""Srcset generation: fixed-dimension (DPR) and fluid-width candidates."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from packages.imgix_urls.domain.errors import InvalidArgumentError
from packages.imgix_urls.domain.models import (
    DPR_QUALITIES,
    FIXED_DIMENSION_KEYS,
    Param,
    SrcsetOptions,
)
from packages.imgix_urls.domain.widths import target_widths

if TYPE_CHECKING:
    from packages.imgix_urls.application.url_builder import URLBuilder

logger = logging.getLogger(__name__)

SRCSET_SEPARATOR = ",\n"


def _with_overrides(params: Sequence[Param], *overrides: Param) -> list[Param]:
    """Return params with overrides applied; an override replaces the same key."""
    merged = {p.key: p for p in params}
    for param in overrides:
        merged[param.key] = param
    return list(merged.values())


def _is_fixed_dimension(params: Sequence[Param]) -> bool:
    return any(p.key in FIXED_DIMENSION_KEYS for p in params)


def build_dpr_srcset(
    builder: URLBuilder,
    path: str,
    params: Sequence[Param],
    variable_quality: bool = True,
) -> str:
    """One candidate per DPR 1..5, each with its `dpr` and (optionally) `q`."""
    caller_sets_quality = any(p.key == "q" for p in params)
    entries: list[str] = []
    for dpr, quality in DPR_QUALITIES.items():
        overrides = [Param("dpr", dpr)]
        if variable_quality and not caller_sets_quality:
            overrides.append(Param("q", quality))
        url = builder.create_url(path, *_with_overrides(params, *overrides))
        entries.append(f"{url} {dpr}x")
    return SRCSET_SEPARATOR.join(entries)


def build_srcset_from_widths(
    builder: URLBuilder,
    path: str,
    params: Iterable[Param],
    widths: Sequence[int],
) -> str:
    """Fluid srcset over the given widths, kept in the caller's order.

    Raises:
        InvalidArgumentError: If a width is not a positive integer.
    """
    params = list(params)
    for width in widths:
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise InvalidArgumentError(f"widths must be positive integers, got {width!r}")

    entries = [
        f"{builder.create_url(path, *_with_overrides(params, Param('w', width)))} {width}w"
        for width in widths
    ]
    logger.debug(
        "srcset_built",
        extra={"event": "srcset_built", "mode": "fluid", "count": len(entries)},
    )
    return SRCSET_SEPARATOR.join(entries)


def build_srcset(
    builder: URLBuilder,
    path: str,
    params: Iterable[Param],
    options: SrcsetOptions,
) -> str:
    """Pick the srcset mode from params and build it.

    Width bounds come from options, falling back to the builder defaults. They
    are only checked in fluid mode, where they are used.
    """
    params = list(params)
    if _is_fixed_dimension(params):
        srcset = build_dpr_srcset(builder, path, params, options.variable_quality)
        logger.debug(
            "srcset_built",
            extra={"event": "srcset_built", "mode": "fixed", "count": len(DPR_QUALITIES)},
        )
        return srcset

    widths = target_widths(
        builder.min_width if options.min_width is None else options.min_width,
        builder.max_width if options.max_width is None else options.max_width,
        builder.tolerance if options.tolerance is None else options.tolerance,
    )
    return build_srcset_from_widths(builder, path, params, widths)
