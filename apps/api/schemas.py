"""Request/response bodies for the URL signing API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from packages.imgix_urls.domain import Param, SrcsetOptions

Scalar = str | int | float
ParamValue = Scalar | list[Scalar]


class UrlRequest(BaseModel):
    """Path plus imgix parameters; a list value becomes a multi-value param."""

    path: str
    params: dict[str, ParamValue] = Field(default_factory=dict)

    @field_validator("params")
    @classmethod
    def reject_empty_values(cls, v: dict[str, ParamValue]) -> dict[str, ParamValue]:
        for key, value in v.items():
            if isinstance(value, list) and not value:
                raise ValueError(f"Parameter '{key}' needs at least one value")
        return v

    def to_params(self) -> list[Param]:
        params: list[Param] = []
        for key, value in self.params.items():
            values = value if isinstance(value, list) else [value]
            params.append(Param(key, *values))
        return params


class UrlResponse(BaseModel):
    url: str


# Per-request limits; each srcset entry is a signed URL built on the server.
MAX_SRCSET_WIDTH = 8192
MAX_EXPLICIT_WIDTHS = 64
MIN_TOLERANCE = 0.01


class SrcsetRequest(UrlRequest):
    # Explicit widths bypass the target width generator.
    widths: list[int] | None = Field(default=None, max_length=MAX_EXPLICIT_WIDTHS)
    min_width: int | None = Field(default=None, le=MAX_SRCSET_WIDTH)
    max_width: int | None = Field(default=None, le=MAX_SRCSET_WIDTH)
    tolerance: float | None = Field(default=None, ge=MIN_TOLERANCE, lt=1)
    variable_quality: bool = True

    @model_validator(mode="after")
    def widths_or_bounds(self) -> SrcsetRequest:
        has_bounds = any(
            v is not None for v in (self.min_width, self.max_width, self.tolerance)
        )
        if self.widths is not None and has_bounds:
            raise ValueError(
                "Provide either widths or (min_width, max_width, tolerance), not both."
            )
        return self

    def to_options(self) -> SrcsetOptions:
        return SrcsetOptions(
            min_width=self.min_width,
            max_width=self.max_width,
            tolerance=self.tolerance,
            variable_quality=self.variable_quality,
        )


class SrcsetResponse(BaseModel):
    srcset: str
