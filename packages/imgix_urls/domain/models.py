"""Domain types for URL parameters and srcset generation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from packages.imgix_urls.domain.errors import InvalidArgumentError

# Quality per device pixel ratio: denser screens tolerate lower quality, which
# keeps the payload of high-DPR variants bounded.
DPR_QUALITIES: Mapping[int, int] = MappingProxyType({1: 75, 2: 50, 3: 35, 4: 23, 5: 20})

# Parameters that pin the rendered size; their presence selects fixed-dimension srcsets.
FIXED_DIMENSION_KEYS = frozenset({"w", "h"})


@dataclass(frozen=True, init=False)
class Param:
    """A single query parameter: one key with one or more values.

    Values are stringified on construction; several values are later serialized
    joined by ``,`` (e.g. ``Param("auto", "format", "compress")``).
    """

    key: str
    values: tuple[str, ...]

    def __init__(self, key: str, *values: object) -> None:
        if not values:
            raise InvalidArgumentError(f"Parameter '{key}' needs at least one value")
        object.__setattr__(self, "key", str(key))
        object.__setattr__(self, "values", tuple(str(v) for v in values))

    @property
    def value(self) -> str:
        return ",".join(self.values)


@dataclass(frozen=True)
class SrcsetOptions:
    """Per-call srcset options. ``None`` bounds fall back to the builder defaults."""

    min_width: int | None = None
    max_width: int | None = None
    tolerance: float | None = None
    # When disabled, fixed-dimension srcsets carry no `q` parameter at all.
    variable_quality: bool = True
