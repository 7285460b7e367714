"""Target widths for fluid-width srcsets."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from packages.imgix_urls.domain.errors import InvalidArgumentError

DEFAULT_MIN_WIDTH = 100
DEFAULT_MAX_WIDTH = 8192
DEFAULT_TOLERANCE = 0.08


def validate_width_range(min_width: int, max_width: int, tolerance: float) -> None:
    """Raise InvalidArgumentError unless 0 < min <= max and 0 < tolerance < 1."""
    for name, value in (("min_width", min_width), ("max_width", max_width)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    if min_width > max_width:
        raise InvalidArgumentError(
            f"min_width ({min_width}) must not exceed max_width ({max_width})"
        )
    if isinstance(tolerance, bool) or not isinstance(tolerance, (int, float)):
        raise InvalidArgumentError(f"tolerance must be a number, got {tolerance!r}")
    if not 0 < tolerance < 1:
        raise InvalidArgumentError(f"tolerance must be in (0, 1), got {tolerance!r}")


def _round_half_up(value: float) -> int:
    # Decimal(float) is exact, so .5 ties are decided on the true binary value.
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def target_widths(
    min_width: int = DEFAULT_MIN_WIDTH,
    max_width: int = DEFAULT_MAX_WIDTH,
    tolerance: float = DEFAULT_TOLERANCE,
) -> list[int]:
    """Return the ordered breakpoint widths between min_width and max_width.

    Each width is ``1 + 2 * tolerance`` times the previous one. The running
    value keeps full float precision; only the emitted element is rounded
    (half up). ``max_width`` is always the last element.

    Raises:
        InvalidArgumentError: If the bounds or tolerance are malformed.
    """
    validate_width_range(min_width, max_width, tolerance)

    ratio = 1 + 2 * tolerance
    previous: float = min_width
    widths: list[int] = []
    while previous < max_width:
        widths.append(_round_half_up(previous))
        previous = previous * ratio
    widths.append(max_width)
    return widths
