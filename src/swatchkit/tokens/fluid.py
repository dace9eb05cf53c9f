"""
Fluid value interpolation.

Turns a pair of pixel bounds into a CSS ``clamp()`` that scales linearly
between the project's minimum and maximum viewport widths. All output
lengths are rem, relative to a 16px root font size.

Rounding: a derived bound (``min = max / ratio`` or ``max = min * ratio``)
is rounded to two decimals when it is derived. Everything after that is
computed at full precision and only rounded to four decimals when formatted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from swatchkit.core.errors import FluidConfigError

from .models import DEFAULT_FLUID_RATIO

ROOT_FONT_SIZE = 16


@dataclass(frozen=True)
class ViewportRange:
    """The two reference viewport widths, in px."""

    min: float
    max: float


@dataclass(frozen=True)
class FluidBounds:
    """Value bounds in px; not necessarily ordered."""

    min: float
    max: float


def format_number(value: float) -> str:
    """Format a number for CSS: at most four decimals, no trailing zeros."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def viewport_range(viewports: dict[str, Any] | None) -> ViewportRange | None:
    """Extract the ``min``/``max`` widths from a viewports document.

    Returns None when either key is missing. Raises FluidConfigError when
    the widths are not numbers or are equal.
    """
    if not viewports or "min" not in viewports or "max" not in viewports:
        return None

    low, high = viewports["min"], viewports["max"]
    for key, width in (("min", low), ("max", high)):
        if isinstance(width, bool) or not isinstance(width, int | float):
            raise FluidConfigError(f"viewport '{key}' must be a number of pixels, got {width!r}")

    if low == high:
        raise FluidConfigError(
            f"viewport min and max are both {format_number(low)}px; "
            "fluid values need two different widths"
        )
    return ViewportRange(min=float(low), max=float(high))


def resolve_bounds(
    min_value: float | None,
    max_value: float | None,
    ratio: float = DEFAULT_FLUID_RATIO,
) -> FluidBounds:
    """Fill in a missing bound from the ratio."""
    if min_value is None and max_value is None:
        raise ValueError("at least one of min or max is required")
    if ratio <= 0:
        raise ValueError(f"fluid ratio must be positive, got {ratio}")

    if min_value is None:
        min_value = round(max_value / ratio, 2)
    elif max_value is None:
        max_value = round(min_value * ratio, 2)
    return FluidBounds(min=float(min_value), max=float(max_value))


def clamp_expression(bounds: FluidBounds, viewports: ViewportRange) -> str:
    """Build ``clamp(lower, intercept + slope * 100vw, upper)``.

    The line passes through (viewports.min, bounds.min) and
    (viewports.max, bounds.max). Lower/upper are the smaller/larger bound
    whichever way round the source values were given.
    """
    if viewports.min == viewports.max:
        raise FluidConfigError("viewport min and max must differ")

    slope = (bounds.max - bounds.min) / (viewports.max - viewports.min)
    intercept = bounds.min - viewports.min * slope

    lower = min(bounds.min, bounds.max) / ROOT_FONT_SIZE
    upper = max(bounds.min, bounds.max) / ROOT_FONT_SIZE
    intercept_rem = intercept / ROOT_FONT_SIZE
    vw = slope * 100

    sign = "-" if vw < 0 else "+"
    preferred = f"{format_number(intercept_rem)}rem {sign} {format_number(abs(vw))}vw"
    return f"clamp({format_number(lower)}rem, {preferred}, {format_number(upper)}rem)"
