"""Number formatting for the text form of geometric values."""

from __future__ import annotations

import math
from typing import Callable

NumberFormatter = Callable[[float], str]
"""Renders a single scalar component as text."""


def scientific_formatter(decimals: int = 3) -> NumberFormatter:
    """Create a normalized scientific formatter.

    The mantissa has exactly one integer digit and ``decimals`` fraction
    digits. The exponent carries no padding and no plus sign, so 1.0
    renders as ``1.000E0`` and -0.0015 as ``-1.500E-3``.

    Args:
        decimals: Number of digits after the decimal point

    Returns:
        Formatter function
    """

    def _format(value: float) -> str:
        mantissa, exponent = f"{value:.{decimals}E}".split("E")
        return f"{mantissa}E{int(exponent)}"

    return _format


def format_number(value: float, formatter: NumberFormatter) -> str:
    """Format one component, handling non-finite values first.

    NaN renders as ``NaN`` and infinities as ``+Inf`` / ``-Inf``; only
    finite values reach ``formatter``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return formatter(value)


def format_components(values, formatter: NumberFormatter | None = None) -> list[str]:
    """Format a sequence of components, using the default formatter if None."""
    if formatter is None:
        from ._config import FormatParams

        formatter = FormatParams().formatter()
    return [format_number(float(v), formatter) for v in values]
