"""Numeric parsing and rounding helpers for display code.

Parsing is fail-soft: malformed inputs degrade to a caller-supplied default
rather than raising. Rounding goes through `Decimal` so that display strings
round half away from zero on the decimal text of a value, not on its binary
approximation.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Final

_LEADING_INT: Final[re.Pattern[str]] = re.compile(r"^\s*([+-]?\d+)")

# Wide enough for any finite float at any sane number of decimal places.
_ROUNDING_CONTEXT: Final[Context] = Context(prec=400)


def try_parse_int(value: object, default: int = 0) -> int:
    """Parse an integer, falling back to a default on bad input.

    Args:
        value: A number, a string, or anything else.
        default: Value returned when `value` cannot be interpreted.

    Returns:
        - For numbers: the value truncated toward zero, or `default` when it is
          NaN or infinite.
        - For strings: the leading integer prefix (`"12px"` -> 12), or
          `default` when the string does not start with digits.
        - For anything else: `default`.
    """

    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        if not math.isfinite(value):
            return default
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return default
        return int(match.group(1))
    return default


def _non_finite_text(num: float) -> str:
    """Render NaN/infinity the way browsers render them."""

    if math.isnan(num):
        return "NaN"
    return "Infinity" if num > 0 else "-Infinity"


def _quantize(num: float, decimal_places: int) -> Decimal:
    """Round half away from zero to a fixed number of decimal places."""

    exponent = Decimal(1).scaleb(-decimal_places)
    return Decimal(str(num)).quantize(exponent, rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT)


def round_fixed(num: float, decimal_places: int = 1) -> str:
    """Render a number with a fixed number of decimal places.

    A value that renders as `100.0` is shown as `100` so saturated percentages
    (uptime, crit rate) do not carry a redundant decimal. No other trailing
    zeros are suppressed.

    Args:
        num: Value to render.
        decimal_places: Digits after the decimal point.

    Returns:
        The formatted string.
    """

    if not math.isfinite(num):
        return _non_finite_text(num)
    rendered = f"{_quantize(num, decimal_places):f}"
    if rendered == "100.0":
        return "100"
    return rendered


def round_value(num: float, decimal_places: int = 1) -> float:
    """Round a number to `decimal_places`, returning a number."""

    if not math.isfinite(num):
        return num
    return float(_quantize(num, decimal_places))
