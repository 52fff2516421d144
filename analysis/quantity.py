"""Compact magnitude formatting for large numbers.

Damage, healing and shield totals in combat logs span many orders of magnitude,
so tables and tooltips render them with a `k`/`m`/`b`/`t` suffix
(e.g. `7.7m`). Values below one thousand are rendered as plain integers.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Final

from .numbers import round_value

_MAGNITUDES: Final[tuple[tuple[str, Decimal], ...]] = (
    ("k", Decimal(1_000)),
    ("m", Decimal(1_000_000)),
    ("b", Decimal(1_000_000_000)),
    ("t", Decimal(1_000_000_000_000)),
)


def _scale(n: float, threshold: Decimal) -> float:
    """Divide by a magnitude threshold and round to one decimal place."""

    return round_value(float(Decimal(str(n)) / threshold), 1)


def abbreviate_number_split(n: float) -> tuple[float, str]:
    """Split a number into a magnitude value and its suffix.

    Args:
        n: Value to abbreviate.

    Returns:
        `(value, suffix)` where `suffix` is one of `k`, `m`, `b`, `t`, or `""`
        below one thousand. Suffixed values are rounded to one decimal place;
        unsuffixed values are rounded to an int.

    Notes:
        - Values are never promoted to the next unit: `999_960` is
          `(1000.0, "k")`.
        - NaN is treated as zero.
    """

    if math.isnan(n):
        return 0, ""
    if n < _MAGNITUDES[0][1]:
        if math.isinf(n):
            return n, ""
        return int(round_value(n, 0)), ""

    index = max(i for i, (_, threshold) in enumerate(_MAGNITUDES) if n >= threshold)
    suffix, threshold = _MAGNITUDES[index]
    return _scale(n, threshold), suffix


def _plain_number(value: float) -> str:
    """Render a number without a redundant `.0`."""

    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value):
        return str(int(value))
    return str(value)


def abbreviate_number(n: float) -> str:
    """Render a number with a compact magnitude suffix.

    Args:
        n: Value to abbreviate.

    Returns:
        A display string such as `1.5k`, `2.5m`, `3b` or `999`. Thousands
        always keep one decimal (`1.0k`); larger units drop a trailing `.0`
        (`2m`).
    """

    value, suffix = abbreviate_number_split(n)
    if suffix == "k":
        return f"{value:.1f}k"
    return f"{_plain_number(value)}{suffix}"
