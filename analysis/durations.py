"""Duration formatting for encounter timers and uptime tooltips."""

from __future__ import annotations

import math

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE


def _finite(value: float) -> float:
    """Treat NaN and infinities as a zero-length duration."""

    return value if math.isfinite(value) else 0.0


def millis_to_minutes_and_seconds(millis: float) -> str:
    """Format milliseconds as a zero-padded `MM:SS` clock.

    Args:
        millis: Duration in milliseconds.

    Returns:
        The minutes within the current hour and the seconds within the current
        minute, both padded to two digits. Whole hours are dropped, so
        `3_725_000` renders as `02:05`.
    """

    millis = _finite(millis)
    minutes = int((millis % _MS_PER_HOUR) // _MS_PER_MINUTE)
    seconds = int((millis % _MS_PER_MINUTE) // _MS_PER_SECOND)
    return f"{minutes:02d}:{seconds:02d}"


def format_duration_from_ms(duration_ms: float) -> str:
    """Format milliseconds as `M:SS` (e.g. `125000` -> `2:05`)."""

    return format_duration_from_s(_finite(duration_ms) // _MS_PER_SECOND)


def format_duration_from_s(seconds: float) -> str:
    """Format seconds as `M:SS`.

    Args:
        seconds: Duration in seconds. Fractional seconds are dropped.

    Returns:
        Unpadded total minutes and zero-padded seconds.
    """

    whole = math.floor(_finite(seconds))
    minutes, remaining = divmod(whole, 60)
    return f"{minutes}:{remaining:02d}"


def format_minutes(minutes_decimal: float) -> str:
    """Format fractional minutes as `<m>m<s>s`.

    Args:
        minutes_decimal: Duration in minutes (e.g. `2.5`).

    Returns:
        A compact string such as `2m30s`. The minutes segment is omitted when
        it is zero (`0.75` -> `45s`). Seconds are rounded half up.
    """

    total_seconds = math.floor(_finite(minutes_decimal) * 60 + 0.5)
    minutes, seconds = divmod(total_seconds, 60)
    if minutes > 0:
        return f"{minutes}m{seconds}s"
    return f"{seconds}s"
