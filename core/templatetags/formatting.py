"""Template filters that expose `analysis` display helpers.

Usage:
    {% load formatting %}
    {{ damage|abbreviate }}  {{ uptime|round_fixed:1 }}%  {{ duration|duration_ms }}
"""

from __future__ import annotations

from django import template
from django.utils import timezone

from analysis.durations import (
    format_duration_from_ms,
    format_duration_from_s,
    format_minutes as _format_minutes,
    millis_to_minutes_and_seconds,
)
from analysis.numbers import round_fixed as _round_fixed
from analysis.numbers import try_parse_int
from analysis.quantity import abbreviate_number
from analysis.timestamps import format_timestamp

register = template.Library()


def _as_number(value: object) -> float:
    """Coerce a template value to a float; non-numeric values become 0."""

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    try:
        return float(str(value))
    except ValueError:
        return float(try_parse_int(value))


@register.filter
def abbreviate(value: object) -> str:
    """Render a number with a `k`/`m`/`b`/`t` suffix."""

    return abbreviate_number(_as_number(value))


@register.filter
def round_fixed(value: object, decimal_places: object = 1) -> str:
    """Render a number with a fixed number of decimal places."""

    return _round_fixed(_as_number(value), try_parse_int(decimal_places, 1))


@register.filter
def duration_ms(value: object) -> str:
    """Render milliseconds as `M:SS`."""

    return format_duration_from_ms(_as_number(value))


@register.filter
def duration_s(value: object) -> str:
    """Render seconds as `M:SS`."""

    return format_duration_from_s(_as_number(value))


@register.filter
def minutes_seconds(value: object) -> str:
    """Render milliseconds as a zero-padded `MM:SS` clock."""

    return millis_to_minutes_and_seconds(_as_number(value))


@register.filter
def format_minutes(value: object) -> str:
    """Render fractional minutes as `<m>m<s>s`."""

    return _format_minutes(_as_number(value))


@register.filter
def timestamp(value: object) -> str:
    """Render epoch milliseconds as `Today HH:MM`, `Yesterday HH:MM` or a date.

    Calendar days follow Django's currently active time zone.
    """

    tz = timezone.get_current_timezone()
    return format_timestamp(_as_number(value), now=timezone.localtime(timezone.now(), tz), tz=tz)
