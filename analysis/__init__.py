"""Pure formatting and series package for logViewer.

This package contains deterministic, testable helpers that prepare combat-log
samples and numbers for display. It must not import Django or perform any I/O.
"""

from .durations import (
    format_duration_from_ms,
    format_duration_from_s,
    format_minutes,
    millis_to_minutes_and_seconds,
)
from .numbers import round_fixed, round_value, try_parse_int
from .quantity import abbreviate_number, abbreviate_number_split
from .series import SeriesOrderError, fill_gaps
from .timestamps import format_timestamp

__all__ = [
    "SeriesOrderError",
    "abbreviate_number",
    "abbreviate_number_split",
    "fill_gaps",
    "format_duration_from_ms",
    "format_duration_from_s",
    "format_minutes",
    "format_timestamp",
    "millis_to_minutes_and_seconds",
    "round_fixed",
    "round_value",
    "try_parse_int",
]
