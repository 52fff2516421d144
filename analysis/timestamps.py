"""Relative timestamp labels for encounter lists."""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo

TIME_FORMAT = "%H:%M"
DATE_TIME_FORMAT = "%m/%d/%Y %H:%M"


def format_timestamp(
    timestamp_ms: float,
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> str:
    """Render an epoch timestamp relative to the current calendar day.

    Args:
        timestamp_ms: Milliseconds since the Unix epoch.
        now: Reference "current" moment. Defaults to the current time.
        tz: Time zone whose calendar decides "today". Defaults to the local
            zone of the process.

    Returns:
        `Today HH:MM`, `Yesterday HH:MM`, or `MM/DD/YYYY HH:MM` for any other
        day (including future days).
    """

    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=tz)
    if tz is None:
        moment = moment.astimezone()
    reference = (now or datetime.now(tz=moment.tzinfo)).astimezone(moment.tzinfo)

    today = reference.date()
    if moment.date() == today:
        return f"Today {moment.strftime(TIME_FORMAT)}"
    if moment.date() == today - timedelta(days=1):
        return f"Yesterday {moment.strftime(TIME_FORMAT)}"
    return moment.strftime(DATE_TIME_FORMAT)
