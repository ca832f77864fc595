"""
Maintenance window calculation.

A window always starts now and lasts for the requested number of hours.
Timestamps follow RFC 3339 with whole seconds, e.g. ``2024-01-15T19:30:00+01:00``,
and ``Z`` for UTC.
"""

from datetime import datetime, timedelta
from typing import Optional

from .errors import ValidationError
from .models import TimeWindow


def window_length(timeout_hours: float) -> timedelta:
    """Length of a window of the given hours, truncated to whole seconds."""
    return timedelta(seconds=int(timeout_hours * 3600))


def format_timestamp(value: datetime) -> str:
    """Format an aware datetime as RFC 3339."""
    text = value.isoformat()
    if value.utcoffset() == timedelta(0):
        return text[:-len("+00:00")] + "Z"
    return text


def compute_window(timeout_hours: float, now: Optional[datetime] = None) -> TimeWindow:
    """
    Compute a maintenance window anchored at the current time.

    Without an explicit ``now`` both ends are in the local zone, each with the
    offset in effect at that instant, so a window spanning a DST change gets
    different offsets at start and end.

    Args:
        timeout_hours: Window length in hours
        now: Start of the window (defaults to the current local time)

    Returns:
        TimeWindow with RFC 3339 start and end timestamps

    Raises:
        ValidationError: If the end of the window is not a representable date
    """
    if now is None:
        now = datetime.now()

    local = now.tzinfo is None
    if local:
        now = now.astimezone()

    start = now.replace(microsecond=0)
    try:
        end = start + window_length(timeout_hours)
        if local:
            end = end.astimezone()
    except (OverflowError, ValueError) as e:
        raise ValidationError(f"Timeout of {timeout_hours} hours is out of range: {e}") from e

    return TimeWindow(start_time=format_timestamp(start), end_time=format_timestamp(end))
