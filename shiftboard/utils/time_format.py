"""Human-readable date/time formatting for the admin and staff panels.

Block windows are stored as naive local wall-clock times (what the form
surface submits, minute precision). Booking timestamps are timezone-aware
UTC and get converted to the display timezone before formatting.
"""

from datetime import datetime

import pytz

from shiftboard.core.exceptions import ValidationError

# Medium date + short time as rendered by the German panels: "18.10.2026, 07:15"
DISPLAY_FORMAT = "%d.%m.%Y, %H:%M"
RANGE_SEPARATOR = " – "
DEFAULT_TIMEZONE = "Europe/Berlin"


def to_minute(value: datetime) -> datetime:
    """Drop seconds and microseconds."""
    return value.replace(second=0, microsecond=0)


def display_zone(name: str):
    """pytz zone for ``name``, UTC when the name is unknown."""
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        return pytz.utc


def format_datetime(value: datetime | str | None, timezone: str = DEFAULT_TIMEZONE) -> str:
    """Format a timestamp for display.

    Args:
        value: Naive local datetime, aware datetime, or ISO string
        timezone: Display timezone name for aware values

    Returns:
        str: Formatted timestamp, or the raw value if it cannot be parsed
    """
    if value is None:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value

    if value.tzinfo is not None:
        value = value.astimezone(display_zone(timezone))

    return value.strftime(DISPLAY_FORMAT)


def format_range(
    start: datetime | str | None, end: datetime | str | None, timezone: str = DEFAULT_TIMEZONE
) -> str:
    """Format a start/end pair as '18.10.2026, 07:15 – 18.10.2026, 11:15'."""
    return f"{format_datetime(start, timezone)}{RANGE_SEPARATOR}{format_datetime(end, timezone)}"


def parse_local_datetime(
    text: datetime | str | None, field: str = "datetime", timezone: str = DEFAULT_TIMEZONE
) -> datetime:
    """Parse a form value like '2026-10-18T07:15' into a naive local datetime.

    Full ISO strings and datetime objects are accepted too; any offset is
    dropped after converting to ``timezone`` so the result is always
    local wall-clock.

    Raises:
        ValidationError: If the value is empty or not a datetime
    """
    if isinstance(text, datetime):
        value = text
    elif text is None or not str(text).strip():
        raise ValidationError(f"{field} is required")
    else:
        try:
            value = datetime.fromisoformat(str(text).strip())
        except ValueError:
            raise ValidationError(f"{field} must look like YYYY-MM-DDTHH:MM, got '{text}'")

    if value.tzinfo is not None:
        value = value.astimezone(display_zone(timezone)).replace(tzinfo=None)
    return to_minute(value)
