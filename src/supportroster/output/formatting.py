"""Text formatting helpers shared by the roster and message generators."""

from datetime import date
from typing import Union

from supportroster.config import HOURS_PER_DAY, UNITS_PER_HOUR
from supportroster.domain.models import strip_contact

Number = Union[int, float]


def ordinal_suffix(day: int) -> str:
    """English ordinal suffix for a day of the month."""
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def pretty_date(d: date) -> str:
    """Format a date like "Monday, November 18th"."""
    return f"{d.strftime('%A, %B')} {d.day}{ordinal_suffix(d.day)}"


def weekday_abbrev(d: date) -> str:
    """Three-letter weekday name, e.g. "Mon"."""
    return d.strftime("%a")


def pretty_hour(offset: int) -> str:
    """Convert a half-hour offset into an HH:MM clock string.

    Offsets past midnight wrap around, so 48 renders as "00:00".
    """
    hour = offset / UNITS_PER_HOUR
    if hour >= HOURS_PER_DAY:
        hour -= HOURS_PER_DAY
    if hour.is_integer():
        return f"{int(hour):02d}:00"
    return f"{int(hour):02d}:30"


def format_number(value: Number) -> str:
    """Render hours and counts without a trailing ".0" on whole numbers."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def ping_handle(agent: str) -> str:
    """Agent handle for the support hours list: first "@" and contact removed."""
    return strip_contact(agent.replace("@", "", 1))


def hour_label(bucket: int) -> str:
    """Row label for an hour bucket; overflow buckets restart at 0."""
    return str(bucket if bucket < HOURS_PER_DAY else bucket - HOURS_PER_DAY)
