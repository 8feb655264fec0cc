"""
Display helpers for rest plans.

The engine works in absolute instants; these helpers render them in a
caller-chosen time zone.
"""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytz

from .types import CrewRole


def is_known_timezone(tz_name: str) -> bool:
    """True for IANA names in the pytz database (e.g., "Europe/Lisbon")."""
    return tz_name in pytz.all_timezones_set


def _localize(dt: datetime, tz_name: str) -> datetime:
    # Naive datetimes are treated as UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(ZoneInfo(tz_name))


def format_duration_hhmm(seconds: float) -> str:
    """Format a duration as "H:MM" (e.g., 5400 -> "1:30")."""
    total = int(seconds)
    return f"{total // 3600}:{(total % 3600) // 60:02d}"


def format_time_in_tz(dt: datetime, tz_name: str) -> str:
    """Format as "HH:MM" local time in tz_name."""
    return _localize(dt, tz_name).strftime("%H:%M")


def format_day_month(dt: datetime, tz_name: str) -> str:
    """Format as "dd/MM" in tz_name."""
    return _localize(dt, tz_name).strftime("%d/%m")


def relative_date_label(dt: datetime, tz_name: str, now: datetime) -> str:
    """History label: "Today" if dt falls on now's date in tz_name, else "dd/MM"."""
    if _localize(dt, tz_name).date() == _localize(now, tz_name).date():
        return "Today"
    return format_day_month(dt, tz_name)


def format_short_datetime_utc(dt: datetime) -> str:
    """Format as "dd/MM/yyyy HH:MM UTC"."""
    return _localize(dt, "UTC").strftime("%d/%m/%Y %H:%M") + " UTC"


def utc_offset_label(tz_name: str, at: datetime) -> str:
    """
    UTC offset of tz_name at a given instant, e.g. "UTC+01:00".

    Uses pytz so the offset reflects DST at that instant.
    """
    tz = pytz.timezone(tz_name)
    if at.tzinfo is None:
        at = pytz.UTC.localize(at)
    offset = at.astimezone(tz).utcoffset()
    minutes = int(offset.total_seconds() // 60)
    sign = "+" if minutes >= 0 else "-"
    minutes = abs(minutes)
    return f"UTC{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def owner_label(owner: int, crew_role: CrewRole) -> str:
    """Display name: "Pilot N" for flight crew, "Group N" for cabin crew."""
    noun = "Pilot" if crew_role == "flight_crew" else "Group"
    return f"{noun} {owner}"
