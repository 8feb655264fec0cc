"""
Resolve time-of-day picker values into concrete rest window instants.

A time picker carries no reliable date. The user is assumed to mean the
nearest sensible occurrence of the chosen time relative to "now":
- Rest begin: up to 6h in the past or 12h in the future
- Rest end (flight crew): the first occurrence after rest begin
- Rest end (cabin crew): landing time after rest begin, minus the
  pre-landing service duration

"now" is always passed in explicitly so results are deterministic.
"""

from datetime import datetime, timedelta

from .types import CrewRole
from .units import to_utc

# Begin adjustment thresholds
BEGIN_PAST_LIMIT = timedelta(hours=-6)  # Earlier than this means tomorrow
BEGIN_FUTURE_LIMIT = timedelta(hours=12)  # Later than this means yesterday

ONE_DAY = timedelta(days=1)


def _elapsed(later: datetime, earlier: datetime) -> timedelta:
    # Aware datetimes sharing a tzinfo subtract as wall time; compare in UTC
    return to_utc(later) - to_utc(earlier)


def adjusted_begin_datetime(raw_begin: datetime, now: datetime) -> datetime:
    """
    Move a picker begin time to the day the user most likely means.

    Args:
        raw_begin: Picker output (time of day on an arbitrary date)
        now: Reference instant

    Returns:
        raw_begin shifted by one calendar day if it is more than 6h in the
        past or more than 12h in the future, otherwise raw_begin
    """
    offset = _elapsed(raw_begin, now)

    if offset < BEGIN_PAST_LIMIT:
        return raw_begin + ONE_DAY
    if offset > BEGIN_FUTURE_LIMIT:
        return raw_begin - ONE_DAY
    return raw_begin


def adjusted_end_datetime(
    begin: datetime,
    raw_end: datetime,
    raw_landing: datetime,
    service_seconds: int,
    crew_role: CrewRole,
    now: datetime,
) -> datetime:
    """
    Resolve the end of the rest window.

    Args:
        begin: Already adjusted rest begin
        raw_end: End-of-rest picker output (flight crew)
        raw_landing: Landing picker output (cabin crew)
        service_seconds: Pre-landing service duration (cabin crew)
        crew_role: Selects which picker value is used
        now: Reference instant (kept for a uniform signature with the begin
            adjustment; the end is resolved against begin)

    Returns:
        End of the rest window
    """
    if crew_role == "flight_crew":
        return raw_end if raw_end > begin else raw_end + ONE_DAY

    landing = raw_landing if raw_landing > begin else raw_landing + ONE_DAY
    # Rests must finish before service starts
    return landing - timedelta(seconds=service_seconds)


def picker_datetime(time_str: str, now: datetime) -> datetime:
    """
    Place an "HH:MM" picker value on now's calendar date and time zone.

    This mirrors what a date-less time picker hands over: today's date with
    the chosen time.
    """
    hour, minute = (int(part) for part in time_str.split(":"))
    return now.replace(hour=hour, minute=minute, second=0, microsecond=0)


def resolve_rest_window(
    begin_time: str,
    crew_role: CrewRole,
    now: datetime,
    end_time: str | None = None,
    landing_time: str | None = None,
    service_seconds: int = 0,
) -> tuple[datetime, datetime]:
    """
    Turn picker strings into an adjusted (begin, end) pair.

    Flight crew requests need end_time, cabin crew requests need
    landing_time and service_seconds.

    Raises:
        ValueError: If the picker value required by crew_role is missing
    """
    if crew_role == "flight_crew" and end_time is None:
        raise ValueError("end_time is required for flight crew")
    if crew_role == "cabin_crew" and landing_time is None:
        raise ValueError("landing_time is required for cabin crew")

    begin = adjusted_begin_datetime(picker_datetime(begin_time, now), now)

    # The unused picker still holds a value in the UI; default it to begin
    raw_end = picker_datetime(end_time, now) if end_time else begin
    raw_landing = picker_datetime(landing_time, now) if landing_time else begin

    end = adjusted_end_datetime(begin, raw_end, raw_landing, service_seconds, crew_role, now)
    return begin, end
