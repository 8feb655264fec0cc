"""
Data structures for rest plan calculation.

Requests, assigned rest periods and the typed rest/break slots the
distributor output is converted into before assembly.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Literal

UNIT_LENGTH_SECONDS = 300  # 5 minutes per rest unit

CrewRole = Literal[
    "flight_crew",  # Pilots, rest window ends at a chosen time
    "cabin_crew",  # Cabin groups, rest window ends before pre-landing service
]

InputStatus = Literal[
    "valid",
    "negative_interval",  # End not after begin
    "too_small_interval",  # Not enough units for the periods and breaks
    "unsupported_combination",  # No fair distribution rule for users/periods
]


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class RestRequest:
    """
    Input for one rest plan calculation.

    begin/end must already be resolved to concrete instants (see
    date_adjuster). creation_datetime is bookkeeping only and does not take
    part in equality, so two requests differing only in when they were made
    compare equal.
    """

    begin_datetime: datetime
    end_datetime: datetime
    number_of_users: int  # 2 or 3
    number_of_periods: int  # 2-5
    minimum_break_units: int
    crew_role: CrewRole = "flight_crew"
    time_zone: str = "UTC"  # IANA timezone, display only
    optimise_breaks: bool = False
    unit_length: int = UNIT_LENGTH_SECONDS
    creation_datetime: datetime = field(default_factory=_utc_now, compare=False)

    @property
    def number_of_breaks(self) -> int:
        return self.number_of_periods - 1


@dataclass(frozen=True)
class RestInterval:
    """Closed time interval [start, end]."""

    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


@dataclass(frozen=True)
class AssignedRestPeriod:
    """A rest interval assigned to one crew member or group."""

    owner: int  # 1-based
    period: RestInterval
    crew_role: CrewRole


@dataclass(frozen=True)
class RestSlot:
    """Rest units for one rest period."""

    units: int


@dataclass(frozen=True)
class BreakSlot:
    """Break units between two rest periods (not assigned to anyone)."""

    units: int


Slot = RestSlot | BreakSlot


@dataclass
class RestPlan:
    """
    Assigned rest periods plus the time zone they are displayed in.

    The display zone defaults to the request's zone and can be switched by
    the caller without recalculating.
    """

    time_zone: str
    rest_periods: list[AssignedRestPeriod] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rest_periods
