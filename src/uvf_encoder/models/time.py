"""
Time primitives.

Contains DTOs for instants and periods used as phenomenon times.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple, Union


@dataclass(frozen=True)
class TimeInstant:
    """A single point in time."""

    value: datetime

    @property
    def start(self) -> datetime:
        return self.value

    @property
    def end(self) -> datetime:
        return self.value


@dataclass(frozen=True)
class TimePeriod:
    """A time period; its phenomenon time is the end instant."""

    start: datetime
    end: datetime


Time = Union[TimeInstant, TimePeriod]


def phenomenon_instant(time: Time) -> datetime:
    """Return the instant a value applies to: the instant itself or the end of a period."""
    return time.end


def time_bounds(time: Time) -> Tuple[datetime, datetime]:
    """Return (start, end) of an instant or period."""
    return time.start, time.end
