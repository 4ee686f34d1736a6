from __future__ import annotations

import calendar
from datetime import datetime


def now_local() -> datetime:
    """Return current time as tz-aware datetime in the local process zone."""
    return datetime.now().astimezone()


def local_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Build a tz-aware datetime from a wall-clock reading in the local zone."""
    return datetime(year, month, day, hour, minute, second).astimezone()


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt


def add_years(dt: datetime, years: int) -> datetime:
    """
    Shift a tz-aware datetime by whole years on the local wall clock.

    Feb 29 shifted into a non-leap year lands on Mar 1. The UTC offset is
    recomputed for the new date, so DST differences are honored.
    """
    wall = normalize_dt(dt).astimezone().replace(tzinfo=None)
    return with_year(wall, wall.year + years).astimezone()


def with_year(wall: datetime, year: int) -> datetime:
    """Replace the year of a wall-clock datetime; Feb 29 rolls to Mar 1 if needed."""
    if wall.month == 2 and wall.day == 29 and not calendar.isleap(year):
        return wall.replace(year=year, month=3, day=1)
    return wall.replace(year=year)
