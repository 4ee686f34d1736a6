"""Resolve listing timestamps ("Sep 26 14:55" / "Apr  6  2022") to instants."""

from __future__ import annotations

from datetime import datetime

from dropboxgc.util.time import add_years, normalize_dt, with_year

# Listing tools always print English month abbreviations, whatever the
# process locale, so the month is looked up here rather than with %b.
MONTHS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MONTH_NUMBERS: dict[str, int] = {name.lower(): i for i, name in enumerate(MONTHS, 1)}

# Recent entries carry a time of day and no year.
DATE_WITH_TIME_NO_YEAR_FORMAT: str = "%m %d %H:%M"
# Older entries carry a year and no time of day.
DATE_WITH_YEAR_FORMAT: str = "%m %d %Y"

# Leap year used while parsing year-less stamps so "Feb 29" is accepted.
_PLACEHOLDER_YEAR: int = 2000


def parse_datestamp(value: str, *, now: datetime) -> datetime:
    """
    Parse a listing timestamp into a tz-aware datetime in the local zone.

    Year-less stamps take the year of `now`; if that puts them after `now`
    they are moved back one year, since a listing cannot show the future.
    Stamps with a year are returned as local midnight of that day.

    Raises:
        ValueError: if the value matches neither format.
    """
    now = normalize_dt(now)
    numeric = _month_to_number(value)

    try:
        wall = datetime.strptime(
            f"{numeric} {_PLACEHOLDER_YEAR}",
            f"{DATE_WITH_TIME_NO_YEAR_FORMAT} %Y",
        )
    except ValueError:
        pass
    else:
        stamp = with_year(wall, now.astimezone().year).astimezone()
        if stamp > now:
            return add_years(stamp, -1)
        return stamp

    return datetime.strptime(numeric, DATE_WITH_YEAR_FORMAT).astimezone()


def _month_to_number(value: str) -> str:
    """Rewrite "Sep 26 14:55" as "09 26 14:55"."""
    tokens = value.split()
    if not tokens:
        raise ValueError(f"empty timestamp: {value!r}")

    month = _MONTH_NUMBERS.get(tokens[0].lower())
    if month is None:
        raise ValueError(f"unknown month {tokens[0]!r} in timestamp {value!r}")

    return " ".join([f"{month:02d}", *tokens[1:]])
