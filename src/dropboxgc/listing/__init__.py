"""Listing line parsing for dropboxgc."""

from __future__ import annotations

from .dates import (
    DATE_WITH_TIME_NO_YEAR_FORMAT,
    DATE_WITH_YEAR_FORMAT,
    MONTHS,
    parse_datestamp,
)
from .parser import LINE_PATTERN, parse_listing_line
from .perms import parse_perms_to_directory_flag

__all__ = [
    "DATE_WITH_TIME_NO_YEAR_FORMAT",
    "DATE_WITH_YEAR_FORMAT",
    "MONTHS",
    "LINE_PATTERN",
    "parse_datestamp",
    "parse_listing_line",
    "parse_perms_to_directory_flag",
]
