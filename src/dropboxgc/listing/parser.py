"""Parse `gfal-ls -l` style listing lines into DropboxEntry objects."""

from __future__ import annotations

import re
from datetime import datetime

from dropboxgc.errors import MalformedPermissionsError, ParseError
from dropboxgc.models import DropboxEntry

from .dates import parse_datestamp
from .perms import parse_perms_to_directory_flag

# "-rwxrwxrwx   0 0     0            50 Sep 26 14:55 bogus_file.out"
# "drwxrwxrwx   0 0     0             0 Apr  6  2022 bogus_dir"
LINE_PATTERN = re.compile(
    r"\s*(?P<perms>[\w-]+)\s+"
    r"(?P<links>\d+)\s+"
    r"(?P<owner>\d+)\s+"
    r"(?P<group>\d+)\s+"
    r"(?P<size>\d+)\s+"
    r"(?P<stamp>\w+\s+\d+\s+(?:\d+:\d+|\d+))\s+"
    r"(?P<name>.+)"
)


def parse_listing_line(line: str, *, now: datetime) -> DropboxEntry:
    """
    Convert one listing line into a DropboxEntry.

    Raises:
        ParseError: if the line does not match the listing shape, or its
            permission or timestamp field is invalid. The underlying error
            is kept as `cause`.
    """
    text = line.rstrip("\r\n")
    match = LINE_PATTERN.match(text)
    if match is None:
        raise ParseError("could not parse line", details={"line": text})

    try:
        is_container = parse_perms_to_directory_flag(match.group("perms"))
    except MalformedPermissionsError as exc:
        raise ParseError(
            "could not parse line: malformed perms",
            details={"line": text},
            cause=exc,
        ) from exc

    try:
        created_at = parse_datestamp(match.group("stamp"), now=now)
    except ValueError as exc:
        raise ParseError(
            "could not parse line: bad timestamp",
            details={"line": text, "stamp": match.group("stamp")},
            cause=exc,
        ) from exc

    return DropboxEntry(
        name=match.group("name"),
        created_at=created_at,
        is_container=is_container,
    )
