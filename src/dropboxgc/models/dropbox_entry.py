"""Data model for dropbox listing entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class DropboxEntry:
    """
    Represents one object in a dropbox listing.

    Notes:
        - name is reported as-is by the listing tool (no normalization).
        - created_at is always tz-aware, in the local process zone.
    """

    name: str
    created_at: datetime
    is_container: bool
