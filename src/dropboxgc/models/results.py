"""Result models for the collection operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .dropbox_entry import DropboxEntry


@dataclass(slots=True, frozen=True)
class SkippedItem:
    """A listing blob or job record that could not be converted."""

    index: int
    error_type: str
    error_message: str
    raw: Optional[str] = None

    @classmethod
    def from_exception(
        cls,
        index: int,
        exc: BaseException,
        *,
        raw: Optional[str] = None,
    ) -> "SkippedItem":
        return cls(
            index=index,
            error_type=type(exc).__name__,
            error_message=str(exc),
            raw=raw,
        )


@dataclass(slots=True)
class DropboxListing:
    """Entries parsed from one dropbox location, plus what was skipped."""

    location: str
    entries: list[DropboxEntry] = field(default_factory=list)
    skipped: list[SkippedItem] = field(default_factory=list)
    total: int = 0


@dataclass(slots=True)
class ActiveFiles:
    """Files referenced by active jobs, plus the jobs that were skipped."""

    files: list[str] = field(default_factory=list)
    skipped: list[SkippedItem] = field(default_factory=list)
    jobs_seen: int = 0
