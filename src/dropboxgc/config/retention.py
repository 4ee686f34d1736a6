"""Retention window and the reference clock used for one cleanup run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from dropboxgc.models import DropboxEntry
from dropboxgc.util.time import normalize_dt, now_local

RECENT_WINDOW: timedelta = timedelta(days=30)


def is_recent(
    entry: DropboxEntry,
    *,
    now: datetime,
    window: timedelta = RECENT_WINDOW,
) -> bool:
    """Return True if entry is younger than window, measured from now."""
    return normalize_dt(now) - entry.created_at < window


@dataclass(slots=True, frozen=True)
class RetentionPolicy:
    """
    Reference clock reading and recency window for one reconciliation run.

    Captured once at process start so every entry in the run is resolved and
    classified against the same instant, however long the run takes.
    """

    reference_now: datetime
    recent_window: timedelta = field(default=RECENT_WINDOW)

    def __post_init__(self) -> None:
        normalize_dt(self.reference_now)
        if not isinstance(self.recent_window, timedelta):
            raise TypeError("RetentionPolicy.recent_window must be a timedelta")
        if self.recent_window <= timedelta(0):
            raise ValueError("RetentionPolicy.recent_window must be positive")

    @classmethod
    def capture(cls, recent_window: Optional[timedelta] = None) -> RetentionPolicy:
        """Read the local clock once and build a policy around it."""
        window = recent_window if recent_window is not None else RECENT_WINDOW
        return cls(reference_now=now_local(), recent_window=window)

    def is_recent(self, entry: DropboxEntry) -> bool:
        return is_recent(entry, now=self.reference_now, window=self.recent_window)
