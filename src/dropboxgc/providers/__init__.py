"""Provider interfaces for dropboxgc."""

from __future__ import annotations

from .base import JobProvider, JobRecord, JobStreams, ListingProvider

__all__ = ["ListingProvider", "JobProvider", "JobRecord", "JobStreams"]
