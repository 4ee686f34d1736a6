"""Capability interfaces consumed by the collection operations."""

from __future__ import annotations

from typing import BinaryIO, Mapping, Protocol, Sequence, runtime_checkable

from dropboxgc.models import DropboxEntry

JobRecord = Mapping[str, bytes]
JobStreams = Mapping[str, BinaryIO]


@runtime_checkable
class ListingProvider(Protocol):
    """Source of raw dropbox listings (e.g. a storage listing tool)."""

    def fetch_raw_entries(self, location: str) -> Sequence[bytes]:
        """Return one raw blob per listed object. Raises on transport failure."""
        ...

    def parse_one_blob(self, blob: bytes) -> DropboxEntry:
        """Convert one raw blob. Raises ParseError (or similar) on failure."""
        ...


@runtime_checkable
class JobProvider(Protocol):
    """Source of active job records (e.g. a batch scheduler)."""

    def query_jobs(
        self,
        attributes: Sequence[str],
        constraints: Sequence[str],
    ) -> Sequence[JobRecord]:
        """Return attribute -> raw value records. Raises on query failure."""
        ...

    def extract_files(self, job: JobStreams) -> list[str]:
        """Return the files one job references. Raises on extraction failure."""
        ...
