"""Collection operations: dropbox entries and files held by active jobs."""

from __future__ import annotations

import io
import logging
from typing import Sequence

from dropboxgc.errors import NoEntriesParsedError
from dropboxgc.models import ActiveFiles, DropboxListing, SkippedItem
from dropboxgc.providers import JobProvider, ListingProvider

logger = logging.getLogger(__name__)


def get_dropbox_files(provider: ListingProvider, location: str) -> DropboxListing:
    """
    List the entries of one dropbox location.

    Blobs that fail to convert are skipped (logged and reported in
    `skipped`). A fetch failure propagates unchanged.

    Raises:
        NoEntriesParsedError: if the listing was non-empty but no blob could
            be converted. That points at a systemic problem (e.g. a changed
            listing format), not at an empty dropbox.
    """
    blobs = provider.fetch_raw_entries(location)

    result = DropboxListing(location=location, total=len(blobs))
    for index, blob in enumerate(blobs):
        try:
            entry = provider.parse_one_blob(blob)
        except Exception as exc:
            raw = _blob_text(blob)
            logger.warning(
                "skipping listing entry %d in %s: %s (%r)", index, location, exc, raw
            )
            result.skipped.append(SkippedItem.from_exception(index, exc, raw=raw))
            continue
        result.entries.append(entry)

    if result.total and not result.entries:
        raise NoEntriesParsedError(
            "there was an error processing the file listings into file entries. "
            "No file entries were generated",
            details={
                "location": location,
                "total": result.total,
                "skipped": result.skipped,
            },
        )

    logger.debug(
        "%s: %d entries, %d skipped", location, len(result.entries), len(result.skipped)
    )
    return result


def get_active_files(
    provider: JobProvider,
    attributes: Sequence[str],
    constraints: Sequence[str],
) -> ActiveFiles:
    """
    Collect every file referenced by the jobs matching constraints.

    Jobs whose files cannot be extracted are skipped (logged and reported in
    `skipped`); if every job fails the result is simply empty. A query
    failure propagates unchanged. Files are not deduplicated.
    """
    jobs = provider.query_jobs(attributes, constraints)

    result = ActiveFiles(jobs_seen=len(jobs))
    for index, job in enumerate(jobs):
        streams = {key: io.BytesIO(value) for key, value in job.items()}
        try:
            files = provider.extract_files(streams)
        except Exception as exc:
            logger.warning("skipping job %d: %s", index, exc)
            result.skipped.append(SkippedItem.from_exception(index, exc))
            continue
        result.files.extend(files)

    logger.debug(
        "%d active files from %d jobs, %d jobs skipped",
        len(result.files), result.jobs_seen, len(result.skipped),
    )
    return result


def _blob_text(blob: bytes) -> str:
    if isinstance(blob, (bytes, bytearray)):
        return bytes(blob).decode("utf-8", errors="replace").rstrip("\r\n")
    return str(blob)
