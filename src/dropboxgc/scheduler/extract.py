from __future__ import annotations

from dropboxgc.errors import MissingAttributeError
from dropboxgc.providers import JobStreams

FILES_SEPARATOR: str = ","


def extract_dropbox_files(job: JobStreams, attribute: str) -> list[str]:
    """
    Split a job's comma-packed file attribute into individual paths.

    Each segment is stripped of surrounding whitespace. Empty segments
    (from ",," or a trailing comma) are kept as "".
    """
    stream = job.get(attribute)
    if stream is None:
        raise MissingAttributeError(
            "required job attribute is missing to get job dropbox files",
            details={"attribute": attribute},
        )

    value = stream.read().decode("utf-8")
    return [segment.strip() for segment in value.split(FILES_SEPARATOR)]
