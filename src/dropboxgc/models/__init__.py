"""Public model exports for dropboxgc."""

from __future__ import annotations

from .dropbox_entry import DropboxEntry
from .results import ActiveFiles, DropboxListing, SkippedItem

__all__ = [
    "DropboxEntry",
    "SkippedItem",
    "DropboxListing",
    "ActiveFiles",
]
