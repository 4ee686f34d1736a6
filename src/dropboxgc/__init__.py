"""dropboxgc public API."""

from __future__ import annotations

from dropboxgc.collect import get_active_files, get_dropbox_files
from dropboxgc.config import (
    RECENT_WINDOW,
    RetentionPolicy,
    Settings,
    is_recent,
    load_settings,
)
from dropboxgc.errors import (
    CommandError,
    CommandNotFoundError,
    CommandTimeoutError,
    DropboxGCError,
    MalformedPermissionsError,
    MissingAttributeError,
    NoEntriesParsedError,
    NotFoundError,
    ParseError,
    PermissionDeniedError,
)
from dropboxgc.listing import (
    parse_datestamp,
    parse_listing_line,
    parse_perms_to_directory_flag,
)
from dropboxgc.models import ActiveFiles, DropboxEntry, DropboxListing, SkippedItem
from dropboxgc.providers import JobProvider, ListingProvider
from dropboxgc.scheduler import CondorSchedd, extract_dropbox_files, group_constraint
from dropboxgc.storage import GfalLister

__all__ = [
    # Collection
    "get_dropbox_files",
    "get_active_files",
    # Providers
    "ListingProvider",
    "JobProvider",
    "GfalLister",
    "CondorSchedd",
    "group_constraint",
    "extract_dropbox_files",
    # Parsing
    "parse_listing_line",
    "parse_datestamp",
    "parse_perms_to_directory_flag",
    # Config / Models
    "RECENT_WINDOW",
    "RetentionPolicy",
    "Settings",
    "is_recent",
    "load_settings",
    "DropboxEntry",
    "DropboxListing",
    "ActiveFiles",
    "SkippedItem",
    # Errors
    "DropboxGCError",
    "ParseError",
    "MalformedPermissionsError",
    "MissingAttributeError",
    "NoEntriesParsedError",
    "CommandError",
    "CommandNotFoundError",
    "CommandTimeoutError",
    "NotFoundError",
    "PermissionDeniedError",
]
