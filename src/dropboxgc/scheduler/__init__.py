"""Batch scheduler job providers for dropboxgc."""

from __future__ import annotations

from .condor import (
    DEFAULT_FILES_ATTRIBUTE,
    CondorSchedd,
    group_constraint,
    join_constraints,
)
from .extract import FILES_SEPARATOR, extract_dropbox_files

__all__ = [
    "CondorSchedd",
    "DEFAULT_FILES_ATTRIBUTE",
    "FILES_SEPARATOR",
    "extract_dropbox_files",
    "group_constraint",
    "join_constraints",
]
