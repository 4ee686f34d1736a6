"""Public error exports for dropboxgc."""

from __future__ import annotations

from .exceptions import (
    CommandError,
    CommandErrorInfo,
    CommandNotFoundError,
    CommandTimeoutError,
    DropboxGCError,
    MalformedPermissionsError,
    MissingAttributeError,
    NoEntriesParsedError,
    NotFoundError,
    ParseError,
    PermissionDeniedError,
    map_command_error,
)

__all__ = [
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
    "CommandErrorInfo",
    "map_command_error",
]
