"""Exception hierarchy and command error mapping for dropboxgc."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class DropboxGCError(Exception):
    """
    Base exception for dropboxgc.

    Attributes:
        details: Optional structured information (e.g., exit code, offending line).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class ParseError(DropboxGCError):
    """Raised when a listing line does not match the expected shape."""


class MalformedPermissionsError(DropboxGCError):
    """Raised when a listing permission field is not a valid 10-char string."""


class MissingAttributeError(DropboxGCError):
    """Raised when a job record lacks the attribute holding its dropbox files."""


class NoEntriesParsedError(DropboxGCError):
    """Raised when a non-empty listing produced no entries at all."""


class CommandError(DropboxGCError):
    """Raised when an external command fails (unclassified non-zero exit)."""


class CommandNotFoundError(CommandError):
    """Raised when the external command binary cannot be executed."""


class CommandTimeoutError(CommandError):
    """Raised when an external command times out."""


class NotFoundError(CommandError):
    """Raised when the remote location does not exist (ENOENT)."""


class PermissionDeniedError(CommandError):
    """Raised when access to the remote location is denied (EPERM/EACCES)."""


@dataclass(frozen=True)
class CommandErrorInfo:
    """Lightweight failure information for mapping to dropboxgc exceptions."""

    argv: tuple[str, ...]
    returncode: int
    stderr: str | None = None


# gfal2 tools exit with the errno of the failed operation.
_ENOENT = 2
_EPERM = 1
_EACCES = 13
_ETIMEDOUT = 110


def map_command_error(
    info: CommandErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> CommandError:
    """
    Map a failed command invocation to a dropboxgc exception.

    Policy:
        - 2 (ENOENT) -> NotFoundError
        - 1/13 (EPERM/EACCES) -> PermissionDeniedError
        - 110 (ETIMEDOUT) -> CommandTimeoutError
        - otherwise -> CommandError
    """
    details: dict[str, Any] = {
        "argv": list(info.argv),
        "returncode": info.returncode,
    }
    stderr = (info.stderr or "").strip()
    if stderr:
        details["stderr"] = stderr

    program = info.argv[0] if info.argv else "command"
    message = stderr or f"{program} exited with status {info.returncode}"

    if info.returncode == _ENOENT:
        return NotFoundError(message, details=details, cause=cause)
    if info.returncode in (_EPERM, _EACCES):
        return PermissionDeniedError(message, details=details, cause=cause)
    if info.returncode == _ETIMEDOUT:
        return CommandTimeoutError(message, details=details, cause=cause)

    return CommandError(message, details=details, cause=cause)
