from __future__ import annotations

from dropboxgc.errors import MalformedPermissionsError

PERMS_LENGTH: int = 10

DIRECTORY_PREFIX: str = "d"
FILE_PREFIX: str = "-"


def parse_perms_to_directory_flag(perms: str) -> bool:
    """
    Return True if a permission string (e.g. "drwxr-xr-x") denotes a directory.

    Only directories ("d") and plain files ("-") are recognized; links,
    devices and anything not exactly 10 characters long are rejected.
    """
    if len(perms) != PERMS_LENGTH:
        raise MalformedPermissionsError(
            f"perms string must be {PERMS_LENGTH} characters: {perms!r}",
            details={"perms": perms},
        )

    prefix = perms[0]
    if prefix not in (DIRECTORY_PREFIX, FILE_PREFIX):
        raise MalformedPermissionsError(
            f"perms string has unrecognized type {prefix!r}: {perms!r}",
            details={"perms": perms},
        )

    return prefix == DIRECTORY_PREFIX
