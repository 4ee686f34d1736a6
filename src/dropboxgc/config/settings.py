"""Environment-driven settings for dropboxgc."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Mapping, Optional

from dotenv import load_dotenv

from .retention import RECENT_WINDOW, RetentionPolicy

ENV_PREFIX: str = "DROPBOXGC_"

DEFAULT_JOB_ATTRIBUTE: str = "PNFS_INPUT_FILES"
DEFAULT_GFAL_LS: str = "gfal-ls"
DEFAULT_CONDOR_Q: str = "condor_q"
DEFAULT_COMMAND_TIMEOUT_SEC: float = 300.0


@dataclass(slots=True, frozen=True)
class Settings:
    """
    Process-wide settings.

    Read once at startup by load_settings(); values are not re-read later.
    """

    recent_days: int = RECENT_WINDOW.days
    job_attribute: str = DEFAULT_JOB_ATTRIBUTE
    gfal_ls: str = DEFAULT_GFAL_LS
    condor_q: str = DEFAULT_CONDOR_Q
    command_timeout_sec: float = DEFAULT_COMMAND_TIMEOUT_SEC
    bearer_token_file: Optional[str] = None
    schedd: Optional[str] = None

    def __post_init__(self) -> None:
        if self.recent_days <= 0:
            raise ValueError("Settings.recent_days must be positive")
        if self.command_timeout_sec <= 0:
            raise ValueError("Settings.command_timeout_sec must be positive")
        for key in ("job_attribute", "gfal_ls", "condor_q"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Settings.{key} must be a non-empty string")

    @property
    def recent_window(self) -> timedelta:
        return timedelta(days=self.recent_days)

    def retention_policy(self) -> RetentionPolicy:
        """Capture the reference clock for this run."""
        return RetentionPolicy.capture(self.recent_window)


def load_settings(
    env_file: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build Settings from DROPBOXGC_* environment variables.

    A .env file (or env_file, if given) is loaded first without overriding
    variables already set. Passing environ skips .env loading entirely.
    """
    if environ is None:
        load_dotenv(env_file, override=False)
        environ = os.environ

    def get(name: str) -> Optional[str]:
        value = environ.get(ENV_PREFIX + name)
        if value is None or not value.strip():
            return None
        return value.strip()

    return Settings(
        recent_days=_as_int(ENV_PREFIX + "RECENT_DAYS", get("RECENT_DAYS"),
                            RECENT_WINDOW.days),
        job_attribute=get("JOB_ATTRIBUTE") or DEFAULT_JOB_ATTRIBUTE,
        gfal_ls=get("GFAL_LS") or DEFAULT_GFAL_LS,
        condor_q=get("CONDOR_Q") or DEFAULT_CONDOR_Q,
        command_timeout_sec=_as_float(ENV_PREFIX + "COMMAND_TIMEOUT",
                                      get("COMMAND_TIMEOUT"),
                                      DEFAULT_COMMAND_TIMEOUT_SEC),
        bearer_token_file=get("BEARER_TOKEN_FILE"),
        schedd=get("SCHEDD"),
    )


def _as_int(name: str, raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _as_float(name: str, raw: Optional[str], default: float) -> float:
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
