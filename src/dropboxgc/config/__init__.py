"""Configuration exports for dropboxgc."""

from __future__ import annotations

from .retention import RECENT_WINDOW, RetentionPolicy, is_recent
from .settings import Settings, load_settings

__all__ = [
    "RECENT_WINDOW",
    "RetentionPolicy",
    "is_recent",
    "Settings",
    "load_settings",
]
