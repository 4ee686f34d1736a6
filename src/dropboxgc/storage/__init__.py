"""Storage listing providers for dropboxgc."""

from __future__ import annotations

from .gfal import GfalLister

__all__ = ["GfalLister"]
