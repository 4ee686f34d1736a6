"""Listing provider backed by the `gfal-ls` command line tool."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Optional

from dropboxgc.config import RetentionPolicy, Settings
from dropboxgc.errors import DropboxGCError
from dropboxgc.listing import parse_listing_line
from dropboxgc.models import DropboxEntry
from dropboxgc.util.command import RetryPolicy, Runner, run_command

logger = logging.getLogger(__name__)


class GfalLister:
    """
    ListingProvider for dropboxes reachable through gfal2 (e.g. dCache over https).

    Notes:
        - gfal-ls reads the token value from BEARER_TOKEN; BEARER_TOKEN_FILE
          is not honored for https endpoints, so the file is read here.
        - Token acquisition itself is not handled; the file must already exist.
    """

    def __init__(
        self,
        policy: RetentionPolicy,
        *,
        gfal_ls: str = "gfal-ls",
        bearer_token_file: Optional[str] = None,
        timeout: Optional[float] = None,
        runner: Runner = subprocess.run,
        retry: RetryPolicy = RetryPolicy(),
    ) -> None:
        self._policy = policy
        self._gfal_ls = gfal_ls
        self._bearer_token_file = bearer_token_file
        self._timeout = timeout
        self._runner = runner
        self._retry = retry

    @classmethod
    def from_settings(cls, settings: Settings, policy: RetentionPolicy) -> "GfalLister":
        return cls(
            policy,
            gfal_ls=settings.gfal_ls,
            bearer_token_file=settings.bearer_token_file,
            timeout=settings.command_timeout_sec,
        )

    @classmethod
    def from_runner(
        cls,
        policy: RetentionPolicy,
        runner: Runner,
        *,
        bearer_token_file: Optional[str] = None,
    ) -> "GfalLister":
        """Create a lister with an injected command runner (useful for tests)."""
        return cls(
            policy,
            bearer_token_file=bearer_token_file,
            runner=runner,
            retry=RetryPolicy(max_retries=0),
        )

    # ----------------------------
    # ListingProvider
    # ----------------------------
    def fetch_raw_entries(self, location: str) -> list[bytes]:
        out = run_command(
            [self._gfal_ls, "-l", location],
            env=self._command_env(),
            timeout=self._timeout,
            runner=self._runner,
            retry=self._retry,
        )
        blobs = [line for line in out.splitlines() if line.strip()]
        logger.debug("gfal-ls returned %d entries for %s", len(blobs), location)
        return blobs

    def parse_one_blob(self, blob: bytes) -> DropboxEntry:
        return parse_listing_line(
            blob.decode("utf-8", errors="surrogateescape"),
            now=self._policy.reference_now,
        )

    # ----------------------------
    # Internal helpers
    # ----------------------------
    def _command_env(self) -> Optional[dict[str, str]]:
        if self._bearer_token_file is None:
            return None

        try:
            with open(self._bearer_token_file, encoding="utf-8") as f:
                token = f.read().strip()
        except OSError as exc:
            raise DropboxGCError(
                f"could not read bearer token file {self._bearer_token_file}",
                details={"bearer_token_file": self._bearer_token_file},
                cause=exc,
            ) from exc

        env = dict(os.environ)
        env["BEARER_TOKEN"] = token
        return env
