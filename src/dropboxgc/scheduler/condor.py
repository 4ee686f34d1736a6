"""Job provider backed by the HTCondor `condor_q` command line tool."""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any, Optional, Sequence

from dropboxgc.config import Settings
from dropboxgc.errors import CommandError
from dropboxgc.providers import JobStreams
from dropboxgc.util.command import RetryPolicy, Runner, run_command

from .extract import extract_dropbox_files

logger = logging.getLogger(__name__)

DEFAULT_FILES_ATTRIBUTE: str = "PNFS_INPUT_FILES"


def group_constraint(group: str) -> str:
    """Constraint selecting the jobs submitted for one experiment group."""
    return f'Jobsub_Group=="{group}"'


def join_constraints(constraints: Sequence[str]) -> Optional[str]:
    parts = [c.strip() for c in constraints if c and c.strip()]
    if not parts:
        return None
    if len(parts) == 1:
        return parts[0]
    return " && ".join(f"({c})" for c in parts)


class CondorSchedd:
    """
    JobProvider querying one HTCondor schedd (or the local default schedd).

    Job records are returned as attribute -> raw bytes; string ClassAd values
    are passed through as-is, everything else as its JSON text.
    """

    def __init__(
        self,
        *,
        name: Optional[str] = None,
        files_attribute: str = DEFAULT_FILES_ATTRIBUTE,
        condor_q: str = "condor_q",
        timeout: Optional[float] = None,
        runner: Runner = subprocess.run,
        retry: RetryPolicy = RetryPolicy(),
    ) -> None:
        self._name = name
        self._files_attribute = files_attribute
        self._condor_q = condor_q
        self._timeout = timeout
        self._runner = runner
        self._retry = retry

    @classmethod
    def from_settings(cls, settings: Settings) -> "CondorSchedd":
        return cls(
            name=settings.schedd,
            files_attribute=settings.job_attribute,
            condor_q=settings.condor_q,
            timeout=settings.command_timeout_sec,
        )

    @classmethod
    def from_runner(
        cls,
        runner: Runner,
        *,
        name: Optional[str] = None,
        files_attribute: str = DEFAULT_FILES_ATTRIBUTE,
    ) -> "CondorSchedd":
        """Create a schedd client with an injected command runner (useful for tests)."""
        return cls(
            name=name,
            files_attribute=files_attribute,
            runner=runner,
            retry=RetryPolicy(max_retries=0),
        )

    @property
    def files_attribute(self) -> str:
        return self._files_attribute

    # ----------------------------
    # JobProvider
    # ----------------------------
    def query_jobs(
        self,
        attributes: Sequence[str],
        constraints: Sequence[str],
    ) -> list[dict[str, bytes]]:
        argv = [self._condor_q]
        if self._name:
            argv += ["-name", self._name]
        constraint = join_constraints(constraints)
        if constraint is not None:
            argv += ["-constraint", constraint]
        argv.append("-json")
        if attributes:
            argv += ["-attributes", ",".join(attributes)]

        out = run_command(
            argv,
            timeout=self._timeout,
            runner=self._runner,
            retry=self._retry,
        )
        ads = _parse_json_ads(out, argv)
        logger.debug("condor_q returned %d jobs", len(ads))
        return [_ad_to_record(ad) for ad in ads]

    def extract_files(self, job: JobStreams) -> list[str]:
        return extract_dropbox_files(job, self._files_attribute)


def _parse_json_ads(out: bytes, argv: Sequence[str]) -> list[dict[str, Any]]:
    # condor_q -json prints nothing at all when no job matches.
    if not out.strip():
        return []

    try:
        payload = json.loads(out.decode("utf-8"))
    except ValueError as exc:
        raise CommandError(
            "condor_q returned invalid JSON",
            details={"argv": list(argv)},
            cause=exc,
        ) from exc

    if not isinstance(payload, list) or not all(isinstance(ad, dict) for ad in payload):
        raise CommandError(
            "condor_q returned unexpected JSON (expected a list of job ads)",
            details={"argv": list(argv)},
        )
    return payload


def _ad_to_record(ad: dict[str, Any]) -> dict[str, bytes]:
    record: dict[str, bytes] = {}
    for key, value in ad.items():
        if isinstance(value, str):
            record[key] = value.encode("utf-8")
        else:
            record[key] = json.dumps(value).encode("utf-8")
    return record
