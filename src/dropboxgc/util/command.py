"""External command execution with errno mapping and retry."""

from __future__ import annotations

import logging
import subprocess
import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from dropboxgc.errors import (
    CommandErrorInfo,
    CommandNotFoundError,
    CommandTimeoutError,
    map_command_error,
)

logger = logging.getLogger(__name__)

Runner = Callable[..., Any]


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 2
    initial_delay_sec: float = 5.0


def run_command(
    argv: Sequence[str],
    *,
    env: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
    runner: Runner = subprocess.run,
    retry: RetryPolicy = RetryPolicy(),
) -> bytes:
    """
    Run argv and return its stdout.

    Timeouts are retried with exponential backoff; every other failure is
    raised immediately as a CommandError subclass.
    """
    delay = retry.initial_delay_sec
    for attempt in range(retry.max_retries + 1):
        try:
            return _run_once(argv, env=env, timeout=timeout, runner=runner)
        except CommandTimeoutError:
            if attempt < retry.max_retries:
                logger.warning(
                    "%s timed out (attempt %d/%d); retrying in %.1fs",
                    argv[0], attempt + 1, retry.max_retries + 1, delay,
                )
                time.sleep(delay)
                delay *= 2
                continue
            raise

    raise CommandTimeoutError("Unexpected retry loop termination")


def _run_once(
    argv: Sequence[str],
    *,
    env: Optional[Mapping[str, str]],
    timeout: Optional[float],
    runner: Runner,
) -> bytes:
    logger.debug("running %s", " ".join(argv))
    try:
        proc = runner(
            list(argv),
            capture_output=True,
            env=dict(env) if env is not None else None,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise CommandTimeoutError(
            f"{argv[0]} timed out after {timeout}s",
            details={"argv": list(argv), "timeout": timeout},
            cause=exc,
        ) from exc
    except OSError as exc:
        raise CommandNotFoundError(
            f"could not execute {argv[0]}",
            details={"argv": list(argv)},
            cause=exc,
        ) from exc

    if proc.returncode != 0:
        info = CommandErrorInfo(
            argv=tuple(argv),
            returncode=proc.returncode,
            stderr=_decode(proc.stderr),
        )
        raise map_command_error(info)

    return proc.stdout or b""


def _decode(data: Any) -> Optional[str]:
    if isinstance(data, (bytes, bytearray)):
        return data.decode("utf-8", errors="replace")
    if isinstance(data, str):
        return data
    return None
