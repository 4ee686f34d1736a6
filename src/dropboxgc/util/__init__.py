from .command import RetryPolicy, run_command
from .time import (
    add_years,
    local_datetime,
    normalize_dt,
    now_local,
    with_year,
)

__all__ = [
    "RetryPolicy",
    "run_command",
    "now_local",
    "local_datetime",
    "normalize_dt",
    "add_years",
    "with_year",
]
