from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Process exit codes."""

    OK = 0
    FAILURE = 1  # a maintenance step failed or the fork manifest is missing
    USAGE_ERROR = 2  # bad CLI usage or config file
