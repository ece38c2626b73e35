# SPDX-License-Identifier: MIT
"""Local fork version, read from a single `version = "..."` manifest line.

This is not a TOML parser. Only the first line that starts with
`version =` is looked at, which in a Cargo manifest is the `[package]`
version (dependency tables put the crate name first).
"""

from __future__ import annotations

import re
from pathlib import Path

__all__ = ["VERSION_PREFIX", "parse_local_version", "read_local_version"]


VERSION_PREFIX = "version ="

_QUOTED = re.compile(r'"([^"]*)"')


def parse_local_version(text: str) -> str:
    """Return the quoted value of the first `version =` line, or "" if none."""
    for line in text.splitlines():
        if not line.startswith(VERSION_PREFIX):
            continue
        match = _QUOTED.search(line, len(VERSION_PREFIX))
        return match.group(1) if match else ""
    return ""


def read_local_version(path: Path) -> str:
    """Read `path` and extract the local version.

    Raises OSError if the file cannot be read; a missing version line is
    not an error and yields "".
    """
    return parse_local_version(path.read_text(encoding="utf-8", errors="replace"))
