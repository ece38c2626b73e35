"""Subprocess execution.

Commands run synchronously with no timeout: a hung `cargo` hangs upkeep.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Protocol

__all__ = [
    "COMMAND_NOT_FOUND",
    "CommandRunner",
    "DefaultCommandRunner",
    "first_line",
]


# Same status a shell reports for an unknown command.
COMMAND_NOT_FOUND = 127


class CommandRunner(Protocol):
    def run(
        self, args: list[str], *, capture: bool = True, cwd: Path | None = None
    ) -> subprocess.CompletedProcess[str]: ...


class DefaultCommandRunner:
    """Run commands with subprocess.

    With `capture=False` the child inherits stdout/stderr, so long-running
    updates stream their progress to the terminal.
    """

    def run(
        self, args: list[str], *, capture: bool = True, cwd: Path | None = None
    ) -> subprocess.CompletedProcess[str]:
        try:
            if capture:
                return subprocess.run(
                    args,
                    text=True,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                    check=False,
                    cwd=str(cwd) if cwd else None,
                )
            return subprocess.run(args, text=True, check=False, cwd=str(cwd) if cwd else None)
        except OSError as e:
            return subprocess.CompletedProcess(args, COMMAND_NOT_FOUND, "", f"{args[0]}: {e}")


def first_line(text: str) -> str:
    for line in text.splitlines():
        line = line.strip()
        if line:
            return line
    return ""
