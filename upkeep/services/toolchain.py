"""Toolchain update step (`rustup update`)."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import Literal

from upkeep.core.result import Err, Ok, Result
from upkeep.output.console import Style
from upkeep.services.base import BaseService

__all__ = ["ToolchainError", "ToolchainService"]


@dataclass(frozen=True, slots=True)
class ToolchainError:
    """Error from the toolchain update."""

    kind: Literal["update_failed"]
    message: str
    hint: str | None = None


class ToolchainService(BaseService):
    """Update the Rust toolchain. Output streams to the terminal."""

    def update(self, *, dry_run: bool = False) -> Result[None, ToolchainError]:
        argv = list(self._config.commands.toolchain)
        display = shlex.join(argv)

        if dry_run:
            self._console.print(f"would run: {display}", Style.WARNING)
            return Ok(None)

        self._echo(argv)
        proc = self._runner.run(argv, capture=False, cwd=self._workspace.root)
        if proc.returncode != 0:
            return Err(
                ToolchainError(
                    kind="update_failed",
                    message=f"Error: '{display}' failed (exit code {proc.returncode}).",
                    hint="check your Rust installation (is rustup on PATH?)",
                )
            )

        self._console.success("Rust toolchain is up to date.")
        return Ok(None)
