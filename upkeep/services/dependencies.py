"""Dependency lock update step (`cargo update`).

Version pins in the project's Cargo.toml (e.g. `rodio = "=0.17.3"`) are
honoured by cargo itself; nothing here touches the manifest.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import Literal

from upkeep.core.result import Err, Ok, Result
from upkeep.output.console import Style
from upkeep.services.base import BaseService

__all__ = ["DependencyError", "DependencyService"]


@dataclass(frozen=True, slots=True)
class DependencyError:
    """Error from the dependency lock update."""

    kind: Literal["update_failed"]
    message: str
    hint: str | None = None


class DependencyService(BaseService):
    def update(self, *, dry_run: bool = False) -> Result[None, DependencyError]:
        argv = list(self._config.commands.dependencies)
        display = shlex.join(argv)

        if dry_run:
            self._console.print(f"would run: {display}", Style.WARNING)
            return Ok(None)

        self._echo(argv)
        proc = self._runner.run(argv, capture=False, cwd=self._workspace.root)
        if proc.returncode != 0:
            return Err(
                DependencyError(
                    kind="update_failed",
                    message=f"Error: '{display}' failed (exit code {proc.returncode}).",
                    hint="check for dependency conflicts in Cargo.toml",
                )
            )

        self._console.success("Project dependencies are up to date.")
        return Ok(None)
