"""Full maintenance run: toolchain, dependencies, fork drift check.

Steps run strictly in order and the first failure ends the run; nothing
after it is attempted.
"""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING, Union

from upkeep.core.result import Err, Ok, Result
from upkeep.services.base import BaseService
from upkeep.services.dependencies import DependencyError, DependencyService
from upkeep.services.fork import ForkError, ForkReport, ForkService
from upkeep.services.toolchain import ToolchainError, ToolchainService

if TYPE_CHECKING:
    from upkeep.core.config import Config
    from upkeep.core.workspace import Workspace
    from upkeep.output.console import ConsoleProtocol
    from upkeep.platform.process import CommandRunner

__all__ = ["UpdateError", "UpdateService"]


UpdateError = Union[ToolchainError, DependencyError, ForkError]


class UpdateService(BaseService):
    def __init__(
        self,
        *,
        workspace: Workspace,
        config: Config,
        console: ConsoleProtocol,
        runner: CommandRunner | None = None,
    ) -> None:
        super().__init__(workspace=workspace, config=config, console=console, runner=runner)
        # Steps share one runner so a fake injected by tests sees every call.
        self._toolchain = ToolchainService(
            workspace=workspace, config=config, console=console, runner=self._runner
        )
        self._dependencies = DependencyService(
            workspace=workspace, config=config, console=console, runner=self._runner
        )
        self._fork = ForkService(
            workspace=workspace, config=config, console=console, runner=self._runner
        )

    def run(self, *, dry_run: bool = False) -> Result[ForkReport, UpdateError]:
        commands = self._config.commands
        fork = self._config.fork

        self._console.success("--- Starting Rust project update ---")
        if dry_run:
            self._console.warning("mode: dry-run")
        self._console.newline()

        self._console.header(
            f"Step 1: Updating Rust toolchain with '{shlex.join(commands.toolchain)}'..."
        )
        toolchain = self._toolchain.update(dry_run=dry_run)
        if isinstance(toolchain, Err):
            return toolchain
        self._console.newline()

        self._console.header(
            f"Step 2: Updating project dependencies with '{shlex.join(commands.dependencies)}'..."
        )
        dependencies = self._dependencies.update(dry_run=dry_run)
        if isinstance(dependencies, Err):
            return dependencies
        self._console.newline()

        self._console.header(f"Step 3: Checking '{fork.package}' library version...")
        report = self._fork.check()
        if isinstance(report, Err):
            return report

        self._console.newline()
        self._console.success("--- Update check complete ---")
        return Ok(report.value)
