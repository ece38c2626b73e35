"""Base service class with common initialization."""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

from upkeep.output.console import Style
from upkeep.platform.process import CommandRunner, DefaultCommandRunner

if TYPE_CHECKING:
    from upkeep.core.config import Config
    from upkeep.core.workspace import Workspace
    from upkeep.output.console import ConsoleProtocol


class BaseService:
    """Base class for services that need workspace, config, console and a runner.

    Provides:
    - Common constructor pattern
    - Default subprocess runner (tests inject a fake)
    - `_echo` for showing a command before it runs
    """

    def __init__(
        self,
        *,
        workspace: Workspace,
        config: Config,
        console: ConsoleProtocol,
        runner: CommandRunner | None = None,
    ) -> None:
        self._workspace = workspace
        self._config = config
        self._console = console
        self._runner = runner or DefaultCommandRunner()

    def _echo(self, argv: list[str]) -> None:
        self._console.print(f"$ {shlex.join(argv)}", Style.DIM)
