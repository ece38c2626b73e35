from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from upkeep.core.config import Config, load_config
from upkeep.core.workspace import Workspace
from upkeep.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    workspace: Workspace
    config: Config
    console: ConsoleProtocol


def build_context(*, config_path: Path | None = None) -> CLIContext:
    """Build the command context for the current directory.

    `config_path` wins over `upkeep.toml` in the workspace root; with neither,
    defaults apply. Raises ConfigError for an unreadable or invalid file.
    """
    workspace = Workspace.from_cwd()
    path = config_path or workspace.config_path
    config = load_config(path) if path.is_file() else Config()
    return CLIContext(workspace=workspace, config=config, console=RichConsole())
