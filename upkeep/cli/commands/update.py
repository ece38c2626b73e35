from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from upkeep import __version__
from upkeep.cli.commands._helpers import exit_on_error
from upkeep.cli.context import build_context
from upkeep.core.config import ConfigError
from upkeep.core.errors import ErrorCode
from upkeep.services.update import UpdateService


def update(
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Show update commands without running them."
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        exists=True,
        dir_okay=False,
        help="Config file (default: ./upkeep.toml if present).",
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Update the Rust toolchain and lockfile, then check the fork for drift.

    Steps (the first failure stops the run):
      1. rustup update
      2. cargo update
      3. compare the fork's Cargo.toml version with crates.io
    """
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))

    try:
        ctx = build_context(config_path=config)
    except ConfigError as e:
        typer.secho(f"error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=int(ErrorCode.USAGE_ERROR))

    service = UpdateService(workspace=ctx.workspace, config=ctx.config, console=ctx.console)
    exit_on_error(service.run(dry_run=dry_run), ctx, error_code=ErrorCode.FAILURE)
