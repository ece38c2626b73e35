from __future__ import annotations

import typer

from upkeep.cli.commands.update import update


app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)


# Single command: a bare `upkeep` runs the update.
app.command()(update)


def main() -> None:
    app()
