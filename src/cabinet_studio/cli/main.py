"""Typer CLI for cabinet design files."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cabinet_studio.application.factory import ServiceFactory
from cabinet_studio.application.settings import ConfigError, load_settings
from cabinet_studio.cli.commands import (
    add_command,
    migrate_command,
    new_command,
    prompt_command,
    render_command,
    validate_command,
)

app = typer.Typer(
    name="cabinet-studio",
    help="Design rows of modular cabinets, render them and compile rendering prompts.",
)


@app.callback()
def main(
    ctx: typer.Context,
    settings: Annotated[
        Path | None,
        typer.Option("--settings", help="Path to a JSON settings file"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Configure logging and services for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = ServiceFactory(load_settings(settings))
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


app.command(name="new")(new_command)
app.command(name="validate")(validate_command)
app.command(name="migrate")(migrate_command)
app.command(name="add")(add_command)
app.command(name="render")(render_command)
app.command(name="prompt")(prompt_command)


if __name__ == "__main__":
    app()
