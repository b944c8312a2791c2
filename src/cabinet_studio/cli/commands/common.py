"""Helpers shared by the CLI commands."""

from pathlib import Path

import typer

from cabinet_studio.application.document import ParseError, load_design_file
from cabinet_studio.application.factory import ServiceFactory
from cabinet_studio.domain.entities import Design


def get_factory(ctx: typer.Context) -> ServiceFactory:
    """Factory created by the root callback, or a default one."""
    if isinstance(ctx.obj, ServiceFactory):
        return ctx.obj
    return ServiceFactory()


def display_parse_error(error: ParseError) -> None:
    """Print a document loading error to stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail.get('path', 'unknown')}: {detail.get('message')}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def load_or_exit(path: Path) -> Design:
    """Load a design file, exiting with code 1 on failure."""
    try:
        return load_design_file(path)
    except ParseError as e:
        display_parse_error(e)
        raise typer.Exit(code=1)
