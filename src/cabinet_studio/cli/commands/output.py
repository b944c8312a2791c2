"""Commands that produce drawings, exports and prompts from a design file."""

from pathlib import Path
from typing import Annotated

import typer

from cabinet_studio.application.prompt_compiler import NOTES_KEY, compile_prompt
from cabinet_studio.cli.commands.common import get_factory, load_or_exit
from cabinet_studio.domain.value_objects import (
    AspectRatio,
    DoorState,
    EnvironmentSettings,
    FloorFinish,
    LightTemperature,
)

_TEXT_FORMATS = {"svg", "json"}


def render_command(
    ctx: typer.Context,
    design_file: Annotated[Path, typer.Argument(help="Design file to render")],
    format_name: Annotated[
        str, typer.Option("--format", "-f", help="Export format (svg, png, jpeg, json)")
    ] = "svg",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file. Text formats print to stdout when omitted; image "
            "formats are written next to the design file.",
        ),
    ] = None,
) -> None:
    """Render a design to SVG, PNG or JPEG, or export its JSON document."""
    factory = get_factory(ctx)
    format_name = format_name.lower()
    available = factory.available_formats()
    if format_name not in available:
        typer.echo(f"Unknown format: {format_name}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    design = load_or_exit(design_file)
    exporter = factory.create_exporter(format_name)

    if output is None and format_name in _TEXT_FORMATS:
        typer.echo(exporter.export_bytes(design).decode("utf-8").rstrip("\n"))
        return

    target = output or design_file.with_suffix(f".{exporter.file_extension}")
    exporter.export(design, target)
    typer.echo(f"Wrote {target}")


def _parse_specs(specs: list[str]) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for spec in specs:
        key, sep, value = spec.partition("=")
        if not sep or not key.strip():
            typer.echo(f"Error: invalid --spec '{spec}', expected KEY=VALUE", err=True)
            raise typer.Exit(code=1)
        parsed[key.strip()] = value.strip()
    return parsed


def prompt_command(
    ctx: typer.Context,
    design_file: Annotated[Path, typer.Argument(help="Design file to describe")],
    light: Annotated[
        LightTemperature | None, typer.Option("--light", help="Light color temperature")
    ] = None,
    doors: Annotated[DoorState | None, typer.Option("--doors", help="Door state")] = None,
    aspect: Annotated[
        AspectRatio | None, typer.Option("--aspect", help="Output aspect ratio")
    ] = None,
    floor: Annotated[
        FloorFinish | None,
        typer.Option("--floor", help="Floor finish (default: the design's floor)"),
    ] = None,
    spec: Annotated[
        list[str] | None,
        typer.Option("--spec", "-s", help="Vendor specification as KEY=VALUE; repeatable"),
    ] = None,
    notes: Annotated[
        str | None, typer.Option("--notes", help="Free text appended to the prompt")
    ] = None,
) -> None:
    """Print the rendering prompt for a design."""
    factory = get_factory(ctx)
    design = load_or_exit(design_file)

    defaults = factory.environment(floor or design.floor)
    environment = EnvironmentSettings(
        floor=defaults.floor,
        light_temperature=light or defaults.light_temperature,
        door_state=doors or defaults.door_state,
        aspect_ratio=aspect or defaults.aspect_ratio,
    )
    vendor_specs = dict(factory.settings.vendor_specs)
    vendor_specs.update(_parse_specs(spec or []))
    if notes:
        vendor_specs[NOTES_KEY] = notes

    typer.echo(compile_prompt(design, vendor_specs, environment))
