"""Commands that create, check and edit design files."""

import json
from pathlib import Path
from typing import Annotated

import typer

from cabinet_studio.application.document import migrate_document, save_design_file
from cabinet_studio.application.prompt_compiler import count_accessories
from cabinet_studio.cli.commands.common import load_or_exit
from cabinet_studio.domain.editor import DesignEditor
from cabinet_studio.domain.entities import new_design
from cabinet_studio.domain.exceptions import StructuralInvariantError
from cabinet_studio.domain.value_objects import AccessoryType, CabinetArchetype


def new_command(
    output: Annotated[Path, typer.Argument(help="Path of the design file to create")],
    name: Annotated[str, typer.Option("--name", "-n", help="Design name")] = "Untitled design",
    cabinets: Annotated[
        int, typer.Option("--cabinets", "-c", min=1, help="Number of cabinets")
    ] = 1,
    archetype: Annotated[
        CabinetArchetype, typer.Option("--archetype", "-a", help="Cabinet archetype")
    ] = CabinetArchetype.TALL,
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
) -> None:
    """Create a new design file with default cabinets.

    Example:
        cabinet-studio new kitchen.json --cabinets 3 --archetype split
    """
    if output.exists() and not force:
        typer.echo(f"Error: {output} already exists (use --force to overwrite)", err=True)
        raise typer.Exit(code=1)

    design = new_design(name, cabinet_count=1)
    editor = DesignEditor(design)
    editor.set_archetype(design.cabinets[0].id, archetype)
    for _ in range(cabinets - 1):
        editor.add_cabinet(archetype)

    save_design_file(design, output)
    typer.echo(f"Created {output} with {len(design.cabinets)} {archetype.value} cabinet(s)")


def validate_command(
    design_file: Annotated[Path, typer.Argument(help="Design file to validate")],
) -> None:
    """Validate a design file and summarize its contents.

    Exit codes:
        0 - The design is valid
        1 - The design cannot be loaded
    """
    typer.echo(f"Validating {design_file}...")
    design = load_or_exit(design_file)

    typer.echo(f"Design: {design.name}")
    typer.echo(f"Ceiling: {design.ceiling_height:g} cm, floor: {design.floor.label}")
    for index, cabinet in enumerate(design.cabinets):
        typer.echo(
            f"  #{index + 1} {cabinet.name} ({cabinet.archetype.value}, "
            f"{cabinet.width:g} x {cabinet.height:g} cm): {count_accessories(cabinet)}"
        )
    typer.echo(f"Total width: {design.total_width:g} cm")
    typer.echo("Design is valid.")


def migrate_command(
    design_file: Annotated[Path, typer.Argument(help="Legacy design file")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Where to write the result (default: in place)"),
    ] = None,
) -> None:
    """Upgrade a legacy design file to the current format."""
    design = load_or_exit(design_file)
    # Re-read the raw JSON only to report what changed; loading already migrated it.
    _, changes = migrate_document(json.loads(design_file.read_text(encoding="utf-8")))

    target = output or design_file
    save_design_file(design, target)
    if changes:
        typer.echo(f"Applied {len(changes)} migration(s):")
        for change in changes:
            typer.echo(f"  - {change}")
    else:
        typer.echo("Document is already current.")
    typer.echo(f"Wrote {target}")


def add_command(
    design_file: Annotated[Path, typer.Argument(help="Design file to edit")],
    kind: Annotated[AccessoryType, typer.Argument(help="Accessory type to add")],
    cabinet: Annotated[
        int, typer.Option("--cabinet", "-c", min=1, help="Cabinet number, from the left")
    ] = 1,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Where to write the result (default: in place)"),
    ] = None,
) -> None:
    """Add an accessory with default geometry to a cabinet."""
    design = load_or_exit(design_file)
    if cabinet > len(design.cabinets):
        typer.echo(
            f"Error: cabinet {cabinet} does not exist (design has {len(design.cabinets)})",
            err=True,
        )
        raise typer.Exit(code=1)

    target_cabinet = design.cabinets[cabinet - 1]
    try:
        accessory = DesignEditor(design).add_accessory(target_cabinet.id, kind)
    except StructuralInvariantError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    target = output or design_file
    save_design_file(design, target)
    typer.echo(
        f"Added {kind.value} {accessory.id} to {target_cabinet.name} "
        f"at y={accessory.y:g} cm, height {accessory.height:g} cm"
    )
