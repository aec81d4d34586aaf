"""Format introspection commands."""

import typer

from markdown_transform import FormatDescriptor, TransformError
from markus.utils.engine import ExtensionOption, build_engine
from markus.utils.formatting import (
    FormatOption,
    OutputFormat,
    console,
    output_list,
    print_error,
    print_json,
)


def formats_command(
    format: OutputFormat = FormatOption,
    extension: list[str] | None = ExtensionOption,
):
    """List all registered formats."""
    try:
        engine = build_engine(extension)
    except TransformError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    descriptors = list(engine.get_transformation_graph().values())

    def build_row(descriptor: FormatDescriptor) -> list[str]:
        return [
            descriptor.name,
            descriptor.file_format.value,
            descriptor.docs,
            ", ".join(descriptor.targets) or "-",
        ]

    def build_json(descriptor: FormatDescriptor) -> dict:
        return {
            "name": descriptor.name,
            "file_format": descriptor.file_format.value,
            "docs": descriptor.docs,
            "targets": descriptor.targets,
        }

    output_list(
        items=descriptors,
        format=format,
        table_title="Formats",
        columns=[
            ("Name", "cyan", True),
            ("File Format", "magenta"),
            ("Description", "white"),
            ("Targets", "green"),
        ],
        row_builder=build_row,
        json_builder=build_json,
    )


def targets_command(
    source: str = typer.Argument(..., help="Source format name"),
    format: OutputFormat = FormatOption,
    extension: list[str] | None = ExtensionOption,
):
    """List the formats directly reachable from a format."""
    try:
        engine = build_engine(extension)
        targets = engine.get_all_target_formats(source)
    except TransformError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if format == OutputFormat.JSON:
        print_json(targets)
        return

    if not targets:
        console.print(f"[yellow]No transformations registered from {source}[/yellow]")
        return
    for target in targets:
        console.print(target, highlight=False, markup=False)


def path_command(
    source: str = typer.Argument(..., help="Source format name"),
    destination: str = typer.Argument(..., help="Destination format name"),
    format: OutputFormat = FormatOption,
    extension: list[str] | None = ExtensionOption,
):
    """Show the shortest transformation path between two formats."""
    try:
        engine = build_engine(extension)
        path = engine.find_path(source, destination)
    except TransformError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if format == OutputFormat.JSON:
        print_json(path)
    else:
        console.print(" -> ".join(path), highlight=False, markup=False)
