"""Diagram command - render the transformation graph."""

from pathlib import Path

import typer

from markdown_transform import DiagramFormat, TransformError
from markus.utils.engine import ExtensionOption, build_engine
from markus.utils.formatting import print_error, print_success
from markus.utils.io import write_document


def diagram_command(
    diagram_format: DiagramFormat = typer.Option(
        DiagramFormat.PLANTUML,
        "--diagram-format",
        "-d",
        help="Diagram language: plantuml (default) or mermaid",
        case_sensitive=False,
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the diagram to this file instead of stdout"
    ),
    extension: list[str] | None = ExtensionOption,
):
    """Generate a state diagram of all formats and transformations."""
    try:
        engine = build_engine(extension)
        diagram = engine.generate_transformation_diagram(diagram_format)
    except TransformError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output:
        write_document(output, diagram + "\n")
        print_success(f"Diagram written to {output}")
    else:
        typer.echo(diagram)
