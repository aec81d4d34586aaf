"""Transform command - convert a document between formats."""

import asyncio
from pathlib import Path

import typer

from markus.utils.config import load_config
from markus.utils.engine import ExtensionOption, build_engine, configure_logging
from markus.utils.formatting import print_error, print_success
from markus.utils.io import parse_parameters, read_document, render_document, write_document


def transform_command(
    source_format: str = typer.Option(
        "markdown", "--from", "-s", help="Format of the input document"
    ),
    destinations: list[str] = typer.Option(
        ...,
        "--to",
        "-t",
        help="Destination format, repeat to route through several formats in order",
    ),
    input: Path | None = typer.Option(
        None,
        "--input",
        "-i",
        help="Input file (reads stdin if omitted)",
        exists=True,
        dir_okay=False,
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output file (prints to stdout if omitted)"
    ),
    params: list[str] | None = typer.Option(
        None, "--param", "-p", help="Transform parameter as key=value, repeatable"
    ),
    roundtrip: bool = typer.Option(
        False, "--roundtrip", "-r", help="Convert back to the source format at the end"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print every intermediate result to stderr"
    ),
    extension: list[str] | None = ExtensionOption,
):
    """Transform a document to one or more destination formats."""
    config = load_config()
    verbose = verbose or config.verbose
    configure_logging(verbose)

    route = list(destinations)
    if roundtrip:
        route.append(source_format)

    try:
        engine = build_engine(extension, config=config)
        source_descriptor = engine.format_descriptor(source_format)
        final_descriptor = engine.format_descriptor(route[-1])
        parameters = {**config.parameters, **parse_parameters(params)}
        document = read_document(input, source_descriptor.file_format)
        result = asyncio.run(
            engine.transform(
                document,
                source_format,
                route,
                parameters=parameters,
                options={"verbose": verbose},
            )
        )
        rendered = render_document(result, final_descriptor.file_format)
    except Exception as e:
        print_error(f"Transform failed: {e}")
        raise typer.Exit(code=1)

    if output:
        write_document(output, rendered)
        print_success(f"Wrote {final_descriptor.name} to {output}")
    else:
        typer.echo(rendered, nl=not isinstance(rendered, bytes))
