"""Engine construction for CLI commands."""

import logging

import typer

from markdown_transform import TransformEngine, create_engine, load_extension

from markus.utils.config import MarkusConfig, load_config


def build_engine(
    extensions: list[str] | None = None, config: MarkusConfig | None = None
) -> TransformEngine:
    """Create an engine with configured and command line extensions registered.

    Args:
        extensions: Extension references given on the command line
        config: Loaded configuration, read from disk when omitted

    Returns:
        A fresh TransformEngine
    """
    config = config or load_config()
    references = [*config.extensions, *(extensions or [])]
    return create_engine(*(load_extension(reference) for reference in references))


def configure_logging(verbose: bool):
    """Send engine traces to stderr when verbose, warnings only otherwise."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        force=True,
    )


# Shared --extension option for commands that build an engine
ExtensionOption = typer.Option(
    None,
    "--extension",
    "-e",
    help="Extension to register (package.module:attribute), repeatable",
)
