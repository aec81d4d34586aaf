"""markus CLI - Main entry point."""

import typer

from markus.commands.diagram import diagram_command
from markus.commands.formats import formats_command, path_command, targets_command
from markus.commands.transform import transform_command

# Create main Typer app
app = typer.Typer(
    name="markus",
    help="markus - Convert documents between formats through the transformation graph",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Register standalone commands
app.command(name="formats")(formats_command)
app.command(name="targets")(targets_command)
app.command(name="path")(path_command)
app.command(name="transform")(transform_command)
app.command(name="diagram")(diagram_command)


@app.callback()
def main_callback():
    """markus CLI for inspecting formats and transforming documents."""
    pass


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
