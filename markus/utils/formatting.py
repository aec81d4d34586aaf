"""Rich formatting utilities for CLI output."""

import json
from collections.abc import Callable
from enum import Enum
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

# Shared console instance
console = Console()


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


# Type annotation for the --format option
FormatOption = typer.Option(
    OutputFormat.TABLE,
    "--format",
    "-f",
    help="Output format: table (default) or json",
    case_sensitive=False,
)


def to_json(data: Any, indent: int = 2) -> str:
    """Convert data to formatted JSON string.

    Args:
        data: Data to convert
        indent: Indentation level for pretty printing

    Returns:
        JSON string
    """
    return json.dumps(data, indent=indent, ensure_ascii=False)


def print_json(data: Any):
    """Print data as formatted JSON.

    Args:
        data: Data to print as JSON
    """
    console.print(to_json(data), soft_wrap=True, highlight=False, markup=False, emoji=False)


def output_list(
    items: list[Any],
    format: OutputFormat,
    table_title: str,
    columns: list[tuple],
    row_builder: Callable[[Any], list[str]],
    json_builder: Callable[[Any], dict],
):
    """Output a list of items in the specified format.

    Args:
        items: List of items to output
        format: Output format (table or json)
        table_title: Title for table output
        columns: Column definitions for table [(name, style, no_wrap), ...]
        row_builder: Function to build table row from an item
        json_builder: Function to build JSON dict from an item
    """
    if format == OutputFormat.JSON:
        json_data = [json_builder(item) for item in items]
        print_json(json_data)
    else:
        table = create_table(table_title, columns)
        for item in items:
            row = row_builder(item)
            table.add_row(*row)
        console.print(table)


def create_table(title: str, columns: list[tuple]) -> Table:
    """Create a Rich table with specified columns.

    Args:
        title: Table title
        columns: List of (column_name, style, no_wrap) tuples

    Returns:
        Configured Rich Table
    """
    table = Table(title=title)
    for col_data in columns:
        name = col_data[0]
        style = col_data[1] if len(col_data) > 1 else None
        no_wrap = col_data[2] if len(col_data) > 2 else False
        table.add_column(name, style=style, no_wrap=no_wrap)
    return table


def print_error(message: str):
    """Print an error message with consistent styling.

    Args:
        message: Error message to display
    """
    console.print(f"❌ {message}", style="bold red", markup=False)


def print_success(message: str):
    """Print a success message with consistent styling.

    Args:
        message: Success message to display
    """
    console.print(f"✅ {message}", style="bold green", markup=False)
