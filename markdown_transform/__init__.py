"""Document transformation engine with graph-based routing.

This package converts documents between named formats. Formats are the
vertices of a directed graph and conversion functions are its edges:

- Shortest-path routing between any two formats
- Multi-hop execution, sync and async edges alike
- Runtime extension with new formats and edges
- Explicit engine instances (no global registry)

Public API
----------
The main entry points are:

    from markdown_transform import create_engine

    engine = create_engine()

    # Let the router pick the route
    outline = await engine.transform(text, "markdown", ["outline"])

    # Force a route through intermediate formats
    text = await engine.transform(html, "html", ["markdown", "plaintext"])

Adding New Formats
------------------
Register an extension with a format and the edges that reach it:

    wordcount = {
        "format": {"name": "wordcount", "docs": "A number of words", "file_format": "utf8"},
        "transforms": {
            "plaintext": {
                "wordcount": lambda text, parameters, options: str(len(text.split(" "))),
            },
        },
    }
    engine.register_extension(wordcount)

Edges can also be BaseTransformer subclasses:

    from markdown_transform.base import TextTransformer

    class ShoutTransformer(TextTransformer):
        def transform(self, source, parameters, options):
            return source.upper()

    engine.register_transformation("plaintext", "plaintext", ShoutTransformer())
"""

from collections.abc import Mapping
from typing import Any

from .builtins import BUILTIN_TRANSFORMATION_GRAPH
from .engine import TransformEngine
from .enums import DiagramFormat, FileFormat
from .exceptions import (
    DuplicateFormatError,
    ExtensionLoadError,
    NoPathError,
    TransformError,
    UnknownFormatError,
)
from .graph import find_path, prune_graph
from .loader import load_extension
from .value_objects import Extension, ExtensionFormat, FormatDescriptor


def create_engine(*extensions: Extension | Mapping[str, Any]) -> TransformEngine:
    """Build a fresh engine over the built-in graph and register extensions."""
    engine = TransformEngine(BUILTIN_TRANSFORMATION_GRAPH)
    for extension in extensions:
        engine.register_extension(extension)
    return engine


__all__ = [
    # Main API
    "TransformEngine",
    "create_engine",
    "BUILTIN_TRANSFORMATION_GRAPH",
    "find_path",
    "prune_graph",
    "load_extension",
    # Enums
    "FileFormat",
    "DiagramFormat",
    # Value objects
    "FormatDescriptor",
    "Extension",
    "ExtensionFormat",
    # Errors
    "TransformError",
    "UnknownFormatError",
    "DuplicateFormatError",
    "NoPathError",
    "ExtensionLoadError",
]
