"""Enumerations for format metadata and diagram output.

Using str as the mixin allows these to be compared directly against the plain
strings found in base graphs and extension mappings.
"""

from enum import Enum


class FileFormat(str, Enum):
    """Serialization kind of the values held in a format.

    Only used to decide how a value is displayed (verbose traces, CLI output)
    and how the CLI reads input files. The engine never type-checks values
    against it.
    """

    UTF8 = "utf8"  # Text
    JSON = "json"  # Structured tree (dicts/lists)
    BINARY = "binary"  # Opaque byte buffer


class DiagramFormat(str, Enum):
    """Text formats supported by the transformation diagram generator."""

    PLANTUML = "plantuml"
    MERMAID = "mermaid"


__all__ = ["FileFormat", "DiagramFormat"]
