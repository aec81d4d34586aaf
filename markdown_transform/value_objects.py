"""Value objects describing formats and extensions.

A transformation graph can be written either as plain mappings (the shape
used by base graphs and extension dicts) or with these dataclasses. The
registry always stores ``FormatDescriptor`` instances.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .base import METADATA_KEYS, EdgeFunction
from .enums import FileFormat


@dataclass
class FormatDescriptor:
    """A vertex of the transformation graph.

    Attributes:
        name: Unique format identifier (e.g. "markdown", "outline")
        docs: Human-readable description, no behavioral effect
        file_format: Serialization kind of values in this format
        edges: Destination format name -> edge function
    """

    name: str
    docs: str
    file_format: FileFormat
    edges: dict[str, EdgeFunction] = field(default_factory=dict)

    def __post_init__(self):
        self.file_format = FileFormat(self.file_format)

    @property
    def targets(self) -> list[str]:
        """Destination format names reachable in one hop."""
        return list(self.edges)

    def copy(self) -> "FormatDescriptor":
        """Clone the descriptor; edge functions are shared, not copied."""
        return FormatDescriptor(
            name=self.name,
            docs=self.docs,
            file_format=self.file_format,
            edges=dict(self.edges),
        )

    @classmethod
    def from_mapping(cls, name: str, mapping: Mapping[str, Any]) -> "FormatDescriptor":
        """Build a descriptor from the plain base-graph shape.

        Every key other than ``docs`` and ``file_format`` (or its alias
        ``fileFormat``) is an edge::

            {
                "docs": "Markdown (string)",
                "file_format": "utf8",
                "outline": markdown_to_outline,
            }

        Raises:
            TypeError: If an edge value is not callable
        """
        edges = {key: value for key, value in mapping.items() if key not in METADATA_KEYS}
        for target, edge in edges.items():
            if not callable(edge):
                raise TypeError(
                    f"Transformation {name} -> {target} must be callable, "
                    f"got {type(edge).__name__}"
                )
        return cls(
            name=name,
            docs=mapping.get("docs", ""),
            file_format=mapping.get("file_format", mapping.get("fileFormat", FileFormat.UTF8)),
            edges=edges,
        )


@dataclass(frozen=True)
class ExtensionFormat:
    """The new format contributed by an extension."""

    name: str
    docs: str
    file_format: FileFormat | str = FileFormat.UTF8


@dataclass(frozen=True)
class Extension:
    """A bundle of a new format and/or new edges for a running engine.

    Attributes:
        format: Optional format registered before any transform
        transforms: Source format name -> {target format name -> edge function}
    """

    format: ExtensionFormat | None = None
    transforms: Mapping[str, Mapping[str, EdgeFunction]] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Extension":
        """Build an extension from a plain dict.

        Accepts ``fileFormat`` as an alias of ``file_format`` in the format entry.
        """
        format_entry = mapping.get("format")
        extension_format = None
        if format_entry is not None:
            if isinstance(format_entry, ExtensionFormat):
                extension_format = format_entry
            else:
                extension_format = ExtensionFormat(
                    name=format_entry["name"],
                    docs=format_entry.get("docs", ""),
                    file_format=format_entry.get(
                        "file_format", format_entry.get("fileFormat", FileFormat.UTF8)
                    ),
                )
        return cls(format=extension_format, transforms=mapping.get("transforms") or {})


__all__ = [
    "FormatDescriptor",
    "ExtensionFormat",
    "Extension",
]
