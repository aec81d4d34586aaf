"""Format registry: the single store of formats and their outgoing edges.

This module provides the storage half of the transformation engine:

- Construction from a base graph (plain mappings or FormatDescriptors)
- Cloning on construction so the caller's base graph is never aliased
- Format and edge registration with endpoint validation
- Introspection of formats and one-hop targets

A registry is owned by one TransformEngine. There is no module-level
registry; independent engines never share state.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from .base import EdgeFunction
from .enums import FileFormat
from .exceptions import DuplicateFormatError, UnknownFormatError
from .value_objects import FormatDescriptor

logger = logging.getLogger(__name__)

# A base graph maps format names to either descriptors or plain mappings
BaseGraph = Mapping[str, FormatDescriptor | Mapping[str, Any]]


class FormatRegistry:
    """Registry of formats keyed by name.

    Example:
        registry = FormatRegistry({
            "plaintext": {"docs": "Plain text", "file_format": "utf8"},
        })
        registry.register_format("wordcount", "A number of words", "utf8")
        registry.register_transformation("plaintext", "wordcount", count_words)
    """

    def __init__(self, base_graph: BaseGraph | None = None):
        self._formats: dict[str, FormatDescriptor] = {}
        for name, entry in (base_graph or {}).items():
            if isinstance(entry, FormatDescriptor):
                self._formats[name] = entry.copy()
            else:
                self._formats[name] = FormatDescriptor.from_mapping(name, entry)

    def __contains__(self, name: object) -> bool:
        return name in self._formats

    def __getitem__(self, name: str) -> FormatDescriptor:
        return self._formats[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._formats)

    def __len__(self) -> int:
        return len(self._formats)

    def items(self):
        """Iterate (name, descriptor) pairs in registration order."""
        return self._formats.items()

    def as_dict(self) -> dict[str, FormatDescriptor]:
        """Return the live name -> descriptor mapping."""
        return self._formats

    def register_format(self, name: str, docs: str, file_format: FileFormat | str) -> FormatDescriptor:
        """Add a new format with no outgoing edges.

        Args:
            name: Unique format name
            docs: Format description
            file_format: One of 'utf8', 'json', 'binary'

        Returns:
            The new descriptor

        Raises:
            DuplicateFormatError: If the name is already registered
            ValueError: If file_format is not a known FileFormat
        """
        if name in self._formats:
            raise DuplicateFormatError(name)

        descriptor = FormatDescriptor(name=name, docs=docs, file_format=file_format)
        self._formats[name] = descriptor
        logger.debug(f"Registered format: {name} ({descriptor.file_format.value})")
        return descriptor

    def register_transformation(self, source: str, target: str, edge: EdgeFunction) -> None:
        """Add the edge source -> target, replacing any existing edge.

        Raises:
            UnknownFormatError: If either endpoint is not registered
            TypeError: If edge is not callable
        """
        if source not in self._formats:
            raise UnknownFormatError(source)
        if target not in self._formats:
            raise UnknownFormatError(target)
        if not callable(edge):
            raise TypeError(f"Transformation must be callable, got {type(edge)}")

        edges = self._formats[source].edges
        if target in edges:
            logger.debug(f"Replaced transformation: {source} -> {target}")
        else:
            logger.debug(f"Registered transformation: {source} -> {target}")
        edges[target] = edge

    def format_descriptor(self, name: str) -> FormatDescriptor:
        """Return the descriptor for a format.

        Raises:
            UnknownFormatError: If the format is not registered
        """
        try:
            return self._formats[name]
        except KeyError:
            raise UnknownFormatError(name) from None

    def get_all_formats(self) -> list[str]:
        """Return all format names in registration order."""
        return list(self._formats)

    def get_all_target_formats(self, source: str) -> list[str]:
        """Return the formats reachable from source in one hop.

        Raises:
            UnknownFormatError: If the source format is not registered
        """
        return self.format_descriptor(source).targets

    def get_edge(self, source: str, target: str) -> EdgeFunction:
        """Return the edge function for source -> target.

        Raises:
            UnknownFormatError: If source is unknown or has no edge to target
        """
        edges = self.format_descriptor(source).edges
        try:
            return edges[target]
        except KeyError:
            raise UnknownFormatError(target) from None


__all__ = [
    "BaseGraph",
    "FormatRegistry",
]
