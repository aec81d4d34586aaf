"""The generic transformation engine.

A TransformEngine owns a graph of named formats whose edges are conversion
functions. It supports:

- Introspection of formats and their one-hop targets
- Shortest-path routing between any two formats
- Multi-hop execution with optional tracing of intermediate results
- Runtime registration of formats, edges and whole extensions
- Diagram generation for documentation

Each engine clones its base graph, so engines built from the same base graph
never see each other's registrations.

Registration is synchronous and expected to happen at setup time. Registering
while a transformation of the same engine is in flight is not guarded
against: the in-flight call keeps the path it already computed but looks up
edge functions as it goes.
"""

import inspect
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .base import EdgeFunction
from .diagram import render_diagram
from .enums import DiagramFormat, FileFormat
from .graph import PrunedGraph, find_path, prune_graph
from .registry import BaseGraph, FormatRegistry
from .value_objects import Extension, FormatDescriptor

logger = logging.getLogger(__name__)


class TransformEngine:
    """Transformation graph engine.

    The base graph maps each format name to its descriptor, written either as
    a FormatDescriptor or as a plain mapping::

        {
            "markdown": {
                "docs": "Markdown (string)",
                "file_format": "utf8",
                "outline": markdown_to_outline,  # edge markdown -> outline
            },
            "outline": {"docs": "Outline tree (JSON)", "file_format": "json"},
        }

    Example:
        engine = TransformEngine(BUILTIN_TRANSFORMATION_GRAPH)
        outline = await engine.transform(text, "markdown", ["outline"])
    """

    def __init__(self, base_graph: BaseGraph | None = None):
        self._registry = FormatRegistry(base_graph)
        self._pruned: PrunedGraph = {}
        self.refresh_pruned_graph()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def get_transformation_graph(self) -> dict[str, FormatDescriptor]:
        """Return the live name -> descriptor mapping."""
        return self._registry.as_dict()

    @property
    def pruned_graph(self) -> PrunedGraph:
        """Topology-only view of the graph used for routing."""
        return self._pruned

    def get_all_formats(self) -> list[str]:
        """Return all format names, base graph first, then registrations."""
        return self._registry.get_all_formats()

    def get_all_target_formats(self, source_format: str) -> list[str]:
        """Return the formats reachable from source_format in one hop."""
        return self._registry.get_all_target_formats(source_format)

    def format_descriptor(self, format_name: str) -> FormatDescriptor:
        """Return the descriptor of a format, or raise UnknownFormatError."""
        return self._registry.format_descriptor(format_name)

    def find_path(self, source_format: str, destination_format: str) -> list[str]:
        """Return the shortest chain of formats from source to destination."""
        return find_path(self._pruned, source_format, destination_format)

    def generate_transformation_diagram(
        self, diagram_format: DiagramFormat | str = DiagramFormat.PLANTUML
    ) -> str:
        """Render the current graph as PlantUML (default) or Mermaid text."""
        return render_diagram(self._registry.as_dict(), diagram_format)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register_format(self, name: str, docs: str, file_format: FileFormat | str) -> None:
        """Add a new format with no outgoing edges.

        Raises:
            DuplicateFormatError: If the format already exists
        """
        self._registry.register_format(name, docs, file_format)
        self.refresh_pruned_graph()

    def register_transformation(
        self, source_format: str, target_format: str, transformation: EdgeFunction
    ) -> None:
        """Add or replace the edge source_format -> target_format.

        Raises:
            UnknownFormatError: If either format is not registered
        """
        self._registry.register_transformation(source_format, target_format, transformation)
        self.refresh_pruned_graph()

    def register_extension(self, extension: Extension | Mapping[str, Any]) -> None:
        """Register an extension's format, then each of its transforms.

        Registration stops at the first failure; anything registered before
        it stays registered.

        Args:
            extension: An Extension, or a mapping with optional "format"
                ({"name", "docs", "file_format"}) and "transforms"
                ({source: {target: edge}}) entries
        """
        if isinstance(extension, Mapping):
            extension = Extension.from_mapping(extension)

        if extension.format is not None:
            self.register_format(
                extension.format.name, extension.format.docs, extension.format.file_format
            )
        for source_format, transforms in extension.transforms.items():
            for target_format, transformation in transforms.items():
                self.register_transformation(source_format, target_format, transformation)

    def refresh_pruned_graph(self) -> None:
        """Rebuild the routing graph from the registry."""
        self._pruned = prune_graph(self._registry)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    async def transform_to_destination(
        self,
        source: Any,
        source_format: str,
        destination_format: str,
        parameters: dict[str, Any] | None = None,
        options: dict[str, Any] | None = None,
    ) -> Any:
        """Transform a value to a single destination format.

        Args:
            source: The input value, in source_format
            source_format: Name of the input format
            destination_format: Name of the output format
            parameters: Context passed to every edge
            options: Toggles passed to every edge. ``verbose`` logs each
                intermediate result.

        Returns:
            The value in destination_format

        Raises:
            UnknownFormatError: If either format is unknown
            NoPathError: If the formats are not connected
            Exception: Anything an edge function raises, unchanged
        """
        parameters = {} if parameters is None else parameters
        options = {} if options is None else options

        path = self.find_path(source_format, destination_format)
        result = source
        for src, dest in zip(path, path[1:]):
            edge = self._registry.get_edge(src, dest)
            result = edge(result, parameters, options)
            if inspect.isawaitable(result):
                result = await result
            if options.get("verbose"):
                self._trace(src, dest, result)
        return result

    async def transform(
        self,
        source: Any,
        source_format: str,
        destination_formats: Sequence[str] | str,
        parameters: dict[str, Any] | None = None,
        options: dict[str, Any] | None = None,
    ) -> Any:
        """Transform a value through each destination format in order.

        Each destination is reached from the previous one (the first from
        source_format) by its own shortest path. Listing intermediate formats
        forces the route through them.

        When source_format is "markdown", the original text is available to
        every edge as ``options["source"]``.

        Example:
            # markdown -> outline, then outline -> markdown
            text = await engine.transform(md, "markdown", ["outline", "markdown"])
        """
        if isinstance(destination_formats, str):
            destination_formats = [destination_formats]
        parameters = {} if parameters is None else parameters
        options = {} if options is None else dict(options)
        if source_format == "markdown":
            options["source"] = source

        result = source
        current_format = source_format
        for destination in destination_formats:
            result = await self.transform_to_destination(
                result, current_format, destination, parameters, options
            )
            current_format = destination
        return result

    def _trace(self, src: str, dest: str, result: Any) -> None:
        """Log one hop's output, rendered by the destination's file format."""
        descriptor = self._registry.as_dict().get(dest)
        if descriptor is not None and descriptor.file_format == FileFormat.BINARY:
            rendered = f"<binary {dest} data>"
        elif isinstance(result, (dict, list)):
            try:
                rendered = json.dumps(result, indent=2, default=str, skipkeys=True)
            except (TypeError, ValueError):
                rendered = repr(result)
        else:
            rendered = str(result)
        logger.info(f"Converted from {src} to {dest}. Result:\n{rendered}")


__all__ = ["TransformEngine"]
