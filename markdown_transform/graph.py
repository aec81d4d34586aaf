"""Graph pruning and shortest-path routing.

The router never looks at descriptors directly. It works on a pruned graph,
``{format: {target: 1}}``, that keeps only the topology of the registry.
Since every edge weighs 1, breadth-first search finds a path with the fewest
hops.
"""

from collections import deque
from collections.abc import Mapping
from typing import Any

from .base import METADATA_KEYS
from .exceptions import NoPathError, UnknownFormatError
from .value_objects import FormatDescriptor

PrunedGraph = dict[str, dict[str, int]]


def prune_graph(graph: Mapping[str, Any]) -> PrunedGraph:
    """Strip functions and metadata from a transformation graph.

    Args:
        graph: A FormatRegistry, a name -> FormatDescriptor mapping, or a
            plain base graph whose entries carry ``docs``/``file_format``
            metadata keys next to their edges

    Returns:
        Adjacency mapping with a weight of 1 on every edge
    """
    result: PrunedGraph = {}
    for source in graph:
        entry = graph[source]
        if isinstance(entry, FormatDescriptor):
            targets = entry.edges
        else:
            targets = [key for key in entry if key not in METADATA_KEYS]
        result[source] = {target: 1 for target in targets}
    return result


def find_path(pruned: PrunedGraph, source: str, destination: str) -> list[str]:
    """Compute a shortest path from source to destination.

    Neighbours are explored in sorted order, so when several paths share the
    minimal length the lexicographically smallest one is returned.

    Args:
        pruned: Output of prune_graph()
        source: Starting format
        destination: Target format

    Returns:
        The path as a list of format names, ``[source, ..., destination]``.
        ``[source]`` when source and destination are the same format.

    Raises:
        UnknownFormatError: If either endpoint is absent from the graph
        NoPathError: If destination cannot be reached from source
    """
    if source not in pruned:
        raise UnknownFormatError(source)
    if destination not in pruned:
        raise UnknownFormatError(destination)
    if source == destination:
        return [source]

    previous: dict[str, str] = {}
    visited = {source}
    queue = deque([source])

    while queue:
        node = queue.popleft()
        for neighbour in sorted(pruned.get(node, {})):
            if neighbour in visited:
                continue
            visited.add(neighbour)
            previous[neighbour] = node
            if neighbour == destination:
                return _walk_back(previous, source, destination)
            queue.append(neighbour)

    raise NoPathError(source, destination)


def _walk_back(previous: dict[str, str], source: str, destination: str) -> list[str]:
    """Rebuild a path from the BFS predecessor map."""
    path = [destination]
    while path[-1] != source:
        path.append(previous[path[-1]])
    path.reverse()
    return path


__all__ = [
    "PrunedGraph",
    "prune_graph",
    "find_path",
]
