"""Tests for graph pruning and shortest-path routing."""

import pytest

from markdown_transform.exceptions import NoPathError, UnknownFormatError
from markdown_transform.graph import find_path, prune_graph
from markdown_transform.registry import FormatRegistry
from markdown_transform.value_objects import FormatDescriptor


def edge(value, parameters, options):
    return value


def node(*targets):
    """Build a plain base-graph entry with the given targets."""
    entry = {"docs": "test format", "file_format": "json"}
    entry.update({target: edge for target in targets})
    return entry


@pytest.fixture
def diamond():
    """A -> B -> D and A -> C -> D, plus an isolated Z."""
    return {
        "A": node("B", "C"),
        "B": node("D"),
        "C": node("D"),
        "D": node(),
        "Z": node(),
    }


class TestPruneGraph:
    """Tests for prune_graph()."""

    def test_plain_mapping(self, diamond):
        """Test that metadata is stripped and every edge weighs 1."""
        assert prune_graph(diamond) == {
            "A": {"B": 1, "C": 1},
            "B": {"D": 1},
            "C": {"D": 1},
            "D": {},
            "Z": {},
        }

    def test_registry_and_descriptors(self, diamond):
        """Test that a registry prunes to the same topology as its base graph."""
        registry = FormatRegistry(diamond)

        assert prune_graph(registry) == prune_graph(diamond)
        assert prune_graph(registry.as_dict()) == prune_graph(diamond)

    def test_descriptor_metadata_never_leaks(self):
        """Test that descriptors contribute only their edges."""
        graph = {"A": FormatDescriptor("A", "docs", "utf8", {"A": edge})}

        assert prune_graph(graph) == {"A": {"A": 1}}


class TestFindPath:
    """Tests for find_path()."""

    def test_shortest_of_two_equal_routes(self, diamond):
        """Test that a 2-hop path is found and ties break lexicographically."""
        path = find_path(prune_graph(diamond), "A", "D")

        assert path == ["A", "B", "D"]

    def test_direct_edge_wins(self, diamond):
        """Test that adding A -> D shortens the route to one hop."""
        diamond["A"]["D"] = edge

        assert find_path(prune_graph(diamond), "A", "D") == ["A", "D"]

    def test_tie_break_ignores_insertion_order(self):
        """Test that the chosen path does not depend on edge insertion order."""
        graph = {"A": node("C", "B"), "B": node("D"), "C": node("D"), "D": node()}

        assert find_path(prune_graph(graph), "A", "D") == ["A", "B", "D"]

    def test_repeated_calls_are_deterministic(self, diamond):
        """Test that identical graph state gives identical paths."""
        pruned = prune_graph(diamond)

        paths = {tuple(find_path(pruned, "A", "D")) for _ in range(20)}

        assert len(paths) == 1

    def test_same_source_and_destination(self, diamond):
        """Test that a format routes to itself with zero hops."""
        assert find_path(prune_graph(diamond), "B", "B") == ["B"]

    def test_longer_chain(self):
        """Test a multi-hop path with a cycle in the graph."""
        graph = {
            "A": node("B"),
            "B": node("A", "C"),
            "C": node("B", "D"),
            "D": node(),
        }

        assert find_path(prune_graph(graph), "A", "D") == ["A", "B", "C", "D"]

    def test_isolated_destination(self, diamond):
        """Test that an isolated format cannot be reached."""
        with pytest.raises(NoPathError) as exc_info:
            find_path(prune_graph(diamond), "A", "Z")

        assert exc_info.value.source_format == "A"
        assert exc_info.value.destination_format == "Z"

    def test_isolated_source(self, diamond):
        """Test that nothing can be reached from an isolated format."""
        with pytest.raises(NoPathError, match="No transformation path from Z to A"):
            find_path(prune_graph(diamond), "Z", "A")

    def test_edges_are_directed(self, diamond):
        """Test that edges are not followed backwards."""
        with pytest.raises(NoPathError):
            find_path(prune_graph(diamond), "D", "A")

    def test_unknown_source(self, diamond):
        """Test that an unknown source format is reported."""
        with pytest.raises(UnknownFormatError, match="Unknown format: foo"):
            find_path(prune_graph(diamond), "foo", "A")

    def test_unknown_destination(self, diamond):
        """Test that an unknown destination format is reported."""
        with pytest.raises(UnknownFormatError, match="Unknown format: foo"):
            find_path(prune_graph(diamond), "A", "foo")

    def test_dangling_edge_target(self):
        """Test that an edge to an unregistered name cannot be routed to."""
        graph = {"A": node("ghost")}

        with pytest.raises(UnknownFormatError):
            find_path(prune_graph(graph), "A", "ghost")
