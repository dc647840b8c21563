"""Tests for the reference graph implementation."""

import pytest

from graphreach.core.exceptions import NodeNotFoundError, ValidationError
from graphreach.core.graph import Graph
from graphreach.core.types import Traversable


def test_graph_is_traversable(cyclic_graph):
    """Test Graph satisfies the Traversable protocol."""
    assert isinstance(cyclic_graph, Traversable)


def test_parents_and_children(cyclic_graph):
    """Test parent and child lookups follow edge direction."""
    assert cyclic_graph.get_children("A") == {"B", "D"}
    assert cyclic_graph.get_parents("A") == {"C"}
    assert cyclic_graph.get_children("D") == set()
    assert cyclic_graph.get_parents("D") == {"A"}


def test_missing_node_lookup(cyclic_graph):
    """Test lookups for unknown nodes raise NodeNotFoundError."""
    with pytest.raises(NodeNotFoundError):
        cyclic_graph.get_parents("Z")
    with pytest.raises(NodeNotFoundError):
        cyclic_graph.get_children("Z")


def test_counts_and_membership(cyclic_graph):
    """Test node and edge counting."""
    assert cyclic_graph.node_count() == 4
    assert len(cyclic_graph) == 4
    assert cyclic_graph.edge_count() == 4
    assert "A" in cyclic_graph
    assert "Z" not in cyclic_graph
    assert cyclic_graph.has_edge("C", "A")
    assert not cyclic_graph.has_edge("A", "C")


def test_duplicate_edges_collapse():
    """Test adding the same edge twice keeps a single edge."""
    graph = Graph([("A", "B"), ("A", "B")])
    assert graph.edge_count() == 1
    assert set(graph.get_edges()) == {("A", "B")}


def test_isolated_nodes():
    """Test nodes without edges are part of the graph."""
    graph = Graph(edges=[("A", "B")], nodes=["C"])
    assert graph.get_nodes() == {"A", "B", "C"}
    assert graph.get_parents("C") == set()
    assert graph.get_children("C") == set()


def test_self_loop():
    """Test a self-loop makes a node its own parent and child."""
    graph = Graph([("A", "A")])
    assert graph.get_parents("A") == {"A"}
    assert graph.get_children("A") == {"A"}


def test_returned_sets_are_copies(cyclic_graph):
    """Test callers cannot mutate graph state through returned sets."""
    cyclic_graph.get_children("A").add("Z")
    cyclic_graph.get_nodes().add("Z")
    assert cyclic_graph.get_children("A") == {"B", "D"}
    assert cyclic_graph.node_count() == 4


def test_remove_edge_and_node(cyclic_graph):
    """Test edge and node removal keep both indexes consistent."""
    cyclic_graph.remove_edge("C", "A")
    assert cyclic_graph.get_parents("A") == set()
    assert cyclic_graph.edge_count() == 3

    cyclic_graph.remove_node("B")
    assert "B" not in cyclic_graph
    assert cyclic_graph.get_children("A") == {"D"}
    assert cyclic_graph.get_parents("C") == set()
    assert cyclic_graph.edge_count() == 1

    with pytest.raises(NodeNotFoundError):
        cyclic_graph.remove_node("B")


def test_snapshot_is_independent(cyclic_graph):
    """Test snapshots are unaffected by later mutation of the original."""
    snapshot = cyclic_graph.snapshot()
    cyclic_graph.add_edge("D", "E")
    cyclic_graph.remove_edge("A", "B")

    assert snapshot.node_count() == 4
    assert snapshot.has_edge("A", "B")
    assert not snapshot.has_edge("D", "E")


def test_from_dict():
    """Test building a graph from a validated document."""
    graph = Graph.from_dict({"nodes": ["X"], "edges": [["A", "B"], ["B", "C"]]})
    assert graph.get_nodes() == {"A", "B", "C", "X"}
    assert graph.get_children("B") == {"C"}


def test_from_dict_rejects_bad_documents():
    """Test schema violations surface as ValidationError."""
    with pytest.raises(ValidationError, match="Invalid graph document"):
        Graph.from_dict({"edges": [["A"]]})
    with pytest.raises(ValidationError):
        Graph.from_dict({"nodes": ["A"]})
    with pytest.raises(ValidationError):
        Graph.from_dict({"edges": [], "weights": {}})
