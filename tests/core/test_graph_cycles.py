"""Tests for cycle detection."""

from graphreach.core.graph import Graph
from graphreach.core.graph_operations.cycles import cyclic_nodes, has_cycle, is_node_in_cycle


def test_node_in_cycle(cyclic_graph):
    """Test nodes of the A -> B -> C -> A cycle are detected."""
    assert is_node_in_cycle(cyclic_graph, "A")
    assert is_node_in_cycle(cyclic_graph, "B")
    assert is_node_in_cycle(cyclic_graph, "C")
    assert not is_node_in_cycle(cyclic_graph, "D")


def test_self_loop_is_cycle():
    """Test a self-loop puts a node in a cycle."""
    graph = Graph([("A", "A"), ("A", "B")])
    assert is_node_in_cycle(graph, "A")
    assert not is_node_in_cycle(graph, "B")
    assert has_cycle(graph)


def test_two_node_cycle():
    """Test the shortest cycle between distinct nodes."""
    graph = Graph([("A", "B"), ("B", "A")])
    assert is_node_in_cycle(graph, "A")
    assert is_node_in_cycle(graph, "B")


def test_downstream_of_cycle_is_not_in_cycle():
    """Test nodes reachable from a cycle are not themselves on it."""
    graph = Graph([("A", "B"), ("B", "A"), ("B", "C"), ("C", "D")])
    assert not is_node_in_cycle(graph, "C")
    assert not is_node_in_cycle(graph, "D")


def test_has_cycle(cyclic_graph, diamond_graph, disconnected_graph):
    """Test whole-graph cycle detection."""
    assert has_cycle(cyclic_graph)
    assert not has_cycle(diamond_graph)
    assert not has_cycle(disconnected_graph)
    assert not has_cycle(Graph())
    assert not has_cycle(Graph(nodes=["A"]))


def test_cyclic_nodes(cyclic_graph, diamond_graph):
    """Test every node on a cycle is collected at once."""
    assert cyclic_nodes(cyclic_graph) == {"A", "B", "C"}
    assert cyclic_nodes(diamond_graph) == set()
    assert cyclic_nodes(Graph([("A", "A"), ("A", "B")])) == {"A"}
