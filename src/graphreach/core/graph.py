"""
Reference directed graph with an adjacency list representation.

This module provides the ``Graph`` class, the package's concrete implementation
of the ``Traversable`` protocol. It stores directed edges as a forward adjacency
map (node to children) and a reverse index (node to parents) so that both
parent and child lookups are constant time.

The traversal engine never mutates a graph. ``Graph`` guards its own state with
a re-entrant lock, and ``snapshot()`` produces an independent copy for callers
that keep mutating the original while a query runs.
"""

from collections import defaultdict
from copy import deepcopy
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, Generic, Iterable, Iterator, Set, Tuple

from ..utils.validation import require_node, validate_graph_document
from .exceptions import EdgeNotFoundError, NodeNotFoundError
from .types import NodeT


@dataclass
class GraphState(Generic[NodeT]):
    """Encapsulates the state of a graph."""

    adjacency: Dict[NodeT, Set[NodeT]] = field(default_factory=lambda: defaultdict(set))
    reverse_index: Dict[NodeT, Set[NodeT]] = field(default_factory=lambda: defaultdict(set))
    node_set: Set[NodeT] = field(default_factory=set)
    edge_count: int = 0


class Graph(Generic[NodeT]):
    """
    Directed graph over hashable nodes.

    Nodes can be any hashable value. Parallel edges collapse into one edge;
    self-loops are allowed and make the node its own parent and child.

    Attributes:
        _state (GraphState): Internal state of the graph
        _state_lock (RLock): Lock for thread-safe state access
    """

    def __init__(
        self,
        edges: Iterable[Tuple[NodeT, NodeT]] = (),
        nodes: Iterable[NodeT] = (),
    ):
        """
        Initialize graph from edges and optional isolated nodes.

        Args:
            edges: ``(parent, child)`` pairs. Missing endpoints are added.
            nodes: Additional nodes, typically ones without any edge.
        """
        self._state: GraphState[NodeT] = GraphState()
        self._state_lock = RLock()
        for node in nodes:
            self.add_node(node)
        for parent, child in edges:
            self.add_edge(parent, child)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"

    def __contains__(self, node: object) -> bool:
        return self.has_node(node)

    def __len__(self) -> int:
        return self.node_count()

    def add_node(self, node: NodeT) -> None:
        """Add a node; adding an existing node is a no-op."""
        require_node(node)
        with self._state_lock:
            self._state.node_set.add(node)

    def add_edge(self, parent: NodeT, child: NodeT) -> None:
        """Add a directed edge from ``parent`` to ``child``."""
        with self._state_lock:
            self.add_node(parent)
            self.add_node(child)

            if child not in self._state.adjacency[parent]:
                self._state.edge_count += 1
            self._state.adjacency[parent].add(child)
            self._state.reverse_index[child].add(parent)

    def remove_edge(self, parent: NodeT, child: NodeT) -> None:
        """Remove an edge from the graph."""
        with self._state_lock:
            if not self.has_edge(parent, child):
                raise EdgeNotFoundError(f"No edge exists from '{parent}' to '{child}'")

            self._state.adjacency[parent].remove(child)
            self._state.reverse_index[child].remove(parent)
            self._state.edge_count -= 1

            # Clean up empty adjacency entries
            if not self._state.adjacency[parent]:
                del self._state.adjacency[parent]
            if not self._state.reverse_index[child]:
                del self._state.reverse_index[child]

    def remove_node(self, node: NodeT) -> None:
        """Remove a node together with every edge touching it."""
        with self._state_lock:
            self._require(node)
            for child in list(self._state.adjacency.get(node, ())):
                self.remove_edge(node, child)
            for parent in list(self._state.reverse_index.get(node, ())):
                self.remove_edge(parent, node)
            self._state.node_set.remove(node)

    def _require(self, node: NodeT) -> None:
        if node not in self._state.node_set:
            raise NodeNotFoundError(f"Node '{node}' not found in the graph")

    def get_nodes(self) -> Set[NodeT]:
        """Get all nodes in the graph."""
        with self._state_lock:
            return self._state.node_set.copy()

    def get_parents(self, node: NodeT) -> Set[NodeT]:
        """Get direct predecessors of a node."""
        with self._state_lock:
            self._require(node)
            return set(self._state.reverse_index.get(node, ()))

    def get_children(self, node: NodeT) -> Set[NodeT]:
        """Get direct successors of a node."""
        with self._state_lock:
            self._require(node)
            return set(self._state.adjacency.get(node, ()))

    def node_count(self) -> int:
        """Get the total number of nodes in the graph."""
        with self._state_lock:
            return len(self._state.node_set)

    def get_edges(self) -> Iterator[Tuple[NodeT, NodeT]]:
        """Get all edges in the graph as ``(parent, child)`` pairs."""
        with self._state_lock:
            edges = [
                (parent, child)
                for parent, children in self._state.adjacency.items()
                for child in children
            ]
        yield from edges

    def edge_count(self) -> int:
        """Get the total number of edges in the graph."""
        with self._state_lock:
            return self._state.edge_count

    def has_node(self, node: object) -> bool:
        """Check if a node exists in the graph."""
        with self._state_lock:
            return node in self._state.node_set

    def has_edge(self, parent: NodeT, child: NodeT) -> bool:
        """Check if an edge exists between two nodes."""
        with self._state_lock:
            return child in self._state.adjacency.get(parent, ())

    def snapshot(self) -> "Graph[NodeT]":
        """Return an independent copy of the current graph state."""
        copy: Graph[NodeT] = Graph()
        with self._state_lock:
            copy._state = deepcopy(self._state)
        return copy

    @classmethod
    def from_dict(cls, document: Dict[str, Any]) -> "Graph[Any]":
        """
        Create a Graph from a ``{"nodes": [...], "edges": [[parent, child], ...]}`` mapping.

        Raises:
            ValidationError: If the document does not match the graph schema
        """
        validate_graph_document(document)
        return cls(
            edges=(tuple(edge) for edge in document["edges"]),
            nodes=document.get("nodes", ()),
        )
