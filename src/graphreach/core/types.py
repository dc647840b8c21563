"""
Core type definitions and protocols.

This module provides the type variables, aliases and the ``Traversable``
protocol shared by every traversal operation. Any structure (an explicit graph,
a derived view, a virtual graph) can be traversed as long as it implements the
protocol and reports a fixed snapshot for the duration of one query.
"""

from typing import Hashable, Protocol, Set, Tuple, TypeVar, runtime_checkable

# Nodes are used as set members and dict keys throughout, so they must supply
# value equality and a hash consistent with it. No ordering is required.
NodeT = TypeVar("NodeT", bound=Hashable)

# A simple directed path, ordered from source to target.
Path = Tuple[NodeT, ...]


@runtime_checkable
class Traversable(Protocol[NodeT]):
    """Protocol defining the read-only graph view consumed by the traversal engine."""

    def get_nodes(self) -> Set[NodeT]:
        """Get every node of the graph."""
        ...

    def get_parents(self, node: NodeT) -> Set[NodeT]:
        """Get direct predecessors of a node.

        Raises:
            NodeNotFoundError: If the node is not part of the graph.
        """
        ...

    def get_children(self, node: NodeT) -> Set[NodeT]:
        """Get direct successors of a node.

        Raises:
            NodeNotFoundError: If the node is not part of the graph.
        """
        ...

    def node_count(self) -> int:
        """Get the total number of nodes."""
        ...
