"""Core graph traversal functionality."""

from .exceptions import (
    EdgeNotFoundError,
    GraphOperationError,
    InvalidArgumentError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .types import NodeT, Path, Traversable
from .graph import Graph
from .models import State
from .traversal import BFSIterator, DFSIterator, GraphIterator, traverse
from .graph_operations import (
    ComponentAnalysis,
    ancestors,
    cyclic_nodes,
    descendants,
    has_cycle,
    is_ancestor,
    is_descendant,
    is_mutually_connected,
    is_node_in_cycle,
    is_strongly_connected,
    is_weakly_connected,
    neighbors,
    siblings,
    strongly_connected_components,
    undirected_closure,
    weakly_connected_components,
)
from .graph_paths import DirectedPathFinder, directed_paths

__all__ = [
    "BFSIterator",
    "ComponentAnalysis",
    "DFSIterator",
    "DirectedPathFinder",
    "EdgeNotFoundError",
    "Graph",
    "GraphIterator",
    "GraphOperationError",
    "InvalidArgumentError",
    "NodeNotFoundError",
    "NodeT",
    "Path",
    "ResourceNotFoundError",
    "State",
    "Traversable",
    "ValidationError",
    "ancestors",
    "cyclic_nodes",
    "descendants",
    "directed_paths",
    "has_cycle",
    "is_ancestor",
    "is_descendant",
    "is_mutually_connected",
    "is_node_in_cycle",
    "is_strongly_connected",
    "is_weakly_connected",
    "neighbors",
    "siblings",
    "strongly_connected_components",
    "traverse",
    "undirected_closure",
    "weakly_connected_components",
]
