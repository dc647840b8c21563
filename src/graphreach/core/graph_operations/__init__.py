"""Reachability, connectivity, cycle and component operations."""

from .closure import (
    ancestors,
    descendants,
    is_ancestor,
    is_descendant,
    neighbors,
    siblings,
    undirected_closure,
)
from .components import (
    ComponentAnalysis,
    strongly_connected_components,
    weakly_connected_components,
)
from .connectivity import is_mutually_connected, is_strongly_connected, is_weakly_connected
from .cycles import cyclic_nodes, has_cycle, is_node_in_cycle

__all__ = [
    "ComponentAnalysis",
    "ancestors",
    "cyclic_nodes",
    "descendants",
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
    "undirected_closure",
    "weakly_connected_components",
]
