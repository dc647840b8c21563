"""Cycle detection for directed graphs.

A node lies on a cycle iff it is its own ancestor: it belongs to a strongly
connected component of two or more nodes, or it has an edge to itself.
"""

import logging
from typing import Set

from ...utils.validation import require_graph, require_node
from ..exceptions import GraphOperationError, NodeNotFoundError
from ..types import NodeT, Traversable
from .closure import is_ancestor
from .components import ComponentAnalysis

logger = logging.getLogger(__name__)


def is_node_in_cycle(graph: Traversable[NodeT], node: NodeT) -> bool:
    """Check if a node is contained in a cycle.

    Raises:
        InvalidArgumentError: If ``graph`` or ``node`` is None
        NodeNotFoundError: If ``node`` is not part of the graph
    """
    require_graph(graph)
    require_node(node)
    return is_ancestor(graph, node, node)


def has_cycle(graph: Traversable[NodeT]) -> bool:
    """Check if the graph contains at least one cycle.

    Stops at the first node found on a cycle. In the worst case every node's
    full ancestor closure is visited; ``cyclic_nodes`` answers the question for
    all nodes in a single linear pass.

    Raises:
        InvalidArgumentError: If ``graph`` is None
        GraphOperationError: If the graph reports a node it then cannot resolve
    """
    require_graph(graph)
    for node in graph.get_nodes():
        try:
            if is_node_in_cycle(graph, node):
                return True
        except NodeNotFoundError as e:
            logger.error(f"Graph view lost node '{node}' during cycle detection")
            raise GraphOperationError(f"Inconsistent graph view: {e}") from e
    return False


def cyclic_nodes(graph: Traversable[NodeT]) -> Set[NodeT]:
    """Get every node that lies on at least one cycle."""
    result: Set[NodeT] = set()
    for component in ComponentAnalysis.find_strongly_connected_components(graph):
        if len(component) > 1:
            result.update(component)
            continue
        (node,) = component
        if node in graph.get_children(node):
            result.add(node)
    return result
