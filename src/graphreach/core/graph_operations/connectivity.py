"""Connectivity analysis for directed graphs.

Weak connectivity ignores edge direction; strong connectivity from a node
follows it. Mutual (pairwise) strong connectivity is answered through the
strongly connected component decomposition.
"""

import logging

from ...utils.validation import require_graph, require_node
from ..exceptions import GraphOperationError, NodeNotFoundError
from ..traversal import DFSIterator
from ..types import NodeT, Traversable
from .closure import undirected_closure
from .components import ComponentAnalysis

logger = logging.getLogger(__name__)


def is_weakly_connected(graph: Traversable[NodeT]) -> bool:
    """Check whether the graph forms one component when edge direction is ignored.

    The undirected neighbor relation is symmetric, so the undirected closure of
    any single node is exactly its weak component. Comparing the size of one
    closure with the node count therefore decides connectivity for the whole
    graph, whichever node is picked.

    Args:
        graph: Graph view to analyze

    Returns:
        True for an empty graph, a single node, or one weak component

    Raises:
        InvalidArgumentError: If ``graph`` is None
        GraphOperationError: If the graph reports a node it then cannot resolve
    """
    require_graph(graph)
    nodes = graph.get_nodes()
    if not nodes:
        return True

    start = next(iter(nodes))
    try:
        component = undirected_closure(graph, start)
    except NodeNotFoundError as e:
        logger.error(f"Graph view lost node during weak connectivity check: {e}")
        raise GraphOperationError(f"Inconsistent graph view: {e}") from e

    return len(component) == graph.node_count()


def is_strongly_connected(graph: Traversable[NodeT], start: NodeT) -> bool:
    """Check whether every node is reachable from ``start`` following edge direction.

    This only proves that ``start`` reaches everything. For mutual reachability
    of all pairs use ``is_mutually_connected``.

    Raises:
        InvalidArgumentError: If ``graph`` or ``start`` is None
        NodeNotFoundError: If ``start`` is not part of the graph
    """
    require_graph(graph)
    require_node(start, "start")
    visited_nodes = sum(1 for _ in DFSIterator(graph, start))
    return visited_nodes == graph.node_count()


def is_mutually_connected(graph: Traversable[NodeT]) -> bool:
    """Check whether every pair of nodes is mutually reachable.

    True iff the graph is empty or decomposes into a single strongly connected
    component.
    """
    require_graph(graph)
    return len(ComponentAnalysis.find_strongly_connected_components(graph)) <= 1
