"""Connected component analysis for directed graphs.

This module provides functionality for decomposing a graph into components:
- Strongly connected components (maximal sets of mutually reachable nodes,
  following edge direction)
- Weakly connected components (maximal sets of nodes connected when edge
  direction is ignored)

Both decompositions cover every node exactly once, including isolated nodes,
which form singleton components.
"""

import logging
from typing import Dict, FrozenSet, Iterator, List, Set, Tuple

from ...utils.validation import require_graph
from ..exceptions import GraphOperationError, NodeNotFoundError
from ..types import NodeT, Traversable
from .closure import undirected_closure

logger = logging.getLogger(__name__)


class ComponentAnalysis:
    """Connected component analysis for directed graphs.

    The analysis methods are implemented as static methods to provide
    utility-style functionality that can be used with any ``Traversable``
    without maintaining state.
    """

    @staticmethod
    def _children(graph: Traversable[NodeT], node: NodeT) -> Iterator[NodeT]:
        """Resolve the children of a node reported by ``get_nodes()``."""
        try:
            return iter(graph.get_children(node))
        except NodeNotFoundError as e:
            logger.error(f"Graph view lost node '{node}' during component analysis")
            raise GraphOperationError(f"Inconsistent graph view: {e}") from e

    @staticmethod
    def _tarjan_scc(
        graph: Traversable[NodeT],
        root: NodeT,
        counter: List[int],
        indices: Dict[NodeT, int],
        lowlinks: Dict[NodeT, int],
        stack: List[NodeT],
        on_stack: Set[NodeT],
        strongly_connected_components: Set[FrozenSet[NodeT]],
    ) -> None:
        """Run Tarjan's algorithm from ``root`` with an explicit work stack.

        Each work frame holds a node and the iterator over its remaining
        children, standing in for one level of recursion.

        Args:
            graph: The graph instance.
            root: Node the depth-first search starts from.
            counter: Next discovery index (in list for mutability).
            indices: Discovery indices for nodes.
            lowlinks: Lowest reachable index for nodes.
            stack: Stack of nodes that are not yet assigned to a component.
            on_stack: Set of nodes currently on ``stack``.
            strongly_connected_components: Collected components.
        """

        def visit(node: NodeT) -> Tuple[NodeT, Iterator[NodeT]]:
            indices[node] = counter[0]
            lowlinks[node] = counter[0]
            counter[0] += 1
            stack.append(node)
            on_stack.add(node)
            return node, ComponentAnalysis._children(graph, node)

        work = [visit(root)]
        while work:
            node, children = work[-1]

            descended = False
            for child in children:
                if child not in indices:
                    # Suspend this frame and descend into the child
                    work.append(visit(child))
                    descended = True
                    break
                if child in on_stack:
                    lowlinks[node] = min(lowlinks[node], indices[child])
            if descended:
                continue

            # All children handled: node is finished
            work.pop()
            if work:
                parent = work[-1][0]
                lowlinks[parent] = min(lowlinks[parent], lowlinks[node])

            # If node is root of strongly connected component, collect it
            if lowlinks[node] == indices[node]:
                component = set()
                while True:
                    member = stack.pop()
                    on_stack.remove(member)
                    component.add(member)
                    if member == node:
                        break
                strongly_connected_components.add(frozenset(component))

    @staticmethod
    def find_strongly_connected_components(
        graph: Traversable[NodeT],
    ) -> Set[FrozenSet[NodeT]]:
        """Find all strongly connected components in the directed graph.

        A strongly connected component (SCC) is a maximal set of nodes where
        every node is reachable from every other node following the direction
        of edges. This method uses Tarjan's algorithm with an explicit stack, so
        long chains do not exhaust the interpreter's recursion limit.

        Args:
            graph: The graph instance to analyze.

        Returns:
            Set of frozensets, each holding the nodes of one component.

        Example:
            >>> graph = Graph([("A", "B"), ("B", "A"), ("B", "C")])
            >>> ComponentAnalysis.find_strongly_connected_components(graph)
            {frozenset({'A', 'B'}), frozenset({'C'})}

        Note:
            - Each node appears in exactly one component
            - Isolated nodes form their own single-node components
            - A node without a self-loop that is on no cycle is a singleton
            - An empty graph yields an empty set
        """
        require_graph(graph)
        counter = [0]
        indices: Dict[NodeT, int] = {}
        lowlinks: Dict[NodeT, int] = {}
        stack: List[NodeT] = []
        on_stack: Set[NodeT] = set()
        strongly_connected_components: Set[FrozenSet[NodeT]] = set()

        for node in graph.get_nodes():
            if node not in indices:
                ComponentAnalysis._tarjan_scc(
                    graph,
                    node,
                    counter,
                    indices,
                    lowlinks,
                    stack,
                    on_stack,
                    strongly_connected_components,
                )

        logger.debug(
            f"Found {len(strongly_connected_components)} strongly connected components "
            f"in {len(indices)} nodes"
        )
        return strongly_connected_components

    @staticmethod
    def find_components(graph: Traversable[NodeT]) -> List[Set[NodeT]]:
        """Find all weakly connected components in the graph.

        A weakly connected component is a maximal set of nodes where every pair
        has a path between them when edge directions are ignored.

        Args:
            graph: The graph instance to analyze.

        Returns:
            List of node sets, in no particular order.
        """
        require_graph(graph)
        components: List[Set[NodeT]] = []
        visited: Set[NodeT] = set()

        for node in graph.get_nodes():
            if node in visited:
                continue
            try:
                component = undirected_closure(graph, node)
            except NodeNotFoundError as e:
                logger.error(f"Graph view lost node '{node}' during component analysis")
                raise GraphOperationError(f"Inconsistent graph view: {e}") from e
            visited.update(component)
            components.append(component)

        logger.debug(f"Found {len(components)} weakly connected components")
        return components


def strongly_connected_components(graph: Traversable[NodeT]) -> Set[FrozenSet[NodeT]]:
    """Partition all nodes into strongly connected components."""
    return ComponentAnalysis.find_strongly_connected_components(graph)


def weakly_connected_components(graph: Traversable[NodeT]) -> List[Set[NodeT]]:
    """Partition all nodes into weakly connected components."""
    return ComponentAnalysis.find_components(graph)
