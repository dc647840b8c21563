"""
Graph traversal system using iterator pattern.

This module provides breadth-first and depth-first traversal over any
``Traversable`` graph view. Iterators follow child edges by default and parent
edges when created with ``reverse=True``. Each iterator owns its visited set
and frontier, so concurrent traversals never share progress.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Dict, Generic, Iterator, Optional, Set, Tuple, Type

from ..utils.validation import require_graph, require_node
from .types import NodeT, Traversable


class GraphIterator(ABC, Generic[NodeT]):
    """Base class for graph traversal iterators."""

    def __init__(
        self,
        graph: Traversable[NodeT],
        start_node: NodeT,
        reverse: bool = False,
        max_depth: Optional[int] = None,
    ):
        """
        Initialize iterator.

        Args:
            graph: The graph to traverse
            start_node: Starting node for traversal
            reverse: Follow parent edges instead of child edges
            max_depth: Maximum depth to traverse (None for no limit)
        """
        require_graph(graph)
        require_node(start_node, "start_node")
        if max_depth is not None and max_depth < 0:
            raise ValueError("max_depth must not be negative")
        self.graph = graph
        self.start = start_node
        self.reverse = reverse
        self.max_depth = max_depth
        self.visited: Set[NodeT] = set()

    def _next_nodes(self, node: NodeT) -> Set[NodeT]:
        if self.reverse:
            return self.graph.get_parents(node)
        return self.graph.get_children(node)

    def _expand(self, node: NodeT, depth: int) -> Set[NodeT]:
        """Successors of a node reached at ``depth``, none once the depth limit is hit."""
        successors = self._next_nodes(node)
        if self.max_depth is not None and depth >= self.max_depth:
            return set()
        return successors

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[NodeT, int]]:
        """
        Get iterator for traversal.

        Returns:
            Iterator yielding tuples of (node, depth)
        """
        pass


class BFSIterator(GraphIterator[NodeT]):
    """Breadth-first traversal iterator."""

    def __iter__(self) -> Iterator[Tuple[NodeT, int]]:
        """
        Traverse graph in breadth-first order.

        Yields:
            Tuples of (node, depth) in BFS order

        Raises:
            NodeNotFoundError: If the start node is not part of the graph
        """
        # Resolve the start node eagerly so a missing node fails before yielding
        first = self._expand(self.start, 0)

        queue = deque([(self.start, 0, first)])
        self.visited.add(self.start)

        while queue:
            node, depth, successors = queue.popleft()
            yield node, depth

            for successor in successors:
                if successor not in self.visited:
                    self.visited.add(successor)
                    queue.append((successor, depth + 1, self._expand(successor, depth + 1)))


class DFSIterator(GraphIterator[NodeT]):
    """Depth-first traversal iterator.

    Without a depth limit each node is expanded once. With ``max_depth`` a
    node first reached through a long branch is expanded again when a shorter
    route to it turns up later, so every node within ``max_depth`` edges of
    the start is yielded, once, whichever branch the search takes first.
    """

    def __iter__(self) -> Iterator[Tuple[NodeT, int]]:
        """
        Traverse graph in depth-first (pre-order) order.

        Yields:
            Tuples of (node, depth) in DFS order; depth is the depth at which
            the node was first reached

        Raises:
            NodeNotFoundError: If the start node is not part of the graph
        """
        best_depth: Dict[NodeT, int] = {self.start: 0}
        stack = [(self.start, 0, iter(self._expand(self.start, 0)))]
        self.visited.add(self.start)
        yield self.start, 0

        while stack:
            node, depth, successors = stack[-1]
            try:
                successor = next(successors)
            except StopIteration:
                stack.pop()
                continue

            successor_depth = depth + 1
            if successor not in self.visited:
                self.visited.add(successor)
                best_depth[successor] = successor_depth
                yield successor, successor_depth
            elif self.max_depth is None or best_depth[successor] <= successor_depth:
                continue
            else:
                # Shorter route to a node cut off deeper: expand it again
                best_depth[successor] = successor_depth
            stack.append(
                (successor, successor_depth, iter(self._expand(successor, successor_depth)))
            )


STRATEGIES: Dict[str, Type[GraphIterator]] = {
    "bfs": BFSIterator,
    "dfs": DFSIterator,
}


def iterator(
    graph: Traversable[NodeT],
    start_node: NodeT,
    strategy: str = "bfs",
    reverse: bool = False,
    max_depth: Optional[int] = None,
) -> GraphIterator[NodeT]:
    """
    Get an iterator for traversing the graph.

    Args:
        graph: The graph to traverse
        start_node: Starting node for traversal
        strategy: Traversal strategy ('bfs' or 'dfs')
        reverse: Follow parent edges instead of child edges
        max_depth: Maximum depth to traverse (None for no limit)

    Returns:
        Appropriate iterator instance

    Raises:
        ValueError: If strategy is not recognized
    """
    if strategy not in STRATEGIES:
        raise ValueError(
            f"Unknown traversal strategy '{strategy}'. "
            f"Must be one of: {', '.join(STRATEGIES.keys())}"
        )
    return STRATEGIES[strategy](graph, start_node, reverse=reverse, max_depth=max_depth)


def traverse(
    graph: Traversable[NodeT],
    start_node: NodeT,
    strategy: str = "bfs",
    max_depth: Optional[int] = None,
    filter_func: Optional[Callable[[NodeT], bool]] = None,
    reverse: bool = False,
) -> Iterator[Tuple[NodeT, int]]:
    """
    Traverse the graph with optional depth limit and filtering.

    Args:
        graph: The graph to traverse
        start_node: Starting node for traversal
        strategy: Traversal strategy to use
        max_depth: Maximum depth to traverse (None for no limit)
        filter_func: Optional function that takes a node and returns bool
        reverse: Follow parent edges instead of child edges

    Returns:
        Iterator yielding (node, depth) tuples
    """
    walker = iterator(graph, start_node, strategy, reverse=reverse, max_depth=max_depth)
    for node, depth in walker:
        if filter_func is None or filter_func(node):
            yield node, depth
