"""Closure primitives for directed graph reachability.

This module provides the breadth-first ascent and descent machinery shared by
the higher-level queries:
- Ancestor and descendant closures (every node reachable by repeatedly
  following parent or child edges)
- Early-exit membership tests (is one node an ancestor/descendant of another)
- The undirected closure used for weak connectivity
- The sibling query (children of a node's parents)

All working state (frontier queue, visited set) is created inside each call.
Frontiers are unbounded ``deque`` instances, so traversals never fail or block
because of graph size.
"""

from collections import deque
from typing import Callable, Set

from ...utils.validation import require_graph, require_node
from ..types import NodeT, Traversable

Expander = Callable[[NodeT], Set[NodeT]]


def _closure(expand: Expander, start: NodeT) -> Set[NodeT]:
    """Collect every node reachable from ``start`` through ``expand``, excluding ``start``."""
    visited = {start}
    queue = deque(expand(start))
    pending = set(queue)

    while queue:
        current = queue.popleft()
        pending.discard(current)
        visited.add(current)
        for successor in expand(current):
            if successor not in visited and successor not in pending:
                pending.add(successor)
                queue.append(successor)

    visited.discard(start)
    return visited


def _reaches(expand: Expander, candidate: NodeT, start: NodeT) -> bool:
    """Check whether ``candidate`` is reachable from ``start`` through ``expand``.

    ``start`` is marked visited up front, so the direct-successor check is the
    only way a cycle leading back to ``start`` is detected when
    ``candidate == start``.
    """
    visited = {start}
    queue = deque(expand(start))
    pending = set(queue)

    while queue:
        current = queue[0]
        if current == candidate:
            return True
        for successor in expand(current):
            if successor == candidate:
                return True
            if successor not in visited and successor not in pending:
                pending.add(successor)
                queue.append(successor)
        queue.popleft()
        pending.discard(current)
        visited.add(current)

    return False


def ancestors(graph: Traversable[NodeT], start: NodeT) -> Set[NodeT]:
    """Get every node from which ``start`` can be reached.

    The result never contains ``start``, even when ``start`` lies on a cycle.

    Args:
        graph: Graph view to traverse
        start: Node whose ancestors are collected

    Returns:
        Set of ancestor nodes

    Raises:
        InvalidArgumentError: If ``graph`` or ``start`` is None
        NodeNotFoundError: If ``start`` is not part of the graph

    Example:
        >>> graph = Graph([("A", "B"), ("B", "C")])
        >>> ancestors(graph, "C")
        {'A', 'B'}
    """
    require_graph(graph)
    require_node(start, "start")
    return _closure(graph.get_parents, start)


def descendants(graph: Traversable[NodeT], start: NodeT) -> Set[NodeT]:
    """Get every node reachable from ``start`` following edge direction.

    The result never contains ``start``, even when ``start`` lies on a cycle.

    Raises:
        InvalidArgumentError: If ``graph`` or ``start`` is None
        NodeNotFoundError: If ``start`` is not part of the graph
    """
    require_graph(graph)
    require_node(start, "start")
    return _closure(graph.get_children, start)


def is_ancestor(graph: Traversable[NodeT], candidate: NodeT, start: NodeT) -> bool:
    """Check if ``candidate`` is an ancestor of ``start``.

    Returns as soon as ``candidate`` is found. With ``candidate == start`` this
    answers whether ``start`` lies on a cycle.

    Raises:
        InvalidArgumentError: If any argument is None
        NodeNotFoundError: If ``start`` is not part of the graph
    """
    require_graph(graph)
    require_node(candidate, "candidate")
    require_node(start, "start")
    return _reaches(graph.get_parents, candidate, start)


def is_descendant(graph: Traversable[NodeT], candidate: NodeT, start: NodeT) -> bool:
    """Check if ``candidate`` is a descendant of ``start``.

    Raises:
        InvalidArgumentError: If any argument is None
        NodeNotFoundError: If ``start`` is not part of the graph
    """
    require_graph(graph)
    require_node(candidate, "candidate")
    require_node(start, "start")
    return _reaches(graph.get_children, candidate, start)


def neighbors(graph: Traversable[NodeT], node: NodeT) -> Set[NodeT]:
    """Get the direct neighbors of a node, ignoring edge direction."""
    return graph.get_parents(node) | graph.get_children(node)


def undirected_closure(graph: Traversable[NodeT], start: NodeT) -> Set[NodeT]:
    """Get every node connected to ``start`` when edge direction is ignored.

    Unlike the directed closures, the result includes ``start`` itself.

    Raises:
        InvalidArgumentError: If ``graph`` or ``start`` is None
        NodeNotFoundError: If ``start`` is not part of the graph
    """
    require_graph(graph)
    require_node(start, "start")
    component = _closure(lambda node: neighbors(graph, node), start)
    component.add(start)
    return component


def siblings(graph: Traversable[NodeT], node: NodeT) -> Set[NodeT]:
    """Get the nodes sharing at least one parent with ``node``.

    Args:
        graph: Graph view to query
        node: Node whose siblings are collected

    Returns:
        Union of the children of every parent of ``node``, without ``node``

    Raises:
        InvalidArgumentError: If ``graph`` or ``node`` is None
        NodeNotFoundError: If ``node`` is not part of the graph
    """
    require_graph(graph)
    require_node(node)
    result: Set[NodeT] = set()
    for parent in graph.get_parents(node):
        result.update(graph.get_children(parent))
    result.discard(node)
    return result
