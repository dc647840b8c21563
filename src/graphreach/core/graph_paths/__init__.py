"""
Path enumeration package.

This package enumerates simple directed paths between a set of source nodes
and a target node over any ``Traversable`` graph view. Weighted and shortest
path algorithms are intentionally absent: paths are structural, not costed.

Example:
    >>> graph = Graph([("A", "B"), ("B", "C"), ("C", "A"), ("A", "D")])
    >>> directed_paths(graph, ["A"], "C")
    {('A', 'B', 'C')}
"""

from typing import Iterable, Optional, Set

from ..types import NodeT, Path, Traversable
from .base import PathFinder
from .directed import DirectedPathFinder
from .utils import DEFAULT_MAX_MEMORY_MB, MEMORY_CHECK_INTERVAL, MemoryManager


def directed_paths(
    graph: Traversable[NodeT],
    sources: Iterable[NodeT],
    target: NodeT,
    max_length: Optional[int] = None,
    max_paths: Optional[int] = None,
    max_memory_mb: Optional[float] = DEFAULT_MAX_MEMORY_MB,
) -> Set[Path]:
    """Get every simple directed path from any node in ``sources`` to ``target``.

    Returns an empty set when ``target`` is itself one of ``sources``.

    Args:
        graph: Graph view to search
        sources: Nodes a path may start from
        target: Node every path ends at
        max_length: Maximum number of edges per path (None for no limit)
        max_paths: Stop after this many paths (None for no limit)
        max_memory_mb: Memory growth limit in MB (None for no limit)

    Returns:
        Set of paths, each a tuple ordered from source to target
    """
    finder = DirectedPathFinder(graph, max_memory_mb=max_memory_mb)
    return set(finder.find_paths(sources, target, max_length=max_length, max_paths=max_paths))


__all__ = [
    "DEFAULT_MAX_MEMORY_MB",
    "DirectedPathFinder",
    "MEMORY_CHECK_INTERVAL",
    "MemoryManager",
    "PathFinder",
    "directed_paths",
]
