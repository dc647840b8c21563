"""Directed simple path enumeration.

Paths are grown backward from the target through parent edges, one breadth
level at a time. A partial path is never extended by a node it already holds,
so every result is a simple path and the enumeration terminates on cyclic
graphs.
"""

import logging
from collections import deque
from typing import Deque, FrozenSet, Iterable, Iterator, Optional

from ...utils.validation import require_node
from ..types import NodeT, Path, Traversable
from .base import PathFinder
from .utils import DEFAULT_MAX_MEMORY_MB, MemoryManager

logger = logging.getLogger(__name__)


class DirectedPathFinder(PathFinder[NodeT]):
    """Enumerates every simple directed path from a set of sources to a target."""

    def __init__(
        self, graph: Traversable[NodeT], max_memory_mb: Optional[float] = DEFAULT_MAX_MEMORY_MB
    ):
        """Initialize finder with optional memory limit."""
        super().__init__(graph)
        self.max_memory_mb = max_memory_mb

    def find_paths(
        self,
        sources: Iterable[NodeT],
        target: NodeT,
        max_length: Optional[int] = None,
        max_paths: Optional[int] = None,
    ) -> Iterator[Path]:
        """Find all simple paths from any node in ``sources`` to ``target``.

        Args:
            sources: Nodes a path may start from
            target: Node every path ends at
            max_length: Maximum number of edges per path (None for no limit)
            max_paths: Stop after this many paths (None for no limit)

        Yields:
            Paths as tuples ordered from source to target. A path ends at the
            first source met while walking back from the target, so no path
            passes through a second source.

        Raises:
            InvalidArgumentError: If ``sources``, a source or ``target`` is None
            NodeNotFoundError: If ``target`` is not part of the graph
            ValueError: If a limit is not positive
            MemoryError: If the memory limit is exceeded
        """
        require_node(sources, "sources")
        source_set: FrozenSet[NodeT] = frozenset(sources)
        self.validate_nodes(source_set, target)
        self.validate_limits(max_length, max_paths)

        # A node is never its own path target
        if target in source_set:
            return

        memory_manager = MemoryManager(self.max_memory_mb)
        partial_paths: Deque[Path] = deque([(target,)])
        paths_found = 0

        while partial_paths:
            memory_manager.check_memory()
            partial = partial_paths.popleft()

            # Skip if another edge would exceed max_length
            if max_length is not None and len(partial) > max_length:
                continue

            for parent in self.graph.get_parents(partial[-1]):
                if parent in partial:
                    continue

                extended = partial + (parent,)
                if parent in source_set:
                    paths_found += 1
                    yield extended[::-1]
                    if max_paths is not None and paths_found >= max_paths:
                        logger.debug(f"Stopped path enumeration after {paths_found} paths")
                        return
                else:
                    partial_paths.append(extended)

        logger.debug(f"Found {paths_found} paths to '{target}'")
