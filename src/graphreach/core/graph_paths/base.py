from abc import ABC, abstractmethod
from typing import Collection, Generic, Iterable, Iterator, Optional

from graphreach.core.types import NodeT, Path, Traversable
from graphreach.utils.validation import require_graph, require_node


class PathFinder(ABC, Generic[NodeT]):
    """Abstract base class for path enumeration algorithms."""

    def __init__(self, graph: Traversable[NodeT]):
        """Initialize finder with graph."""
        require_graph(graph)
        self.graph = graph

    @abstractmethod
    def find_paths(
        self,
        sources: Iterable[NodeT],
        target: NodeT,
        max_length: Optional[int] = None,
        max_paths: Optional[int] = None,
    ) -> Iterator[Path]:
        """Find paths from any of ``sources`` to ``target``."""
        pass

    def find_path(
        self,
        sources: Iterable[NodeT],
        target: NodeT,
        max_length: Optional[int] = None,
    ) -> Optional[Path]:
        """Find a single path, the first one the enumeration produces."""
        return next(self.find_paths(sources, target, max_length=max_length, max_paths=1), None)

    @staticmethod
    def validate_limits(max_length: Optional[int], max_paths: Optional[int]) -> None:
        """Validate enumeration limits."""
        if max_length is not None and max_length < 1:
            raise ValueError("max_length must be at least 1")
        if max_paths is not None and max_paths <= 0:
            raise ValueError("max_paths must be positive")

    @staticmethod
    def validate_nodes(sources: Collection[NodeT], target: NodeT) -> None:
        """Reject missing source or target arguments."""
        for source in sources:
            require_node(source, "source")
        require_node(target, "target")
