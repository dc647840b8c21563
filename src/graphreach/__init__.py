"""
graphreach - Generic Directed Graph Traversal Engine

This package answers structural reachability questions over any graph that
implements the ``Traversable`` protocol, whatever its node type:

- Ancestor and descendant closures
- Weak and strong connectivity
- Cycle detection
- Strongly connected component decomposition
- Enumeration of simple directed paths

Nodes must be hashable and compare by value.
"""

__version__ = "0.1.0"
__author__ = "graphreach Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("graphreach requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.exceptions import GraphOperationError, InvalidArgumentError, NodeNotFoundError
from .core.graph import Graph
from .core.graph_operations import (
    ancestors,
    descendants,
    has_cycle,
    is_ancestor,
    is_descendant,
    is_node_in_cycle,
    is_strongly_connected,
    is_weakly_connected,
    siblings,
    strongly_connected_components,
)
from .core.graph_paths import directed_paths
from .core.types import Traversable

__all__ = [
    "Graph",
    "GraphOperationError",
    "InvalidArgumentError",
    "NodeNotFoundError",
    "Traversable",
    "ancestors",
    "descendants",
    "directed_paths",
    "has_cycle",
    "is_ancestor",
    "is_descendant",
    "is_node_in_cycle",
    "is_strongly_connected",
    "is_weakly_connected",
    "siblings",
    "strongly_connected_components",
]
