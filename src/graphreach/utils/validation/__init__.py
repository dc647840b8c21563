"""
Validation helpers.

Provides argument checks for the traversal operations and JSON schema
validation for graph documents.
"""

from .arguments import require_graph, require_node
from .schema import GRAPH_SCHEMA, validate_graph_document

__all__ = [
    "GRAPH_SCHEMA",
    "require_graph",
    "require_node",
    "validate_graph_document",
]
