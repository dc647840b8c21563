"""
Argument checks shared by the traversal operations.

Every public query rejects absent arguments up front so that no traversal
state is built for a call that cannot succeed.
"""

from typing import Any

from ...core.exceptions import InvalidArgumentError


def require_graph(graph: Any) -> None:
    """Reject a missing graph view."""
    if graph is None:
        raise InvalidArgumentError("graph must not be None")


def require_node(node: Any, name: str = "node") -> None:
    """Reject a missing node argument.

    Args:
        node: Value to check
        name: Argument name used in the error message
    """
    if node is None:
        raise InvalidArgumentError(f"{name} must not be None")
