"""
Custom exceptions for the graph traversal engine.

This module defines the hierarchy of exceptions raised by the traversal engine
and by the graph views it consumes. Traversal functions never catch or translate
``NodeNotFoundError``; it travels unchanged from the graph view to the caller.
"""


class ValidationError(Exception):
    """
    Raised when input data fails validation.

    Examples:
        * Malformed graph documents passed to ``Graph.from_dict``
        * Missing required arguments
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidArgumentError(ValidationError):
    """
    Raised when a required graph or node argument is absent.

    The check happens before any traversal begins, so no partial
    state is produced.

    Examples:
        * ``None`` passed as the graph
        * ``None`` passed as a start, candidate or target node
    """


class GraphOperationError(Exception):
    """
    Raised when a graph operation hits an internal inconsistency.

    This is a programming-error fault, distinct from ``NodeNotFoundError``:
    it signals that a node reported by ``get_nodes()`` was then reported
    missing by the same graph view during one query.

    Examples:
        * A graph view mutated while a whole-graph query was running
        * A graph view whose node set and adjacency disagree
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Edge not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found in a graph view.

    Examples:
        * Parent or child lookup for a node the graph does not contain
        * Traversal started from a missing node
        * Removal of a non-existent node
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    Examples:
        * Removal of an edge that does not exist
    """
