"""
State models for transition systems built on the graph engine.

A ``State`` is a graph vertex carrying a name, an optional payload element and
a lambda marker. States are frozen: ``name`` and ``element`` make up the hash,
so they cannot change while the state sits in a graph. The lambda marker is
pure decoration. It never takes part in equality or hashing and can be flipped
through ``set_lambda`` without changing a state's identity inside a graph.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

DEFAULT_STATE_NAME = "<->"


@dataclass(frozen=True)
class State:
    """
    Vertex of a transition system.

    Attributes:
        name (str): State name, the primary identity of the state
        element (Optional[Any]): Hashable payload attached to the state
        is_lambda (bool): Marks a lambda (silent) state
    """

    name: str = DEFAULT_STATE_NAME
    element: Optional[Any] = None
    is_lambda: bool = field(default=False, compare=False)

    def __post_init__(self):
        """Validate state attributes after initialization."""
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("name must be a non-empty string")
        # States are used as set members, so the payload must hash
        hash(self.element)

    def __hash__(self) -> int:
        return hash((self.name, self.element))

    def __str__(self) -> str:
        return self.name

    def set_lambda(self, is_lambda: bool = True) -> None:
        """Mark or unmark the state as a lambda state."""
        object.__setattr__(self, "is_lambda", is_lambda)
