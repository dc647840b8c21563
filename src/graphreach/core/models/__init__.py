"""
Vertex models for graphs traversed by the engine.
"""

from .state import DEFAULT_STATE_NAME, State

__all__ = [
    "DEFAULT_STATE_NAME",
    "State",
]
