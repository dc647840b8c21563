"""Tests for the State vertex model."""

from dataclasses import FrozenInstanceError

import pytest

from graphreach.core.graph import Graph
from graphreach.core.graph_operations import has_cycle, siblings
from graphreach.core.models import DEFAULT_STATE_NAME, State


def test_state_defaults():
    """Test a state created without arguments."""
    state = State()
    assert state.name == DEFAULT_STATE_NAME
    assert state.element is None
    assert not state.is_lambda
    assert str(state) == DEFAULT_STATE_NAME


def test_state_validation_empty_name():
    """Test state validation with empty name."""
    with pytest.raises(ValueError, match="name must be a non-empty string"):
        State(name="")


def test_state_validation_unhashable_element():
    """Test state payloads must be hashable."""
    with pytest.raises(TypeError):
        State(name="s0", element=["not", "hashable"])


def test_lambda_marker_does_not_affect_identity():
    """Test the lambda marker is excluded from equality and hashing."""
    plain = State(name="s0", element=1)
    silent = State(name="s0", element=1, is_lambda=True)
    assert plain == silent
    assert hash(plain) == hash(silent)
    assert State(name="s0", element=2) != plain


def test_lambda_marker_is_mutable_inside_graph():
    """Test flipping the lambda marker keeps the state resolvable in a graph."""
    start = State(name="start")
    loop = State(name="loop")
    graph = Graph([(start, loop), (loop, start)])

    start.set_lambda()
    assert start.is_lambda
    assert graph.get_children(start) == {loop}
    assert has_cycle(graph)


def test_states_as_graph_nodes():
    """Test value-equal states resolve to the same node."""
    graph = Graph([(State(name="a"), State(name="b")), (State(name="a"), State(name="c"))])
    assert graph.node_count() == 3
    assert siblings(graph, State(name="b")) == {State(name="c")}


def test_state_identity_is_read_only():
    """Test name and element cannot be reassigned on a state held by a graph."""
    state = State(name="s0", element=1)
    graph = Graph([(state, State(name="s1"))])

    with pytest.raises(FrozenInstanceError):
        state.name = "renamed"
    with pytest.raises(FrozenInstanceError):
        state.element = 2
    with pytest.raises(FrozenInstanceError):
        state.is_lambda = True

    state.set_lambda()
    state.set_lambda(False)
    assert not state.is_lambda
    assert graph.has_node(state)
    assert graph.get_children(State(name="s0", element=1)) == {State(name="s1")}
