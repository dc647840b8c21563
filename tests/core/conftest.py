"""Shared test fixtures."""

import random
from typing import List

import pytest

from graphreach.core.graph import Graph


def build_random_graph(seed: int, node_count: int, edge_probability: float) -> Graph[int]:
    """Build a reproducible random directed graph, self-loops included."""
    rng = random.Random(seed)
    graph: Graph[int] = Graph(nodes=range(node_count))
    for parent in range(node_count):
        for child in range(node_count):
            if rng.random() < edge_probability:
                graph.add_edge(parent, child)
    return graph


@pytest.fixture
def cyclic_graph() -> Graph[str]:
    """
    Fixture providing a three-node cycle with one exit:
    A -> B -> C -> A
    |
    v
    D
    """
    return Graph([("A", "B"), ("B", "C"), ("C", "A"), ("A", "D")])


@pytest.fixture
def disconnected_graph() -> Graph[str]:
    """
    Fixture providing two separate components:
    A -> B    C -> D
    """
    return Graph([("A", "B"), ("C", "D")])


@pytest.fixture
def diamond_graph() -> Graph[str]:
    """
    Fixture providing an acyclic diamond:
      A
     / \\
    B   C
     \\ /
      D
    """
    return Graph([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])


@pytest.fixture
def random_graphs() -> List[Graph[int]]:
    """Fixture providing a spread of small random graphs, sparse to dense."""
    graphs = []
    for seed in range(60):
        node_count = 1 + seed % 8
        edge_probability = (0.05, 0.15, 0.3, 0.5)[seed % 4]
        graphs.append(build_random_graph(seed, node_count, edge_probability))
    return graphs
