import numpy as np
import pytest

from levit.graph import Graph


def random_graph(rng, n, density, low, high, acyclic=False):
    """Random digraph; with ``acyclic`` arcs follow a shuffled topological order."""
    graph = Graph(n)
    order = rng.permutation(n)
    for i in range(n):
        for j in range(n):
            if i == j or (acyclic and i >= j):
                continue
            if rng.random() < density:
                graph.add_arc(int(order[i]), int(order[j]), int(rng.integers(low, high)))
    return graph


@pytest.fixture
def rng():
    return np.random.default_rng(20241018)


@pytest.fixture
def diamond():
    graph = Graph(4)
    graph.add_arc(0, 1, 1)
    graph.add_arc(0, 2, 4)
    graph.add_arc(1, 3, 2)
    graph.add_arc(2, 3, 1)
    return graph
