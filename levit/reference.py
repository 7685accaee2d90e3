import numpy as np
from graphblas import Matrix, Vector, binary, semiring

from levit.errors import NegativeCycleSuspected, ReferenceMismatchError
from levit.solver import INF


def to_graphblas(graph):
    """Transposed adjacency matrix: ``A[t, s]`` is the cheapest arc ``s -> t``."""
    n = graph.vertex_count
    A = Matrix(int, n, n)

    sources, targets, weights = [], [], []
    for arc in graph.arcs():
        sources.append(arc.source)
        targets.append(arc.target)
        weights.append(arc.weight)

    if weights:
        A.build(targets, sources, weights, dup_op=binary.min)
    return A


def bellman_ford(graph, start):
    graph.check_vertex(start)
    A = to_graphblas(graph)
    n = A.nrows

    d = Vector(int, n)
    d[start] = 0

    for _ in range(n - 1):
        prev_d = d.dup()
        d(binary.min) << A.mxv(d, semiring.min_plus)

        if d.isequal(prev_d):
            break

    prev_d = d.dup()
    d(binary.min) << A.mxv(d, semiring.min_plus)
    if not d.isequal(prev_d):
        raise NegativeCycleSuspected(f"negative cycle reachable from vertex {start}")

    return np.asarray(d.to_dense(fill_value=INF), dtype=np.int64)


def cross_check(graph, start, distances):
    """Raise :class:`ReferenceMismatchError` unless ``distances`` match Bellman-Ford."""
    expected = bellman_ford(graph, start)
    mismatched = np.flatnonzero(np.asarray(distances) != expected).tolist()
    if mismatched:
        raise ReferenceMismatchError(mismatched)
    return expected
