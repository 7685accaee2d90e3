import operator
from collections import namedtuple

import numpy as np

from levit.errors import IndexOutOfRangeError, InvalidWeightError

Arc = namedtuple("Arc", ["source", "target", "weight"])

INT64 = np.iinfo(np.int64)


def _as_integer(value):
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


class Graph:
    """Directed graph with integer arc weights over vertices ``0..n-1``.

    Arcs can only be appended. The vertex count is fixed at construction.
    Weights must fit in a signed 64-bit integer.
    """

    def __init__(self, vertex_count):
        if vertex_count < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
        self._n = vertex_count
        self._adjacency = [[] for _ in range(vertex_count)]
        self._arc_count = 0

    @property
    def vertex_count(self):
        return self._n

    @property
    def arc_count(self):
        return self._arc_count

    def __len__(self):
        return self._n

    def __repr__(self):
        return f"Graph(vertex_count={self._n}, arc_count={self._arc_count})"

    def check_vertex(self, vertex):
        index = _as_integer(vertex)
        if index is None or not 0 <= index < self._n:
            raise IndexOutOfRangeError(vertex, self._n)
        return index

    def add_arc(self, source, target, weight):
        source = self.check_vertex(source)
        target = self.check_vertex(target)
        value = _as_integer(weight)
        if value is None or not INT64.min <= value <= INT64.max:
            raise InvalidWeightError(weight)
        self._adjacency[source].append(Arc(source, target, value))
        self._arc_count += 1

    def arcs_from(self, vertex):
        return tuple(self._adjacency[self.check_vertex(vertex)])

    def arcs(self):
        for outgoing in self._adjacency:
            yield from outgoing
