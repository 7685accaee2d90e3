"""Levit's label-correcting single-source shortest paths.

Vertices waiting for their first pass go through the main queue. A vertex
that was already processed and gets a shorter distance goes through the
urgent queue, which is always drained first.
"""
import logging
from collections import deque, namedtuple
from enum import IntEnum

import numpy as np

from levit.errors import DistanceOverflowError, NegativeCycleSuspected
from levit.graph import INT64

logger = logging.getLogger(__name__)

INF = INT64.max

SolveTrace = namedtuple("SolveTrace", ["distances", "order"])


class VertexState(IntEnum):
    UNVISITED = 0
    QUEUED_MAIN = 1
    QUEUED_URGENT = 2
    SETTLED = 3


class ShortestPathSolver:
    def __init__(self, graph, max_steps=None):
        if max_steps is not None and max_steps < 1:
            raise ValueError(f"max_steps must be positive, got {max_steps}")
        self.graph = graph
        self.max_steps = max_steps

    def solve(self, start):
        """Return an int64 array of distances from ``start``, ``INF`` where unreachable."""
        return self._run(start, None).distances

    def trace(self, start):
        """Like :meth:`solve`, also recording ``(vertex, queue)`` per dequeue."""
        return self._run(start, [])

    def _run(self, start, order):
        graph = self.graph
        n = graph.vertex_count
        start = graph.check_vertex(start)

        dist = [INF] * n
        state = [VertexState.UNVISITED] * n
        main_queue = deque()
        urgent_queue = deque()

        dist[start] = 0
        state[start] = VertexState.QUEUED_MAIN
        main_queue.append(start)

        steps = 0
        requeued = 0
        while main_queue or urgent_queue:
            if urgent_queue:
                current = urgent_queue.popleft()
                queue_name = "urgent"
            else:
                current = main_queue.popleft()
                queue_name = "main"

            steps += 1
            if self.max_steps is not None and steps > self.max_steps:
                raise NegativeCycleSuspected(
                    f"no convergence after {self.max_steps} steps from vertex {start}"
                )
            if order is not None:
                order.append((current, queue_name))

            base = dist[current]
            for arc in graph.arcs_from(current):
                neighbour = arc.target
                candidate = base + arc.weight
                # INF itself is reserved for unreachable vertices
                if not INT64.min <= candidate < INF:
                    raise DistanceOverflowError(
                        f"path length {candidate} to vertex {neighbour} does not fit in int64"
                    )
                if candidate < dist[neighbour]:
                    dist[neighbour] = candidate
                    if state[neighbour] == VertexState.SETTLED:
                        state[neighbour] = VertexState.QUEUED_URGENT
                        urgent_queue.append(neighbour)
                        requeued += 1
                    elif state[neighbour] == VertexState.UNVISITED:
                        state[neighbour] = VertexState.QUEUED_MAIN
                        main_queue.append(neighbour)

            state[current] = VertexState.SETTLED

        logger.debug(
            "levit from %d over %d vertices: %d steps, %d urgent re-queues",
            start, n, steps, requeued,
        )
        return SolveTrace(np.array(dist, dtype=np.int64), order)


def levit(graph, start, max_steps=None):
    return ShortestPathSolver(graph, max_steps=max_steps).solve(start)
