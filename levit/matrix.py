"""Readers that turn text files into :class:`~levit.graph.Graph` objects.

Two formats are understood:

* an adjacency matrix, one row per vertex, cells separated by spaces, tabs
  or commas, with a placeholder token (``-`` by default) for "no arc";
* an edge list, one ``src dst [weight]`` line per arc, ``#`` comments allowed.
"""
import re

from levit.errors import EmptyInputError, MalformedRowError, TokenParseError
from levit.graph import INT64, Graph

NO_ARC = "-"

_SEPARATORS = re.compile(r"[ \t,]")
_INTEGER = re.compile(r"[+-]?\d+")
_VERTEX = re.compile(r"\d+")


def _parse_int(token, row, column, pattern=_INTEGER):
    if not pattern.fullmatch(token):
        raise TokenParseError(row, column, token)
    # int64 has at most 19 digits; skip converting longer strings
    value = int(token) if len(token.lstrip("+-")) <= 19 else None
    if value is None or not INT64.min <= value <= INT64.max:
        raise TokenParseError(row, column, token, "is outside the int64 range")
    return value


def _tokens(line):
    return [t for t in _SEPARATORS.split(line) if t]


def parse_matrix(text, no_arc=NO_ARC):
    lines = text.splitlines()
    if not lines:
        raise EmptyInputError("matrix")

    n = len(lines)
    graph = Graph(n)
    for i, line in enumerate(lines):
        parts = _tokens(line)
        if len(parts) != n:
            raise MalformedRowError(i + 1, n, len(parts))

        for j, token in enumerate(parts):
            if token == no_arc:
                continue
            weight = _parse_int(token, i + 1, j + 1)
            # self-loops are dropped, but the cell still has to be a number
            if i != j:
                graph.add_arc(i, j, weight)
    return graph


def load_matrix(file_path, no_arc=NO_ARC):
    with open(file_path, 'r') as f:
        return parse_matrix(f.read(), no_arc=no_arc)


def parse_edge_list(text):
    edges = []
    max_vertex = -1
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith('#'):
            continue

        parts = line.split()
        if len(parts) not in (2, 3):
            raise MalformedRowError(number, 3, len(parts))
        s = _parse_int(parts[0], number, 1, _VERTEX)
        t = _parse_int(parts[1], number, 2, _VERTEX)
        w = _parse_int(parts[2], number, 3) if len(parts) == 3 else 1

        edges.append((s, t, w))
        max_vertex = max(max_vertex, s, t)

    if not edges:
        raise EmptyInputError("edge list")

    graph = Graph(max_vertex + 1)
    for s, t, w in edges:
        graph.add_arc(s, t, w)
    return graph


def load_edge_list(file_path):
    with open(file_path, 'r') as f:
        return parse_edge_list(f.read())
