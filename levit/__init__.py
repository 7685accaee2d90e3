from levit.errors import (
    DistanceOverflowError,
    EmptyInputError,
    IndexOutOfRangeError,
    InvalidWeightError,
    LevitError,
    MalformedRowError,
    MatrixFormatError,
    NegativeCycleSuspected,
    ReferenceMismatchError,
    TokenParseError,
)
from levit.graph import Arc, Graph
from levit.matrix import load_edge_list, load_matrix, parse_edge_list, parse_matrix
from levit.reference import bellman_ford, cross_check, to_graphblas
from levit.solver import INF, ShortestPathSolver, SolveTrace, VertexState, levit

__version__ = "0.1.0"
