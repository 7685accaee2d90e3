class LevitError(Exception):
    pass


class MatrixFormatError(LevitError, ValueError):
    """Input file does not describe a graph."""


class EmptyInputError(MatrixFormatError):
    def __init__(self, source="input"):
        super().__init__(f"{source} is empty")


class MalformedRowError(MatrixFormatError):
    def __init__(self, row, expected, found):
        self.row = row
        self.expected = expected
        self.found = found
        super().__init__(f"malformed row {row}: expected {expected} values, found {found}")


class TokenParseError(MatrixFormatError):
    def __init__(self, row, column, token, reason="is not an integer"):
        self.row = row
        self.column = column
        self.token = token
        super().__init__(f"row {row}, column {column}: {token!r} {reason}")


class IndexOutOfRangeError(LevitError, IndexError):
    def __init__(self, vertex, vertex_count):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"vertex {vertex!r} is out of range [0, {vertex_count})")


class InvalidWeightError(LevitError, ValueError):
    def __init__(self, weight):
        self.weight = weight
        super().__init__(f"arc weight {weight!r} is not an int64 integer")


class DistanceOverflowError(LevitError, OverflowError):
    pass


class NegativeCycleSuspected(LevitError, RuntimeError):
    pass


class ReferenceMismatchError(LevitError, RuntimeError):
    def __init__(self, vertices):
        self.vertices = vertices
        super().__init__(f"Bellman-Ford disagrees at vertices {vertices}")
