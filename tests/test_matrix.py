import pytest

from levit.errors import EmptyInputError, MalformedRowError, TokenParseError
from levit.graph import Arc
from levit.matrix import load_edge_list, load_matrix, parse_edge_list, parse_matrix
from levit.solver import INF, levit


def test_mixed_separators():
    graph = parse_matrix("- 1,4\t-\n-\t- - 2\n- - - 1\n-,-,-,-\n")

    assert graph.vertex_count == 4
    assert graph.arcs_from(0) == (Arc(0, 1, 1), Arc(0, 2, 4))
    assert levit(graph, 0).tolist() == [0, 1, 4, 3]


def test_repeated_separators_are_ignored():
    graph = parse_matrix("-  ,, 3\n\t-  -")
    assert list(graph.arcs()) == [Arc(0, 1, 3)]


def test_diagonal_is_ignored():
    graph = parse_matrix("7 2\n-5 0")
    assert list(graph.arcs()) == [Arc(0, 1, 2), Arc(1, 0, -5)]


def test_diagonal_must_still_be_an_integer():
    with pytest.raises(TokenParseError):
        parse_matrix("x 1\n- -")


def test_custom_no_arc_token():
    graph = parse_matrix("inf 3\ninf inf", no_arc="inf")
    assert list(graph.arcs()) == [Arc(0, 1, 3)]


def test_negative_weights_parsed():
    graph = parse_matrix("- 5 2\n- - -\n- -4 -")
    assert levit(graph, 0).tolist() == [0, -2, 2]


def test_empty_file():
    with pytest.raises(EmptyInputError):
        parse_matrix("")


def test_short_row():
    with pytest.raises(MalformedRowError) as info:
        parse_matrix("- 1 2\n- -\n- - -")
    assert (info.value.row, info.value.expected, info.value.found) == (2, 3, 2)


def test_blank_row_is_malformed():
    with pytest.raises(MalformedRowError):
        parse_matrix("- 1\n\n- -")


@pytest.mark.parametrize("token", ["1.5", "abc", "1_000", "--"])
def test_bad_token(token):
    with pytest.raises(TokenParseError) as info:
        parse_matrix(f"- {token}\n- -")
    assert (info.value.row, info.value.column, info.value.token) == (1, 2, token)


def test_load_matrix_from_file(tmp_path):
    path = tmp_path / "matrix.txt"
    path.write_text("- 1 -\n- - -\n- - -\n")

    graph = load_matrix(str(path))
    assert levit(graph, 0).tolist() == [0, 1, INF]


def test_load_matrix_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_matrix(str(tmp_path / "missing.txt"))


def test_edge_list():
    graph = parse_edge_list("# diamond\n0 1 1\n0 2 4\n\n1 3 2\n2 3\n")

    assert graph.vertex_count == 4
    assert graph.arcs_from(2) == (Arc(2, 3, 1),)
    assert levit(graph, 0).tolist() == [0, 1, 4, 3]


def test_edge_list_bad_lines():
    with pytest.raises(MalformedRowError):
        parse_edge_list("0 1 2 3")
    with pytest.raises(TokenParseError):
        parse_edge_list("-1 0 2")
    with pytest.raises(TokenParseError):
        parse_edge_list("0 1 x")


def test_edge_list_without_edges(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text("# nothing here\n")
    with pytest.raises(EmptyInputError):
        load_edge_list(str(path))


@pytest.mark.parametrize("token", ["9223372036854775808", "-9223372036854775809", "1" * 5000])
def test_token_outside_int64(token):
    with pytest.raises(TokenParseError) as info:
        parse_matrix(f"- {token}\n- -")
    assert "int64" in str(info.value)


def test_int64_extremes_parse():
    graph = parse_matrix("- -9223372036854775808\n9223372036854775807 -")
    assert list(graph.arcs()) == [Arc(0, 1, -2 ** 63), Arc(1, 0, 2 ** 63 - 1)]
