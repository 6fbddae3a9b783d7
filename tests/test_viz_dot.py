"""Tests for the DOT text emitter."""

import pytest

from wgraph import PathResult, build_graph
from wgraph.viz.dot import highlight_edges, to_dot

HEADER = [
    'bgcolor="#00000000";',
    'graph[nodesep="0.2", ranksep="0.0", splines="curved", dpi=150, fixedsize=true];',
    "node[shape=circle, fillcolor=white, style=filled];",
]


def test_plain_undirected(triangle):
    """Test the full text of an undirected graph without highlight."""
    text = to_dot(triangle)

    assert text == "\n".join(
        ["graph G {"]
        + HEADER
        + [
            'a -- b[label="3"];',
            'b -- c[label="5"];',
            'c -- a[label="7"];',
            "}",
        ]
    ) + "\n"


def test_plain_directed():
    """Test that directed graphs use digraph and the arrow connector."""
    G = build_graph(["x", "y"], [("x", "y", 1.5), ("y", "x", -2)], directed=True)
    lines = to_dot(G).splitlines()

    assert lines[0] == "digraph G {"
    assert lines[4:] == ['x -> y[label="1.5"];', 'y -> x[label="-2"];', "}"]


def test_path_highlight(triangle):
    """Test markers and edge color for a path highlight."""
    lines = to_dot(triangle, ["a", "c"]).splitlines()

    assert lines[4] == "a[fillcolor=yellow];"
    assert lines[5] == "c[shape=doublecircle, fillcolor=green];"
    assert lines[6:] == [
        'a -- b[label="3"];',
        'b -- c[label="5"];',
        'c -- a[label="7", color=red, penwidth=2];',
        "}",
    ]


def test_path_highlight_either_orientation(triangle):
    """Test that an undirected path matches canonical edges in reverse."""
    text = to_dot(triangle, ["c", "b", "a"])

    assert 'b -- c[label="5", color=red, penwidth=2];' in text
    assert 'a -- b[label="3", color=red, penwidth=2];' in text
    assert 'c -- a[label="7"];' in text
    assert "c[fillcolor=yellow];" in text
    assert "a[shape=doublecircle, fillcolor=green];" in text


def test_directed_highlight_is_oriented():
    """Test that a directed highlight only matches its own direction."""
    G = build_graph(["x", "y"], [("x", "y", 1), ("y", "x", 2)], directed=True)
    text = to_dot(G, ["y", "x"])

    assert 'x -> y[label="1"];' in text
    assert 'y -> x[label="2", color=red, penwidth=2];' in text


def test_edge_list_highlight(triangle):
    """Test that an edge list highlights edges with no vertex markers."""
    text = to_dot(triangle, [("a", "b"), ("a", "c")], highlight_is_edge_list=True)

    assert "fillcolor=yellow" not in text
    assert "doublecircle" not in text
    assert 'a -- b[label="3", color=red, penwidth=2];' in text
    assert 'b -- c[label="5"];' in text
    assert 'c -- a[label="7", color=red, penwidth=2];' in text


def test_edge_list_accepts_triples(triangle):
    """Test that (u, v, w) triples work as an edge list."""
    text = to_dot(triangle, [("b", "c", 5)], highlight_is_edge_list=True)
    assert text.count("color=red") == 1


def test_edge_list_has_no_implied_adjacency(triangle):
    """Test that separate edges are not joined into a path."""
    pairs = highlight_edges(triangle, [("a", "b"), ("c", "a")], highlight_is_edge_list=True)
    assert ("b", "c") not in pairs


def test_path_result_highlight(triangle):
    """Test that a PathResult is accepted as a path."""
    result = PathResult(path=["a", "b"], total=3, distances={})
    text = to_dot(triangle, result)

    assert "a[fillcolor=yellow];" in text
    assert "b[shape=doublecircle, fillcolor=green];" in text


def test_generator_highlight(triangle):
    """Test that a one-shot iterable is consumed only once."""
    text = to_dot(triangle, (v for v in ["a", "b"]))

    assert "a[fillcolor=yellow];" in text
    assert 'a -- b[label="3", color=red, penwidth=2];' in text


def test_empty_path_has_no_markers(triangle):
    """Test that an empty path highlights nothing."""
    assert to_dot(triangle, []) == to_dot(triangle)


def test_single_vertex_path(triangle):
    """Test that a one-vertex path gets both markers and no edges."""
    text = to_dot(triangle, ["b"])

    assert "b[fillcolor=yellow];" in text
    assert "b[shape=doublecircle, fillcolor=green];" in text
    assert "color=red" not in text


@pytest.mark.parametrize(
    "highlight, is_edge_list, expected",
    [
        (None, False, set()),
        (["a", "b", "c"], False, {("a", "b"), ("b", "a"), ("b", "c"), ("c", "b")}),
        ([("a", "c", 7)], True, {("a", "c"), ("c", "a")}),
    ],
)
def test_highlight_edges_undirected(triangle, highlight, is_edge_list, expected):
    """Test highlight resolution for undirected graphs."""
    assert highlight_edges(triangle, highlight, is_edge_list) == expected


def test_highlight_edges_directed(directed_eight):
    """Test that directed highlights keep only the given orientation."""
    assert highlight_edges(directed_eight, ["a", "d", "g"]) == {("a", "d"), ("d", "g")}


def test_isolated_vertex_not_emitted():
    """Test that only edges produce lines."""
    G = build_graph(["a", "b", "lonely"], [("a", "b", 1)])
    assert "lonely" not in to_dot(G)


def test_integer_labels():
    """Test that labels and weights are rendered with str()."""
    G = build_graph([1, 2], [(1, 2, 0.25)])
    assert '1 -- 2[label="0.25"];' in to_dot(G)
