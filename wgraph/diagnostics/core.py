"""Invariant checks for graphs and spanning tree results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Iterable, Optional, Sequence

if TYPE_CHECKING:
    from wgraph.core import Graph
    from wgraph.mst import SpanningTreeResult


def assert_reciprocal_closure(
    graph: "Graph",
    declared: Optional[Iterable[Sequence]] = None,
) -> None:
    """
    Assert that an undirected graph mirrors every edge with equal weight.

    Parameters
    ----------
    graph:
        Graph to check. Directed graphs pass trivially.
    declared:
        Optional (u, v, w) triplets the graph was built from. When given,
        each one must be present in both orientations.

    Raises
    ------
    ValueError
        If an edge is missing its reverse, the two weights differ, or an
        endpoint is missing from the other's neighbor list.
    """
    if graph.directed:
        return

    for u, v, w in graph.edges():
        if not graph.has_edge(v, u):
            raise ValueError(f"Edge ({u!r}, {v!r}) has no reciprocal edge.")
        if graph.weight(v, u) != w:
            raise ValueError(
                f"Reciprocal weights differ on ({u!r}, {v!r}): "
                f"{w!r} != {graph.weight(v, u)!r}"
            )
        if v not in graph.neighbors(u) or u not in graph.neighbors(v):
            raise ValueError(f"Adjacency is not symmetric for ({u!r}, {v!r}).")

    if declared is not None:
        for u, v, _ in declared:
            if not (graph.has_edge(u, v) and graph.has_edge(v, u)):
                raise ValueError(f"Declared edge ({u!r}, {v!r}) is not present in both orientations.")


def _component_count(graph: "Graph") -> int:
    seen: set = set()
    components = 0
    for start in graph.vertices:
        if start in seen:
            continue
        components += 1
        stack = [start]
        seen.add(start)
        while stack:
            u = stack.pop()
            for v in graph.neighbors(u):
                if v not in seen:
                    seen.add(v)
                    stack.append(v)
    return components


def assert_spanning_forest(graph: "Graph", result: "SpanningTreeResult") -> None:
    """
    Assert that a spanning tree result is a spanning forest of ``graph``.

    Checks that the vertex set is preserved, every selected edge exists in
    the source graph with the same weight, the selection is acyclic, and
    it holds exactly ``n - c`` edges for ``c`` connected components.

    Raises
    ------
    ValueError
        If any of the checks fails.
    """
    tree = result.tree
    if tuple(tree.vertices) != tuple(graph.vertices):
        raise ValueError("Spanning forest does not preserve the vertex set.")

    parent: dict[Hashable, Hashable] = {v: v for v in graph.vertices}

    def find(x: Hashable) -> Hashable:
        while parent[x] != x:
            x = parent[x]
        return x

    for u, v, w in result.selected_edges:
        if not graph.has_edge(u, v) or graph.weight(u, v) != w:
            raise ValueError(f"Selected edge ({u!r}, {v!r}, {w!r}) is not an edge of the graph.")
        root_u, root_v = find(u), find(v)
        if root_u == root_v:
            raise ValueError(f"Selected edge ({u!r}, {v!r}) closes a cycle.")
        parent[root_u] = root_v

    expected = len(graph.vertices) - _component_count(graph)
    if len(result.selected_edges) != expected:
        raise ValueError(
            f"Spanning forest has {len(result.selected_edges)} edges, expected {expected}."
        )
