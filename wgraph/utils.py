"""
Utility functions for graph results.

Provides helpers for vertex indexing, path edges and weights, and a dense
adjacency matrix view.
"""

from typing import Dict, Hashable, List, Sequence, Tuple

import numpy as np

from .core import Graph


def vertex_index_map(graph: Graph) -> Dict[Hashable, int]:
    """
    Map each vertex to its position in the declaration order.

    Example:
        >>> G = build_graph(["c", "a", "b"], [])
        >>> vertex_index_map(G)
        {'c': 0, 'a': 1, 'b': 2}
    """
    return {vertex: idx for idx, vertex in enumerate(graph.vertices)}


def path_edges(path: Sequence[Hashable]) -> List[Tuple[Hashable, Hashable]]:
    """
    Return the consecutive (u, v) pairs of a path.

    Example:
        >>> path_edges(["a", "b", "c"])
        [('a', 'b'), ('b', 'c')]
    """
    return [(path[i], path[i + 1]) for i in range(len(path) - 1)]


def path_weight(graph: Graph, path: Sequence[Hashable]) -> float:
    """
    Sum the edge weights along a path.

    Args:
        graph: Graph holding the edges.
        path: Vertex sequence. Paths with fewer than two vertices weigh 0.

    Returns:
        Total weight of the path.

    Raises:
        KeyError: If two consecutive vertices are not joined by an edge.
    """
    return sum((graph.weight(u, v) for u, v in path_edges(path)), 0)


def adjacency_matrix(graph: Graph, missing: float = 0.0) -> np.ndarray:
    """
    Dense weight matrix of a graph.

    Row and column order follow ``graph.vertices``. Entry [i, j] holds the
    weight of edge (vertices[i], vertices[j]); absent edges hold ``missing``.
    Undirected graphs give a symmetric matrix.

    Args:
        graph: Graph to convert.
        missing: Fill value for absent edges (use ``np.inf`` or ``np.nan``
            when zero-weight edges must stay distinguishable).

    Returns:
        (n, n) float array.

    Example:
        >>> G = build_graph(["a", "b"], [("a", "b", 2.5)])
        >>> adjacency_matrix(G)
        array([[0. , 2.5],
               [2.5, 0. ]])
    """
    index = vertex_index_map(graph)
    n = len(index)
    W = np.full((n, n), missing, dtype=float)

    for u in graph.vertices:
        i = index[u]
        for v in graph.neighbors(u):
            W[i, index[v]] = graph.weight(u, v)

    return W
