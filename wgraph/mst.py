"""
Minimum spanning forest construction (Kruskal).

Edges are taken from ``Graph.ordered_edges()`` (ascending weight, ties in
canonical declaration order) and accepted whenever they join two different
components. The whole edge list is always scanned, so a disconnected graph
yields one tree per component.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 21.3 (disjoint-set forests) and 23.2 (Kruskal).
"""

from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Tuple

from .core import Graph, build_graph
from .diagnostics.core import assert_spanning_forest
from .diagnostics.debug_mode import is_debug_enabled
from .logging import get_logger

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by rank.

    Used by Kruskal's algorithm for cycle detection.
    """

    def __init__(self, nodes: Iterable[Hashable]):
        """
        Initialize union-find with one singleton set per node.

        Args:
            nodes: Iterable of nodes.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}

        for node in nodes:
            self.parent[node] = node
            self.rank[node] = 0

    def find(self, x: Hashable) -> Hashable:
        """
        Find root of x with path compression.

        Args:
            x: Node to find root for.

        Returns:
            Root node.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Union sets containing x and y using union by rank.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True


@dataclass
class SpanningTreeResult:
    """
    Minimum spanning forest of an undirected graph.

    Attributes:
        tree: New undirected Graph over the original vertex set holding only
            the selected edges.
        selected_edges: (u, v, weight) edges in the order they were selected.
    """

    tree: Graph
    selected_edges: List[Tuple[Hashable, Hashable, float]]

    @property
    def total_weight(self) -> float:
        """Sum of the selected edge weights."""
        return sum(w for _, _, w in self.selected_edges)


def minimum_spanning_tree(graph: Graph) -> SpanningTreeResult:
    """
    Kruskal's algorithm for a minimum spanning forest.

    The graph must be undirected. This is not checked: a directed graph is
    accepted and processed as if its canonical edges were undirected, which
    is a caller error and produces an unspecified result.

    Args:
        graph: Undirected Graph.

    Returns:
        SpanningTreeResult with the forest as a new Graph and the selected
        edges in selection order. A connected graph with n vertices yields
        n - 1 edges; one with c components yields n - c.

    Complexity: O(E log E) for sorting plus near-constant union-find work per edge.

    Example:
        >>> G = build_graph(["a", "b", "c"], [("a", "b", 3), ("b", "c", 5), ("c", "a", 7)])
        >>> minimum_spanning_tree(G).selected_edges
        [('a', 'b', 3), ('b', 'c', 5)]
    """
    if graph.directed:
        logger.warning("minimum_spanning_tree called on a directed graph; result is unspecified")

    uf = UnionFind(graph.vertices)
    selected: List[Tuple[Hashable, Hashable, float]] = []

    candidates = graph.ordered_edges()
    for u, v, weight in candidates:
        if uf.union(u, v):
            selected.append((u, v, weight))

    tree = build_graph(graph.vertices, selected, directed=False)
    result = SpanningTreeResult(tree=tree, selected_edges=selected)
    logger.debug(
        "Selected %d of %d edges, total weight %r",
        len(selected),
        len(candidates),
        result.total_weight,
    )

    if is_debug_enabled() and not graph.directed:
        assert_spanning_forest(graph, result)

    return result
