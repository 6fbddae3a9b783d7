"""
Core graph data structure.

Provides an immutable weighted Graph built once from a vertex declaration and
a list of (u, v, weight) edge triplets. Iteration order everywhere follows
declaration order, never sorted order: adjacency order drives tie-breaking in
path search and traversal, and edge order drives tie-breaking in the spanning
tree builder.

For undirected graphs every declared edge (a, b, w) is mirrored by a
generated (b, a, w). Declared edges come first and the generated reciprocals
are appended after all of them, as one combined edge list.
"""

from typing import Dict, Hashable, Iterable, Iterator, List, Sequence, Tuple

from .diagnostics.core import assert_reciprocal_closure
from .diagnostics.debug_mode import is_debug_enabled
from .exceptions import InvalidVertex, UnknownVertex
from .logging import get_logger

logger = get_logger(__name__)

Edge = Tuple[Hashable, Hashable, float]


class Graph:
    """
    Immutable weighted graph with adjacency-list representation.

    Instances are produced by :func:`build_graph`; do not mutate them. All
    queries allocate their own state, so a single Graph can be shared freely
    between readers.

    Attributes:
        vertices: Tuple of vertex labels in declaration order.
        directed: If True, graph is directed; otherwise undirected.

    Complexity:
        - neighbors: O(deg(v))
        - weight / has_edge: O(1)
        - edges: O(E)
        - ordered_edges: O(E log E)
    """

    __slots__ = ("vertices", "directed", "_vertex_set", "_weights", "_adj")

    def __init__(
        self,
        vertices: Tuple[Hashable, ...],
        directed: bool,
        weights: Dict[Tuple[Hashable, Hashable], float],
        adj: Dict[Hashable, List[Hashable]],
    ):
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "directed", directed)
        object.__setattr__(self, "_vertex_set", frozenset(vertices))
        object.__setattr__(self, "_weights", weights)
        object.__setattr__(self, "_adj", adj)

    def __setattr__(self, name, value):
        raise AttributeError(f"Graph is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Graph is immutable; cannot delete {name!r}")

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._vertex_set

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.vertices)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, vertices={len(self.vertices)}, edges={len(self.edges())})"

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        """
        Return successors of a vertex in adjacency (edge declaration) order.

        Args:
            vertex: Vertex to get neighbors for.

        Returns:
            List of successor vertices. The list is a copy.

        Raises:
            UnknownVertex: If vertex is not in graph.
        """
        if vertex not in self._vertex_set:
            raise UnknownVertex(vertex)
        return list(self._adj[vertex])

    def weight(self, u: Hashable, v: Hashable) -> float:
        """
        Return the weight of the ordered edge (u, v).

        Raises:
            UnknownVertex: If u or v is not in graph.
            KeyError: If there is no edge from u to v.
        """
        for vertex in (u, v):
            if vertex not in self._vertex_set:
                raise UnknownVertex(vertex)
        try:
            return self._weights[(u, v)]
        except KeyError:
            raise KeyError(f"No edge ({u!r}, {v!r}) in graph") from None

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        """Return True if the ordered edge (u, v) exists."""
        return (u, v) in self._weights

    def edges(self) -> List[Edge]:
        """
        Return the canonical edge list.

        For directed graphs every (u, v) in the weight map is listed. For
        undirected graphs each unordered pair appears once, in the
        orientation first seen while iterating the weight map in insertion
        order (i.e. the declared orientation).

        Returns:
            List of (u, v, weight) tuples.
        """
        if self.directed:
            return [(u, v, w) for (u, v), w in self._weights.items()]

        edges_list: List[Edge] = []
        seen = set()
        for (u, v), w in self._weights.items():
            if (v, u) in seen:
                continue
            seen.add((u, v))
            edges_list.append((u, v, w))
        return edges_list

    def ordered_edges(self) -> List[Edge]:
        """
        Return the canonical edges sorted ascending by weight.

        The sort is stable, so equal weights keep their ``edges()`` order.
        """
        return sorted(self.edges(), key=lambda e: e[2])


def build_graph(
    vertices: Iterable[Hashable],
    edges: Iterable[Sequence],
    directed: bool = False,
) -> Graph:
    """
    Construct an immutable Graph from a vertex declaration and edge triplets.

    Args:
        vertices: Unique vertex labels; declaration order is kept.
        edges: Iterable of (u, v, weight) triplets. Weights may be negative.
        directed: If False, each edge is also added in reverse with the same
            weight.

    Returns:
        The constructed Graph.

    Raises:
        InvalidVertex: If a vertex label is declared twice, or if an edge
            endpoint is not a declared vertex. Nothing is built in that case.

    Example:
        >>> G = build_graph(["a", "b", "c"], [("a", "b", 3), ("b", "c", 5)])
        >>> G.neighbors("b")
        ['c', 'a']
        >>> G.weight("b", "a")
        3
    """
    vertex_list = list(vertices)
    vertex_set = set()
    for vertex in vertex_list:
        if vertex in vertex_set:
            raise InvalidVertex(vertex, "vertex declared more than once")
        vertex_set.add(vertex)

    declared: List[Edge] = [(u, v, w) for u, v, w in edges]
    combined = list(declared)
    if not directed:
        combined.extend((v, u, w) for u, v, w in declared)

    for u, v, _ in combined:
        if u not in vertex_set:
            raise InvalidVertex(u)
        if v not in vertex_set:
            raise InvalidVertex(v)

    weights: Dict[Tuple[Hashable, Hashable], float] = {}
    adj: Dict[Hashable, List[Hashable]] = {vertex: [] for vertex in vertex_list}
    for u, v, w in combined:
        weights[(u, v)] = w
        if v not in adj[u]:
            adj[u].append(v)

    if not directed:
        # Last declaration of an unordered pair wins in both orientations
        for u, v, w in declared:
            weights[(u, v)] = w
            weights[(v, u)] = w

    graph = Graph(tuple(vertex_list), bool(directed), weights, adj)
    logger.debug(
        "Built %s graph with %d vertices and %d edges",
        "directed" if directed else "undirected",
        len(vertex_list),
        len(declared),
    )

    if is_debug_enabled():
        assert_reciprocal_closure(graph, declared)

    return graph
