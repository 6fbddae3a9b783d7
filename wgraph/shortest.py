"""
Shortest path search by exhaustive simple-path enumeration.

Every simple path from the source is explored; no branch is pruned by
distance. This is exponential in the worst case but stays correct with
negative edge weights, where priority-queue relaxation (Dijkstra) does not.
Callers serving untrusted graphs must bound the search themselves.
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Optional

from .core import Graph
from .exceptions import UnknownVertex
from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class PathResult:
    """
    Outcome of a shortest path query.

    Attributes:
        path: Vertices from source to target inclusive; empty if unreachable.
        total: Total weight of ``path``; None if unreachable.
        distances: Best-effort distance trace. For each vertex, the smallest
            accumulated weight seen up to the moment the returned path was
            recorded (or up to the end of the search when no path exists).
            Not an authoritative shortest-distance table.
    """

    path: List[Hashable] = field(default_factory=list)
    total: Optional[float] = None
    distances: Dict[Hashable, float] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        """True if a path to the target was found."""
        return bool(self.path)


def shortest_path(graph: Graph, source: Hashable, target: Hashable) -> PathResult:
    """
    Find a minimum-total-weight simple path from source to target.

    Neighbors are explored in adjacency order. The first path to reach the
    target is kept, and later paths replace it only when strictly lighter,
    so among equal-cost paths the first one found wins.

    Args:
        graph: Graph to search. Weights may be negative.
        source: Start vertex.
        target: End vertex.

    Returns:
        PathResult with the path, its total weight and the distance trace.

    Raises:
        UnknownVertex: If source or target is not in graph.

    Complexity: O(number of simple paths from source), exponential in the
    worst case.

    Example:
        >>> G = build_graph(["a", "b", "c"], [("a", "b", 3), ("b", "c", 5), ("c", "a", 7)])
        >>> result = shortest_path(G, "a", "c")
        >>> result.path, result.total
        (['a', 'c'], 7)
    """
    for vertex in (source, target):
        if vertex not in graph:
            raise UnknownVertex(vertex)

    distances: Dict[Hashable, float] = {source: 0}
    if source == target:
        return PathResult(path=[source], total=0, distances=dict(distances))

    best_path: List[Hashable] = []
    best_total: Optional[float] = None
    snapshot: Optional[Dict[Hashable, float]] = None
    explored_paths = 0

    # Frames of the current path: vertex, accumulated weight, pending neighbors
    path: List[Hashable] = [source]
    on_path = {source}
    accumulated: List[float] = [0]
    stack: List[Iterator[Hashable]] = [iter(graph.neighbors(source))]

    while stack:
        u = path[-1]
        for v in stack[-1]:
            if v in on_path:
                continue
            d = accumulated[-1] + graph.weight(u, v)
            if v not in distances or d < distances[v]:
                distances[v] = d
            if v == target:
                explored_paths += 1
                if best_total is None or d < best_total:
                    best_path = path + [v]
                    best_total = d
                    snapshot = dict(distances)
                continue
            path.append(v)
            on_path.add(v)
            accumulated.append(d)
            stack.append(iter(graph.neighbors(v)))
            break
        else:
            stack.pop()
            on_path.discard(path.pop())
            accumulated.pop()

    logger.debug(
        "Searched %r -> %r: %d complete paths, best total %r",
        source,
        target,
        explored_paths,
        best_total,
    )

    if best_total is None:
        return PathResult(path=[], total=None, distances=distances)
    return PathResult(path=best_path, total=best_total, distances=snapshot)
