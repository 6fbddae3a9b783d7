"""
Graph traversal algorithms: depth-first and breadth-first discovery.

Neighbors are visited in adjacency order (edge declaration order), so
results are reproducible for a given construction.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from dataclasses import dataclass
from typing import Hashable, Iterator, List, Optional, Tuple

from .core import Graph
from .exceptions import UnknownVertex


@dataclass
class TraversalResult:
    """
    Discovery record of a traversal.

    Attributes:
        discovered: Vertices in the order first reached.
        explored: Vertices in the order their neighbors were fully processed.
        traversal: Depth-first walk including backtracking moves, with no
            vertex repeated back to back. None for breadth-first results.
    """

    discovered: List[Hashable]
    explored: List[Hashable]
    traversal: Optional[List[Hashable]] = None


def depth_first(graph: Graph, start: Hashable) -> TraversalResult:
    """
    Depth-first search from a start vertex.

    A vertex is discovered on first visit, before its neighbors are handled,
    and explored once every neighbor has been handled. The walk records each
    move, including the step back to a parent after a child finishes.

    Uses an explicit stack of neighbor iterators, which visits vertices in
    the same order as the recursive formulation without its depth limit.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.

    Returns:
        TraversalResult with discovered, explored and traversal populated.

    Raises:
        UnknownVertex: If start is not in graph.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = build_graph(["a", "b", "c"], [("a", "b", 1), ("a", "c", 1)])
        >>> result = depth_first(G, "a")
        >>> result.traversal
        ['a', 'b', 'a', 'c', 'a']
    """
    if start not in graph:
        raise UnknownVertex(start)

    discovered: List[Hashable] = [start]
    explored: List[Hashable] = []
    walk: List[Hashable] = [start]
    visited = {start}

    def step(vertex: Hashable) -> None:
        if walk[-1] != vertex:
            walk.append(vertex)

    stack: List[Tuple[Hashable, Iterator[Hashable]]] = [(start, iter(graph.neighbors(start)))]

    while stack:
        u, pending = stack[-1]
        for v in pending:
            if v not in visited:
                visited.add(v)
                discovered.append(v)
                step(v)
                stack.append((v, iter(graph.neighbors(v))))
                break
        else:
            stack.pop()
            explored.append(u)
            if stack:
                # Backtrack to the parent
                step(stack[-1][0])

    return TraversalResult(discovered=discovered, explored=explored, traversal=walk)


def breadth_first(graph: Graph, start: Hashable) -> TraversalResult:
    """
    Breadth-first search from a start vertex.

    The start vertex is discovered and enqueued first. Each dequeued vertex
    discovers and enqueues its undiscovered neighbors, then is explored.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.

    Returns:
        TraversalResult with discovered and explored populated.

    Raises:
        UnknownVertex: If start is not in graph.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = build_graph(["a", "b", "c"], [("a", "b", 1), ("b", "c", 1)])
        >>> breadth_first(G, "a").discovered
        ['a', 'b', 'c']
    """
    if start not in graph:
        raise UnknownVertex(start)

    discovered: List[Hashable] = [start]
    explored: List[Hashable] = []
    seen = {start}
    queue = deque([start])

    while queue:
        u = queue.popleft()
        for v in graph.neighbors(u):
            if v not in seen:
                seen.add(v)
                discovered.append(v)
                queue.append(v)
        explored.append(u)

    return TraversalResult(discovered=discovered, explored=explored)
