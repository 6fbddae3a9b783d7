"""
wgraph - a small in-memory weighted graph engine.

This package provides:
- An immutable weighted Graph built from vertices and edge triplets
- Traversal algorithms (depth-first, breadth-first)
- Exhaustive simple-path shortest path search (tolerates negative weights)
- Minimum spanning forests (Kruskal)
- Graphviz DOT text generation with path/edge highlighting

Iteration follows edge declaration order everywhere, so results are
deterministic for a given construction.
"""

__version__ = "0.1.0"

from .core import Graph, build_graph
from .diagnostics import (
    assert_reciprocal_closure,
    assert_spanning_forest,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .exceptions import GraphError, InvalidVertex, UnknownVertex
from .logging import configure_logging, get_logger, set_log_level
from .mst import SpanningTreeResult, UnionFind, minimum_spanning_tree
from .shortest import PathResult, shortest_path
from .traversal import TraversalResult, breadth_first, depth_first
from .utils import adjacency_matrix, path_edges, path_weight, vertex_index_map
from .viz import highlight_edges, to_dot

__all__ = [
    "__version__",
    # Core
    "Graph",
    "build_graph",
    # Errors
    "GraphError",
    "InvalidVertex",
    "UnknownVertex",
    # Queries
    "depth_first",
    "breadth_first",
    "TraversalResult",
    "shortest_path",
    "PathResult",
    "minimum_spanning_tree",
    "SpanningTreeResult",
    "UnionFind",
    # Rendering
    "to_dot",
    "highlight_edges",
    # Helpers
    "vertex_index_map",
    "path_edges",
    "path_weight",
    "adjacency_matrix",
    # Diagnostics and configuration
    "assert_reciprocal_closure",
    "assert_spanning_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]

# Example usage:
# from wgraph import build_graph, shortest_path, to_dot
#
# G = build_graph(["a", "b", "c"], [("a", "b", 3), ("b", "c", 5), ("c", "a", 7)])
# result = shortest_path(G, "a", "c")  # result.path == ["a", "c"]
# text = to_dot(G, result.path)
