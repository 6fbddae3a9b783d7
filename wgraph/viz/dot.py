"""Graphviz DOT text emitter for Graph visualization.

Produces a deterministic DOT payload for a graph, optionally emphasising a
path or an explicit set of edges. The emitter only builds text; writing it
out and invoking a renderer is left to the caller.
"""

from __future__ import annotations

from typing import Hashable, Iterable, List, Optional, Set, Tuple, Union

from wgraph.core import Graph
from wgraph.logging import get_logger
from wgraph.shortest import PathResult
from wgraph.utils import path_edges

logger = get_logger(__name__)

_HEADER = [
    'bgcolor="#00000000";',
    'graph[nodesep="0.2", ranksep="0.0", splines="curved", dpi=150, fixedsize=true];',
    "node[shape=circle, fillcolor=white, style=filled];",
]

_START_STYLE = "[fillcolor=yellow]"
_END_STYLE = "[shape=doublecircle, fillcolor=green]"
_HIGHLIGHT_STYLE = ", color=red, penwidth=2"

Highlight = Union[PathResult, Iterable[Hashable], Iterable[tuple]]


def _resolve_path(highlight: Highlight) -> List[Hashable]:
    if isinstance(highlight, PathResult):
        return list(highlight.path)
    return list(highlight)


def highlight_edges(
    graph: Graph,
    highlight: Optional[Highlight] = None,
    highlight_is_edge_list: bool = False,
) -> Set[Tuple[Hashable, Hashable]]:
    """
    Resolve a highlight specification into a set of ordered vertex pairs.

    Parameters
    ----------
    graph:
        Graph the highlight refers to.
    highlight:
        A vertex sequence describing a path (or a PathResult), or, when
        ``highlight_is_edge_list`` is True, an iterable of (u, v) pairs or
        (u, v, weight) triples.
    highlight_is_edge_list:
        Treat ``highlight`` as independent edges rather than a path.

    Returns
    -------
    set
        Highlighted (u, v) pairs. For undirected graphs both orientations of
        every pair are included.
    """
    if highlight is None:
        return set()

    if highlight_is_edge_list:
        pairs = [(edge[0], edge[1]) for edge in highlight]
    else:
        pairs = path_edges(_resolve_path(highlight))

    resolved = set(pairs)
    if not graph.directed:
        resolved.update((v, u) for u, v in pairs)
    return resolved


def to_dot(
    graph: Graph,
    highlight: Optional[Highlight] = None,
    highlight_is_edge_list: bool = False,
) -> str:
    """
    Convert a Graph to DOT text.

    One edge line is written per canonical edge, in ``graph.edges()`` order,
    with ``--`` for undirected and ``->`` for directed graphs. Highlighted
    edges get a red, thicker stroke. A path highlight also marks its first
    vertex as the start and its last vertex as the end.

    Parameters
    ----------
    graph:
        Graph to render.
    highlight:
        Optional path (vertex sequence or PathResult) or edge list.
    highlight_is_edge_list:
        If True, ``highlight`` is a list of independent edges and no start or
        end markers are emitted.

    Returns
    -------
    str
        DOT text ending with a newline.

    Example
    -------
    >>> G = build_graph(["a", "b"], [("a", "b", 3)])
    >>> print(to_dot(G, ["a", "b"]), end="")
    graph G {
    ...
    a[fillcolor=yellow];
    b[shape=doublecircle, fillcolor=green];
    a -- b[label="3", color=red, penwidth=2];
    }
    """
    keyword = "digraph" if graph.directed else "graph"
    connector = "->" if graph.directed else "--"

    lines: List[str] = [f"{keyword} G {{"]
    lines.extend(_HEADER)

    if highlight is not None and not isinstance(highlight, PathResult):
        highlight = list(highlight)

    if highlight is not None and not highlight_is_edge_list:
        path = _resolve_path(highlight)
        if path:
            lines.append(f"{path[0]}{_START_STYLE};")
            lines.append(f"{path[-1]}{_END_STYLE};")

    emphasised = highlight_edges(graph, highlight, highlight_is_edge_list)

    for u, v, w in graph.edges():
        style = _HIGHLIGHT_STYLE if (u, v) in emphasised else ""
        lines.append(f'{u} {connector} {v}[label="{w}"{style}];')

    lines.append("}")
    logger.debug("Emitted DOT for %r with %d highlighted pairs", graph, len(emphasised))
    return "\n".join(lines) + "\n"
