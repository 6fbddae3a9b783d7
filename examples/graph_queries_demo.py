"""Example: Graph Queries with wgraph

Builds the two reference graphs, runs every query on them, and prints the
DOT text that a Graphviz renderer would consume.
"""

from wgraph import (
    breadth_first,
    build_graph,
    depth_first,
    minimum_spanning_tree,
    shortest_path,
    to_dot,
)


def example_undirected_triangle():
    """Example: shortest path and spanning tree on a weighted triangle."""
    print("=" * 60)
    print("Example 1: Undirected triangle")
    print("=" * 60)

    G = build_graph(["a", "b", "c"], [("a", "b", 3), ("b", "c", 5), ("c", "a", 7)])

    result = shortest_path(G, "a", "c")
    print(f"Shortest path a -> c: {result.path} (total {result.total})")

    tree = minimum_spanning_tree(G)
    print(f"Spanning tree edges:  {tree.selected_edges} (total {tree.total_weight})")

    print()
    print(to_dot(G, tree.selected_edges, highlight_is_edge_list=True))


def example_directed_network():
    """Example: traversals and a highlighted path on a directed graph."""
    print("=" * 60)
    print("Example 2: Directed network")
    print("=" * 60)

    G = build_graph(
        ["a", "b", "c", "d", "e", "f", "g", "h"],
        [
            ("a", "b", 4), ("a", "d", 2), ("a", "e", 7), ("b", "e", 2),
            ("c", "e", 4), ("d", "g", 1), ("d", "h", 4), ("e", "f", 2),
            ("f", "c", 1), ("g", "h", 2), ("h", "f", 1),
        ],
        directed=True,
    )

    dfs = depth_first(G, "a")
    bfs = breadth_first(G, "a")
    print(f"Depth-first discovered:   {dfs.discovered}")
    print(f"Depth-first walk:         {dfs.traversal}")
    print(f"Breadth-first discovered: {bfs.discovered}")

    result = shortest_path(G, "a", "c")
    print(f"Shortest path a -> c:     {result.path} (total {result.total})")

    print()
    print(to_dot(G, result))


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Graph Queries - wgraph Examples")
    print("=" * 60 + "\n")

    example_undirected_triangle()
    example_directed_network()
