"""Visualization utilities for graphs.

This module provides Graphviz DOT text generation with optional path or
edge-set highlighting.
"""

from .dot import highlight_edges, to_dot

__all__ = [
    "to_dot",
    "highlight_edges",
]
