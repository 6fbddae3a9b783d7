"""
Exceptions raised by the graph engine.
"""

from typing import Hashable


class GraphError(Exception):
    """Base exception class for graph engine errors."""

    def __init__(self, label: Hashable, message: str):
        super().__init__(message)
        self.label = label
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidVertex(GraphError, ValueError):
    """Raised at construction when an edge references an undeclared vertex,
    or when a vertex label is declared twice."""

    def __init__(self, label: Hashable, reason: str = "edge endpoint is not a declared vertex"):
        super().__init__(label, f"Invalid vertex {label!r}: {reason}")


class UnknownVertex(GraphError, KeyError):
    """Raised when a query names a vertex that is not in the graph."""

    def __init__(self, label: Hashable):
        super().__init__(label, f"Node {label!r} not in graph")
