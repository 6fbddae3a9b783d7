"""Diagnostics and debugging utilities for wgraph."""

from .core import assert_reciprocal_closure, assert_spanning_forest
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_reciprocal_closure",
    "assert_spanning_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
