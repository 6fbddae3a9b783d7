"""Pytest configuration and shared fixtures for wgraph tests.

This module provides:
- A deterministic RNG fixture for randomized graph tests
- The reference graphs used across test modules
"""

import os

import numpy as np
import pytest

from wgraph import build_graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def triangle():
    """Undirected triangle a-b (3), b-c (5), c-a (7)."""
    return build_graph(["a", "b", "c"], [("a", "b", 3), ("b", "c", 5), ("c", "a", 7)])


@pytest.fixture
def directed_eight():
    """Directed eight-vertex graph whose a->c shortest path is a,d,g,h,f,c."""
    return build_graph(
        ["a", "b", "c", "d", "e", "f", "g", "h"],
        [
            ("a", "b", 4),
            ("a", "d", 2),
            ("a", "e", 7),
            ("b", "e", 2),
            ("c", "e", 4),
            ("d", "g", 1),
            ("d", "h", 4),
            ("e", "f", 2),
            ("f", "c", 1),
            ("g", "h", 2),
            ("h", "f", 1),
        ],
        directed=True,
    )


@pytest.fixture
def two_components():
    """Undirected graph with components {a, b, c} and {d, e}, plus isolated f."""
    return build_graph(
        ["a", "b", "c", "d", "e", "f"],
        [("a", "b", 1), ("b", "c", 2), ("a", "c", 2), ("d", "e", 4)],
    )


@pytest.fixture
def random_edges(rng: np.random.Generator):
    """Factory for random (u, v, w) triplets over vertices 0..n-1 without repeated pairs."""

    def sample(n: int, p: float, low: int = 1, high: int = 10):
        edges = []
        for u in range(n):
            for v in range(u + 1, n):
                if rng.random() < p:
                    edges.append((u, v, int(rng.integers(low, high))))
        return edges

    return sample
