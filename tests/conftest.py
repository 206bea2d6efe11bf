"""Pytest configuration and shared fixtures for relgraph tests.

This module provides:
- A deterministic RNG fixture for randomized graph tests
- The sample graphs used across the suite
"""

import os

import numpy as np
import pytest

from relgraph import Pathway, Relation

# Sample Graph :
#                  +----------------+
#                  |                |
#                  v                |
#       +---------(q)-->(t)------->(y)<----(r)
#       |          |     |          ^       |
#       v          |     v          |       |
#   +--(s)<--+     |    (x)<---+   (u)<-----+
#   |        |     |     |     |
#   v        |     |     v     |
#  (v)----->(w)<---+    (z)----+
SAMPLE_EDGES = [
    ("q", "s", 1),
    ("q", "t", 1),
    ("q", "w", 1),
    ("r", "u", 1),
    ("r", "y", 1),
    ("s", "v", 1),
    ("t", "x", 1),
    ("t", "y", 1),
    ("u", "y", 1),
    ("v", "w", 1),
    ("w", "s", 1),
    ("x", "z", 1),
    ("y", "q", 1),
    ("z", "x", 1),
]

# Professor Bumstead's clothing, prerequisite -> dependent
CLOTHING_EDGES = [
    ("undershorts", "pants"),
    ("undershorts", "shoes"),
    ("socks", "shoes"),
    ("watch", "watch"),
    ("pants", "belt"),
    ("pants", "shoes"),
    ("shirt", "belt"),
    ("shirt", "tie"),
    ("tie", "jacket"),
    ("belt", "jacket"),
]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def sample_relations():
    return [Relation(*row) for row in SAMPLE_EDGES]


@pytest.fixture
def sample_graph(sample_relations):
    """Directed 10-node sample graph with unit weights."""
    return Pathway(sample_relations)


@pytest.fixture
def undirected_sample_graph(sample_relations):
    return Pathway(sample_relations, undirected=True)


@pytest.fixture
def weighted_graph():
    """a -> b (1), a -> c (5), b -> c (3), directed."""
    return Pathway([
        Relation("a", "b", 1),
        Relation("a", "c", 5),
        Relation("b", "c", 3),
    ])


@pytest.fixture
def clothing_dag():
    return Pathway([Relation(u, v, True) for u, v in CLOTHING_EDGES])
