"""
Pytest configuration and shared fixtures for MINAA tests.

This module provides fixtures for:
- Graphlet degree vectors of small graphs
- Adjacency matrices and labels of paths, stars and single nodes
- Alignment matrices
- Stub aligners standing in for the external assignment algorithm
"""

from typing import List

import numpy as np
import pytest

from minaa_core.orbits import ORBIT_COUNT
from minaa_orchestrator.models import GraphData


def pytest_configure(config):
    for marker, description in (
        ("unit", "fast tests of a single function or class"),
        ("integration", "tests running the whole alignment pipeline"),
        ("property", "hypothesis property-based tests"),
    ):
        config.addinivalue_line("markers", f"{marker}: {description}")


def make_signature(degree: int, **orbits: int) -> List[int]:
    """Build a 73-entry signature; keyword ``o<k>=count`` sets orbit k."""
    signature = [0] * ORBIT_COUNT
    signature[0] = degree
    for name, count in orbits.items():
        signature[int(name[1:])] = count
    return signature


# ============================================================================
# Signature Fixtures
# ============================================================================

@pytest.fixture
def signature_factory():
    """Provide ``make_signature`` to tests that build their own vectors."""
    return make_signature


@pytest.fixture
def path2_signatures() -> List[List[int]]:
    """Signatures of a single edge: both endpoints have degree 1."""
    return [make_signature(1), make_signature(1)]


@pytest.fixture
def path3_signatures() -> List[List[int]]:
    """Signatures of the path a-b-c (ends on orbit 1, middle on orbit 2)."""
    return [
        make_signature(1, o1=1),
        make_signature(2, o2=1),
        make_signature(1, o1=1),
    ]


@pytest.fixture
def triangle_signatures() -> List[List[int]]:
    """Signatures of a triangle: every node has degree 2 and touches orbit 3."""
    return [make_signature(2, o3=1) for _ in range(3)]


# ============================================================================
# Graph Fixtures
# ============================================================================

@pytest.fixture
def path2_adjacency() -> np.ndarray:
    return np.array([[0, 1], [1, 0]])


@pytest.fixture
def path3_adjacency() -> np.ndarray:
    """Path 0-1-2."""
    return np.array(
        [
            [0, 1, 0],
            [1, 0, 1],
            [0, 1, 0],
        ]
    )


@pytest.fixture
def star3_adjacency() -> np.ndarray:
    """Star centered on node 0: edges 0-1 and 0-2."""
    return np.array(
        [
            [0, 1, 1],
            [1, 0, 0],
            [1, 0, 0],
        ]
    )


@pytest.fixture
def identity2() -> np.ndarray:
    return np.eye(2)


@pytest.fixture
def identity3() -> np.ndarray:
    return np.eye(3)


@pytest.fixture
def path2_graphs(path2_adjacency, path2_signatures):
    """Two copies of the single-edge graph, labelled a/b and x/y."""
    g = GraphData.from_sequences(["a", "b"], path2_adjacency, path2_signatures)
    h = GraphData.from_sequences(["x", "y"], path2_adjacency, path2_signatures)
    return g, h


@pytest.fixture
def path3_graph(path3_adjacency, path3_signatures) -> GraphData:
    return GraphData.from_sequences(["a", "b", "c"], path3_adjacency, path3_signatures)


# ============================================================================
# Aligner Fixtures
# ============================================================================

class IdentityAligner:
    """Aligns node i of G with node i of H."""

    name = "identity"

    def align(self, costs: np.ndarray) -> np.ndarray:
        return np.eye(*costs.shape)


class GreedyAligner:
    """Aligns every G node with its cheapest H node, ignoring collisions."""

    name = "greedy"

    def align(self, costs: np.ndarray) -> np.ndarray:
        alignment = np.zeros(costs.shape)
        if costs.size:
            alignment[np.arange(costs.shape[0]), costs.argmin(axis=1)] = 1.0
        return alignment


class FailingAligner:
    name = "failing"

    def align(self, costs: np.ndarray) -> np.ndarray:
        raise RuntimeError("solver crashed")


class WrongShapeAligner:
    name = "wrong-shape"

    def align(self, costs: np.ndarray) -> np.ndarray:
        return np.zeros((costs.shape[0] + 1, costs.shape[1]))


@pytest.fixture
def identity_aligner() -> IdentityAligner:
    return IdentityAligner()


@pytest.fixture
def greedy_aligner() -> GreedyAligner:
    return GreedyAligner()


@pytest.fixture
def failing_aligner() -> FailingAligner:
    return FailingAligner()


@pytest.fixture
def wrong_shape_aligner() -> WrongShapeAligner:
    return WrongShapeAligner()
