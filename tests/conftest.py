"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the netresilience test suite.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "centrality"    # Run only centrality tests
    pytest tests/ --quick            # Skip slow tests
"""

import random
import sys
from pathlib import Path
from typing import Iterable, Tuple

import networkx as nx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from netresilience.domain.models import GraphData, NodeData, EdgeData
from netresilience.domain.services import GraphIndex


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Helpers
# =============================================================================

def make_graph(node_ids: Iterable[str], edges: Iterable[Tuple[str, str]], weight: float = 1.0) -> GraphData:
    """GraphData from plain ids and (source, target) pairs."""
    return GraphData(
        nodes=[NodeData(id=nid, name=nid) for nid in node_ids],
        edges=[EdgeData(src, tgt, weight) for src, tgt in edges],
    )


def make_index(node_ids: Iterable[str], edges: Iterable[Tuple[str, str]]) -> GraphIndex:
    return GraphIndex.from_graph_data(make_graph(node_ids, edges))


def star_edges(leaves: int) -> Tuple[list, list]:
    ids = ["HUB"] + [f"L{i}" for i in range(leaves)]
    return ids, [("HUB", leaf) for leaf in ids[1:]]


# =============================================================================
# Graph Fixtures
# =============================================================================

@pytest.fixture
def cycle_index() -> GraphIndex:
    """Directed 4-cycle A->B->C->D->A."""
    return make_index("ABCD", [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")])


@pytest.fixture
def mutual_pairs_index() -> GraphIndex:
    """Two disjoint mutual pairs A<->B, C<->D."""
    return make_index("ABCD", [("A", "B"), ("B", "A"), ("C", "D"), ("D", "C")])


@pytest.fixture
def path_index() -> GraphIndex:
    """Directed path A->B->C."""
    return make_index("ABC", [("A", "B"), ("B", "C")])


@pytest.fixture
def path_with_isolate_index() -> GraphIndex:
    """Directed path A->B->C plus an isolated node Z."""
    return make_index("ABCZ", [("A", "B"), ("B", "C")])


@pytest.fixture
def star_index() -> GraphIndex:
    """Hub with 19 outbound spokes (20 nodes)."""
    ids, edges = star_edges(19)
    return make_index(ids, edges)


@pytest.fixture
def empty_index() -> GraphIndex:
    return GraphIndex([], [])


@pytest.fixture
def single_index() -> GraphIndex:
    return make_index(["solo"], [])


@pytest.fixture
def random_graph_data() -> GraphData:
    """Seeded directed G(n, p) graph, 40 nodes, no duplicate edges."""
    g = nx.gnp_random_graph(40, 0.08, seed=42, directed=True)
    rng = random.Random(42)
    return GraphData(
        nodes=[NodeData(id=f"N{n}") for n in g.nodes],
        edges=[EdgeData(f"N{u}", f"N{v}", round(rng.uniform(1, 10), 2)) for u, v in g.edges],
    )


@pytest.fixture
def random_index(random_graph_data) -> GraphIndex:
    return GraphIndex.from_graph_data(random_graph_data)
