"""
Domain Services Package

Pure analytics over an immutable network snapshot.
These services contain the algorithms without any I/O.
"""

from .graph_index import GraphIndex
from .centrality_engine import CentralityEngine
from .topology_stats import TopologyStats
from .robustness_simulator import RobustnessSimulator

__all__ = [
    "GraphIndex",
    "CentralityEngine",
    "TopologyStats",
    "RobustnessSimulator",
]
