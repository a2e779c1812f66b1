"""
netresilience

Structural and resilience analytics for directed, weighted transportation
networks: centrality metrics, topology statistics and ranked node-removal
robustness sweeps.

Usage:
    from netresilience import GraphData, analyze_network

    report = analyze_network(GraphData.from_dict(payload), seed=42)
    report.stats.ngc
    report.robustness["degree"].ngc_values()
"""

import logging

from netresilience.config import AnalysisSettings
from netresilience.domain.config import RemovalStrategy
from netresilience.domain.models import (
    GraphData,
    NodeData,
    EdgeData,
    CentralityMetrics,
    CentralityReport,
    NetworkStats,
    RobustnessPoint,
    RobustnessCurve,
    GraphValidationError,
    InvalidEdgeReference,
    DuplicateNodeError,
    InvalidEdgeWeight,
    UnknownStrategyError,
)
from netresilience.domain.services import (
    GraphIndex,
    CentralityEngine,
    TopologyStats,
    RobustnessSimulator,
)
from netresilience.application.services import (
    NetworkAnalysisService,
    NetworkAnalysisReport,
    analyze_network,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "AnalysisSettings",
    "RemovalStrategy",
    "GraphData", "NodeData", "EdgeData",
    "CentralityMetrics", "CentralityReport", "NetworkStats",
    "RobustnessPoint", "RobustnessCurve",
    "GraphValidationError", "InvalidEdgeReference", "DuplicateNodeError",
    "InvalidEdgeWeight", "UnknownStrategyError",
    "GraphIndex", "CentralityEngine", "TopologyStats", "RobustnessSimulator",
    "NetworkAnalysisService", "NetworkAnalysisReport", "analyze_network",
]
