"""
Domain Models Package

Pure value objects with no computation of their own.
Re-exports all domain models for convenient imports.
"""

from .graph import GraphData, NodeData, EdgeData
from .metrics import CentralityMetrics, CentralityReport, NetworkStats, METRIC_NAMES
from .robustness import RobustnessPoint, RobustnessCurve
from .errors import (
    GraphValidationError,
    InvalidEdgeReference,
    DuplicateNodeError,
    InvalidEdgeWeight,
    UnknownStrategyError,
)

__all__ = [
    # Graph data
    "GraphData", "NodeData", "EdgeData",
    # Metrics
    "CentralityMetrics", "CentralityReport", "NetworkStats", "METRIC_NAMES",
    # Robustness
    "RobustnessPoint", "RobustnessCurve",
    # Errors
    "GraphValidationError", "InvalidEdgeReference", "DuplicateNodeError",
    "InvalidEdgeWeight", "UnknownStrategyError",
]
