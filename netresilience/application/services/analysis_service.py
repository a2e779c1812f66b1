"""
Analysis Service

Application service bundling the analytics engine behind one call.
Runs the pipeline on a single network snapshot:

    1. Index          → GraphIndex built (and validated) once
    2. Centrality     → per-node metrics (degree, betweenness, closeness,
                        PageRank, DomiRank)
    3. Topology       → density, clustering, path length, NGC
    4. Robustness     → one decay curve per removal strategy
    5. Hub ranking    → top facilities by DomiRank

The returned report is a plain value object with ``to_dict()`` for the
presentation layer.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from netresilience.config.settings import AnalysisSettings
from netresilience.domain.config.strategies import RemovalStrategy
from netresilience.domain.models.graph import GraphData
from netresilience.domain.models.metrics import CentralityReport, NetworkStats
from netresilience.domain.models.robustness import RobustnessCurve
from netresilience.domain.services import (
    GraphIndex,
    CentralityEngine,
    TopologyStats,
    RobustnessSimulator,
)


@dataclass
class NetworkAnalysisReport:
    """Everything computed for one network snapshot."""
    metrics: CentralityReport
    stats: NetworkStats
    robustness: Dict[str, RobustnessCurve] = field(default_factory=dict)
    hubs: List[str] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "stats": self.stats.to_dict(),
            "metrics": self.metrics.to_dict(),
            "hubs": self.hubs,
            "robustness": {name: c.to_dict() for name, c in self.robustness.items()},
        }


class NetworkAnalysisService:
    """
    Façade over GraphIndex, CentralityEngine, TopologyStats and
    RobustnessSimulator sharing one settings object and random source.
    """

    def __init__(
        self,
        settings: Optional[AnalysisSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = (settings or AnalysisSettings()).validate()
        self.engine = CentralityEngine(self.settings)
        self.topology = TopologyStats()
        self.simulator = RobustnessSimulator(self.engine, self.settings, rng)
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def analyze(
        self,
        graph: Union[GraphData, GraphIndex],
        include_robustness: bool = True,
        strategies: Optional[Iterable[Union[RemovalStrategy, str]]] = None,
    ) -> NetworkAnalysisReport:
        """
        Run the full pipeline on ``graph``.

        Raises:
            GraphValidationError: if ``graph`` is GraphData with an edge
                to an unknown node, a repeated node id or a bad weight.
        """
        index = graph if isinstance(graph, GraphIndex) else GraphIndex.from_graph_data(graph)
        self._logger.info(
            "Analyzing network: %d nodes, %d edges", index.node_count, index.edge_count,
        )

        metrics = self.engine.compute(index)
        stats = self.topology.compute(index)

        robustness: Dict[str, RobustnessCurve] = {}
        if include_robustness:
            robustness = self.simulator.simulate_all(index, strategies, metrics)

        return NetworkAnalysisReport(
            metrics=metrics,
            stats=stats,
            robustness=robustness,
            hubs=self.hub_ranking(metrics),
        )

    def hub_ranking(
        self,
        metrics: CentralityReport,
        metric: str = "domirank",
        n: Optional[int] = None,
    ) -> List[str]:
        """Top ``n`` node ids by ``metric`` (DomiRank by default)."""
        return metrics.top_nodes(metric, self.settings.hub_count if n is None else n)


def analyze_network(
    graph_data: Union[GraphData, Dict[str, Any]],
    settings: Optional[AnalysisSettings] = None,
    seed: Optional[int] = None,
    include_robustness: bool = True,
) -> NetworkAnalysisReport:
    """
    Convenience wrapper: analyse a GraphData or ``{"nodes", "edges"}`` dict.
    """
    if isinstance(graph_data, dict):
        graph_data = GraphData.from_dict(graph_data)
    rng = random.Random(seed) if seed is not None else None
    service = NetworkAnalysisService(settings, rng)
    return service.analyze(graph_data, include_robustness=include_robustness)
