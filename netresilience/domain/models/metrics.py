"""
Metric Domain Models

Per-node centrality values and aggregate network statistics. Both are
recomputed from a GraphIndex on every analysis call and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Iterator, List, Any, Mapping

import pandas as pd


METRIC_NAMES = (
    "in_degree",
    "out_degree",
    "degree",
    "betweenness",
    "closeness",
    "pagerank",
    "domirank",
)


@dataclass(frozen=True)
class CentralityMetrics:
    """Centrality values for a single node."""
    in_degree: int = 0
    out_degree: int = 0
    degree: int = 0
    betweenness: float = 0.0
    closeness: float = 0.0
    pagerank: float = 0.0
    domirank: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "degree": self.degree,
            "inDegree": self.in_degree,
            "outDegree": self.out_degree,
            "betweenness": self.betweenness,
            "closeness": self.closeness,
            "pageRank": self.pagerank,
            "domiRank": self.domirank,
        }


class CentralityReport(Mapping[str, CentralityMetrics]):
    """
    Read-only mapping of node id to CentralityMetrics.

    Iteration follows the node order of the GraphIndex the report was
    computed from; that order is also the tiebreak for rankings.
    """

    def __init__(self, metrics: Dict[str, CentralityMetrics]) -> None:
        self._metrics = dict(metrics)

    def __getitem__(self, node_id: str) -> CentralityMetrics:
        return self._metrics[node_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._metrics)

    def __len__(self) -> int:
        return len(self._metrics)

    def __repr__(self) -> str:
        return f"CentralityReport({len(self)} nodes)"

    def get_metric(self, metric: str) -> Dict[str, float]:
        """Return ``{node_id: value}`` for one metric."""
        if metric not in METRIC_NAMES:
            raise KeyError(f"Unknown metric '{metric}'. Valid: {list(METRIC_NAMES)}")
        return {nid: getattr(m, metric) for nid, m in self._metrics.items()}

    def top_nodes(self, metric: str, n: int = 10) -> List[str]:
        """Node ids with the highest ``metric`` values, ties kept in node order."""
        values = self.get_metric(metric)
        ranked = sorted(values, key=lambda nid: -values[nid])
        return ranked[:n]

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {nid: m.to_dict() for nid, m in self._metrics.items()}

    def to_dataframe(self) -> pd.DataFrame:
        """One row per node, one column per metric."""
        df = pd.DataFrame(
            [asdict(m) for m in self._metrics.values()],
            index=pd.Index(list(self._metrics), name="node_id"),
            columns=list(METRIC_NAMES),
        )
        return df


@dataclass(frozen=True)
class NetworkStats:
    """Aggregate statistics of a network snapshot."""
    node_count: int
    edge_count: int
    density: float
    avg_clustering: float
    avg_shortest_path: float
    ngc: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodeCount": self.node_count,
            "edgeCount": self.edge_count,
            "density": self.density,
            "avgClustering": self.avg_clustering,
            "avgShortestPath": self.avg_shortest_path,
            "ngc": self.ngc,
        }
