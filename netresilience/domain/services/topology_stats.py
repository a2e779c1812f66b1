"""
Topology Statistics

Aggregate statistics of a network snapshot:
    Density, Average clustering coefficient, Average shortest path
    length, Normalized giant component (NGC)

The NGC routine is the connectivity primitive reused by the robustness
simulator on progressively pruned subgraphs.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import networkx as nx

from netresilience.domain.models.metrics import NetworkStats
from netresilience.domain.services.graph_index import GraphIndex


class TopologyStats:
    """Graph-level statistics computed from a GraphIndex."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def compute(self, index: GraphIndex) -> NetworkStats:
        stats = NetworkStats(
            node_count=index.node_count,
            edge_count=index.edge_count,
            density=self.density(index),
            avg_clustering=self.average_clustering(index),
            avg_shortest_path=self.average_shortest_path(index),
            ngc=self.normalized_giant_component(index),
        )
        self._logger.info(
            "Network stats: %d nodes, %d edges, density=%.4f, ngc=%.4f",
            stats.node_count, stats.edge_count, stats.density, stats.ngc,
        )
        return stats

    # ------------------------------------------------------------------
    # Density
    # ------------------------------------------------------------------

    @staticmethod
    def density(index: GraphIndex) -> float:
        """E / (V(V-1)), counting every supplied edge; 0 for V < 2."""
        n = index.node_count
        if n < 2:
            return 0.0
        return index.edge_count / (n * (n - 1))

    # ------------------------------------------------------------------
    # Clustering
    # ------------------------------------------------------------------

    @staticmethod
    def local_clustering(index: GraphIndex) -> Dict[str, float]:
        """
        Per-node clustering over the undirected neighbourhood.

        For a neighbourhood of size k >= 2, the number of ordered
        neighbour pairs (i, j), i != j, joined by an edge i -> j is
        divided by k(k-1). Nodes with k < 2 score 0.
        """
        result: Dict[str, float] = {}
        for pos, nid in enumerate(index.node_ids):
            nbrs = (index.successor_positions(pos) | index.predecessor_positions(pos)) - {pos}
            k = len(nbrs)
            if k < 2:
                result[nid] = 0.0
                continue
            links = 0
            for i in nbrs:
                succ_i = index.successor_positions(i)
                links += len(succ_i & nbrs) - (1 if i in succ_i else 0)
            result[nid] = links / (k * (k - 1))
        return result

    def average_clustering(self, index: GraphIndex) -> float:
        """Sum of local clustering divided by V, low-degree nodes included."""
        n = index.node_count
        if n == 0:
            return 0.0
        return sum(self.local_clustering(index).values()) / n

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @staticmethod
    def average_shortest_path(index: GraphIndex) -> float:
        """
        Mean BFS distance over all reachable ordered pairs.

        Unreachable pairs are skipped rather than counted as infinite;
        returns 0 when no pair is reachable.
        """
        graph = index.to_networkx()
        total = 0
        pairs = 0
        for nid in index.node_ids:
            dist = nx.single_source_shortest_path_length(graph, nid)
            total += sum(dist.values())
            pairs += len(dist) - 1
        return total / pairs if pairs > 0 else 0.0

    # ------------------------------------------------------------------
    # Connectivity
    # ------------------------------------------------------------------

    @staticmethod
    def giant_component_size(index: GraphIndex) -> int:
        """Size of the largest connected component, edge direction ignored."""
        if index.node_count == 0:
            return 0
        return max(len(c) for c in nx.connected_components(index.to_undirected()))

    @classmethod
    def normalized_giant_component(cls, index: GraphIndex, total: Optional[int] = None) -> float:
        """
        Largest undirected component size as a fraction of the node count.

        ``total`` overrides the denominator, which lets a pruned subgraph
        be measured against the size of the network it was cut from.
        Returns 0 for an empty graph.
        """
        denominator = index.node_count if total is None else total
        if denominator <= 0:
            return 0.0
        return cls.giant_component_size(index) / denominator
