"""
Graph Index

Immutable adjacency index built once per network snapshot and shared by
every analytics service.

Each node id is assigned a stable integer position (its order in the
node list). Successor and predecessor sets are stored per position, so
the algorithms iterate dense arrays instead of probing maps for missing
keys. A NetworkX DiGraph view is kept alongside for the routines that
delegate to NetworkX (connected components, Brandes betweenness, BFS
distance maps).

Usage:
    index = GraphIndex(graph_data.nodes, graph_data.edges)
    index.successors("LHR")
    index.weight("LHR", "JFK")
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

import networkx as nx
import numpy as np

from netresilience.domain.models.graph import GraphData, NodeData, EdgeData
from netresilience.domain.models.errors import (
    InvalidEdgeReference,
    DuplicateNodeError,
    InvalidEdgeWeight,
)

logger = logging.getLogger(__name__)


class GraphIndex:
    """
    Read-only adjacency, reverse adjacency and weight lookup.

    Construction is O(V + E) and validates the input: an edge that
    references an unknown node id, a repeated node id, or a weight that
    is not a positive finite number is rejected. Repeated edges between
    the same ordered pair are accepted; adjacency is a set, the last
    weight wins, and ``edge_count`` still counts every edge supplied.
    """

    def __init__(self, nodes: Iterable[NodeData], edges: Iterable[EdgeData]) -> None:
        node_ids: List[str] = []
        position: Dict[str, int] = {}
        for node in nodes:
            nid = node.id
            if nid in position:
                raise DuplicateNodeError(nid)
            position[nid] = len(node_ids)
            node_ids.append(nid)

        succ: List[Set[int]] = [set() for _ in node_ids]
        pred: List[Set[int]] = [set() for _ in node_ids]
        weights: Dict[Tuple[str, str], float] = {}
        edge_count = 0

        for edge in edges:
            src, tgt = edge.source_id, edge.target_id
            if src not in position:
                raise InvalidEdgeReference(src, tgt, src)
            if tgt not in position:
                raise InvalidEdgeReference(src, tgt, tgt)
            w = edge.weight
            if isinstance(w, bool) or not isinstance(w, Real) or not math.isfinite(w) or w <= 0:
                raise InvalidEdgeWeight(src, tgt, w)
            succ[position[src]].add(position[tgt])
            pred[position[tgt]].add(position[src])
            weights[(src, tgt)] = float(w)
            edge_count += 1

        self._node_ids: Tuple[str, ...] = tuple(node_ids)
        self._position = position
        self._succ: Tuple[FrozenSet[int], ...] = tuple(frozenset(s) for s in succ)
        self._pred: Tuple[FrozenSet[int], ...] = tuple(frozenset(p) for p in pred)
        self._weights = weights
        self._edge_count = edge_count

        # Deduplicated edge list in deterministic (source, target) position order
        pairs = sorted((u, v) for u in range(len(node_ids)) for v in self._succ[u])
        self._src = np.fromiter((u for u, _ in pairs), dtype=np.intp, count=len(pairs))
        self._tgt = np.fromiter((v for _, v in pairs), dtype=np.intp, count=len(pairs))

        graph = nx.DiGraph()
        graph.add_nodes_from(node_ids)
        graph.add_weighted_edges_from(
            (node_ids[u], node_ids[v], weights[(node_ids[u], node_ids[v])]) for u, v in pairs
        )
        self._graph = nx.freeze(graph)

        logger.debug(
            "Built GraphIndex: %d nodes, %d edges (%d distinct)",
            len(node_ids), edge_count, len(pairs),
        )

    @classmethod
    def from_graph_data(cls, graph_data: GraphData) -> GraphIndex:
        return cls(graph_data.nodes, graph_data.edges)

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    @property
    def node_ids(self) -> Tuple[str, ...]:
        return self._node_ids

    @property
    def node_count(self) -> int:
        return len(self._node_ids)

    @property
    def edge_count(self) -> int:
        """Number of edges supplied, duplicates included."""
        return self._edge_count

    @property
    def distinct_edge_count(self) -> int:
        return len(self._src)

    def __len__(self) -> int:
        return len(self._node_ids)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._position

    def __repr__(self) -> str:
        return f"GraphIndex(nodes={self.node_count}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Lookups by id
    # ------------------------------------------------------------------

    def position(self, node_id: str) -> int:
        """Stable integer position of ``node_id``; KeyError if unknown."""
        return self._position[node_id]

    def successors(self, node_id: str) -> FrozenSet[str]:
        return frozenset(self._node_ids[v] for v in self._succ[self._position[node_id]])

    def predecessors(self, node_id: str) -> FrozenSet[str]:
        return frozenset(self._node_ids[u] for u in self._pred[self._position[node_id]])

    def neighbors(self, node_id: str) -> FrozenSet[str]:
        """Undirected neighbourhood: successors and predecessors, self excluded."""
        pos = self._position[node_id]
        return frozenset(
            self._node_ids[n] for n in (self._succ[pos] | self._pred[pos]) if n != pos
        )

    def weight(self, source_id: str, target_id: str) -> Optional[float]:
        """Weight of the edge ``source -> target``, or None if there is no such edge."""
        return self._weights.get((source_id, target_id))

    def has_edge(self, source_id: str, target_id: str) -> bool:
        return (source_id, target_id) in self._weights

    def in_degree(self, node_id: str) -> int:
        return len(self._pred[self._position[node_id]])

    def out_degree(self, node_id: str) -> int:
        return len(self._succ[self._position[node_id]])

    # ------------------------------------------------------------------
    # Position-level access for the algorithms
    # ------------------------------------------------------------------

    def successor_positions(self, pos: int) -> FrozenSet[int]:
        return self._succ[pos]

    def predecessor_positions(self, pos: int) -> FrozenSet[int]:
        return self._pred[pos]

    def in_degrees(self) -> np.ndarray:
        return np.array([len(p) for p in self._pred], dtype=np.int64)

    def out_degrees(self) -> np.ndarray:
        return np.array([len(s) for s in self._succ], dtype=np.int64)

    def edge_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Source and target positions of every distinct edge."""
        return self._src, self._tgt

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def to_networkx(self) -> nx.DiGraph:
        """Read-only NetworkX view; edges carry a ``weight`` attribute."""
        return self._graph

    def to_undirected(self) -> nx.Graph:
        """Undirected view, edge direction ignored."""
        return self._graph.to_undirected(as_view=True)

    def subgraph(self, keep_ids: Iterable[str]) -> GraphIndex:
        """
        Induced GraphIndex on ``keep_ids``.

        Node order follows this index; edges are kept when both
        endpoints survive. Unknown ids raise KeyError.
        """
        keep: Set[int] = {self._position[nid] for nid in keep_ids}
        nodes = [NodeData(id=self._node_ids[p]) for p in sorted(keep)]
        edges = [
            EdgeData(self._node_ids[u], self._node_ids[v],
                     self._weights[(self._node_ids[u], self._node_ids[v])])
            for u, v in zip(self._src.tolist(), self._tgt.tolist())
            if u in keep and v in keep
        ]
        return GraphIndex(nodes, edges)
