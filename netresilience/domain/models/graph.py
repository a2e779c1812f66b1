"""
Graph Data Domain Models

Plain value objects describing a transportation network snapshot:
facilities (nodes) and weighted directional links (edges).
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any

from .errors import GraphValidationError


@dataclass
class NodeData:
    """A facility in the network. Only ``id`` is read by the engine."""
    id: str
    name: str = ""
    city: str = ""
    lat: float = 0.0
    lng: float = 0.0
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "city": self.city,
            "lat": self.lat,
            "lng": self.lng,
            **self.properties,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "NodeData":
        known = {"id", "name", "city", "lat", "lng"}
        return NodeData(
            id=str(data["id"]),
            name=data.get("name", ""),
            city=data.get("city", ""),
            lat=float(data.get("lat", 0.0)),
            lng=float(data.get("lng", 0.0)),
            properties={k: v for k, v in data.items() if k not in known},
        )


@dataclass
class EdgeData:
    """A directed, weighted link between two facilities."""
    source_id: str
    target_id: str
    weight: float = 1.0
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source_id,
            "target": self.target_id,
            "weight": self.weight,
            **self.properties,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "EdgeData":
        known = {"source", "target", "source_id", "target_id", "weight"}
        source = data.get("source_id", data.get("source"))
        target = data.get("target_id", data.get("target"))
        if source is None or target is None:
            raise GraphValidationError(f"Edge is missing a source or target: {data!r}")
        return EdgeData(
            source_id=str(source),
            target_id=str(target),
            weight=data.get("weight", 1.0),
            properties={k: v for k, v in data.items() if k not in known},
        )


@dataclass
class GraphData:
    """A complete network snapshot supplied wholesale to the engine."""
    nodes: List[NodeData] = field(default_factory=list)
    edges: List[EdgeData] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "GraphData":
        return GraphData(
            nodes=[NodeData.from_dict(n) for n in data.get("nodes", [])],
            edges=[EdgeData.from_dict(e) for e in data.get("edges", [])],
        )

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]
