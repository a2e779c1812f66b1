"""
Domain Errors

Validation failures raised while building a graph snapshot or parsing
a removal strategy. Degenerate graphs (empty, single node) are not
errors; the services return zero sentinels for them instead.
"""

from typing import Optional


class GraphValidationError(ValueError):
    """Base class for malformed graph input."""


class InvalidEdgeReference(GraphValidationError):
    """An edge points at a node id that is not in the node list."""

    def __init__(self, source_id: str, target_id: str, missing: str) -> None:
        self.source_id = source_id
        self.target_id = target_id
        self.missing = missing
        super().__init__(
            f"Edge {source_id!r} -> {target_id!r} references unknown node {missing!r}"
        )


class DuplicateNodeError(GraphValidationError):
    """Two nodes in the node list share the same id."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Duplicate node id {node_id!r}")


class InvalidEdgeWeight(GraphValidationError):
    """Edge weight is not a positive finite number."""

    def __init__(self, source_id: str, target_id: str, weight: Optional[float]) -> None:
        self.source_id = source_id
        self.target_id = target_id
        self.weight = weight
        super().__init__(
            f"Edge {source_id!r} -> {target_id!r} has invalid weight {weight!r}"
        )


class UnknownStrategyError(ValueError):
    """A removal strategy name could not be parsed."""
