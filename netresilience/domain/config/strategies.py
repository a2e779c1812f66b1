"""
Node Removal Strategies

Ranking strategies used by the robustness simulator to decide which
facilities are removed first:

    random      → uniformly shuffled order (seeded RNG)
    degree      → highest total degree first
    betweenness → highest betweenness first
    pageRank    → highest PageRank first
    domiRank    → highest DomiRank first
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from netresilience.domain.models.errors import UnknownStrategyError


class RemovalStrategy(Enum):
    """Order in which nodes are stripped during a robustness sweep."""
    RANDOM = "random"
    DEGREE = "degree"
    BETWEENNESS = "betweenness"
    PAGERANK = "pageRank"
    DOMIRANK = "domiRank"

    @property
    def metric_name(self) -> Optional[str]:
        """CentralityMetrics attribute ranked by this strategy (None for RANDOM)."""
        return _METRIC_BY_STRATEGY.get(self)

    @property
    def is_targeted(self) -> bool:
        return self is not RemovalStrategy.RANDOM

    @classmethod
    def from_string(cls, value: str) -> RemovalStrategy:
        """Convert a string to RemovalStrategy, supporting common aliases."""
        if isinstance(value, cls):
            return value
        _ALIASES: Dict[str, RemovalStrategy] = {
            "random": cls.RANDOM,
            "rand": cls.RANDOM,
            "degree": cls.DEGREE,
            "hub": cls.DEGREE,
            "highest_degree": cls.DEGREE,
            "betweenness": cls.BETWEENNESS,
            "highest_betweenness": cls.BETWEENNESS,
            "pagerank": cls.PAGERANK,
            "page_rank": cls.PAGERANK,
            "domirank": cls.DOMIRANK,
            "domi_rank": cls.DOMIRANK,
            "dominance": cls.DOMIRANK,
        }
        key = str(value).lower().strip()
        if key in _ALIASES:
            return _ALIASES[key]
        valid = sorted({s.value for s in cls} | set(_ALIASES))
        raise UnknownStrategyError(f"Unknown strategy '{value}'. Valid: {valid}")


_METRIC_BY_STRATEGY: Dict[RemovalStrategy, str] = {
    RemovalStrategy.DEGREE: "degree",
    RemovalStrategy.BETWEENNESS: "betweenness",
    RemovalStrategy.PAGERANK: "pagerank",
    RemovalStrategy.DOMIRANK: "domirank",
}

DEFAULT_STRATEGIES = (
    RemovalStrategy.RANDOM,
    RemovalStrategy.DEGREE,
    RemovalStrategy.BETWEENNESS,
    RemovalStrategy.PAGERANK,
    RemovalStrategy.DOMIRANK,
)
