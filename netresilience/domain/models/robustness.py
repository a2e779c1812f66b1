"""
Robustness Domain Models

Decay points recorded while nodes are progressively removed from a
network, and the curve that collects them for one removal strategy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional

import pandas as pd


@dataclass(frozen=True)
class RobustnessPoint:
    """Connectivity after removing ``removal_ratio`` of the nodes."""
    removal_ratio: float
    ngc: float
    strategy: str
    removed_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "removalRatio": self.removal_ratio,
            "ngc": self.ngc,
            "strategy": self.strategy,
            "removedCount": self.removed_count,
        }


@dataclass
class RobustnessCurve:
    """Ordered decay points of one strategy, ratios non-decreasing."""
    strategy: str
    points: List[RobustnessPoint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def ratios(self) -> List[float]:
        return [p.removal_ratio for p in self.points]

    def ngc_values(self) -> List[float]:
        return [p.ngc for p in self.points]

    def collapse_ratio(self, threshold: float = 0.5) -> Optional[float]:
        """First removal ratio at which NGC drops to ``threshold`` or below."""
        for point in self.points:
            if point.ngc <= threshold:
                return point.removal_ratio
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy,
            "points": [p.to_dict() for p in self.points],
        }

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "removal_ratio": self.ratios(),
                "ngc": self.ngc_values(),
                "removed_count": [p.removed_count for p in self.points],
                "strategy": [p.strategy for p in self.points],
            }
        )
