"""
Analysis Settings

Numeric constants for the analytics engine, grouped in one place so the
centrality, topology and robustness services share a single source.
"""

import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class AnalysisSettings:
    """Tunable parameters of the analytics engine."""

    # PageRank
    pagerank_damping: float = 0.85
    pagerank_iterations: int = 50

    # DomiRank
    domirank_alpha: float = 0.1
    domirank_beta: float = 0.1
    domirank_theta: float = 1.0
    domirank_iterations: int = 100

    # Robustness sweep
    robustness_steps: int = 20
    ngc_relative_to_remaining: bool = True
    seed: Optional[int] = None

    # Reporting
    hub_count: int = 10

    def validate(self) -> "AnalysisSettings":
        """Raise ValueError if any parameter is out of range."""
        if not 0.0 <= self.pagerank_damping <= 1.0:
            raise ValueError(f"pagerank_damping must be in [0, 1], got {self.pagerank_damping}")
        if self.pagerank_iterations < 0:
            raise ValueError(f"pagerank_iterations must be >= 0, got {self.pagerank_iterations}")
        if self.domirank_iterations < 0:
            raise ValueError(f"domirank_iterations must be >= 0, got {self.domirank_iterations}")
        if self.robustness_steps < 1:
            raise ValueError(f"robustness_steps must be >= 1, got {self.robustness_steps}")
        if self.hub_count < 0:
            raise ValueError(f"hub_count must be >= 0, got {self.hub_count}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_env(cls) -> "AnalysisSettings":
        """Load settings from NETRES_* environment variables."""
        seed = os.getenv("NETRES_SEED")
        return cls(
            pagerank_damping=float(os.getenv("NETRES_PAGERANK_DAMPING", "0.85")),
            pagerank_iterations=int(os.getenv("NETRES_PAGERANK_ITERATIONS", "50")),
            domirank_alpha=float(os.getenv("NETRES_DOMIRANK_ALPHA", "0.1")),
            domirank_beta=float(os.getenv("NETRES_DOMIRANK_BETA", "0.1")),
            domirank_theta=float(os.getenv("NETRES_DOMIRANK_THETA", "1.0")),
            domirank_iterations=int(os.getenv("NETRES_DOMIRANK_ITERATIONS", "100")),
            robustness_steps=int(os.getenv("NETRES_ROBUSTNESS_STEPS", "20")),
            ngc_relative_to_remaining=os.getenv(
                "NETRES_NGC_RELATIVE_TO_REMAINING", "true"
            ).lower() in ("1", "true", "yes"),
            seed=int(seed) if seed else None,
            hub_count=int(os.getenv("NETRES_HUB_COUNT", "10")),
        ).validate()
