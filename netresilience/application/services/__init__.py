from .analysis_service import (
    NetworkAnalysisService,
    NetworkAnalysisReport,
    analyze_network,
)

__all__ = [
    "NetworkAnalysisService",
    "NetworkAnalysisReport",
    "analyze_network",
]
