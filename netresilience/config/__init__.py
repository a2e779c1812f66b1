"""
Configuration Package

Engine parameters and their environment overrides.
"""

from .settings import AnalysisSettings

__all__ = [
    "AnalysisSettings",
]
