"""
Domain Configuration Package

Canonical enumerations shared by the domain services.
"""

from .strategies import RemovalStrategy, DEFAULT_STRATEGIES

__all__ = [
    "RemovalStrategy",
    "DEFAULT_STRATEGIES",
]
