# Path: remapper/process/matcher/engine/__init__.py
"""
Matching Engine Core

- MatchingCoordinator: Main orchestrator
"""

from .coordinator import MatchingCoordinator

__all__ = ['MatchingCoordinator']
