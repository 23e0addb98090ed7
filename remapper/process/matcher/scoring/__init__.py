# Path: remapper/process/matcher/scoring/__init__.py
"""
Scoring Module

Components for combining verdicts and picking a winner:
- ScoreAggregator: Combines verdicts from multiple evaluators
- Tiebreaker: Resolves ties between equal-scoring candidates
"""

from .aggregator import ScoreAggregator
from .tiebreaker import Tiebreaker, FIRST_IN_DECLARATION_ORDER

__all__ = [
    'ScoreAggregator',
    'Tiebreaker',
    'FIRST_IN_DECLARATION_ORDER',
]
