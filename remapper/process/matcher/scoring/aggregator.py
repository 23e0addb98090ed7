# Path: remapper/process/matcher/scoring/aggregator.py
"""
Score Aggregator

Combines the verdicts of the evaluators run for one candidate into a
single verdict.
"""

from typing import Iterable

from core.logger.ipo_logging import get_process_logger

from ..models.score_tracker import MatchVerdict


class ScoreAggregator:
    """
    Aggregates per-criterion verdicts.

    DISABLED verdicts are ignored. Any NO_MATCH vetoes the candidate.
    What happens when nothing is enabled depends on the level:
    - aggregate(): top-level candidate verdict, nothing enabled is NO_MATCH
    - merge_sub_checks(): one evaluator's sub-checks, nothing enabled is
      DISABLED so the evaluator simply drops out of the top level

    Example:
        aggregator = ScoreAggregator()
        verdict = aggregator.aggregate([
            MatchVerdict.MATCH,
            MatchVerdict.DISABLED,
            MatchVerdict.MATCH,
        ])
        # verdict == MatchVerdict.MATCH
    """

    def __init__(self):
        """Initialize score aggregator."""
        self.logger = get_process_logger('matcher.scoring.aggregator')

    def aggregate(self, verdicts: Iterable[MatchVerdict]) -> MatchVerdict:
        """
        Combine all criterion verdicts for one candidate.

        Args:
            verdicts: Verdicts in evaluator order

        Returns:
            MATCH if every enabled criterion matched, else NO_MATCH
        """
        merged = self.merge_sub_checks(verdicts)
        if merged == MatchVerdict.DISABLED:
            return MatchVerdict.NO_MATCH
        return merged

    def merge_sub_checks(self, verdicts: Iterable[MatchVerdict]) -> MatchVerdict:
        """
        Combine the sub-checks of a single evaluator.

        Args:
            verdicts: Sub-check verdicts

        Returns:
            DISABLED if no sub-check ran, NO_MATCH if any failed, else MATCH
        """
        enabled = [v for v in verdicts if v != MatchVerdict.DISABLED]

        if not enabled:
            return MatchVerdict.DISABLED

        if MatchVerdict.NO_MATCH in enabled:
            return MatchVerdict.NO_MATCH

        return MatchVerdict.MATCH

    def count_enabled(self, verdicts: Iterable[MatchVerdict]) -> int:
        """Count criteria that actually took part in the decision."""
        return sum(1 for v in verdicts if v != MatchVerdict.DISABLED)


__all__ = ['ScoreAggregator']
