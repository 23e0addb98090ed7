# Path: remapper/process/matcher/evaluators/base_evaluator.py
"""
Base Evaluator

Abstract base class for all structural predicates.
Defines the interface that all evaluators must implement.
"""

from abc import ABC, abstractmethod

from core.logger.ipo_logging import get_process_logger

from ..models.search_params import SearchParams
from ..models.type_declaration import TypeDeclaration
from ..models.score_tracker import ScoreTracker, MatchVerdict, FailureReason


class BaseEvaluator(ABC):
    """
    Abstract base class for structural predicates.

    Each evaluator checks one criterion of a specification against one
    candidate and follows the same contract:
    - criterion not requested: return DISABLED, tracker untouched
    - criterion satisfied: credit the tracker, return MATCH
    - criterion violated: latch a failure reason, return NO_MATCH

    Subclasses must implement evaluator_type and evaluate().

    Example:
        evaluator = SealedEvaluator()
        verdict = evaluator.evaluate(candidate, params, tracker)
    """

    def __init__(self):
        """Initialize evaluator."""
        self.logger = get_process_logger(f'matcher.evaluators.{self.evaluator_type}')

    @property
    @abstractmethod
    def evaluator_type(self) -> str:
        """Return the type name of this evaluator."""
        pass

    @abstractmethod
    def evaluate(
        self,
        candidate: TypeDeclaration,
        params: SearchParams,
        tracker: ScoreTracker
    ) -> MatchVerdict:
        """
        Evaluate one criterion against a candidate.

        Args:
            candidate: Type declaration being scored
            params: Search parameters of the specification
            tracker: Score tracker for this candidate

        Returns:
            MatchVerdict for this criterion
        """
        pass

    def _match(self, tracker: ScoreTracker, points: int = 1) -> MatchVerdict:
        """Credit the tracker and report a match."""
        if points:
            tracker.add_score(points)
        return MatchVerdict.MATCH

    def _no_match(self, tracker: ScoreTracker, reason: FailureReason) -> MatchVerdict:
        """Latch the failure reason and report a miss."""
        tracker.record_failure(reason)
        return MatchVerdict.NO_MATCH


__all__ = ['BaseEvaluator']
