# Path: remapper/process/matcher/evaluators/derivation_evaluator.py
"""
Derivation Evaluator

Matches the inheritance relation of a candidate: whether it derives from
anything, from a known base type, or from a base type that rules it out.
"""

from .base_evaluator import BaseEvaluator
from ..models.search_params import SearchParams
from ..models.type_declaration import TypeDeclaration
from ..models.score_tracker import ScoreTracker, MatchVerdict, FailureReason


class DerivationEvaluator(BaseEvaluator):
    """
    Evaluates is_derived together with match_base_class / ignore_base_class.

    Rules, in order:
    1. Base type equals ignore_base_class: NO_MATCH (veto)
    2. is_derived=True and the candidate has any base type: MATCH (+1)
    3. Base type equals match_base_class: MATCH (no score)
    4. is_derived=False and the candidate has no base type: MATCH (no score)
    5. Otherwise NO_MATCH

    Example:
        params = SearchParams(is_derived=True, ignore_base_class="MonoBehaviour")
        # A MonoBehaviour subclass is rejected despite is_derived=True
    """

    @property
    def evaluator_type(self) -> str:
        return "is_derived"

    def evaluate(
        self,
        candidate: TypeDeclaration,
        params: SearchParams,
        tracker: ScoreTracker
    ) -> MatchVerdict:
        if params.is_derived is None:
            return MatchVerdict.DISABLED

        base_type = candidate.base_type

        if params.ignore_base_class and base_type == params.ignore_base_class:
            self.logger.debug(
                f"{candidate.full_name}: base type {base_type} is ignored "
                f"for {tracker.proposed_new_name}"
            )
            return self._no_match(tracker, FailureReason.IS_DERIVED)

        if params.is_derived and base_type is not None:
            return self._match(tracker)

        if params.match_base_class and base_type == params.match_base_class:
            return self._match(tracker, points=0)

        if not params.is_derived and base_type is None:
            return self._match(tracker, points=0)

        return self._no_match(tracker, FailureReason.IS_DERIVED)


__all__ = ['DerivationEvaluator']
