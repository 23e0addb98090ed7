# Path: remapper/process/matcher/evaluators/visibility_evaluator.py
"""
Visibility Evaluator

Matches the externally-visible / not-externally-visible request against
the candidate's visibility attribute.
"""

from .base_evaluator import BaseEvaluator
from ..models.search_params import SearchParams
from ..models.type_declaration import TypeDeclaration
from ..models.score_tracker import ScoreTracker, MatchVerdict, FailureReason


class PublicEvaluator(BaseEvaluator):
    """
    Evaluates the is_public criterion.

    The check is asymmetric:
    - is_public=True matches only top-level public types
    - is_public=False matches only top-level not-public types

    Nested visibilities satisfy neither request, so a nested private or
    family type is never picked up by "is_public: false".
    """

    @property
    def evaluator_type(self) -> str:
        return "is_public"

    def evaluate(
        self,
        candidate: TypeDeclaration,
        params: SearchParams,
        tracker: ScoreTracker
    ) -> MatchVerdict:
        if params.is_public is None:
            return MatchVerdict.DISABLED

        if params.is_public is False and candidate.is_not_public:
            return self._match(tracker)

        if params.is_public is True and candidate.is_public:
            return self._match(tracker)

        return self._no_match(tracker, FailureReason.IS_PUBLIC)


__all__ = ['PublicEvaluator']
