# Path: remapper/process/matcher/evaluators/constructor_evaluator.py
"""
Constructor Evaluator

Matches a candidate by the parameter count of its instance constructors.
"""

from .base_evaluator import BaseEvaluator
from ..models.search_params import SearchParams
from ..models.type_declaration import TypeDeclaration
from ..models.score_tracker import ScoreTracker, MatchVerdict, FailureReason


class ConstructorEvaluator(BaseEvaluator):
    """
    Evaluates constructor_parameter_count.

    Matches if any instance constructor takes exactly the requested
    number of parameters. The type initializer is never considered.
    """

    @property
    def evaluator_type(self) -> str:
        return "constructor_parameter_count"

    def evaluate(
        self,
        candidate: TypeDeclaration,
        params: SearchParams,
        tracker: ScoreTracker
    ) -> MatchVerdict:
        expected = params.constructor_parameter_count
        if expected is None:
            return MatchVerdict.DISABLED

        if any(c.parameter_count == expected for c in candidate.constructors):
            return self._match(tracker)

        return self._no_match(tracker, FailureReason.CONSTRUCTOR_PARAMETER_COUNT)


__all__ = ['ConstructorEvaluator']
