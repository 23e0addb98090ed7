# Path: remapper/process/matcher/evaluators/flag_evaluator.py
"""
Flag Evaluators

Evaluate boolean specification flags by direct equality against the
candidate's corresponding attribute (sealed, enum, nested, interface,
generic, attributed, abstract).
"""

from typing import Optional

from .base_evaluator import BaseEvaluator
from ..models.search_params import SearchParams
from ..models.type_declaration import TypeDeclaration
from ..models.score_tracker import ScoreTracker, MatchVerdict, FailureReason


class FlagEvaluator(BaseEvaluator):
    """
    Equality check between one tri-state flag and one candidate attribute.

    Subclasses declare which specification field to read, which
    candidate attribute to compare, and the failure reason to latch.
    """

    param_field: str = ""
    candidate_attribute: str = ""
    failure_reason: FailureReason = FailureReason.NO_CRITERIA

    @property
    def evaluator_type(self) -> str:
        return self.param_field

    def evaluate(
        self,
        candidate: TypeDeclaration,
        params: SearchParams,
        tracker: ScoreTracker
    ) -> MatchVerdict:
        """
        Compare the requested flag with the candidate attribute.

        Args:
            candidate: Type declaration being scored
            params: Search parameters of the specification
            tracker: Score tracker for this candidate

        Returns:
            DISABLED if the flag is unset, else MATCH or NO_MATCH
        """
        requested: Optional[bool] = getattr(params, self.param_field)
        if requested is None:
            return MatchVerdict.DISABLED

        if getattr(candidate, self.candidate_attribute) == requested:
            return self._match(tracker)

        return self._no_match(tracker, self.failure_reason)


class EnumEvaluator(FlagEvaluator):
    param_field = "is_enum"
    candidate_attribute = "is_enum"
    failure_reason = FailureReason.IS_ENUM


class NestedEvaluator(FlagEvaluator):
    param_field = "is_nested"
    candidate_attribute = "is_nested"
    failure_reason = FailureReason.IS_NESTED


class SealedEvaluator(FlagEvaluator):
    param_field = "is_sealed"
    candidate_attribute = "is_sealed"
    failure_reason = FailureReason.IS_SEALED


class InterfaceEvaluator(FlagEvaluator):
    param_field = "is_interface"
    candidate_attribute = "is_interface"
    failure_reason = FailureReason.IS_INTERFACE


class GenericParametersEvaluator(FlagEvaluator):
    param_field = "has_generic_parameters"
    candidate_attribute = "has_generic_parameters"
    failure_reason = FailureReason.HAS_GENERIC_PARAMETERS


class AttributeEvaluator(FlagEvaluator):
    param_field = "has_attribute"
    candidate_attribute = "has_custom_attributes"
    failure_reason = FailureReason.HAS_ATTRIBUTE


class AbstractEvaluator(FlagEvaluator):
    """
    Abstractness check.

    Interfaces and types with a static initializer are never eligible:
    interfaces are abstract by construction, and static utility types
    are emitted abstract+sealed and would otherwise pass as abstract.
    """

    param_field = "is_abstract"
    candidate_attribute = "is_abstract"
    failure_reason = FailureReason.IS_ABSTRACT

    def evaluate(
        self,
        candidate: TypeDeclaration,
        params: SearchParams,
        tracker: ScoreTracker
    ) -> MatchVerdict:
        if params.is_abstract is None:
            return MatchVerdict.DISABLED

        if candidate.is_interface or candidate.has_static_constructor:
            return self._no_match(tracker, self.failure_reason)

        return super().evaluate(candidate, params, tracker)


__all__ = [
    'FlagEvaluator',
    'EnumEvaluator',
    'NestedEvaluator',
    'SealedEvaluator',
    'InterfaceEvaluator',
    'GenericParametersEvaluator',
    'AttributeEvaluator',
    'AbstractEvaluator',
]
