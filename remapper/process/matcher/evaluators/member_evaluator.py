# Path: remapper/process/matcher/evaluators/member_evaluator.py
"""
Member Evaluators

Match candidates by the names of their members. Fields, properties and
nested types share one algorithm; methods add count-based sub-checks.

Member-set algorithm:
1. Wildcard: ignore list holds "*" -> the candidate must have no members
   of that kind (MATCH +1 if it has none, NO_MATCH otherwise)
2. Blacklist: any member named in the ignore list vetoes the candidate
3. Whitelist: +1 per member named in the match list; at least one hit
   is required

Whitelisting is existence-based: naming five members matches a candidate
that carries only one of them.
"""

from constants import WILDCARD

from .base_evaluator import BaseEvaluator
from ..models.search_params import SearchParams
from ..models.type_declaration import TypeDeclaration
from ..models.score_tracker import ScoreTracker, MatchVerdict, FailureReason
from ..scoring.aggregator import ScoreAggregator


class MemberSetEvaluator(BaseEvaluator):
    """
    Name-based match/ignore evaluation for one member kind.

    Subclasses declare the member kind, the specification lists to read,
    the candidate attribute holding member names, and the failure
    reasons for a forbidden member and for a missing one.
    """

    member_kind: str = ""
    match_field: str = ""
    ignore_field: str = ""
    names_attribute: str = ""
    has_reason: FailureReason = FailureReason.NO_CRITERIA
    missing_reason: FailureReason = FailureReason.NO_CRITERIA

    @property
    def evaluator_type(self) -> str:
        return self.member_kind

    def evaluate(
        self,
        candidate: TypeDeclaration,
        params: SearchParams,
        tracker: ScoreTracker
    ) -> MatchVerdict:
        """
        Evaluate the member lists against the candidate's member names.

        Args:
            candidate: Type declaration being scored
            params: Search parameters of the specification
            tracker: Score tracker for this candidate

        Returns:
            DISABLED if both lists are empty, else MATCH or NO_MATCH
        """
        wanted: tuple[str, ...] = getattr(params, self.match_field)
        ignored: tuple[str, ...] = getattr(params, self.ignore_field)

        if not wanted and not ignored:
            return MatchVerdict.DISABLED

        names: list[str] = getattr(candidate, self.names_attribute)

        self.logger.debug(
            f"{tracker.proposed_new_name}: checking {self.member_kind} "
            f"of {candidate.full_name}"
        )

        if WILDCARD in ignored:
            if not names:
                return self._match(tracker)
            return self._no_match(tracker, self.has_reason)

        for name in names:
            if name in ignored:
                return self._no_match(tracker, self.has_reason)

        hits = sum(1 for name in names if name in wanted)
        if hits > 0:
            return self._match(tracker, points=hits)

        return self._no_match(tracker, self.missing_reason)


class FieldEvaluator(MemberSetEvaluator):
    member_kind = "fields"
    match_field = "match_fields"
    ignore_field = "ignore_fields"
    names_attribute = "field_names"
    has_reason = FailureReason.HAS_FIELDS
    missing_reason = FailureReason.MISSING_FIELDS


class PropertyEvaluator(MemberSetEvaluator):
    member_kind = "properties"
    match_field = "match_properties"
    ignore_field = "ignore_properties"
    names_attribute = "property_names"
    has_reason = FailureReason.HAS_PROPERTIES
    missing_reason = FailureReason.MISSING_PROPERTIES


class NestedTypeEvaluator(MemberSetEvaluator):
    member_kind = "nested_types"
    match_field = "match_nested_types"
    ignore_field = "ignore_nested_types"
    names_attribute = "nested_type_names"
    has_reason = FailureReason.HAS_NESTED_TYPES
    missing_reason = FailureReason.MISSING_NESTED_TYPES


class MethodEvaluator(BaseEvaluator):
    """
    Evaluates methods through independent sub-checks.

    Sub-checks (each enabled on its own, merged like top-level criteria):
    - with methods: match_methods non-empty, +1 per named method present
    - without methods: ignore_methods non-empty, veto on a named method
    - no methods: ignore_methods holds "*", the candidate has no methods (+1)
    - method count: method_count set, exact count of methods (+1)

    Constructors are not methods for any of these checks.

    A method whitelist combined with the "*" wildcard is a configuration
    conflict: it is logged and the candidate is rejected.
    """

    def __init__(self):
        super().__init__()
        self.aggregator = ScoreAggregator()

    @property
    def evaluator_type(self) -> str:
        return "methods"

    def evaluate(
        self,
        candidate: TypeDeclaration,
        params: SearchParams,
        tracker: ScoreTracker
    ) -> MatchVerdict:
        """
        Run every enabled method sub-check and merge the results.

        Args:
            candidate: Type declaration being scored
            params: Search parameters of the specification
            tracker: Score tracker for this candidate

        Returns:
            DISABLED if no sub-check is enabled, else MATCH or NO_MATCH
        """
        if params.match_methods and params.ignores_all_methods:
            self.logger.error(
                f"Cannot both ignore all methods and search for a method "
                f"on {tracker.proposed_new_name}"
            )
            return self._no_match(tracker, FailureReason.CONFIGURATION_CONFLICT)

        names = candidate.method_names
        verdicts = []

        if params.match_methods:
            self.logger.debug(f"{tracker.proposed_new_name}: type with methods")
            verdicts.append(self._with_methods(names, params, tracker))

        if params.ignore_methods:
            self.logger.debug(f"{tracker.proposed_new_name}: type without methods")
            verdicts.append(self._without_methods(names, params, tracker))

        if params.ignores_all_methods:
            self.logger.debug(f"{tracker.proposed_new_name}: type with no methods")
            verdicts.append(self._no_methods(names, tracker))

        if params.method_count is not None:
            self.logger.debug(f"{tracker.proposed_new_name}: type by number of methods")
            verdicts.append(self._method_count(names, params, tracker))

        return self.aggregator.merge_sub_checks(verdicts)

    def _with_methods(
        self,
        names: list[str],
        params: SearchParams,
        tracker: ScoreTracker
    ) -> MatchVerdict:
        hits = sum(1 for name in names if name in params.match_methods)
        if hits > 0:
            return self._match(tracker, points=hits)
        return self._no_match(tracker, FailureReason.MISSING_METHODS)

    def _without_methods(
        self,
        names: list[str],
        params: SearchParams,
        tracker: ScoreTracker
    ) -> MatchVerdict:
        for name in names:
            if name in params.ignore_methods:
                return self._no_match(tracker, FailureReason.HAS_METHODS)
        return self._match(tracker, points=0)

    def _no_methods(self, names: list[str], tracker: ScoreTracker) -> MatchVerdict:
        if not names:
            return self._match(tracker)
        return self._no_match(tracker, FailureReason.HAS_METHODS)

    def _method_count(
        self,
        names: list[str],
        params: SearchParams,
        tracker: ScoreTracker
    ) -> MatchVerdict:
        if len(names) == params.method_count:
            return self._match(tracker)
        return self._no_match(tracker, FailureReason.METHOD_COUNT)


__all__ = [
    'MemberSetEvaluator',
    'FieldEvaluator',
    'PropertyEvaluator',
    'NestedTypeEvaluator',
    'MethodEvaluator',
]
