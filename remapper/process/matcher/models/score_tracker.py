# Path: remapper/process/matcher/models/score_tracker.py
"""
Score Tracker Model

Per-candidate accumulator used while one specification is evaluated
against one type declaration. A fresh tracker is created for every
candidate; nothing carries over between candidates.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass


class MatchVerdict(str, Enum):
    """Outcome of one criterion (or of a whole candidate)."""
    DISABLED = "disabled"
    MATCH = "match"
    NO_MATCH = "no_match"


class FailureReason(str, Enum):
    """Criterion that first disqualified a candidate."""
    IS_PUBLIC = "is_public"
    IS_ABSTRACT = "is_abstract"
    IS_INTERFACE = "is_interface"
    IS_ENUM = "is_enum"
    IS_NESTED = "is_nested"
    IS_SEALED = "is_sealed"
    IS_DERIVED = "is_derived"
    HAS_ATTRIBUTE = "has_attribute"
    HAS_GENERIC_PARAMETERS = "has_generic_parameters"
    CONSTRUCTOR_PARAMETER_COUNT = "constructor_parameter_count"
    METHOD_COUNT = "method_count"
    HAS_METHODS = "has_methods"
    HAS_FIELDS = "has_fields"
    HAS_PROPERTIES = "has_properties"
    HAS_NESTED_TYPES = "has_nested_types"
    MISSING_METHODS = "missing_methods"
    MISSING_FIELDS = "missing_fields"
    MISSING_PROPERTIES = "missing_properties"
    MISSING_NESTED_TYPES = "missing_nested_types"
    CONFIGURATION_CONFLICT = "configuration_conflict"
    NO_CRITERIA = "no_criteria"


class TrackerState(str, Enum):
    """Lifecycle of a candidate evaluation."""
    PENDING = "pending"
    MATCHED = "matched"
    REJECTED = "rejected"


@dataclass
class ScoreTracker:
    """
    Running score and first failure for one candidate.

    Once a failure is recorded the tracker is rejected and stays that
    way; later criteria may still add score (useful for diagnostics) but
    cannot change the outcome or the retained reason.

    Attributes:
        proposed_new_name: Name the specification would give the type
        candidate_name: Full name of the candidate being scored
        score: Number of satisfied criteria (member hits count singly)
        failure_reason: First disqualifying criterion, if any
        state: Pending until finalized, then matched or rejected
    """
    proposed_new_name: str
    candidate_name: str = ""
    score: int = 0
    failure_reason: Optional[FailureReason] = None
    state: TrackerState = TrackerState.PENDING

    def add_score(self, points: int = 1) -> None:
        """Credit satisfied criteria."""
        self.score += points

    def record_failure(self, reason: FailureReason) -> None:
        """Latch the first failure reason and reject the candidate."""
        if self.failure_reason is None:
            self.failure_reason = reason
        self.state = TrackerState.REJECTED

    def finalize(self, verdict: MatchVerdict) -> MatchVerdict:
        """
        Settle the tracker state from the aggregate verdict.

        Args:
            verdict: Combined verdict for the candidate

        Returns:
            The verdict, downgraded to NO_MATCH if a failure was latched
        """
        if verdict == MatchVerdict.MATCH and self.state != TrackerState.REJECTED:
            self.state = TrackerState.MATCHED
            return MatchVerdict.MATCH

        if self.failure_reason is None:
            self.failure_reason = FailureReason.NO_CRITERIA
        self.state = TrackerState.REJECTED
        return MatchVerdict.NO_MATCH

    @property
    def is_rejected(self) -> bool:
        return self.state == TrackerState.REJECTED


__all__ = [
    'MatchVerdict',
    'FailureReason',
    'TrackerState',
    'ScoreTracker',
]
