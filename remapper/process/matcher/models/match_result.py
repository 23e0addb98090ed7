# Path: remapper/process/matcher/models/match_result.py
"""
Match Result Models

Models representing the results of matching one specification against
every type declaration of a module.
"""

from enum import Enum
from typing import Optional
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone


class MatchStatus(str, Enum):
    """Status of a matching attempt."""
    MATCHED = "matched"
    NO_MATCH = "no_match"


@dataclass
class ScoredCandidate:
    """
    A candidate whose aggregate verdict was a match.

    Attributes:
        type_name: Full name of the matched declaration
        score: Final tracker score
        position: Index of the declaration in candidate order
    """
    type_name: str
    score: int
    position: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'type_name': self.type_name,
            'score': self.score,
            'position': self.position,
        }


@dataclass
class MatchResult:
    """
    Result of re-identifying one specification in a module.

    Attributes:
        new_type_name: Name proposed by the specification
        status: Matched or no match
        matched_type: Full name of the winning declaration (if any)
        score: Winning score
        original_type_name: Name recorded in the prior build (if known)
        tied_candidates: Other candidates that reached the winning score
        alternatives: Runner-up candidates, best first
        failure_reasons: Count of first failure reasons across candidates
        candidates_evaluated: Number of declarations scanned
        tiebreaker_used: Which tiebreaker resolved the winner
        warnings: Warnings generated during matching
        matched_at: Timestamp of the match
    """
    new_type_name: str
    status: MatchStatus
    matched_type: Optional[str] = None
    score: int = 0
    original_type_name: Optional[str] = None
    tied_candidates: list[str] = field(default_factory=list)
    alternatives: list[ScoredCandidate] = field(default_factory=list)
    failure_reasons: dict[str, int] = field(default_factory=dict)
    candidates_evaluated: int = 0
    tiebreaker_used: Optional[str] = None
    warnings: list[str] = field(default_factory=list)
    matched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def no_match(
        cls,
        new_type_name: str,
        failure_reasons: Optional[Counter] = None,
        candidates_evaluated: int = 0,
        original_type_name: Optional[str] = None,
        reason: Optional[str] = None
    ) -> 'MatchResult':
        """
        Create a result for when no candidate matched.

        Args:
            new_type_name: Specification that failed to match
            failure_reasons: Histogram of first failure reasons
            candidates_evaluated: Number of declarations scanned
            original_type_name: Prior-build name, if known
            reason: Optional summary of why nothing matched

        Returns:
            MatchResult with NO_MATCH status
        """
        result = cls(
            new_type_name=new_type_name,
            status=MatchStatus.NO_MATCH,
            original_type_name=original_type_name,
            failure_reasons=dict(failure_reasons or {}),
            candidates_evaluated=candidates_evaluated,
        )
        if reason:
            result.warnings.append(reason)
        return result

    @classmethod
    def from_candidate(
        cls,
        new_type_name: str,
        winner: ScoredCandidate,
        tied_candidates: Optional[list[str]] = None,
        alternatives: Optional[list[ScoredCandidate]] = None,
        tiebreaker_used: Optional[str] = None,
        candidates_evaluated: int = 0,
        original_type_name: Optional[str] = None,
        failure_reasons: Optional[Counter] = None
    ) -> 'MatchResult':
        """
        Create a result from the winning candidate.

        Args:
            new_type_name: Specification that was matched
            winner: The selected candidate
            tied_candidates: Other candidates with the same score
            alternatives: Runner-up candidates
            tiebreaker_used: Which tiebreaker was used (if any)
            candidates_evaluated: Number of declarations scanned
            original_type_name: Prior-build name, if known
            failure_reasons: Histogram of first failure reasons among rejected candidates

        Returns:
            MatchResult with MATCHED status
        """
        result = cls(
            new_type_name=new_type_name,
            status=MatchStatus.MATCHED,
            matched_type=winner.type_name,
            score=winner.score,
            original_type_name=original_type_name,
            tied_candidates=tied_candidates or [],
            alternatives=alternatives or [],
            tiebreaker_used=tiebreaker_used,
            candidates_evaluated=candidates_evaluated,
            failure_reasons=dict(failure_reasons or {}),
        )
        if result.tied_candidates:
            result.warnings.append(
                f"{len(result.tied_candidates)} other candidate(s) tied at "
                f"score {winner.score}: {', '.join(result.tied_candidates)}"
            )
        return result

    @property
    def is_matched(self) -> bool:
        """Check if matching was successful."""
        return self.status == MatchStatus.MATCHED

    @property
    def is_ambiguous(self) -> bool:
        """Check if the winner was picked among equal scores."""
        return bool(self.tied_candidates)

    @property
    def top_failure_reason(self) -> Optional[str]:
        """Most frequent first failure across candidates."""
        if not self.failure_reasons:
            return None
        return max(self.failure_reasons.items(), key=lambda item: item[1])[0]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'new_type_name': self.new_type_name,
            'status': self.status.value,
            'matched_type': self.matched_type,
            'score': self.score,
            'original_type_name': self.original_type_name,
            'tied_candidates': self.tied_candidates,
            'alternatives': [a.to_dict() for a in self.alternatives],
            'failure_reasons': self.failure_reasons,
            'candidates_evaluated': self.candidates_evaluated,
            'tiebreaker_used': self.tiebreaker_used,
            'warnings': self.warnings,
            'matched_at': self.matched_at.isoformat(),
        }


__all__ = [
    'MatchStatus',
    'ScoredCandidate',
    'MatchResult',
]
