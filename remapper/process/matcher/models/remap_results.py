# Path: remapper/process/matcher/models/remap_results.py
"""
Remap Results Model

The remap results are the primary output of the matching engine. They
map each specification to its match outcome for one module, and derive
the rename plan consumed by the rewrite step.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from constants import ProcessingStatus
from .match_result import MatchResult


@dataclass
class RemapResults:
    """
    Match outcomes for every specification evaluated against a module.

    Attributes:
        module_name: Identifier of the scanned module
        resolved_at: When matching was performed
        status: Processing status of the run
        matches: Results keyed by new type name, in specification order
        unresolved: Specifications that matched nothing
    """
    module_name: str
    resolved_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status: ProcessingStatus = ProcessingStatus.PENDING
    matches: dict[str, MatchResult] = field(default_factory=dict)
    unresolved: list[str] = field(default_factory=list)

    def add_result(self, result: MatchResult) -> None:
        """
        Add a match result.

        Args:
            result: Outcome for one specification
        """
        self.matches[result.new_type_name] = result

        if not result.is_matched and result.new_type_name not in self.unresolved:
            self.unresolved.append(result.new_type_name)

    def get_result(self, new_type_name: str):
        """Get the result for a specification, or None."""
        return self.matches.get(new_type_name)

    def get_matched_type(self, new_type_name: str):
        """Get the matched declaration's full name, or None."""
        result = self.matches.get(new_type_name)
        if result and result.is_matched:
            return result.matched_type
        return None

    @property
    def matched(self) -> dict[str, MatchResult]:
        """Results with a winning candidate."""
        return {k: v for k, v in self.matches.items() if v.is_matched}

    @property
    def ambiguous(self) -> list[str]:
        """Specifications whose winner was chosen among tied scores."""
        return [k for k, v in self.matches.items() if v.is_ambiguous]

    @property
    def match_rate(self) -> float:
        """Percentage of specifications that matched."""
        if not self.matches:
            return 0.0
        return len(self.matched) / len(self.matches) * 100

    def rename_plan(self) -> dict[str, str]:
        """
        Map matched declaration names to their proposed new names.

        When several specifications claim the same declaration, each
        claim is kept in specification order and the first one wins;
        conflicts are reported by conflicting_claims().

        Returns:
            Dictionary of matched full name -> new type name
        """
        plan: dict[str, str] = {}
        for new_name, result in self.matched.items():
            plan.setdefault(result.matched_type, new_name)
        return plan

    def conflicting_claims(self) -> dict[str, list[str]]:
        """Declarations matched by more than one specification."""
        claims: dict[str, list[str]] = {}
        for new_name, result in self.matched.items():
            claims.setdefault(result.matched_type, []).append(new_name)
        return {k: v for k, v in claims.items() if len(v) > 1}

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'module_name': self.module_name,
            'resolved_at': self.resolved_at.isoformat(),
            'status': self.status.value,
            'summary': {
                'total': len(self.matches),
                'matched': len(self.matched),
                'unmatched': len(self.unresolved),
                'ambiguous': len(self.ambiguous),
                'match_rate': round(self.match_rate, 1),
            },
            'matches': {k: v.to_dict() for k, v in self.matches.items()},
            'unresolved': self.unresolved,
            'rename_plan': self.rename_plan(),
            'conflicting_claims': self.conflicting_claims(),
        }


__all__ = ['RemapResults']
