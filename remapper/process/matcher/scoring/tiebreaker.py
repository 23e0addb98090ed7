# Path: remapper/process/matcher/scoring/tiebreaker.py
"""
Tiebreaker

Resolves ties when multiple candidates reach the same top score.
"""

from core.logger.ipo_logging import get_process_logger

from ..models.match_result import ScoredCandidate


FIRST_IN_DECLARATION_ORDER = "first_in_declaration_order"


class Tiebreaker:
    """
    Resolves ties between equally-scored candidates.

    Nothing in the scoring model distinguishes tied candidates, so the
    candidate that appears first in module declaration order wins. The
    result is deterministic across runs for the same module.

    Example:
        tiebreaker = Tiebreaker()
        best, method = tiebreaker.resolve([candidate1, candidate2])
    """

    def __init__(self):
        """Initialize tiebreaker."""
        self.logger = get_process_logger('matcher.scoring.tiebreaker')

    def resolve(
        self,
        candidates: list[ScoredCandidate]
    ) -> tuple[ScoredCandidate, str]:
        """
        Resolve ties between candidates.

        Args:
            candidates: Equally-scored candidates

        Returns:
            Tuple of (best candidate, tiebreaker method used)
        """
        if len(candidates) == 0:
            raise ValueError("No candidates to resolve")

        if len(candidates) == 1:
            return candidates[0], "single_match"

        self.logger.debug(
            f"Resolving tie between {len(candidates)} candidates "
            f"using {FIRST_IN_DECLARATION_ORDER}"
        )

        best = min(candidates, key=lambda c: c.position)
        return best, FIRST_IN_DECLARATION_ORDER


__all__ = ['Tiebreaker', 'FIRST_IN_DECLARATION_ORDER']
