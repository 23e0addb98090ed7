# Path: remapper/process/matcher/engine/coordinator.py
"""
Matching Coordinator

The main orchestrator for structural type matching.
This is the primary entry point for the matching engine.
"""

import threading
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

# Import IPO logging (PROCESS layer for matching engine)
from core.logger.ipo_logging import get_process_logger

from constants import ProcessingStatus
from ..models.search_params import RemapSpecification
from ..models.type_declaration import TypeIndex
from ..models.score_tracker import ScoreTracker, MatchVerdict
from ..models.match_result import MatchResult, ScoredCandidate
from ..models.remap_results import RemapResults
from ..evaluators import BaseEvaluator, default_evaluators
from ..scoring import ScoreAggregator, Tiebreaker


class MatchingCoordinator:
    """
    Main orchestrator for structural type matching.

    The MatchingCoordinator:
    1. Scans every declaration of a module for each specification
    2. Runs the predicate set against each candidate with a fresh tracker
    3. Aggregates the verdicts into one verdict per candidate
    4. Selects the highest-scoring candidate, first in order on ties
    5. Produces RemapResults for the rename step

    Candidates are never mutated, so specification scans are independent
    and may run on a thread pool.

    Example:
        coordinator = MatchingCoordinator(max_alternatives=3)
        results = coordinator.resolve_all(specifications, type_index)

        results.get_matched_type("PlayerController")
        # Returns: "EFT.GClass1234"
    """

    def __init__(
        self,
        evaluators: Optional[list[BaseEvaluator]] = None,
        diagnostics: bool = True,
        max_alternatives: int = 5,
        max_concurrent_jobs: int = 4,
        enable_multithreading: bool = False
    ):
        """
        Initialize matching coordinator.

        Args:
            evaluators: Predicate set to run. Defaults to every evaluator.
            diagnostics: Enable detailed diagnostic logging (default True)
            max_alternatives: Runner-up candidates kept per result
            max_concurrent_jobs: Worker threads when multithreading
            enable_multithreading: Scan specifications in parallel
        """
        self.logger = get_process_logger('matcher.coordinator')
        self.diagnostics = diagnostics
        self.max_alternatives = max_alternatives
        self.max_concurrent_jobs = max(1, max_concurrent_jobs)
        self.enable_multithreading = enable_multithreading

        self.evaluators = evaluators if evaluators is not None else default_evaluators()

        # Initialize scoring components
        self.score_aggregator = ScoreAggregator()
        self.tiebreaker = Tiebreaker()

        self._match_diagnostics: dict[str, dict] = {}
        self._diagnostics_lock = threading.Lock()

    def resolve_all(
        self,
        specifications: list[RemapSpecification],
        type_index: TypeIndex
    ) -> RemapResults:
        """
        Match every specification against a module.

        Args:
            specifications: Specifications in the order they were loaded
            type_index: Index of the module's declarations

        Returns:
            RemapResults with one MatchResult per specification
        """
        results = RemapResults(
            module_name=type_index.module_name,
            status=ProcessingStatus.IN_PROGRESS,
        )

        self.logger.info(
            f"Resolving {len(specifications)} specifications against "
            f"{len(type_index)} types in {type_index.module_name}"
        )

        if self.enable_multithreading and len(specifications) > 1:
            self.logger.info(
                f"Scanning in parallel with {self.max_concurrent_jobs} workers"
            )
            with ThreadPoolExecutor(max_workers=self.max_concurrent_jobs) as executor:
                # map() yields in submission order
                outcomes = list(executor.map(
                    lambda spec: self.match_specification(spec, type_index),
                    specifications,
                ))
        else:
            outcomes = [
                self.match_specification(spec, type_index)
                for spec in specifications
            ]

        for result in outcomes:
            results.add_result(result)

        results.status = ProcessingStatus.COMPLETED

        self.logger.info(
            f"Resolution complete: {len(results.matched)}/{len(specifications)} "
            f"matched ({results.match_rate:.1f}%), "
            f"{len(results.ambiguous)} resolved by tiebreak"
        )

        conflicts = results.conflicting_claims()
        for type_name, claimants in conflicts.items():
            self.logger.warning(
                f"{type_name} claimed by {len(claimants)} specifications: "
                f"{', '.join(claimants)}"
            )

        return results

    def match_specification(
        self,
        specification: RemapSpecification,
        type_index: TypeIndex
    ) -> MatchResult:
        """
        Match a single specification against every declaration.

        Args:
            specification: What to look for
            type_index: Index of the module's declarations

        Returns:
            MatchResult (NO_MATCH is a normal outcome, never raised)
        """
        new_name = specification.new_type_name
        params = specification.search_params

        diag = {
            'new_type_name': new_name,
            'candidates_evaluated': 0,
            'passed': [],
            'failure_reasons': {},
            'failure_reason': None,
        }

        scored: list[ScoredCandidate] = []
        failures: Counter = Counter()

        for position, candidate in enumerate(type_index):
            tracker = ScoreTracker(
                proposed_new_name=new_name,
                candidate_name=candidate.full_name,
            )

            verdicts = [
                evaluator.evaluate(candidate, params, tracker)
                for evaluator in self.evaluators
            ]

            verdict = tracker.finalize(self.score_aggregator.aggregate(verdicts))

            if verdict == MatchVerdict.MATCH:
                scored.append(ScoredCandidate(
                    type_name=candidate.full_name,
                    score=tracker.score,
                    position=position,
                ))
            else:
                failures[tracker.failure_reason.value] += 1

        diag['candidates_evaluated'] = len(type_index)
        diag['failure_reasons'] = dict(failures)

        if not scored:
            diag['failure_reason'] = 'NO_MATCH'
            self._store_diagnostics(new_name, diag)

            top = failures.most_common(3)
            self.logger.info(
                f"[MATCH FAIL] {new_name}: no candidate among "
                f"{len(type_index)} types. Top failures: {top}"
            )
            return MatchResult.no_match(
                new_name,
                failure_reasons=failures,
                candidates_evaluated=len(type_index),
                original_type_name=specification.original_type_name,
                reason=f"No candidate matched ({len(type_index)} evaluated)",
            )

        # Stable sort keeps declaration order within equal scores
        scored.sort(key=lambda c: c.score, reverse=True)

        top_score = scored[0].score
        ties = [c for c in scored if c.score == top_score]

        if len(ties) > 1:
            best, tiebreaker_used = self.tiebreaker.resolve(ties)
            tied_names = [c.type_name for c in ties if c is not best]
            self.logger.warning(
                f"[TIE] {new_name}: {len(ties)} candidates at score {top_score}, "
                f"picked {best.type_name}"
            )
        else:
            best = scored[0]
            tiebreaker_used = None
            tied_names = []

        alternatives = [c for c in scored if c is not best][:self.max_alternatives]

        diag['passed'] = [c.to_dict() for c in scored[:self.max_alternatives + 1]]
        diag['matched_type'] = best.type_name
        diag['matched_score'] = best.score
        self._store_diagnostics(new_name, diag)

        if self.diagnostics:
            self.logger.debug(
                f"  [CANDIDATES] {new_name}: {len(type_index)} evaluated, "
                f"{len(scored)} passed, {sum(failures.values())} rejected"
            )

        self.logger.info(
            f"[MATCHED] {new_name} -> {best.type_name} (score={best.score})"
        )

        return MatchResult.from_candidate(
            new_type_name=new_name,
            winner=best,
            tied_candidates=tied_names,
            alternatives=alternatives,
            tiebreaker_used=tiebreaker_used,
            candidates_evaluated=len(type_index),
            original_type_name=specification.original_type_name,
            failure_reasons=failures,
        )

    def _store_diagnostics(self, new_type_name: str, diag: dict) -> None:
        with self._diagnostics_lock:
            self._match_diagnostics[new_type_name] = diag

    def get_match_diagnostics(self) -> dict[str, dict]:
        """
        Get detailed diagnostics for all match attempts.

        Returns:
            Dictionary mapping new type name to diagnostic info including:
            - candidates_evaluated: Number of declarations scanned
            - passed: Candidates whose aggregate verdict was a match
            - failure_reasons: Histogram of first failure reasons
            - failure_reason: Why matching failed (if it did)
            - matched_type: The winning declaration (if successful)
            - matched_score: The winning score (if successful)
        """
        with self._diagnostics_lock:
            return self._match_diagnostics.copy()


__all__ = ['MatchingCoordinator']
