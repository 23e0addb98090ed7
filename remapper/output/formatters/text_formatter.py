# Path: remapper/output/formatters/text_formatter.py
"""
Text Formatter

Renders RemapResults as ASCII text suitable for console display
and plain-text file output.
"""

from typing import Optional

from constants import RESULTS_TEXT_FILE, STATUS_OK, STATUS_FAIL, STATUS_WARN
from process.matcher.models.match_result import MatchResult
from process.matcher.models.remap_results import RemapResults
from process.publicizer.publicizer import PublicizeSummary
from .base_formatter import BaseFormatter

LINE_WIDTH = 70
DIVIDER = '=' * LINE_WIDTH
SUB_DIVIDER = '-' * LINE_WIDTH

# Failure reasons listed per unmatched specification
TOP_FAILURES = 3


class TextFormatter(BaseFormatter):
    """Renders results as ASCII text."""

    @property
    def format_name(self) -> str:
        return 'text'

    @property
    def file_name(self) -> str:
        return RESULTS_TEXT_FILE

    def format_report(
        self,
        results: RemapResults,
        publicize_summary: Optional[PublicizeSummary] = None
    ) -> str:
        """Render full report as text."""
        matched = results.matched
        lines = []
        lines.append('')
        lines.append(DIVIDER)
        lines.append(f"  REMAP RESULTS: {results.module_name}")
        lines.append(
            f"  {len(matched)}/{len(results.matches)} matched "
            f"({results.match_rate:.1f}%) | "
            f"{len(results.ambiguous)} tied | {results.status.value}"
        )
        lines.append(DIVIDER)

        lines.extend(self._render_matched(list(matched.values())))
        lines.extend(self._render_unmatched(results))
        lines.extend(self._render_rename_plan(results))
        lines.extend(self._render_conflicts(results))

        if publicize_summary is not None:
            lines.extend(self._render_publicizer(publicize_summary))

        lines.append('')
        lines.append(DIVIDER)
        lines.append(f"  Resolved: {results.resolved_at.isoformat(timespec='seconds')}")
        lines.append('')
        return '\n'.join(lines)

    def _render_matched(self, matched: list[MatchResult]) -> list[str]:
        lines = ['', f"  MATCHED ({len(matched)}):", SUB_DIVIDER]
        if not matched:
            lines.append("    (none)")
            return lines

        for result in matched:
            marker = STATUS_WARN if result.is_ambiguous else STATUS_OK
            lines.append(
                f"    {marker:6s} {result.new_type_name:30s} -> "
                f"{result.matched_type} (score={result.score})"
            )
            if result.tied_candidates:
                lines.append(f"           tied: {', '.join(result.tied_candidates)}")
            if result.alternatives:
                alts = ', '.join(
                    f"{a.type_name} ({a.score})" for a in result.alternatives
                )
                lines.append(f"           alternatives: {alts}")
        return lines

    def _render_unmatched(self, results: RemapResults) -> list[str]:
        lines = ['', f"  UNMATCHED ({len(results.unresolved)}):", SUB_DIVIDER]
        if not results.unresolved:
            lines.append("    (none)")
            return lines

        for new_name in results.unresolved:
            result = results.get_result(new_name)
            top = sorted(
                result.failure_reasons.items(),
                key=lambda item: item[1],
                reverse=True,
            )[:TOP_FAILURES]
            failures = ', '.join(f"{reason}={count}" for reason, count in top)
            lines.append(
                f"    {STATUS_FAIL:6s} {new_name:30s} "
                f"{result.candidates_evaluated} evaluated"
            )
            if failures:
                lines.append(f"           top failures: {failures}")
        return lines

    def _render_rename_plan(self, results: RemapResults) -> list[str]:
        plan = results.rename_plan()
        lines = ['', f"  RENAME PLAN ({len(plan)}):", SUB_DIVIDER]
        for old_name, new_name in plan.items():
            lines.append(f"    {old_name} -> {new_name}")
        return lines

    def _render_conflicts(self, results: RemapResults) -> list[str]:
        conflicts = results.conflicting_claims()
        if not conflicts:
            return []

        lines = ['', f"  CONFLICTING CLAIMS ({len(conflicts)}):", SUB_DIVIDER]
        for type_name, claimants in conflicts.items():
            lines.append(f"    {STATUS_WARN} {type_name} <- {', '.join(claimants)}")
        return lines

    def _render_publicizer(self, summary: PublicizeSummary) -> list[str]:
        lines = ['', "  PUBLICIZER:", SUB_DIVIDER]
        for key, value in summary.to_dict().items():
            label = key.replace('_', ' ').capitalize()
            lines.append(f"    {label:25s}  {value}")
        return lines


__all__ = ['TextFormatter']
