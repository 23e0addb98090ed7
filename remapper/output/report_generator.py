# Path: remapper/output/report_generator.py
"""
Report Generator

Main orchestrator for output generation. Writes RemapResults in every
enabled format via registered formatters.

Architecture:
    RemapResults  ->  [Formatters]  ->  Files

Usage:
    from output import ReportGenerator

    generator = ReportGenerator(output_dir, json_indent=2)
    paths = generator.write(results)
    print(generator.to_console(results))
"""

from pathlib import Path
from typing import Dict, List, Optional

from core.logger.ipo_logging import get_output_logger
from constants import OutputFormat
from process.matcher.models.remap_results import RemapResults
from process.publicizer.publicizer import PublicizeSummary

from .formatters import (
    FormatterRegistry,
    JsonFormatter,
    TextFormatter,
)


def _register_defaults() -> None:
    """Register built-in formatters."""
    FormatterRegistry.register(JsonFormatter)
    FormatterRegistry.register(TextFormatter)


# Auto-register on module import
_register_defaults()


class ReportGenerator:
    """
    Writes remap reports.

    Example:
        generator = ReportGenerator(Path('out'), formats=['json'])
        paths = generator.write(results)
        # {'json': Path('out/remap_results.json')}
    """

    def __init__(
        self,
        output_dir: Path,
        json_indent: int = 2,
        formats: Optional[List[str]] = None
    ):
        """
        Initialize report generator.

        Args:
            output_dir: Directory reports are written into
            json_indent: Indentation of the JSON report
            formats: Format names to write (default: json and text)
        """
        self.logger = get_output_logger('report_generator')
        self.output_dir = Path(output_dir)
        self.formats = formats if formats is not None else [f.value for f in OutputFormat]
        self._options = {OutputFormat.JSON.value: {'indent': json_indent}}

    def write(
        self,
        results: RemapResults,
        publicize_summary: Optional[PublicizeSummary] = None,
        output_dir: Optional[Path] = None
    ) -> Dict[str, Path]:
        """
        Write results to files in the configured formats.

        Args:
            results: RemapResults to write
            publicize_summary: Changes made by the publicizer, if it ran
            output_dir: Override output directory

        Returns:
            Dict mapping format name to written file path
        """
        target = Path(output_dir) if output_dir is not None else self.output_dir

        written = {}
        for fmt_name in self.formats:
            formatter = FormatterRegistry.get(fmt_name, **self._options.get(fmt_name, {}))
            if formatter is None:
                self.logger.warning(f"No formatter for: {fmt_name}")
                continue

            filepath = formatter.write_report(results, target, publicize_summary)
            written[fmt_name] = filepath
            self.logger.info(f"Wrote {fmt_name}: {filepath}")

        return written

    def to_console(
        self,
        results: RemapResults,
        publicize_summary: Optional[PublicizeSummary] = None
    ) -> str:
        """
        Render results as console-friendly text.

        Args:
            results: RemapResults to render
            publicize_summary: Changes made by the publicizer, if it ran

        Returns:
            ASCII text string for console display
        """
        formatter = FormatterRegistry.get(OutputFormat.TEXT.value)
        if formatter is None:
            return f"[No text formatter available for {results.module_name}]"
        return formatter.format_report(results, publicize_summary)

    def to_json(self, results: RemapResults) -> str:
        """Render results as JSON string."""
        formatter = FormatterRegistry.get(
            OutputFormat.JSON.value,
            **self._options[OutputFormat.JSON.value]
        )
        if formatter is None:
            return '{}'
        return formatter.format_report(results)


__all__ = ['ReportGenerator']
