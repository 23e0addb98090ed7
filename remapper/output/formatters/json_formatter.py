# Path: remapper/output/formatters/json_formatter.py
"""
JSON Formatter

Renders RemapResults as structured JSON for the rename step and for
other tools.
"""

import json
from typing import Optional

from constants import RESULTS_JSON_FILE
from process.matcher.models.remap_results import RemapResults
from process.publicizer.publicizer import PublicizeSummary
from .base_formatter import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Renders results as JSON."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    @property
    def format_name(self) -> str:
        return 'json'

    @property
    def file_name(self) -> str:
        return RESULTS_JSON_FILE

    def format_report(
        self,
        results: RemapResults,
        publicize_summary: Optional[PublicizeSummary] = None
    ) -> str:
        """Serialize results to JSON string."""
        data = results.to_dict()
        if publicize_summary is not None:
            data['publicizer'] = publicize_summary.to_dict()
        return json.dumps(data, indent=self.indent, default=str)


__all__ = ['JsonFormatter']
