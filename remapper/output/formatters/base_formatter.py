# Path: remapper/output/formatters/base_formatter.py
"""
Base Formatter and Formatter Registry

Abstract base class for output formatters and a registry
to look them up by format name.

To add a new format:
1. Subclass BaseFormatter
2. Implement format_report()
3. Register via FormatterRegistry.register()
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Type

from process.matcher.models.remap_results import RemapResults
from process.publicizer.publicizer import PublicizeSummary


class BaseFormatter(ABC):
    """
    Abstract base for report formatters.

    Each subclass renders RemapResults into a specific format.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name for this format (e.g., 'json', 'text')."""

    @property
    @abstractmethod
    def file_name(self) -> str:
        """Name of the file written into the output directory."""

    @abstractmethod
    def format_report(
        self,
        results: RemapResults,
        publicize_summary: Optional[PublicizeSummary] = None
    ) -> str:
        """
        Render results to string.

        Args:
            results: RemapResults to render
            publicize_summary: Changes made by the publicizer, if it ran

        Returns:
            Formatted string representation
        """

    def write_report(
        self,
        results: RemapResults,
        output_path: Path,
        publicize_summary: Optional[PublicizeSummary] = None
    ) -> Path:
        """
        Write results to file.

        Args:
            results: RemapResults to render
            output_path: Directory to write into
            publicize_summary: Changes made by the publicizer, if it ran

        Returns:
            Path to the written file
        """
        output_path.mkdir(parents=True, exist_ok=True)
        filepath = output_path / self.file_name

        content = self.format_report(results, publicize_summary)
        filepath.write_text(content, encoding='utf-8')
        return filepath


class FormatterRegistry:
    """
    Registry of available formatters.

    Lookup by format name. The ReportGenerator uses this to
    find the right formatter for each requested output format.
    """

    _formatters: Dict[str, Type[BaseFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: Type[BaseFormatter]) -> None:
        """Register a formatter class."""
        instance = formatter_class()
        cls._formatters[instance.format_name] = formatter_class

    @classmethod
    def get(cls, format_name: str, **options) -> Optional[BaseFormatter]:
        """Get a formatter instance by name, built with the given options."""
        formatter_class = cls._formatters.get(format_name)
        if formatter_class:
            return formatter_class(**options)
        return None

    @classmethod
    def get_available(cls) -> list[str]:
        """Return list of registered format names."""
        return list(cls._formatters.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (for testing)."""
        cls._formatters.clear()


__all__ = ['BaseFormatter', 'FormatterRegistry']
