# Path: remapper/output/__init__.py
"""
Output Module for remapper

Generates human-readable and machine-readable reports of a remap run.

Architecture:
    ReportGenerator   - Main entry point for report generation
    FormatterRegistry - Register new output formats

Usage:
    from output import ReportGenerator

    generator = ReportGenerator(output_dir)
    paths = generator.write(results)
    print(generator.to_console(results))
"""

from .report_generator import ReportGenerator

from .formatters import (
    BaseFormatter,
    FormatterRegistry,
    JsonFormatter,
    TextFormatter,
)


__all__ = [
    'ReportGenerator',
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
]
