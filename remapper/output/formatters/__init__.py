# Path: remapper/output/formatters/__init__.py
"""
Report Formatters

Each formatter renders RemapResults into a specific output format.
New formats add new formatters without changing the generator.
"""

from .base_formatter import BaseFormatter, FormatterRegistry
from .json_formatter import JsonFormatter
from .text_formatter import TextFormatter

__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
]
