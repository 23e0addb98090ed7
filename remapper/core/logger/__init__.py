# Path: remapper/core/logger/__init__.py
"""
remapper Logger Package

IPO-aware logging for the type remapping system.

Provides separate log streams for:
- INPUT layer (module dumps, remap specifications)
- PROCESS layer (matching engine, publicizer)
- OUTPUT layer (result reports)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
