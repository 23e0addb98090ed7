# Path: remapper/core/logger/ipo_logging.py
"""
IPO-Aware Logging for remapper

Input-Process-Output separated logging for the type remapper.

This module sets up logging with separate files for:
- INPUT layer (module reader, specification reader)
- PROCESS layer (matching coordinator, evaluators, publicizer)
- OUTPUT layer (report generator, formatters)
- Full activity (everything combined)

Files rotate by size so repeated runs against large modules do not
grow the logs without bound.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from constants import LogCategory


LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
CONSOLE_FORMAT = '[%(levelname)s] %(name)s - %(message)s'

BYTES_PER_MB = 1024 * 1024


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name == self.layer or record.name.startswith(f'{self.layer}.')


def _rotating_handler(
    path: Path,
    formatter: logging.Formatter,
    max_size_mb: int,
    backup_count: int
) -> RotatingFileHandler:
    """Create a DEBUG-level rotating file handler."""
    handler = RotatingFileHandler(
        path,
        maxBytes=max_size_mb * BYTES_PER_MB,
        backupCount=backup_count,
        encoding='utf-8',
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def setup_ipo_logging(
    log_dir: Path,
    log_level: str = 'INFO',
    console_output: bool = True,
    max_size_mb: int = 10,
    backup_count: int = 5
) -> None:
    """
    Set up IPO-aware logging for remapper.

    Creates separate log files for:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS/matching layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Args:
        log_dir: Directory for log files
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console
        max_size_mb: Size at which a log file is rotated
        backup_count: Number of rotated files kept per log

    Example:
        setup_ipo_logging(
            log_dir=Path('/var/log/remapper'),
            log_level='DEBUG',
            console_output=False
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Clear any existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Full activity log (everything)
    root_logger.addHandler(_rotating_handler(
        log_dir / 'full_activity.log', formatter, max_size_mb, backup_count
    ))

    # One log per layer
    for layer in LogCategory:
        handler = _rotating_handler(
            log_dir / f'{layer.value}_activity.log',
            formatter,
            max_size_mb,
            backup_count,
        )
        handler.addFilter(IPOFilter(layer.value))
        root_logger.addHandler(handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, log_level.upper()))
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'module_reader', 'spec_reader')

    Returns:
        Logger configured for INPUT layer
    """
    return logging.getLogger(f'{LogCategory.INPUT.value}.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer (matching engine).

    Args:
        name: Logger name (e.g., 'matcher.coordinator')

    Returns:
        Logger configured for PROCESS layer

    Example:
        logger = get_process_logger('matcher.coordinator')
        logger.info("Resolving 120 specifications")
    """
    return logging.getLogger(f'{LogCategory.PROCESS.value}.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'report_generator')

    Returns:
        Logger configured for OUTPUT layer
    """
    return logging.getLogger(f'{LogCategory.OUTPUT.value}.{name}')


__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
