#!/usr/bin/env python3
# Path: remapper/main.py
"""
remapper - Main Entry Point

Re-identifies renamed or obfuscated types in a new build of a module
from structural specifications recorded against a prior build.

Data Flow:
    INPUT:   module dump (JSON) + remap specifications (YAML/JSON)
    PROCESS: structural matching, optional accessibility widening
    OUTPUT:  remap_results.json / remap_results.txt in the output directory

Usage:
    python main.py                          # Paths from .env
    python main.py --module dump.json --specs specs/
    python main.py --validate               # Check specifications only
    python main.py --publicize --unseal     # Widen accessibility after matching

Prerequisites:
    - Configured .env file (REMAPPER_OUTPUT_DIR, REMAPPER_LOG_DIR)
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Ensure remapper root is in path
sys.path.insert(0, str(Path(__file__).parent))

from config_loader import ConfigLoader
from core.logger import setup_ipo_logging, get_process_logger
from loaders import ModuleReader, SpecReader
from process.matcher import MatchingCoordinator
from process.publicizer import Publicizer
from output import ReportGenerator
from constants import (
    OutputFormat,
    STATUS_OK, STATUS_FAIL, STATUS_WARN, STATUS_INFO,
    MENU_HEADER,
)


def print_banner() -> None:
    """Print application banner."""
    print()
    print(MENU_HEADER)
    print("  REMAPPER - Structural Type Remapping")
    print(MENU_HEADER)
    print()


def print_system_info(config: ConfigLoader, module_path: Path, specs_path: Path) -> None:
    """Print the paths the run will use."""
    print(f"  Environment: {config.get('environment')}")
    print(f"  Module: {module_path}")
    print(f"  Specs:  {specs_path}")
    print(f"  Output: {config.get('output_dir')}")
    print()


def initialize_system() -> ConfigLoader:
    """
    Load configuration and set up logging.

    Returns:
        ConfigLoader instance

    Raises:
        ValueError: If configuration is invalid
    """
    config = ConfigLoader()

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=config.get('log_level', 'INFO'),
        console_output=config.get('log_console', True) and not config.get('debug', False),
        max_size_mb=config.get('log_max_size_mb', 10),
        backup_count=config.get('log_backup_count', 5),
    )

    return config


def run_validate(reader: SpecReader) -> int:
    """
    Report configuration conflicts in the specifications.

    Returns:
        Exit code (0 if all specifications are consistent)
    """
    specifications = reader.load_all()
    errors = reader.validate_all()

    print(f"{STATUS_INFO} {len(specifications)} specifications loaded")

    if not errors:
        print(f"{STATUS_OK} No configuration conflicts")
        return 0

    for message in errors:
        print(f"  {STATUS_FAIL} {message}")
    return 1


def run_remap(
    config: ConfigLoader,
    args: argparse.Namespace,
    module_path: Path,
    specs_path: Path
) -> int:
    """
    Match, optionally widen accessibility, and write reports.

    Returns:
        Exit code (0 for success)
    """
    logger = get_process_logger('main')

    spec_reader = SpecReader(specs_path)
    specifications = spec_reader.load_all()

    for message in spec_reader.validate_all():
        logger.warning(f"Configuration conflict: {message}")

    if not specifications:
        print(f"{STATUS_WARN} No specifications found in {specs_path}")

    type_index = ModuleReader().read_index(module_path)

    coordinator = MatchingCoordinator(
        diagnostics=config.get('diagnostics', True),
        max_alternatives=config.get('max_alternatives', 5),
        max_concurrent_jobs=args.jobs or config.get('max_concurrent_jobs', 4),
        enable_multithreading=config.get('enable_multithreading', False),
    )
    results = coordinator.resolve_all(specifications, type_index)

    publicizer = Publicizer(
        publicize=args.publicize or config.get('publicize', False),
        unseal=args.unseal or config.get('unseal', False),
    )
    publicize_summary = None
    if publicizer.publicize_enabled or publicizer.unseal_enabled:
        publicize_summary = publicizer.apply(type_index, results)

    formats = []
    if config.get('output_json', True):
        formats.append(OutputFormat.JSON.value)
    if config.get('output_text', True):
        formats.append(OutputFormat.TEXT.value)

    output_dir = Path(args.output) if args.output else config.get('output_dir')
    generator = ReportGenerator(
        output_dir,
        json_indent=config.get('json_indent', 2),
        formats=formats,
    )
    written = generator.write(results, publicize_summary)

    if not args.quiet:
        print(generator.to_console(results, publicize_summary))

    print(
        f"{STATUS_OK} {len(results.matched)}/{len(results.matches)} "
        f"specifications matched"
    )
    for fmt_name, path in written.items():
        print(f"  {fmt_name}: {path}")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for remapper.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description='remapper - Structural Type Remapping',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                               Use paths from .env
  python main.py -m dump.json -s specs/        Explicit inputs
  python main.py --validate                    Check specifications only
        """
    )

    parser.add_argument('--module', '-m', type=str, help='Module dump (JSON)')
    parser.add_argument('--specs', '-s', type=str, help='Specification file or directory')
    parser.add_argument('--output', '-o', type=str, help='Output directory')
    parser.add_argument('--jobs', '-j', type=int, help='Worker threads for parallel scans')
    parser.add_argument(
        '--validate',
        action='store_true',
        help='Validate specifications without matching'
    )
    parser.add_argument(
        '--publicize',
        action='store_true',
        help='Make types, methods and accessors public after matching'
    )
    parser.add_argument(
        '--unseal',
        action='store_true',
        help='Unseal sealed types after matching'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress banner and report output'
    )

    args = parser.parse_args(argv)

    if not args.quiet:
        print_banner()

    try:
        config = initialize_system()

        specs_path = Path(args.specs) if args.specs else config.get('specs_path')
        module_path = Path(args.module) if args.module else config.get('module_path')

        if specs_path is None:
            raise ValueError("No specifications path (--specs or REMAPPER_SPECS_PATH)")

        if args.validate:
            return run_validate(SpecReader(specs_path))

        if module_path is None:
            raise ValueError("No module dump path (--module or REMAPPER_MODULE_PATH)")

        if not args.quiet:
            print_system_info(config, module_path, specs_path)

        return run_remap(config, args, module_path, specs_path)

    except (ValueError, FileNotFoundError) as e:
        print(f"\n{STATUS_FAIL} Error: {e}")
        return 1

    except KeyboardInterrupt:
        print("\n[Interrupted]")
        return 130


if __name__ == '__main__':
    sys.exit(main())
