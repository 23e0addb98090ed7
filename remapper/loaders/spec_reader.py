# Path: remapper/loaders/spec_reader.py
"""
Specification Reader

Loads remap specifications from YAML or JSON files and validates them
into RemapSpecification models.

A path may be a single file or a directory searched recursively. Each
file holds either a list of entries or a mapping with a "remaps" list.
Keys are accepted in snake_case or in PascalCase as written by older
remap files (NewTypeName, SearchParams, IsSealed, MatchMethods, ...).
"""

import json
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from core.logger.ipo_logging import get_input_logger
from constants import SPEC_FILE_EXTENSIONS, SpecKeys
from process.matcher.models.search_params import RemapSpecification


# Legacy key spellings that do not convert mechanically
KEY_ALIASES: dict[str, str] = {
    'ignore_propterties': 'ignore_properties',
}

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')


def normalize_key(key: str) -> str:
    """
    Convert a PascalCase or camelCase key to snake_case.

    Example:
        normalize_key('ConstructorParameterCount')
        # Returns: 'constructor_parameter_count'
    """
    snake = _CAMEL_BOUNDARY.sub('_', key).lower()
    return KEY_ALIASES.get(snake, snake)


class SpecReader:
    """
    Loads remap specifications from disk.

    Entries that fail validation are logged and skipped. When two entries
    share a new type name the later one replaces the earlier one.

    Example:
        reader = SpecReader(Path('specs/'))
        specifications = reader.load_all()

        for message in reader.validate_all():
            print(message)
    """

    def __init__(self, specs_path: Optional[Path] = None):
        """
        Initialize specification reader.

        Args:
            specs_path: File or directory holding remap files
        """
        self.logger = get_input_logger('spec_reader')
        self.specs_path = Path(specs_path) if specs_path is not None else None
        self._cache: Optional[list[RemapSpecification]] = None

    def load_all(self, use_cache: bool = True) -> list[RemapSpecification]:
        """
        Load every specification under the configured path.

        Args:
            use_cache: Whether to use cached results

        Returns:
            Specifications in file order, deduplicated by new type name
        """
        if use_cache and self._cache is not None:
            return self._cache

        if self.specs_path is None or not self.specs_path.exists():
            self.logger.warning(f"Specifications path not found: {self.specs_path}")
            return []

        files = self._discover_files(self.specs_path)
        self.logger.info(f"Found {len(files)} specification files")

        specifications: dict[str, RemapSpecification] = {}

        for spec_file in files:
            for spec in self.load_file(spec_file):
                if spec.new_type_name in specifications:
                    self.logger.warning(
                        f"Duplicate specification: {spec.new_type_name} "
                        f"in {spec_file}, replacing earlier entry"
                    )
                specifications[spec.new_type_name] = spec

        result = list(specifications.values())
        self.logger.info(f"Loaded {len(result)} specifications")
        self._cache = result
        return result

    def load_file(self, file_path: Path) -> list[RemapSpecification]:
        """
        Load the specifications in a single file.

        Args:
            file_path: Path to a YAML or JSON file

        Returns:
            Valid specifications in file order (empty if the file is unreadable)
        """
        data = self._read_data(Path(file_path))
        if data is None:
            return []

        if isinstance(data, dict):
            entries = {normalize_key(k): v for k, v in data.items()}.get(SpecKeys.REMAPS)
            if entries is None:
                # A single entry
                entries = [data]
        else:
            entries = data

        if not isinstance(entries, list):
            self.logger.error(f"Expected a list of remaps in {file_path}")
            return []

        specifications = []
        for position, entry in enumerate(entries):
            spec = self.parse_entry(entry, source=f"{file_path}[{position}]")
            if spec is not None:
                specifications.append(spec)

        self.logger.debug(f"Loaded {len(specifications)} specifications from {file_path}")
        return specifications

    def parse_entry(self, entry: Any, source: str = "<memory>") -> Optional[RemapSpecification]:
        """
        Validate one raw entry.

        Args:
            entry: Mapping read from a remap file
            source: Location used in log messages

        Returns:
            RemapSpecification or None if the entry is invalid
        """
        if not isinstance(entry, dict):
            self.logger.error(f"Skipping {source}: entry is not a mapping")
            return None

        normalized = self._normalize(entry)

        try:
            return RemapSpecification.model_validate(normalized)
        except ValidationError as e:
            self.logger.error(
                f"Skipping {source}: invalid specification "
                f"({e.error_count()} errors): {e}"
            )
            return None

    def validate_all(self) -> list[str]:
        """
        Check loaded specifications for conflicting criteria.

        Returns:
            List of validation messages (empty if all are consistent)
        """
        errors = []
        for spec in self.load_all(use_cache=False):
            for problem in spec.search_params.conflicts():
                errors.append(f"{spec.new_type_name}: {problem}")
        return errors

    def clear_cache(self) -> None:
        """Clear the specifications cache."""
        self._cache = None

    def _discover_files(self, path: Path) -> list[Path]:
        if path.is_file():
            return [path]
        return sorted(
            p for p in path.rglob('*')
            if p.is_file() and p.suffix.lower() in SPEC_FILE_EXTENSIONS
        )

    def _read_data(self, file_path: Path) -> Any:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                if file_path.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
            self.logger.error(f"Parse error in {file_path}: {e}")
            return None
        except OSError as e:
            self.logger.error(f"Cannot read {file_path}: {e}")
            return None

        if data is None:
            self.logger.warning(f"Empty file: {file_path}")
        return data

    def _normalize(self, entry: dict) -> dict:
        """Normalize keys of an entry and its search parameters."""
        normalized = {normalize_key(k): v for k, v in entry.items()}

        params = normalized.get(SpecKeys.SEARCH_PARAMS)
        if isinstance(params, dict):
            # Older files write null for empty member lists
            normalized[SpecKeys.SEARCH_PARAMS] = {
                normalize_key(k): v for k, v in params.items()
                if v is not None
            }
        elif params is None:
            normalized.pop(SpecKeys.SEARCH_PARAMS, None)

        return normalized


__all__ = ['SpecReader', 'normalize_key']
