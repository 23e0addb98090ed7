# Path: remapper/constants.py
"""
System-Wide Constants for remapper

Central repository for constant values used across the system.
Module code refers to these names instead of repeating literals.

Constants are organized by category:
- Search Tokens
- Processing Status
- File Names
- JSON Keys
- Display Formatting
- Logging Categories
"""

from enum import Enum
from typing import Final


# ==============================================================================
# SEARCH TOKENS
# ==============================================================================

# Placed in an ignore list: "the type must have none of this member kind"
WILDCARD: Final[str] = '*'

# Member names the host uses for constructors
INSTANCE_CONSTRUCTOR_NAME: Final[str] = '.ctor'
STATIC_CONSTRUCTOR_NAME: Final[str] = '.cctor'

# Separator between declaring type and nested type in full names
NESTED_TYPE_SEPARATOR: Final[str] = '/'


# ==============================================================================
# PROCESSING STATUS
# ==============================================================================

class ProcessingStatus(str, Enum):
    """
    Processing status for a remap run.
    """
    PENDING = 'pending'
    IN_PROGRESS = 'in_progress'
    COMPLETED = 'completed'


# ==============================================================================
# FILE NAMES
# ==============================================================================

SPEC_FILE_EXTENSIONS: Final[tuple[str, ...]] = ('.yaml', '.yml', '.json')

RESULTS_JSON_FILE: Final[str] = 'remap_results.json'
RESULTS_TEXT_FILE: Final[str] = 'remap_results.txt'


class OutputFormat(str, Enum):
    """Supported output formats."""
    JSON = 'json'
    TEXT = 'text'


# ==============================================================================
# JSON KEYS - Module Dumps
# ==============================================================================

class ModuleKeys:
    """
    Standard JSON keys for decoded module dumps.

    Used for consistent parsing across the loaders.
    """
    # Top level
    MODULE: Final[str] = 'module'
    TYPES: Final[str] = 'types'

    # Type
    NAME: Final[str] = 'name'
    NAMESPACE: Final[str] = 'namespace'
    VISIBILITY: Final[str] = 'visibility'
    IS_SEALED: Final[str] = 'is_sealed'
    IS_ABSTRACT: Final[str] = 'is_abstract'
    IS_INTERFACE: Final[str] = 'is_interface'
    IS_ENUM: Final[str] = 'is_enum'
    BASE_TYPE: Final[str] = 'base_type'
    HAS_GENERIC_PARAMETERS: Final[str] = 'has_generic_parameters'
    HAS_CUSTOM_ATTRIBUTES: Final[str] = 'has_custom_attributes'
    METHODS: Final[str] = 'methods'
    FIELDS: Final[str] = 'fields'
    PROPERTIES: Final[str] = 'properties'
    NESTED_TYPES: Final[str] = 'nested_types'

    # Method
    PARAMETER_COUNT: Final[str] = 'parameter_count'
    IS_CONSTRUCTOR: Final[str] = 'is_constructor'
    IS_STATIC: Final[str] = 'is_static'
    IS_PUBLIC: Final[str] = 'is_public'

    # Property
    HAS_GETTER: Final[str] = 'has_getter'
    HAS_SETTER: Final[str] = 'has_setter'


class SpecKeys:
    """
    Standard keys for remap specification files.
    """
    REMAPS: Final[str] = 'remaps'
    SEARCH_PARAMS: Final[str] = 'search_params'


# ==============================================================================
# DISPLAY FORMATTING
# ==============================================================================

MENU_WIDTH: Final[int] = 60
MENU_HEADER: Final[str] = '=' * MENU_WIDTH

# Status indicators (ASCII only - no emojis)
STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_WARN: Final[str] = '[WARN]'
STATUS_INFO: Final[str] = '[INFO]'


# ==============================================================================
# LOGGING CATEGORIES
# ==============================================================================

class LogCategory(str, Enum):
    """
    IPO logging categories for remapper.
    """
    INPUT = 'input'
    PROCESS = 'process'
    OUTPUT = 'output'


# ==============================================================================
# EXPORTS
# ==============================================================================

__all__ = [
    # Enums
    'ProcessingStatus',
    'OutputFormat',
    'LogCategory',

    # Search tokens
    'WILDCARD',
    'INSTANCE_CONSTRUCTOR_NAME',
    'STATIC_CONSTRUCTOR_NAME',
    'NESTED_TYPE_SEPARATOR',

    # File names
    'SPEC_FILE_EXTENSIONS',
    'RESULTS_JSON_FILE',
    'RESULTS_TEXT_FILE',

    # Key classes
    'ModuleKeys',
    'SpecKeys',

    # Display
    'MENU_WIDTH',
    'MENU_HEADER',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_WARN',
    'STATUS_INFO',
]
