# Path: remapper/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for remapper

Provides common test fixtures used across all test modules.
"""

import json
import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add remapper to path for imports
REMAPPER_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REMAPPER_ROOT))

from process.matcher.models import (
    FieldDeclaration,
    MethodDeclaration,
    PropertyDeclaration,
    RemapSpecification,
    ScoreTracker,
    SearchParams,
    TypeDeclaration,
    make_constructor,
)


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'REMAPPER_ENVIRONMENT': 'test',
        'REMAPPER_DEBUG': 'true',

        # Input paths
        'REMAPPER_MODULE_PATH': str(temp_dir / 'module.json'),
        'REMAPPER_SPECS_PATH': str(temp_dir / 'specs'),

        # Output paths - REQUIRED
        'REMAPPER_OUTPUT_DIR': str(temp_dir / 'output'),
        'REMAPPER_LOG_DIR': str(temp_dir / 'logs'),

        # Matching
        'REMAPPER_MAX_ALTERNATIVES': '3',
        'REMAPPER_MAX_CONCURRENT_JOBS': '2',
        'REMAPPER_ENABLE_MULTITHREADING': 'false',
        'REMAPPER_LOG_CONSOLE': 'false',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# DECLARATION FACTORIES
# ==============================================================================

def build_type(
    name: str,
    methods: tuple = (),
    fields: tuple = (),
    properties: tuple = (),
    constructors: tuple = (),
    static_constructor: bool = False,
    **kwargs
) -> TypeDeclaration:
    """
    Build a TypeDeclaration from member names.

    Args:
        name: Type name
        methods: Regular method names
        fields: Field names
        properties: Property names
        constructors: Parameter counts of instance constructors
        static_constructor: Whether to add a type initializer
        **kwargs: Any other TypeDeclaration attribute
    """
    method_decls = [make_constructor(count) for count in constructors]
    if static_constructor:
        method_decls.append(make_constructor(is_static=True))
    method_decls.extend(MethodDeclaration(name=m) for m in methods)

    return TypeDeclaration(
        name=name,
        methods=method_decls,
        fields=[FieldDeclaration(name=f) for f in fields],
        properties=[
            PropertyDeclaration(name=p, getter=MethodDeclaration(name=f"get_{p}"))
            for p in properties
        ],
        **kwargs
    )


@pytest.fixture
def make_type():
    """Factory fixture for candidate declarations."""
    return build_type


@pytest.fixture
def tracker():
    """Fresh score tracker."""
    return ScoreTracker(proposed_new_name="Target", candidate_name="Candidate")


@pytest.fixture
def make_spec():
    """Factory fixture for remap specifications."""
    def _make(new_type_name: str = "Target", **params) -> RemapSpecification:
        return RemapSpecification(
            new_type_name=new_type_name,
            search_params=SearchParams(**params),
        )
    return _make


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def sample_module_dump():
    """Provide a sample decoded module dump."""
    return {
        'module': 'Assembly-CSharp',
        'types': [
            {
                'name': 'GClass100',
                'namespace': 'EFT',
                'visibility': 'public',
                'is_sealed': True,
                'base_type': 'MonoBehaviour',
                'methods': [
                    {'name': '.ctor', 'parameter_count': 0, 'is_constructor': True},
                    'Update',
                    'Awake',
                ],
                'fields': ['health', 'speed'],
                'properties': [{'name': 'Id', 'has_getter': True, 'has_setter': True}],
                'nested_types': [
                    {
                        'name': 'Class5',
                        'methods': ['MoveNext'],
                        'fields': ['state'],
                    },
                ],
            },
            {
                'name': 'GClass101',
                'namespace': 'EFT',
                'visibility': 'not_public',
                'base_type': 'Object',
                'methods': [
                    {'name': '.ctor', 'parameter_count': 2, 'is_constructor': True},
                    {'name': '.cctor', 'is_constructor': True, 'is_static': True},
                    'Update',
                ],
            },
            {
                'name': 'GInterface7',
                'namespace': 'EFT',
                'is_interface': True,
                'is_abstract': True,
                'methods': ['Dispose'],
            },
            {
                'name': 'EWeaponKind',
                'namespace': 'EFT',
                'is_enum': True,
                'is_sealed': True,
                'base_type': 'Enum',
                'fields': ['value__', 'Pistol', 'Rifle'],
            },
        ],
    }


@pytest.fixture
def sample_remaps():
    """Provide sample remap entries in the legacy PascalCase layout."""
    return [
        {
            'NewTypeName': 'PlayerController',
            'OriginalTypeName': 'GClass100',
            'SearchParams': {
                'IsSealed': True,
                'MatchMethods': ['Update'],
                'IgnorePropterties': None,
            },
        },
        {
            'NewTypeName': 'WeaponKind',
            'SearchParams': {
                'IsEnum': True,
                'MatchFields': ['Rifle'],
            },
        },
        {
            'NewTypeName': 'SessionFactory',
            'SearchParams': {
                'IsPublic': False,
                'ConstructorParameterCount': 2,
            },
        },
    ]


# ==============================================================================
# FILE CREATION FIXTURES
# ==============================================================================

@pytest.fixture
def create_module_dump(temp_dir, sample_module_dump):
    """Write the sample module dump to disk."""
    dump_path = temp_dir / 'module.json'
    with open(dump_path, 'w') as f:
        json.dump(sample_module_dump, f, indent=2)
    return dump_path


@pytest.fixture
def create_spec_file(temp_dir, sample_remaps):
    """Write the sample remaps as a JSON specification file."""
    specs_dir = temp_dir / 'specs'
    specs_dir.mkdir(parents=True, exist_ok=True)
    spec_path = specs_dir / 'remaps.json'
    with open(spec_path, 'w') as f:
        json.dump(sample_remaps, f, indent=2)
    return spec_path


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config(temp_dir):
    """Create a mock ConfigLoader for testing."""
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: {
        'environment': 'test',
        'debug': True,
        'output_dir': temp_dir / 'output',
        'log_dir': temp_dir / 'logs',
        'max_alternatives': 3,
        'max_concurrent_jobs': 2,
        'enable_multithreading': False,
    }.get(key, default)
    return config


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


