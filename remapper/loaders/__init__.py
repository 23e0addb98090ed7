# Path: remapper/loaders/__init__.py
"""
remapper Loaders Package

Readers for the two inputs of a remap run.

Data Sources:
    - module: JSON dump of the decoded module (metadata provider)
    - specs: YAML/JSON remap specification files

Example:
    from loaders import ModuleReader, SpecReader

    index = ModuleReader().read_index(module_path)
    specifications = SpecReader(specs_path).load_all()
"""

from .module_reader import ModuleReader
from .spec_reader import SpecReader, normalize_key

__all__ = [
    'ModuleReader',
    'SpecReader',
    'normalize_key',
]
