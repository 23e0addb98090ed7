# Path: remapper/loaders/module_reader.py
"""
Module Reader for remapper

Reads a JSON dump of a decoded module into TypeDeclaration objects and
builds the TypeIndex the matching engine scans.

RESPONSIBILITY: Interpret the dump structure. Decoding the binary
container itself happens upstream; this reader only sees its JSON form.

Dump layout:
    {
        "module": "Assembly-CSharp",
        "types": [
            {
                "name": "GClass1234",
                "namespace": "EFT",
                "visibility": "public",
                "is_sealed": true,
                "base_type": "MonoBehaviour",
                "methods": [{"name": ".ctor", "parameter_count": 2, "is_constructor": true}],
                "fields": ["health", {"name": "speed", "is_public": true}],
                "properties": [{"name": "Id", "has_getter": true}],
                "nested_types": [ ... ]
            }
        ]
    }

Members may be given as bare names or as objects.
"""

import json
from pathlib import Path
from typing import Any, Union

from core.logger.ipo_logging import get_input_logger
from constants import (
    ModuleKeys,
    INSTANCE_CONSTRUCTOR_NAME,
    STATIC_CONSTRUCTOR_NAME,
)
from process.matcher.models.type_declaration import (
    Visibility,
    MethodDeclaration,
    FieldDeclaration,
    PropertyDeclaration,
    TypeDeclaration,
    TypeIndex,
)


class ModuleReader:
    """
    Reads decoded module dumps.

    Example:
        reader = ModuleReader()
        index = reader.read_index(Path('dumps/Assembly-CSharp.json'))
        print(f"Types: {len(index)}")
    """

    def __init__(self):
        """Initialize module reader."""
        self.logger = get_input_logger('module_reader')

    def read_index(self, dump_path: Path) -> TypeIndex:
        """
        Read a module dump and index every declaration.

        Args:
            dump_path: Path to the JSON dump

        Returns:
            TypeIndex in module declaration order

        Raises:
            FileNotFoundError: If the dump does not exist
            ValueError: If the dump is not valid JSON or is malformed
        """
        data = self.read_raw(dump_path)
        module_name = data.get(ModuleKeys.MODULE) or Path(dump_path).stem

        types = [
            self._parse_type(type_data)
            for type_data in self._list_of(data, ModuleKeys.TYPES, module_name)
        ]
        index = TypeIndex.from_types(types, module_name=module_name)

        self.logger.info(
            f"Indexed module {module_name}: {len(types)} top-level types, "
            f"{len(index)} total"
        )
        return index

    def read_raw(self, dump_path: Path) -> dict:
        """
        Load the raw dump dictionary.

        Args:
            dump_path: Path to the JSON dump

        Returns:
            Parsed JSON object
        """
        dump_path = Path(dump_path)
        if not dump_path.exists():
            self.logger.error(f"Module dump not found: {dump_path}")
            raise FileNotFoundError(f"Module dump not found: {dump_path}")

        self.logger.info(f"Reading module dump {dump_path}")

        try:
            with open(dump_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self.logger.error(f"JSON decode error in {dump_path}: {e}")
            raise ValueError(f"Invalid module dump {dump_path}: {e}") from e

        if isinstance(data, list):
            # Bare list of types
            data = {ModuleKeys.TYPES: data}

        if not isinstance(data, dict):
            raise ValueError(f"Invalid module dump {dump_path}: expected an object")

        return data

    def _parse_type(self, data: Any, is_nested: bool = False) -> TypeDeclaration:
        """Parse one type and, recursively, its nested types."""
        if not isinstance(data, dict):
            raise ValueError(f"Type entry is not an object: {data!r}")

        name = data.get(ModuleKeys.NAME)
        if not name:
            raise ValueError(f"Type entry without a name: {data}")

        nested = [
            self._parse_type(nested_data, is_nested=True)
            for nested_data in self._list_of(data, ModuleKeys.NESTED_TYPES, name)
        ]

        visibility = self._parse_visibility(
            data.get(ModuleKeys.VISIBILITY),
            is_nested=is_nested,
        )

        return TypeDeclaration(
            name=name,
            namespace=data.get(ModuleKeys.NAMESPACE) or "",
            visibility=visibility,
            is_sealed=bool(data.get(ModuleKeys.IS_SEALED, False)),
            is_abstract=bool(data.get(ModuleKeys.IS_ABSTRACT, False)),
            is_interface=bool(data.get(ModuleKeys.IS_INTERFACE, False)),
            is_enum=bool(data.get(ModuleKeys.IS_ENUM, False)),
            base_type=data.get(ModuleKeys.BASE_TYPE) or None,
            has_generic_parameters=bool(data.get(ModuleKeys.HAS_GENERIC_PARAMETERS, False)),
            has_custom_attributes=bool(data.get(ModuleKeys.HAS_CUSTOM_ATTRIBUTES, False)),
            methods=[self._parse_method(m) for m in self._list_of(data, ModuleKeys.METHODS, name)],
            fields=[self._parse_field(f) for f in self._list_of(data, ModuleKeys.FIELDS, name)],
            properties=[
                self._parse_property(p)
                for p in self._list_of(data, ModuleKeys.PROPERTIES, name)
            ],
            nested_types=nested,
        )

    def _list_of(self, data: dict, key: str, owner: str) -> list:
        """Member list under key; absent or null means empty."""
        value = data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError(f"'{key}' of {owner} is not a list: {value!r}")
        return value

    def _member_entry(self, data: Any, kind: str) -> dict:
        """Turn a member given by name or as an object into a dict with a name."""
        if isinstance(data, str):
            data = {ModuleKeys.NAME: data}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {kind} entry: {data!r}")
        name = data.get(ModuleKeys.NAME)
        if not name or not isinstance(name, str):
            raise ValueError(f"{kind.capitalize()} entry without a name: {data}")
        return data

    def _parse_visibility(self, value: Any, is_nested: bool) -> Visibility:
        """Unspecified visibility defaults to public, or nested private."""
        if value is None:
            return Visibility.NESTED_PRIVATE if is_nested else Visibility.PUBLIC
        if isinstance(value, Visibility):
            return value
        try:
            return Visibility(str(value).lower())
        except ValueError as e:
            raise ValueError(f"Unknown visibility: {value}") from e

    def _parse_method(self, data: Union[str, dict]) -> MethodDeclaration:
        data = self._member_entry(data, 'method')
        name = data[ModuleKeys.NAME]
        is_constructor = bool(data.get(
            ModuleKeys.IS_CONSTRUCTOR,
            name in (INSTANCE_CONSTRUCTOR_NAME, STATIC_CONSTRUCTOR_NAME),
        ))

        return MethodDeclaration(
            name=name,
            parameter_count=int(data.get(ModuleKeys.PARAMETER_COUNT, 0)),
            is_constructor=is_constructor,
            is_static=bool(data.get(ModuleKeys.IS_STATIC, name == STATIC_CONSTRUCTOR_NAME)),
            is_public=bool(data.get(ModuleKeys.IS_PUBLIC, False)),
        )

    def _parse_field(self, data: Union[str, dict]) -> FieldDeclaration:
        data = self._member_entry(data, 'field')
        return FieldDeclaration(
            name=data[ModuleKeys.NAME],
            is_public=bool(data.get(ModuleKeys.IS_PUBLIC, False)),
            is_static=bool(data.get(ModuleKeys.IS_STATIC, False)),
        )

    def _parse_property(self, data: Union[str, dict]) -> PropertyDeclaration:
        if isinstance(data, str):
            data = {ModuleKeys.NAME: data, ModuleKeys.HAS_GETTER: True}
        data = self._member_entry(data, 'property')

        name = data[ModuleKeys.NAME]
        getter = None
        setter = None

        if data.get(ModuleKeys.HAS_GETTER, False):
            getter = MethodDeclaration(name=f"get_{name}")
        if data.get(ModuleKeys.HAS_SETTER, False):
            setter = MethodDeclaration(name=f"set_{name}", parameter_count=1)

        return PropertyDeclaration(name=name, getter=getter, setter=setter)


__all__ = ['ModuleReader']
