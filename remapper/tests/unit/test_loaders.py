# Path: remapper/tests/unit/test_loaders.py
"""
Tests for the module dump and specification readers.
"""

import json
import sys
from pathlib import Path

import pytest
import yaml

# Add remapper to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from loaders import ModuleReader, SpecReader, normalize_key
from process.matcher.models import Visibility


class TestNormalizeKey:
    """Test key normalization."""

    @pytest.mark.parametrize("key,expected", [
        ("NewTypeName", "new_type_name"),
        ("ConstructorParameterCount", "constructor_parameter_count"),
        ("isSealed", "is_sealed"),
        ("match_methods", "match_methods"),
        ("IgnorePropterties", "ignore_properties"),
    ])
    def test_normalize(self, key, expected):
        assert normalize_key(key) == expected


class TestSpecReader:
    """Test SpecReader functionality."""

    def test_load_pascal_case_json(self, create_spec_file):
        specifications = SpecReader(create_spec_file.parent).load_all()

        assert [s.new_type_name for s in specifications] == [
            "PlayerController", "WeaponKind", "SessionFactory",
        ]
        player = specifications[0]
        assert player.original_type_name == "GClass100"
        assert player.search_params.is_sealed is True
        assert player.search_params.match_methods == ("Update",)
        assert player.search_params.ignore_properties == ()
        assert specifications[2].search_params.constructor_parameter_count == 2

    def test_load_yaml_mapping(self, temp_dir):
        spec_path = temp_dir / 'remaps.yaml'
        spec_path.write_text(yaml.safe_dump({
            'remaps': [
                {
                    'new_type_name': 'Inventory',
                    'search_params': {'is_derived': True, 'ignore_fields': ['*']},
                },
            ],
        }))

        specifications = SpecReader(spec_path).load_all()

        assert len(specifications) == 1
        assert specifications[0].search_params.is_derived is True
        assert specifications[0].search_params.ignore_fields == ('*',)

    def test_single_entry_file(self, temp_dir):
        spec_path = temp_dir / 'single.yml'
        spec_path.write_text("NewTypeName: Lonely\nSearchParams:\n  IsEnum: true\n")

        specifications = SpecReader(spec_path).load_all()

        assert specifications[0].new_type_name == "Lonely"

    def test_invalid_entries_are_skipped(self, temp_dir, caplog):
        spec_path = temp_dir / 'remaps.json'
        spec_path.write_text(json.dumps([
            {'SearchParams': {'IsSealed': True}},
            {'NewTypeName': 'Bad', 'SearchParams': {'MethodCount': -1}},
            'not a mapping',
            {'NewTypeName': 'Good'},
        ]))

        specifications = SpecReader(spec_path).load_all()

        assert [s.new_type_name for s in specifications] == ['Good']
        assert caplog.text.count('Skipping') == 3

    def test_duplicate_names_last_wins(self, temp_dir):
        specs_dir = temp_dir / 'specs'
        (specs_dir / 'nested').mkdir(parents=True)
        (specs_dir / 'a.json').write_text(json.dumps([
            {'NewTypeName': 'Shared', 'SearchParams': {'IsEnum': True}},
        ]))
        (specs_dir / 'nested' / 'b.yaml').write_text(yaml.safe_dump([
            {'new_type_name': 'Shared', 'search_params': {'is_sealed': True}},
        ]))
        (specs_dir / 'notes.txt').write_text('ignored')

        specifications = SpecReader(specs_dir).load_all()

        assert len(specifications) == 1
        assert specifications[0].search_params.is_sealed is True
        assert specifications[0].search_params.is_enum is None

    def test_missing_path_returns_empty(self, temp_dir):
        assert SpecReader(temp_dir / 'nowhere').load_all() == []

    def test_unparseable_file_is_skipped(self, temp_dir):
        spec_path = temp_dir / 'broken.yaml'
        spec_path.write_text("remaps: [unclosed\n")

        assert SpecReader(spec_path).load_all() == []

    def test_undecodable_file_is_skipped(self, temp_dir):
        specs_dir = temp_dir / 'specs'
        specs_dir.mkdir()
        (specs_dir / 'a.json').write_text(json.dumps([{'NewTypeName': 'Good'}]))
        (specs_dir / 'b.yaml').write_bytes(b'\xff\xfe\x00remaps: []\n')

        specifications = SpecReader(specs_dir).load_all()

        assert [s.new_type_name for s in specifications] == ['Good']

    def test_cache_and_clear(self, create_spec_file):
        reader = SpecReader(create_spec_file)
        first = reader.load_all()

        assert reader.load_all() is first

        reader.clear_cache()
        assert reader.load_all() is not first

    def test_validate_all_reports_conflicts(self, temp_dir):
        spec_path = temp_dir / 'remaps.json'
        spec_path.write_text(json.dumps([
            {'NewTypeName': 'Clash', 'SearchParams': {
                'MatchMethods': ['Foo'], 'IgnoreMethods': ['*'],
            }},
            {'NewTypeName': 'Fine', 'SearchParams': {'IgnoreMethods': ['*']}},
        ]))

        errors = SpecReader(spec_path).validate_all()

        assert len(errors) == 1
        assert errors[0].startswith('Clash: ')


class TestModuleReader:
    """Test ModuleReader functionality."""

    def test_read_index(self, create_module_dump):
        index = ModuleReader().read_index(create_module_dump)

        assert index.module_name == 'Assembly-CSharp'
        assert len(index) == 5
        assert [t.full_name for t in index] == [
            'EFT.GClass100', 'EFT.GClass100/Class5',
            'EFT.GClass101', 'EFT.GInterface7', 'EFT.EWeaponKind',
        ]

    def test_members(self, create_module_dump):
        index = ModuleReader().read_index(create_module_dump)

        player = index.get_type('EFT.GClass100')
        assert player.is_sealed
        assert player.base_type == 'MonoBehaviour'
        assert player.method_names == ['Update', 'Awake']
        assert player.field_names == ['health', 'speed']
        prop = player.properties[0]
        assert prop.getter.name == 'get_Id'
        assert prop.setter.name == 'set_Id'

    def test_constructors(self, create_module_dump):
        factory = ModuleReader().read_index(create_module_dump).get_type('EFT.GClass101')

        assert factory.visibility == Visibility.NOT_PUBLIC
        assert [c.parameter_count for c in factory.constructors] == [2]
        assert factory.has_static_constructor
        assert factory.method_names == ['Update']

    def test_nested_default_visibility(self, create_module_dump):
        nested = ModuleReader().read_index(create_module_dump).get_type('EFT.GClass100/Class5')

        assert nested.visibility == Visibility.NESTED_PRIVATE
        assert nested.is_nested
        assert not nested.is_not_public

    def test_bare_list_uses_file_stem(self, temp_dir):
        dump_path = temp_dir / 'Plugins.json'
        dump_path.write_text(json.dumps([{'name': 'Plugin', 'methods': ['.ctor']}]))

        index = ModuleReader().read_index(dump_path)

        assert index.module_name == 'Plugins'
        assert len(index.get_type('Plugin').constructors) == 1

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            ModuleReader().read_index(temp_dir / 'missing.json')

    def test_invalid_json(self, temp_dir):
        dump_path = temp_dir / 'broken.json'
        dump_path.write_text('{"types": [')

        with pytest.raises(ValueError):
            ModuleReader().read_index(dump_path)

    def test_unknown_visibility(self, temp_dir):
        dump_path = temp_dir / 'module.json'
        dump_path.write_text(json.dumps({'types': [{'name': 'A', 'visibility': 'friend'}]}))

        with pytest.raises(ValueError, match='Unknown visibility'):
            ModuleReader().read_index(dump_path)

    def test_type_without_name(self, temp_dir):
        dump_path = temp_dir / 'module.json'
        dump_path.write_text(json.dumps({'types': [{'namespace': 'EFT'}]}))

        with pytest.raises(ValueError):
            ModuleReader().read_index(dump_path)

    @pytest.mark.parametrize('types', [
        ['NotAnObject'],
        [{'name': 'A', 'methods': [{'parameter_count': 1}]}],
        [{'name': 'A', 'fields': [{'is_public': True}]}],
        [{'name': 'A', 'properties': [{'has_getter': True}]}],
        [{'name': 'A', 'methods': [42]}],
        [{'name': 'A', 'nested_types': ['Inner']}],
        [{'name': 'A', 'fields': 'health'}],
    ])
    def test_malformed_entries_raise_value_error(self, temp_dir, types):
        dump_path = temp_dir / 'module.json'
        dump_path.write_text(json.dumps({'types': types}))

        with pytest.raises(ValueError):
            ModuleReader().read_index(dump_path)

    def test_types_must_be_a_list(self, temp_dir):
        dump_path = temp_dir / 'module.json'
        dump_path.write_text(json.dumps({'types': {'name': 'A'}}))

        with pytest.raises(ValueError, match='not a list'):
            ModuleReader().read_index(dump_path)

    def test_null_member_lists_are_empty(self, temp_dir):
        dump_path = temp_dir / 'module.json'
        dump_path.write_text(json.dumps({'types': [{'name': 'A', 'methods': None}]}))

        index = ModuleReader().read_index(dump_path)

        assert index.get_type('A').method_names == []
