# Path: remapper/tests/unit/test_publicizer.py
"""
Tests for post-match accessibility widening.
"""

import sys
from pathlib import Path

import pytest

# Add remapper to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from constants import ProcessingStatus
from loaders import ModuleReader
from process.matcher import RemapResults
from process.matcher.models import Visibility
from process.publicizer import Publicizer


@pytest.fixture
def type_index(create_module_dump):
    return ModuleReader().read_index(create_module_dump)


@pytest.fixture
def completed_results():
    return RemapResults(module_name='Assembly-CSharp', status=ProcessingStatus.COMPLETED)


class TestPublicizer:
    """Test Publicizer functionality."""

    def test_refuses_to_run_before_matching_completes(self, type_index):
        results = RemapResults(module_name='Assembly-CSharp', status=ProcessingStatus.IN_PROGRESS)

        with pytest.raises(RuntimeError):
            Publicizer(publicize=True).apply(type_index, results)

    def test_disabled_is_noop(self, type_index, completed_results):
        summary = Publicizer().apply(type_index, completed_results)

        assert summary.total_changes == 0
        assert type_index.get_type('EFT.GClass101').visibility == Visibility.NOT_PUBLIC

    def test_publicize(self, type_index, completed_results):
        summary = Publicizer(publicize=True).apply(type_index, completed_results)

        assert summary.types_publicized == 1
        assert summary.methods_publicized == 7
        assert summary.accessors_publicized == 2
        assert summary.types_unsealed == 0
        assert type_index.get_type('EFT.GClass101').visibility == Visibility.PUBLIC
        assert all(m.is_public for m in type_index.get_type('EFT.GClass100').methods)

    def test_nested_types_are_untouched(self, type_index, completed_results):
        Publicizer(publicize=True).apply(type_index, completed_results)

        nested = type_index.get_type('EFT.GClass100/Class5')
        assert nested.visibility == Visibility.NESTED_PRIVATE
        assert not nested.methods[0].is_public

    def test_unseal(self, type_index, completed_results):
        summary = Publicizer(unseal=True).apply(type_index, completed_results)

        assert summary.types_unsealed == 2
        assert not type_index.get_type('EFT.EWeaponKind').is_sealed
        assert summary.to_dict()['types_publicized'] == 0

    def test_second_run_changes_nothing(self, type_index, completed_results):
        publicizer = Publicizer(publicize=True, unseal=True)
        publicizer.apply(type_index, completed_results)

        assert publicizer.apply(type_index, completed_results).total_changes == 0
