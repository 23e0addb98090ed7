# Path: remapper/tests/unit/test_evaluators/test_flag_evaluators.py
"""
Tests for the flag, visibility, derivation and constructor evaluators.
"""

import sys
from pathlib import Path

import pytest

# Add remapper to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from process.matcher.evaluators import (
    AbstractEvaluator,
    AttributeEvaluator,
    ConstructorEvaluator,
    DerivationEvaluator,
    EnumEvaluator,
    GenericParametersEvaluator,
    InterfaceEvaluator,
    NestedEvaluator,
    PublicEvaluator,
    SealedEvaluator,
)
from process.matcher.models import (
    FailureReason,
    MatchVerdict,
    SearchParams,
    TrackerState,
    TypeDeclaration,
    Visibility,
)


class TestFlagEvaluators:
    """Test direct equality flag checks."""

    def test_unset_flag_is_disabled(self, make_type, tracker):
        """An unset flag returns DISABLED and leaves the tracker alone."""
        verdict = SealedEvaluator().evaluate(
            make_type("A", is_sealed=True), SearchParams(), tracker
        )

        assert verdict == MatchVerdict.DISABLED
        assert tracker.score == 0
        assert tracker.failure_reason is None
        assert tracker.state == TrackerState.PENDING

    def test_sealed_match_scores_one(self, make_type, tracker):
        verdict = SealedEvaluator().evaluate(
            make_type("A", is_sealed=True), SearchParams(is_sealed=True), tracker
        )

        assert verdict == MatchVerdict.MATCH
        assert tracker.score == 1

    def test_sealed_mismatch_records_reason(self, make_type, tracker):
        verdict = SealedEvaluator().evaluate(
            make_type("A"), SearchParams(is_sealed=True), tracker
        )

        assert verdict == MatchVerdict.NO_MATCH
        assert tracker.failure_reason == FailureReason.IS_SEALED
        assert tracker.is_rejected

    def test_false_flag_matches_false_attribute(self, make_type, tracker):
        verdict = EnumEvaluator().evaluate(
            make_type("A"), SearchParams(is_enum=False), tracker
        )

        assert verdict == MatchVerdict.MATCH
        assert tracker.score == 1

    @pytest.mark.parametrize("evaluator_class,param,attribute,reason", [
        (EnumEvaluator, "is_enum", "is_enum", FailureReason.IS_ENUM),
        (InterfaceEvaluator, "is_interface", "is_interface", FailureReason.IS_INTERFACE),
        (GenericParametersEvaluator, "has_generic_parameters",
         "has_generic_parameters", FailureReason.HAS_GENERIC_PARAMETERS),
        (AttributeEvaluator, "has_attribute",
         "has_custom_attributes", FailureReason.HAS_ATTRIBUTE),
    ])
    def test_flag_reasons(self, make_type, tracker, evaluator_class, param, attribute, reason):
        """Each flag latches its own failure reason."""
        candidate = make_type("A", **{attribute: False})
        verdict = evaluator_class().evaluate(
            candidate, SearchParams(**{param: True}), tracker
        )

        assert verdict == MatchVerdict.NO_MATCH
        assert tracker.failure_reason == reason

    def test_nested_flag_uses_declaring_type(self, make_type, tracker):
        inner = make_type("Inner")
        make_type("Outer", nested_types=[inner])

        verdict = NestedEvaluator().evaluate(inner, SearchParams(is_nested=True), tracker)

        assert verdict == MatchVerdict.MATCH


class TestAbstractEvaluator:
    """Test the abstractness check and its exclusions."""

    def test_abstract_class_matches(self, make_type, tracker):
        verdict = AbstractEvaluator().evaluate(
            make_type("A", is_abstract=True), SearchParams(is_abstract=True), tracker
        )

        assert verdict == MatchVerdict.MATCH
        assert tracker.score == 1

    def test_interface_never_matches(self, make_type, tracker):
        candidate = make_type("IA", is_interface=True, is_abstract=True)

        verdict = AbstractEvaluator().evaluate(candidate, SearchParams(is_abstract=True), tracker)

        assert verdict == MatchVerdict.NO_MATCH
        assert tracker.failure_reason == FailureReason.IS_ABSTRACT

    def test_static_constructor_excludes_type(self, make_type, tracker):
        """Static utility types are abstract+sealed with a type initializer."""
        candidate = make_type("Utils", is_abstract=True, is_sealed=True, static_constructor=True)

        verdict = AbstractEvaluator().evaluate(candidate, SearchParams(is_abstract=True), tracker)

        assert verdict == MatchVerdict.NO_MATCH
        assert tracker.score == 0

    def test_static_constructor_excludes_even_when_not_abstract_requested(self, make_type, tracker):
        candidate = make_type("Plain", static_constructor=True)

        verdict = AbstractEvaluator().evaluate(candidate, SearchParams(is_abstract=False), tracker)

        assert verdict == MatchVerdict.NO_MATCH

    def test_unset_is_disabled_for_interfaces(self, make_type, tracker):
        verdict = AbstractEvaluator().evaluate(
            make_type("IA", is_interface=True), SearchParams(), tracker
        )

        assert verdict == MatchVerdict.DISABLED


class TestPublicEvaluator:
    """Test asymmetric visibility semantics."""

    @pytest.mark.parametrize("visibility,expected", [
        (Visibility.NOT_PUBLIC, MatchVerdict.MATCH),
        (Visibility.PUBLIC, MatchVerdict.NO_MATCH),
        (Visibility.NESTED_PRIVATE, MatchVerdict.NO_MATCH),
        (Visibility.NESTED_FAMILY, MatchVerdict.NO_MATCH),
        (Visibility.NESTED_ASSEMBLY, MatchVerdict.NO_MATCH),
    ])
    def test_not_public_request(self, make_type, tracker, visibility, expected):
        """is_public=False matches only not-externally-visible types."""
        candidate = make_type("A", visibility=visibility)

        verdict = PublicEvaluator().evaluate(candidate, SearchParams(is_public=False), tracker)

        assert verdict == expected

    @pytest.mark.parametrize("visibility,expected", [
        (Visibility.PUBLIC, MatchVerdict.MATCH),
        (Visibility.NOT_PUBLIC, MatchVerdict.NO_MATCH),
        (Visibility.NESTED_PUBLIC, MatchVerdict.NO_MATCH),
    ])
    def test_public_request(self, make_type, tracker, visibility, expected):
        candidate = make_type("A", visibility=visibility)

        verdict = PublicEvaluator().evaluate(candidate, SearchParams(is_public=True), tracker)

        assert verdict == expected

    def test_failure_reason(self, make_type, tracker):
        PublicEvaluator().evaluate(
            make_type("A", visibility=Visibility.PUBLIC), SearchParams(is_public=False), tracker
        )

        assert tracker.failure_reason == FailureReason.IS_PUBLIC


class TestDerivationEvaluator:
    """Test the inheritance relation check."""

    def test_any_base_scores(self, make_type, tracker):
        verdict = DerivationEvaluator().evaluate(
            make_type("A", base_type="Object"), SearchParams(is_derived=True), tracker
        )

        assert verdict == MatchVerdict.MATCH
        assert tracker.score == 1

    def test_ignore_base_class_vetoes(self, make_type, tracker):
        """The veto wins over the permissive is_derived=True check."""
        params = SearchParams(is_derived=True, ignore_base_class="MonoBehaviour")

        verdict = DerivationEvaluator().evaluate(
            make_type("A", base_type="MonoBehaviour"), params, tracker
        )

        assert verdict == MatchVerdict.NO_MATCH
        assert tracker.failure_reason == FailureReason.IS_DERIVED
        assert tracker.score == 0

    def test_match_base_class_does_not_score(self, make_type, tracker):
        params = SearchParams(is_derived=False, match_base_class="Component")

        verdict = DerivationEvaluator().evaluate(
            make_type("A", base_type="Component"), params, tracker
        )

        assert verdict == MatchVerdict.MATCH
        assert tracker.score == 0

    def test_not_derived_without_base(self, make_type, tracker):
        verdict = DerivationEvaluator().evaluate(
            make_type("A"), SearchParams(is_derived=False), tracker
        )

        assert verdict == MatchVerdict.MATCH
        assert tracker.score == 0

    def test_not_derived_with_base_fails(self, make_type, tracker):
        verdict = DerivationEvaluator().evaluate(
            make_type("A", base_type="Object"), SearchParams(is_derived=False), tracker
        )

        assert verdict == MatchVerdict.NO_MATCH

    def test_derived_without_base_fails(self, make_type, tracker):
        verdict = DerivationEvaluator().evaluate(
            make_type("A"), SearchParams(is_derived=True), tracker
        )

        assert verdict == MatchVerdict.NO_MATCH
        assert tracker.failure_reason == FailureReason.IS_DERIVED

    def test_base_class_names_alone_do_not_enable(self, make_type, tracker):
        params = SearchParams(match_base_class="Object")

        verdict = DerivationEvaluator().evaluate(make_type("A", base_type="Object"), params, tracker)

        assert verdict == MatchVerdict.DISABLED


class TestConstructorEvaluator:
    """Test instance constructor arity matching."""

    def test_any_constructor_with_count_matches(self, make_type, tracker):
        candidate = make_type("A", constructors=(0, 2))

        verdict = ConstructorEvaluator().evaluate(
            candidate, SearchParams(constructor_parameter_count=2), tracker
        )

        assert verdict == MatchVerdict.MATCH
        assert tracker.score == 1

    def test_no_constructor_with_count(self, make_type, tracker):
        verdict = ConstructorEvaluator().evaluate(
            make_type("A", constructors=(1,)),
            SearchParams(constructor_parameter_count=2),
            tracker,
        )

        assert verdict == MatchVerdict.NO_MATCH
        assert tracker.failure_reason == FailureReason.CONSTRUCTOR_PARAMETER_COUNT

    def test_static_constructor_is_ignored(self, make_type, tracker):
        candidate = make_type("A", static_constructor=True)

        verdict = ConstructorEvaluator().evaluate(
            candidate, SearchParams(constructor_parameter_count=0), tracker
        )

        assert verdict == MatchVerdict.NO_MATCH

    def test_zero_count_is_enabled(self, make_type, tracker):
        verdict = ConstructorEvaluator().evaluate(
            make_type("A", constructors=(0,)),
            SearchParams(constructor_parameter_count=0),
            tracker,
        )

        assert verdict == MatchVerdict.MATCH

    def test_unset_is_disabled(self, tracker):
        verdict = ConstructorEvaluator().evaluate(TypeDeclaration(name="A"), SearchParams(), tracker)

        assert verdict == MatchVerdict.DISABLED
