# Path: remapper/process/matcher/evaluators/__init__.py
"""
Structural Evaluators

Each evaluator checks one criterion of a specification against a
candidate type and returns DISABLED, MATCH or NO_MATCH.

Evaluators:
- Flag evaluators: sealed, enum, nested, interface, generic, attribute, abstract
- PublicEvaluator: Externally visible / not externally visible
- DerivationEvaluator: Base type relation
- ConstructorEvaluator: Instance constructor arity
- Member evaluators: Methods, fields, properties, nested types
"""

from .base_evaluator import BaseEvaluator
from .flag_evaluator import (
    FlagEvaluator,
    EnumEvaluator,
    NestedEvaluator,
    SealedEvaluator,
    InterfaceEvaluator,
    GenericParametersEvaluator,
    AttributeEvaluator,
    AbstractEvaluator,
)
from .visibility_evaluator import PublicEvaluator
from .derivation_evaluator import DerivationEvaluator
from .constructor_evaluator import ConstructorEvaluator
from .member_evaluator import (
    MemberSetEvaluator,
    FieldEvaluator,
    PropertyEvaluator,
    NestedTypeEvaluator,
    MethodEvaluator,
)


def default_evaluators() -> list[BaseEvaluator]:
    """Build the full predicate set in evaluation order."""
    return [
        PublicEvaluator(),
        AbstractEvaluator(),
        InterfaceEvaluator(),
        EnumEvaluator(),
        NestedEvaluator(),
        SealedEvaluator(),
        DerivationEvaluator(),
        AttributeEvaluator(),
        GenericParametersEvaluator(),
        ConstructorEvaluator(),
        MethodEvaluator(),
        FieldEvaluator(),
        PropertyEvaluator(),
        NestedTypeEvaluator(),
    ]


__all__ = [
    'BaseEvaluator',
    'FlagEvaluator',
    'EnumEvaluator',
    'NestedEvaluator',
    'SealedEvaluator',
    'InterfaceEvaluator',
    'GenericParametersEvaluator',
    'AttributeEvaluator',
    'AbstractEvaluator',
    'PublicEvaluator',
    'DerivationEvaluator',
    'ConstructorEvaluator',
    'MemberSetEvaluator',
    'FieldEvaluator',
    'PropertyEvaluator',
    'NestedTypeEvaluator',
    'MethodEvaluator',
    'default_evaluators',
]
