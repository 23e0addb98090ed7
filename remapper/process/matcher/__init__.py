# Path: remapper/process/matcher/__init__.py
"""
Matching Engine - Structural Type Matching

The matching engine re-identifies types across two builds of a module
whose names have changed. A type is described by its STRUCTURE
(visibility, sealing, inheritance, constructors, member names) and
every declaration of the new build is scored against that description.

Core Components:
    - MatchingCoordinator: Main orchestrator
    - Evaluators: One structural predicate each
    - Scoring: Verdict aggregation and tie-breaking
    - Models: Specifications, declarations, trackers and results

Example:
    from process.matcher import MatchingCoordinator

    coordinator = MatchingCoordinator()
    results = coordinator.resolve_all(specifications, type_index)

    # results.rename_plan() maps matched type -> new name
    # e.g., {"GClass1234": "PlayerController"}
"""

from .engine import MatchingCoordinator
from .models import (
    SearchParams,
    RemapSpecification,
    TypeDeclaration,
    TypeIndex,
    MatchResult,
    MatchStatus,
    RemapResults,
)

__all__ = [
    'MatchingCoordinator',
    'SearchParams',
    'RemapSpecification',
    'TypeDeclaration',
    'TypeIndex',
    'MatchResult',
    'MatchStatus',
    'RemapResults',
]
