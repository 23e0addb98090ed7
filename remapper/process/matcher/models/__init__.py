# Path: remapper/process/matcher/models/__init__.py
"""
Matcher Models

Data models for the matching engine:
- SearchParams / RemapSpecification: What to look for
- TypeDeclaration / TypeIndex: Candidates from the scanned module
- ScoreTracker: Per-candidate score and first failure
- MatchResult: Outcome for a single specification
- RemapResults: Outcomes for a whole module
"""

from .search_params import (
    SearchParams,
    RemapSpecification,
)

from .type_declaration import (
    Visibility,
    MethodDeclaration,
    FieldDeclaration,
    PropertyDeclaration,
    TypeDeclaration,
    TypeIndex,
    make_constructor,
)

from .score_tracker import (
    MatchVerdict,
    FailureReason,
    TrackerState,
    ScoreTracker,
)

from .match_result import (
    MatchStatus,
    ScoredCandidate,
    MatchResult,
)

from .remap_results import RemapResults

__all__ = [
    # Search Specification
    'SearchParams',
    'RemapSpecification',
    # Declarations
    'Visibility',
    'MethodDeclaration',
    'FieldDeclaration',
    'PropertyDeclaration',
    'TypeDeclaration',
    'TypeIndex',
    'make_constructor',
    # Score Tracking
    'MatchVerdict',
    'FailureReason',
    'TrackerState',
    'ScoreTracker',
    # Match Result
    'MatchStatus',
    'ScoredCandidate',
    'MatchResult',
    # Remap Results
    'RemapResults',
]
