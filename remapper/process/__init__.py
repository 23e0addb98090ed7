# Path: remapper/process/__init__.py
"""
Process Layer for remapper

The PROCESS layer handles all remapping operations:
- matcher/ - Structural matching of specifications against declarations
- publicizer/ - Accessibility widening after matching

All components follow the IPO pattern:
- Read from INPUT layer (loaders)
- Process data (matching, transforms)
- Prepare for OUTPUT layer (reports)
"""

from process.matcher import MatchingCoordinator, RemapResults
from process.publicizer import Publicizer

__all__ = [
    'MatchingCoordinator',
    'RemapResults',
    'Publicizer',
]
