# Path: remapper/process/publicizer/__init__.py
"""
Publicizer - post-match accessibility widening.
"""

from .publicizer import Publicizer, PublicizeSummary

__all__ = ['Publicizer', 'PublicizeSummary']
