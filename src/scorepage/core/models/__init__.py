"""
Core Models Package

Immutable data models read by the layout engine.

All score models are frozen dataclasses: the layout engine never
mutates the score it lays out, it only references bar indices.
"""

from .score import Bar, MasterBar, Score, Track
from .tuning import Tuning, find_tuning, get_text_for_tuning
from .bounds import BarBounds, Bounds, BoundingsLookup, StaveGroupBounds

__all__ = [
    "Bar",
    "MasterBar",
    "Score",
    "Track",
    "Tuning",
    "find_tuning",
    "get_text_for_tuning",
    "Bounds",
    "BarBounds",
    "StaveGroupBounds",
    "BoundingsLookup",
]
