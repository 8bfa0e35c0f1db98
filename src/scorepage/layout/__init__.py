"""
Module: layout

Purpose:
    Page view layout for multi-track scores.
    Packs bars into lines, justifies lines and measures the header.

Key Classes:
    - PageViewLayout: Main entry point for layout
    - StaveGroup: One line of bars across all tracks
    - ScoreInfoLayout: Header measurement and painting
    - Settings, LayoutOptions, LayoutConstants: Configuration
    - TabBarMeasurer: Default bar measurer

Dependencies:
    - scorepage.core.models: Score, Track, bounds
    - scorepage.output: Canvas and rendering resources

Used By:
    - scorepage.controller: render_score()
"""

from .config import LayoutConstants, LayoutOptions, Settings
from .measure import BarMeasurer, BarSize, TabBarMeasurer
from .stave_group import StaveGroup
from .header import HeaderFooterElements, HeaderRow, ScoreInfoLayout
from .engine import PageViewLayout

__all__ = [
    # Config
    "LayoutConstants",
    "LayoutOptions",
    "Settings",
    # Measuring
    "BarMeasurer",
    "BarSize",
    "TabBarMeasurer",
    # Layout
    "StaveGroup",
    "HeaderFooterElements",
    "HeaderRow",
    "ScoreInfoLayout",
    "PageViewLayout",
]
