"""
Module: layout.measure

Purpose:
    Width/height contract of one bar of one track.
    The layout engine never measures glyphs itself; it asks a
    BarMeasurer for the natural size of each bar.

Key Classes:
    - BarSize: Natural width and height of a bar
    - BarMeasurer: Protocol for measurers
    - TabBarMeasurer: Tablature measurer based on beat counts

Dependencies:
    - core.models: Track, MasterBar

Used By:
    - layout.stave_group: Bar accumulation and candidate widths
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from scorepage.core.models import MasterBar, Track

# Percussion tracks are drawn on a five line staff
PERCUSSION_LINES = 5


@dataclass(frozen=True, slots=True)
class BarSize:
    """
    Measured size of one bar.

    Attributes:
        width: Natural width
        height: Height of the track's stave for this bar
        line_spacing: Distance between staff lines, already scaled
            (None = let the painter spread the lines)
    """

    width: float
    height: float
    line_spacing: Optional[float] = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"bar size must be >= 0: {self.width}x{self.height}")
        if self.line_spacing is not None and self.line_spacing <= 0:
            raise ValueError(f"line_spacing must be positive: {self.line_spacing}")


class BarMeasurer(Protocol):
    """Measures one track's bar at a given scale."""

    def measure(self, track: Track, master_bar: MasterBar, scale: float) -> BarSize:
        ...


@dataclass(frozen=True)
class TabBarMeasurer:
    """
    Tablature bar measurer.

    Width grows with the number of beats in the bar (at least the time
    signature numerator); height with the number of strings.

    Attributes:
        bar_padding: Space before the first and after the last beat
        beat_spacing: Natural space per beat
        line_spacing: Distance between staff lines
        staff_padding: Vertical space around the staff (bar numbers)

    Example:
        >>> m = TabBarMeasurer()
        >>> m.measure(Track(tuning=(64, 59, 55, 50, 45, 40)), MasterBar(0), 1.0).width
        160.0
    """

    bar_padding: float = 20.0
    beat_spacing: float = 35.0
    line_spacing: float = 10.0
    staff_padding: float = 40.0

    def measure(self, track: Track, master_bar: MasterBar, scale: float) -> BarSize:
        beats = track.bar(master_bar.index).beats
        width = (self.bar_padding + max(beats, master_bar.numerator) * self.beat_spacing) * scale
        return BarSize(
            width=width,
            height=self.staff_height(track) * scale,
            line_spacing=self.line_spacing * scale,
        )

    def staff_height(self, track: Track) -> float:
        """Unscaled stave height for a track."""
        return (self.line_count(track) - 1) * self.line_spacing + self.staff_padding

    @staticmethod
    def line_count(track: Track) -> int:
        """Number of staff lines drawn for a track."""
        if track.is_percussion or track.string_count == 0:
            return PERCUSSION_LINES
        return track.string_count
