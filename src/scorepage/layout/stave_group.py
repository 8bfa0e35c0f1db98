"""
Module: layout.stave_group

Purpose:
    Accumulator for one visual line: consecutive bars across all
    selected tracks. The engine grows a group bar by bar, asks for
    candidate widths before committing, justifies it once, then
    finalizes it.

Key Classes:
    - StaveGroup: Mutable line accumulator

Lifecycle:
    1. Created empty by the engine
    2. Grows via add_bars() (revert_last_bar() undoes the last one)
    3. Positioned (x, y) and justified via apply_bar_spacing()
    4. finalize_group(): only x/y may change afterwards

Dependencies:
    - core.models: Score, Track, MasterBar, bounds
    - layout.measure: BarMeasurer, BarSize
    - output.canvas: Canvas, TextAlign

Used By:
    - layout.engine: Packing, justification, painting, bounds
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from scorepage.core.models import (
    BarBounds,
    Bounds,
    BoundingsLookup,
    MasterBar,
    Score,
    StaveGroupBounds,
    Track,
)
from scorepage.output.canvas import Canvas, TextAlign
from scorepage.output.resources import RenderingResources

from .measure import BarMeasurer, BarSize, TabBarMeasurer

logger = logging.getLogger(__name__)


class _BarColumn:
    """One bar across all tracks: aligned width plus per-track sizes."""

    __slots__ = ("master_bar", "sizes", "width")

    def __init__(self, master_bar: MasterBar, sizes: List[BarSize]) -> None:
        self.master_bar = master_bar
        self.sizes = sizes
        # Bars line up vertically, so the widest track decides
        self.width = max((s.width for s in sizes), default=0.0)


class StaveGroup:
    """
    One line of bars across all selected tracks.

    Attributes:
        x: Left edge of the line (page units)
        y: Top edge of the line (page units)
        is_full: Set by the engine when the next bar did not fit

    Example:
        >>> group = StaveGroup(score, score.tracks)
        >>> group.add_bars(0)
        >>> group.last_bar_index
        0
    """

    def __init__(
        self,
        score: Score,
        tracks: Sequence[Track],
        measurer: Optional[BarMeasurer] = None,
        scale: float = 1.0,
        resources: Optional[RenderingResources] = None,
    ) -> None:
        self.score = score
        self.tracks = tuple(tracks)
        self.measurer = measurer or TabBarMeasurer()
        self.scale = scale
        self.resources = resources or RenderingResources()
        self.x = 0.0
        self.y = 0.0
        self.is_full = False
        self._index: Optional[int] = None
        self._columns: List[_BarColumn] = []
        self._finalized = False

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Line number within the page, assigned once by the engine."""
        if self._index is None:
            raise AttributeError("index has not been assigned")
        return self._index

    @index.setter
    def index(self, value: int) -> None:
        if self._index is not None:
            raise ValueError(f"index already assigned: {self._index}")
        self._index = value

    @property
    def master_bars(self) -> tuple[MasterBar, ...]:
        return tuple(c.master_bar for c in self._columns)

    @property
    def bar_count(self) -> int:
        return len(self._columns)

    @property
    def last_bar_index(self) -> int:
        """Index of the last contained bar, -1 when empty."""
        if not self._columns:
            return -1
        return self._columns[-1].master_bar.index

    @property
    def width(self) -> float:
        """Sum of the (possibly justified) bar widths."""
        return sum(c.width for c in self._columns)

    @property
    def height(self) -> float:
        """Sum over tracks of the tallest bar of each track."""
        return sum(self._track_heights())

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    # ─────────────────────────────────────────────────────────────────────────
    # Building
    # ─────────────────────────────────────────────────────────────────────────

    def candidate_width(self, bar_index: int) -> float:
        """
        Width the group would have with the bar appended.

        Does not modify the group.
        """
        return self.width + self._measure(bar_index).width

    def add_bars(self, bar_index: int) -> None:
        """Append a bar, measured across all selected tracks."""
        self._check_open("add_bars")
        self._columns.append(self._measure(bar_index))

    def revert_last_bar(self) -> None:
        """Remove the last added bar."""
        self._check_open("revert_last_bar")
        if not self._columns:
            raise IndexError("revert_last_bar on empty stave group")
        self._columns.pop()

    def apply_bar_spacing(self, spacing: float) -> None:
        """
        Add the same spacing to every bar's width.

        Negative spacing compresses the line; bars shrink uniformly.
        """
        self._check_open("apply_bar_spacing")
        if spacing == 0:
            return
        for column in self._columns:
            column.width += spacing

    def finalize_group(self) -> None:
        """Seal the group; afterwards only x and y may change."""
        self._finalized = True

    def _measure(self, bar_index: int) -> _BarColumn:
        master_bar = self.score.master_bars[bar_index]
        sizes = [self.measurer.measure(t, master_bar, self.scale) for t in self.tracks]
        return _BarColumn(master_bar, sizes)

    def _check_open(self, operation: str) -> None:
        if self._finalized:
            raise RuntimeError(f"{operation} on finalized stave group {self._index}")

    def _track_heights(self) -> List[float]:
        return [
            max((c.sizes[i].height for c in self._columns), default=0.0)
            for i in range(len(self.tracks))
        ]

    # ─────────────────────────────────────────────────────────────────────────
    # Painting and bounds
    # ─────────────────────────────────────────────────────────────────────────

    def paint(self, cx: float, cy: float, canvas: Canvas) -> None:
        """
        Paint staff lines, barlines and bar numbers.

        Args:
            cx: X origin added to the group position
            cy: Y origin added to the group position
            canvas: Drawing surface
        """
        res = self.resources.scaled(self.scale)
        left = cx + self.x
        right = left + self.width
        top = cy + self.y

        for track_index, (track, track_height) in enumerate(zip(self.tracks, self._track_heights())):
            lines = TabBarMeasurer.line_count(track)
            line_spacing = self._line_spacing(track_index, track_height, lines)
            staff_top = top + (track_height - (lines - 1) * line_spacing) / 2
            staff_bottom = staff_top + (lines - 1) * line_spacing

            canvas.color = res.staff_line_color
            for line in range(lines):
                line_y = staff_top + line * line_spacing
                canvas.stroke_line(left, line_y, right, line_y)

            bar_x = left
            canvas.color = res.bar_separator_color
            canvas.stroke_line(bar_x, staff_top, bar_x, staff_bottom)
            for column in self._columns:
                bar_x += column.width
                canvas.stroke_line(bar_x, staff_top, bar_x, staff_bottom)

            if track_index == 0:
                self._paint_bar_numbers(canvas, res, left, staff_top)

            top += track_height

    def _paint_bar_numbers(
        self,
        canvas: Canvas,
        res: RenderingResources,
        left: float,
        staff_top: float,
    ) -> None:
        canvas.color = res.bar_number_color
        canvas.font = res.bar_number_font
        canvas.text_align = TextAlign.LEFT
        number_y = staff_top - res.bar_number_font.size * 1.2
        bar_x = left
        for column in self._columns:
            canvas.fill_text(str(column.master_bar.number), bar_x + 2 * self.scale, number_y)
            bar_x += column.width

    def _line_spacing(self, track_index: int, track_height: float, lines: int) -> float:
        spacings = [c.sizes[track_index].line_spacing for c in self._columns]
        known = [s for s in spacings if s is not None]
        if known:
            return max(known)
        # No spacing measured: spread the lines over the middle half of the stave
        return track_height / 2 / max(1, lines - 1)

    def build_boundings_lookup(self, lookup: BoundingsLookup) -> None:
        """Add this group's visual and bar rectangles to the lookup."""
        bars = []
        bar_x = self.x
        for column in self._columns:
            # Heavy compression can push a narrow bar below zero width
            bars.append(BarBounds(
                bar_index=column.master_bar.index,
                bounds=Bounds(bar_x, self.y, max(0.0, column.width), self.height),
            ))
            bar_x += column.width
        lookup.add_stave_group(StaveGroupBounds(
            index=self.index,
            visual_bounds=Bounds(self.x, self.y, max(0.0, self.width), self.height),
            bars=tuple(bars),
        ))

    def __repr__(self) -> str:
        first = self._columns[0].master_bar.index if self._columns else -1
        return (
            f"StaveGroup(index={self._index}, bars={first}..{self.last_bar_index}, "
            f"width={self.width:g}, full={self.is_full})"
        )
