"""
Module: layout.engine

Purpose:
    Page view layout: arranges bars into a fixed width, dynamic height
    page. Packs bars greedily into stave groups (lines), justifies each
    line to the usable width and stacks the lines below the header.

Key Classes:
    - PageViewLayout: Layout engine for one score + settings

Algorithm:
    1. Resolve the inclusive bar range from start/count (clamped)
    2. Decide the page width once (reference width x scale or configured)
    3. Place the header, then for each line:
       a. Add bars until the next one would make the line full
          (width-driven or barsPerRow-driven), never rejecting a first bar
       b. Position at (left padding, y), justify, finalize
       c. Advance y by line height + group spacing
    4. Page height = y + bottom padding

Dependencies:
    - core.models: Score, Track, BoundingsLookup
    - layout.config: Settings, LayoutConstants
    - layout.header: ScoreInfoLayout
    - layout.stave_group: StaveGroup
    - output.canvas: Canvas, TextAlign

Used By:
    - controller: render_score()
    - output.renderer: paint_score()
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from scorepage.core.models import BoundingsLookup, Score, Track
from scorepage.output.canvas import Canvas, TextAlign
from scorepage.output.resources import RenderingResources

from .config import LayoutConstants, Settings
from .header import ScoreInfoLayout
from .measure import BarMeasurer, TabBarMeasurer
from .stave_group import StaveGroup

logger = logging.getLogger(__name__)

# Justified widths carry float noise
OVERFLOW_TOLERANCE = 1e-6


class PageViewLayout:
    """
    Arranges bars into a fixed width and dynamic height page.

    A call to do_layout() replaces any previous result; there is no
    incremental re-layout. Not safe for concurrent use.

    Attributes:
        width: Page width (may grow for an overflowing single-bar line)
        height: Page height
        groups: Finalized stave groups, top to bottom

    Example:
        >>> layout = PageViewLayout(score, Settings())
        >>> layout.do_layout()
        >>> [g.bar_count for g in layout.groups]
        [5, 5, 2]
    """

    def __init__(
        self,
        score: Score,
        settings: Settings,
        measurer: Optional[BarMeasurer] = None,
        resources: Optional[RenderingResources] = None,
        constants: Optional[LayoutConstants] = None,
    ) -> None:
        self.score = score
        self.settings = settings
        self.measurer = measurer or TabBarMeasurer()
        self.resources = resources or RenderingResources()
        self.constants = constants or LayoutConstants()
        self.tracks: Tuple[Track, ...] = self._resolve_tracks()
        self.groups: List[StaveGroup] = []
        self.width = 0.0
        self.height = 0.0
        self.header_height = 0.0
        self._max_width = 0.0

    @property
    def scale(self) -> float:
        return self.settings.scale

    @property
    def max_width(self) -> float:
        """Usable line width: initial page width minus left/right padding."""
        return self._max_width

    @property
    def sheet_width(self) -> float:
        """Reference page width at the current scale."""
        return self.constants.width_on_100 * self.scale

    # ─────────────────────────────────────────────────────────────────────────
    # Layout
    # ─────────────────────────────────────────────────────────────────────────

    def do_layout(self) -> None:
        """Lay out the score; fills groups, width and height."""
        self.groups = []
        c = self.constants
        options = self.settings.layout

        start_index, end_bar_index = self.resolve_bar_range()

        configured_width = self.settings.page_width
        if options.auto_size or configured_width <= 0:
            self.width = self.sheet_width
        else:
            self.width = configured_width
        self._max_width = self.width - c.padding_left - c.padding_right

        x = c.padding_left
        y = c.padding_top
        self.header_height = self._score_info().measure()
        y += self.header_height

        if self.tracks and self.score.bar_count > 0:
            current_bar_index = start_index
            while current_bar_index <= end_bar_index:
                group = self.create_stave_group(current_bar_index, end_bar_index)
                self.groups.append(group)

                group.x = x
                group.y = y

                self.fit_group(group)
                group.finalize_group()

                y += group.height + c.group_spacing * self.scale
                current_bar_index = group.last_bar_index + 1
        elif not self.tracks:
            logger.warning("No tracks selected, laying out header only")

        self.height = y + c.padding_bottom

        logger.info(
            f"Laid out bars {start_index + 1}-{end_bar_index + 1} in {len(self.groups)} lines "
            f"({self.width:g}x{self.height:g})"
        )

    def resolve_bar_range(self) -> Tuple[int, int]:
        """
        Inclusive 0-based bar range from the start/count options.

        Returns:
            (start_index, end_bar_index), clamped to [0, bar_count - 1]
            with end_bar_index >= start_index
        """
        options = self.settings.layout
        bar_count = self.score.bar_count

        start_index = _clamp(options.start - 1, 0, bar_count - 1)

        count = options.count
        if count < 0:
            count = bar_count
        end_bar_index = _clamp(start_index + count - 1, start_index, bar_count - 1)
        return start_index, end_bar_index

    def create_stave_group(self, current_bar_index: int, end_index: int) -> StaveGroup:
        """
        Pack bars into a new group, starting at current_bar_index.

        A bar that would make the group full is not added; the group is
        then marked full. The first bar of a group is always added.

        Args:
            current_bar_index: First bar of the line
            end_index: Last bar of the range (inclusive)

        Returns:
            New, not yet positioned group
        """
        group = StaveGroup(
            self.score,
            self.tracks,
            measurer=self.measurer,
            scale=self.scale,
            resources=self.resources,
        )
        group.index = len(self.groups)

        bars_per_row = self.settings.layout.bars_per_row
        if bars_per_row == 0:
            bars_per_row = 1
        max_width = self.max_width

        for i in range(current_bar_index, end_index + 1):
            if group.bar_count > 0:
                if bars_per_row < 0:
                    group_is_full = group.candidate_width(i) >= max_width
                else:
                    group_is_full = group.bar_count == bars_per_row
                if group_is_full:
                    group.is_full = True
                    logger.debug(f"Line {group.index} full at bar {i + 1}: {group!r}")
                    return group

            group.add_bars(i)

        return group

    def fit_group(self, group: StaveGroup) -> None:
        """
        Realign the bars of a line to the available width.

        Full lines are stretched or compressed; under-full lines are only
        compressed. The same space goes to every bar. A lone bar wider
        than the line keeps its natural width and the page grows instead.
        """
        bar_space = 0.0
        free_space = self.max_width - group.width

        if free_space != 0 and group.bar_count > 0:
            bar_space = free_space / group.bar_count

        if bar_space < 0 and group.bar_count == 1:
            logger.debug(f"Line {group.index} holds one over-wide bar, widening page")
        elif group.is_full or bar_space < 0:
            group.apply_bar_spacing(bar_space)

        if group.width - self.max_width > OVERFLOW_TOLERANCE:
            logger.warning(
                f"Line {group.index} overflows usable width: "
                f"{group.width:g} > {self.max_width:g}"
            )

        self.width = max(self.width, group.width)

    # ─────────────────────────────────────────────────────────────────────────
    # Painting and bounds
    # ─────────────────────────────────────────────────────────────────────────

    def paint_score(self, canvas: Canvas) -> None:
        """Paint the header and all stave groups."""
        c = self.constants
        self._score_info().paint(canvas, c.padding_left, c.padding_top, self.width)

        canvas.color = self.resources.main_glyph_color
        canvas.text_align = TextAlign.LEFT
        for group in self.groups:
            group.paint(0, 0, canvas)

    def build_boundings_lookup(self, lookup: BoundingsLookup) -> None:
        """Add every group's rectangles to the lookup, in order."""
        for group in self.groups:
            group.build_boundings_lookup(lookup)

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _score_info(self) -> ScoreInfoLayout:
        return ScoreInfoLayout(
            self.score,
            self.tracks,
            scale=self.scale,
            flags=ScoreInfoLayout.flags_for(self.settings.layout.hide_info),
            constants=self.constants,
            resources=self.resources,
        )

    def _resolve_tracks(self) -> Tuple[Track, ...]:
        tracks = []
        for index in self.settings.tracks:
            if 0 <= index < len(self.score.tracks):
                tracks.append(self.score.tracks[index])
            else:
                logger.warning(f"Ignoring track index {index}: score has {len(self.score.tracks)} tracks")
        return tuple(tracks)


def _clamp(value: int, low: int, high: int) -> int:
    """Clamp value into [low, high]; low wins when the range is empty."""
    return max(low, min(high, value))
