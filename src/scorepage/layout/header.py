"""
Module: layout.header

Purpose:
    Score info header (title, subtitle, artist, album, composer line,
    tuning diagram). Measuring and painting are driven by one list of
    rows so both always agree on which rows exist and how tall they are.

Key Classes:
    - HeaderFooterElements: Flags selecting the header elements
    - HeaderRow: Height plus paint action of one header row
    - ScoreInfoLayout: Builds rows, measures and paints them

Algorithm:
    Rows in fixed order, each only when its text is present and its
    flag enabled:
    1. Title (35)
    2. Subtitle, artist, album (20 each)
    3. Composer row (20): "Music and Words by X" or music right / words left
    4. Info gap (20)
    5. Tuning name (15), string listing (ceil(n/2) x 15, non-standard
       tunings only) and closing row (15), for a single non-percussion track
    6. Bottom gap: 40 when measuring, 25 when painting
    All heights are multiplied by the layout scale.

Dependencies:
    - core.models: Score, Track, tuning lookup
    - layout.config: LayoutConstants
    - output.canvas: Canvas, TextAlign

Used By:
    - layout.engine: Header height and header painting
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from scorepage.core.models import Score, Track, find_tuning, get_text_for_tuning
from scorepage.output.canvas import Canvas, TextAlign
from scorepage.output.resources import Font, RenderingResources

from .config import LayoutConstants

logger = logging.getLogger(__name__)

# (canvas, x, y, page_width)
PaintAction = Callable[[Canvas, float, float, float], None]


class HeaderFooterElements(enum.Flag):
    """Header elements that may be shown."""

    NONE = 0
    TITLE = 1
    SUB_TITLE = 2
    ARTIST = 4
    ALBUM = 8
    WORDS = 16
    MUSIC = 32
    WORDS_AND_MUSIC = 64
    ALL = 127


@dataclass(frozen=True)
class HeaderRow:
    """
    One header row.

    Attributes:
        name: Row identifier for logging and tests
        height: Vertical space consumed (already scaled)
        paint: Action drawing the row at the cursor, None for gaps
    """

    name: str
    height: float
    paint: Optional[PaintAction] = None


class ScoreInfoLayout:
    """
    Measures and paints the score info header.

    Example:
        >>> info = ScoreInfoLayout(Score(title="Song"), tracks=(), scale=1.0)
        >>> info.measure()
        95.0
    """

    def __init__(
        self,
        score: Score,
        tracks: Sequence[Track],
        scale: float = 1.0,
        flags: HeaderFooterElements = HeaderFooterElements.ALL,
        constants: Optional[LayoutConstants] = None,
        resources: Optional[RenderingResources] = None,
    ) -> None:
        self.score = score
        self.tracks = tuple(tracks)
        self.scale = scale
        self.flags = flags
        self.constants = constants or LayoutConstants()
        self.resources = (resources or RenderingResources()).scaled(scale)
        self.rows: List[HeaderRow] = self._build_rows()

    @classmethod
    def flags_for(cls, hide_info: bool) -> HeaderFooterElements:
        """Element flags for the hideInfo layout option."""
        return HeaderFooterElements.NONE if hide_info else HeaderFooterElements.ALL

    def measure(self) -> float:
        """Height of the header block."""
        if not self.flags:
            return 0.0
        height = sum(row.height for row in self.rows)
        return height + self.constants.header_bottom_gap * self.scale

    def paint(self, canvas: Canvas, x: float, y: float, page_width: float) -> float:
        """
        Paint the header block.

        Args:
            canvas: Drawing surface
            x: Left edge of the content area
            y: Top of the header block
            page_width: Final page width (for centered/right aligned text)

        Returns:
            Y coordinate below the painted block
        """
        if not self.flags:
            return y
        canvas.color = self.resources.score_info_color
        canvas.text_align = TextAlign.CENTER
        for row in self.rows:
            if row.paint is not None:
                row.paint(canvas, x, y, page_width)
            y += row.height
        # Painted closing gap differs from the measured one (40 vs 25)
        return y + self.constants.header_painted_bottom_gap * self.scale

    # ─────────────────────────────────────────────────────────────────────────
    # Row construction
    # ─────────────────────────────────────────────────────────────────────────

    def _build_rows(self) -> List[HeaderRow]:
        if not self.flags:
            return []

        c = self.constants
        s = self.scale
        res = self.resources
        score = self.score
        flags = self.flags
        rows: List[HeaderRow] = []

        if score.title and HeaderFooterElements.TITLE in flags:
            rows.append(HeaderRow("title", c.title_height * s, _centered(score.title, res.title_font)))
        if score.subtitle and HeaderFooterElements.SUB_TITLE in flags:
            rows.append(HeaderRow("subtitle", c.text_row_height * s, _centered(score.subtitle, res.sub_title_font)))
        if score.artist and HeaderFooterElements.ARTIST in flags:
            rows.append(HeaderRow("artist", c.text_row_height * s, _centered(score.artist, res.sub_title_font)))
        if score.album and HeaderFooterElements.ALBUM in flags:
            rows.append(HeaderRow("album", c.text_row_height * s, _centered(score.album, res.sub_title_font)))

        composer = self._composer_row()
        if composer is not None:
            rows.append(composer)

        rows.append(HeaderRow("info_gap", c.info_gap * s))
        rows.extend(self._tuning_rows())
        return rows

    def _composer_row(self) -> Optional[HeaderRow]:
        score = self.score
        flags = self.flags
        height = self.constants.text_row_height * self.scale
        words_font = self.resources.words_font

        if score.music and score.music == score.words and HeaderFooterElements.WORDS_AND_MUSIC in flags:
            return HeaderRow("words_and_music", height, _centered(f"Music and Words by {score.words}", words_font))

        show_music = bool(score.music) and HeaderFooterElements.MUSIC in flags
        show_words = bool(score.words) and HeaderFooterElements.WORDS in flags
        if not (show_music or show_words):
            return None

        right_padding = self.constants.padding_right

        def paint(canvas: Canvas, x: float, y: float, page_width: float) -> None:
            canvas.font = words_font
            if show_music:
                canvas.text_align = TextAlign.RIGHT
                canvas.fill_text(f"Music by {score.music}", page_width - right_padding, y)
            if show_words:
                canvas.text_align = TextAlign.LEFT
                canvas.fill_text(f"Words by {score.words}", x, y)

        return HeaderRow("words_music", height, paint)

    def _tuning_rows(self) -> List[HeaderRow]:
        if len(self.tracks) != 1 or self.tracks[0].is_percussion:
            return []
        values = self.tracks[0].tuning
        tuning = find_tuning(values)
        if tuning is None:
            logger.debug(f"No named tuning for {values}, skipping tuning diagram")
            return []

        c = self.constants
        s = self.scale
        row_height = c.tuning_row_height * s
        effect_font = self.resources.effect_font

        def paint_name(canvas: Canvas, x: float, y: float, page_width: float) -> None:
            canvas.text_align = TextAlign.LEFT
            canvas.font = effect_font
            canvas.fill_text(tuning.name, x, y)

        rows = [HeaderRow("tuning_name", row_height, paint_name)]

        if not tuning.is_standard:
            strings_per_column = math.ceil(len(values) / 2)
            column_offset = c.tuning_column_offset * s

            def paint_strings(canvas: Canvas, x: float, y: float, page_width: float) -> None:
                canvas.text_align = TextAlign.LEFT
                canvas.font = effect_font
                current_x, current_y = x, y
                for i, value in enumerate(values):
                    canvas.fill_text(f"({i + 1}) = {get_text_for_tuning(value)}", current_x, current_y)
                    current_y += row_height
                    if i == strings_per_column - 1:
                        current_x += column_offset
                        current_y = y

            rows.append(HeaderRow("tuning_strings", strings_per_column * row_height, paint_strings))

        rows.append(HeaderRow("tuning_gap", row_height))
        return rows


def _centered(text: str, font: Font) -> PaintAction:
    """Paint action drawing text centered on the page."""
    def paint(canvas: Canvas, x: float, y: float, page_width: float) -> None:
        canvas.text_align = TextAlign.CENTER
        canvas.font = font
        canvas.fill_text(text, page_width / 2, y)
    return paint
