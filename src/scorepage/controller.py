"""
Module: controller

Purpose:
    Orchestrate layout and rendering of one score.
    Layout → Bounds → Render

Key Functions:
    - render_score(): Main entry point

Key Classes:
    - RenderResult: Layout summary and output path
    - RenderError: Exception for render failures

Dependencies:
    - layout: PageViewLayout, Settings
    - output.renderer: PNG/PDF output

Used By:
    - Library callers
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from scorepage.core.models import BoundingsLookup, Score
from scorepage.layout import BarMeasurer, PageViewLayout, Settings
from scorepage.output.renderer import render_to_pdf, render_to_png

logger = logging.getLogger(__name__)

_RENDERERS = {
    ".png": render_to_png,
    ".jpg": render_to_png,
    ".jpeg": render_to_png,
    ".pdf": render_to_pdf,
}


class RenderError(Exception):
    """Error during rendering."""
    pass


@dataclass(frozen=True)
class RenderResult:
    """
    Complete render result (immutable).

    Attributes:
        output_path: Written file, None when only the layout was computed
        width: Page width
        height: Page height
        group_count: Number of lines
        bar_ranges: (first, last) 0-based bar index per line
        boundings: Hit-testing rectangles of all lines
        elapsed: Seconds spent

    Example:
        >>> result = render_score(score, Settings(), Path("out/page.png"))
        >>> print(f"{result.group_count} lines, {result.height:g} high")
    """

    output_path: Optional[Path]
    width: float
    height: float
    group_count: int
    bar_ranges: Tuple[Tuple[int, int], ...]
    boundings: BoundingsLookup
    elapsed: float


def render_score(
    score: Score,
    settings: Optional[Settings] = None,
    output_path: Union[str, Path, None] = None,
    measurer: Optional[BarMeasurer] = None,
) -> RenderResult:
    """
    Lay out a score and optionally render it.

    Args:
        score: Score to lay out
        settings: Render settings (defaults to Settings())
        output_path: .png/.jpg/.pdf file to write, or None
        measurer: Bar measurer (defaults to TabBarMeasurer)

    Returns:
        RenderResult with layout summary

    Raises:
        RenderError: Unsupported suffix or write failure
    """
    start_time = time.perf_counter()
    settings = settings or Settings()

    renderer = None
    if output_path is not None:
        output_path = Path(output_path)
        renderer = _RENDERERS.get(output_path.suffix.lower())
        if renderer is None:
            raise RenderError(f"Unsupported output format: {output_path.suffix!r}")

    logger.info(f"Laying out {score.bar_count} bars of {score.title or 'untitled score'!r}")
    layout = PageViewLayout(score, settings, measurer=measurer)
    layout.do_layout()

    boundings = BoundingsLookup()
    layout.build_boundings_lookup(boundings)

    if renderer is not None:
        try:
            renderer(layout, output_path)
        except OSError as e:
            raise RenderError(f"Failed to write {output_path}: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Score layout completed in {elapsed:.2f}s")

    return RenderResult(
        output_path=output_path,
        width=layout.width,
        height=layout.height,
        group_count=len(layout.groups),
        bar_ranges=tuple((g.master_bars[0].index, g.last_bar_index) for g in layout.groups),
        boundings=boundings,
        elapsed=elapsed,
    )
