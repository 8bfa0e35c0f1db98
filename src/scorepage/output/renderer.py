"""
Module: output.renderer

Purpose:
    Render a laid out page to PNG (PIL) or PDF (reportlab).
    The page is painted exactly as PageViewLayout.paint_score() draws it.

Key Functions:
    - render_to_png(): Raster output
    - render_to_pdf(): Vector output

Dependencies:
    - output.canvas: PilCanvas, PdfCanvas

Used By:
    - controller: render_score()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .canvas import PdfCanvas, PilCanvas

if TYPE_CHECKING:
    from scorepage.layout.engine import PageViewLayout

logger = logging.getLogger(__name__)


def render_to_png(layout: PageViewLayout, output_path: Path) -> None:
    """
    Paint the layout onto an image and save it.

    Args:
        layout: Layout after do_layout()
        output_path: Image path; format follows the suffix

    Raises:
        OSError: If the image cannot be written
    """
    _warn_if_empty(layout)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    canvas = PilCanvas(layout.width, layout.height)
    layout.paint_score(canvas)
    canvas.save(output_path)

    logger.info(f"Rendered {len(layout.groups)} lines to {output_path}")


def render_to_pdf(layout: PageViewLayout, output_path: Path) -> None:
    """
    Paint the layout onto a single PDF page sized to the layout.

    Args:
        layout: Layout after do_layout()
        output_path: PDF path

    Raises:
        OSError: If the PDF cannot be written
    """
    _warn_if_empty(layout)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    canvas = PdfCanvas(output_path, layout.width, layout.height)
    layout.paint_score(canvas)
    canvas.save()

    logger.info(f"Rendered {len(layout.groups)} lines to {output_path}")


def _warn_if_empty(layout: PageViewLayout) -> None:
    if layout.width <= 0 or layout.height <= 0:
        logger.warning("Layout has no size, was do_layout() called?")
    elif not layout.groups:
        logger.warning("Empty layout, rendering header only")
