"""
Module: output.canvas

Purpose:
    Drawing surfaces the layout paints onto. The layout only sets
    alignment, font and color and issues text/line/rect calls; the
    surfaces translate those to PIL or reportlab.

Key Classes:
    - TextAlign: Horizontal text alignment
    - Canvas: Protocol implemented by all surfaces
    - PilCanvas: Raster surface backed by a PIL image
    - PdfCanvas: Vector surface backed by a reportlab canvas

Dependencies:
    - PIL: Raster drawing and TrueType fonts
    - reportlab: PDF drawing

Used By:
    - layout.header: Header painting
    - layout.stave_group: Staff painting
    - output.renderer: PNG/PDF output
"""

from __future__ import annotations

import functools
import logging
import math
from enum import Enum
from pathlib import Path
from typing import Protocol, Union

from PIL import Image, ImageDraw, ImageFont
from reportlab.lib.colors import HexColor
from reportlab.pdfgen import canvas as pdf_canvas

from .resources import Font

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "white"
DEFAULT_COLOR = "#000000"


class TextAlign(Enum):
    """Horizontal alignment of text relative to the x coordinate."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Canvas(Protocol):
    """
    Drawing surface.

    Text y coordinates are the top of the text line.
    """

    text_align: TextAlign
    font: Font
    color: str

    def fill_text(self, text: str, x: float, y: float) -> None:
        ...

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        ...

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        ...


class PilCanvas:
    """
    Raster canvas painting onto a white RGB PIL image.

    Example:
        >>> canvas = PilCanvas(200, 100)
        >>> canvas.fill_text("Title", 100, 10)
        >>> canvas.image.size
        (200, 100)
    """

    def __init__(self, width: float, height: float, background: str = DEFAULT_BACKGROUND) -> None:
        size = (max(1, math.ceil(width)), max(1, math.ceil(height)))
        self.image = Image.new("RGB", size, color=background)
        self._draw = ImageDraw.Draw(self.image)
        self.text_align = TextAlign.LEFT
        self.font = Font()
        self.color = DEFAULT_COLOR

    def fill_text(self, text: str, x: float, y: float) -> None:
        font = _load_pil_font(self.font)
        text_width = self._draw.textlength(text, font=font)
        if self.text_align is TextAlign.CENTER:
            x -= text_width / 2
        elif self.text_align is TextAlign.RIGHT:
            x -= text_width
        self._draw.text((x, y), text, fill=self.color, font=font)

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._draw.line([(x1, y1), (x2, y2)], fill=self.color, width=1)

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        self._draw.rectangle([x, y, x + w, y + h], fill=self.color)

    def save(self, path: Union[str, Path]) -> None:
        """Write the image; format follows the file suffix."""
        self.image.save(path)


class PdfCanvas:
    """
    Single-page PDF canvas.

    Page coordinates are top-down like the layout; they are flipped
    to reportlab's bottom-up system when drawing.
    """

    def __init__(self, path: Union[str, Path], width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self._canvas = pdf_canvas.Canvas(str(path), pagesize=(self.width, self.height))
        self.text_align = TextAlign.LEFT
        self.font = Font()
        self.color = DEFAULT_COLOR

    def fill_text(self, text: str, x: float, y: float) -> None:
        c = self._canvas
        c.setFont(_pdf_font_name(self.font), self.font.size)
        c.setFillColor(HexColor(self.color))
        # Approximate ascent so y is the top of the line
        baseline = self.height - y - self.font.size * 0.8
        if self.text_align is TextAlign.CENTER:
            c.drawCentredString(x, baseline, text)
        elif self.text_align is TextAlign.RIGHT:
            c.drawRightString(x, baseline, text)
        else:
            c.drawString(x, baseline, text)

    def stroke_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        c = self._canvas
        c.setStrokeColor(HexColor(self.color))
        c.line(x1, self.height - y1, x2, self.height - y2)

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        c = self._canvas
        c.setFillColor(HexColor(self.color))
        c.rect(x, self.height - y - h, w, h, stroke=0, fill=1)

    def save(self) -> None:
        """Finish the page and write the PDF."""
        self._canvas.showPage()
        self._canvas.save()


@functools.lru_cache(maxsize=64)
def _load_pil_font(font: Font) -> ImageFont.ImageFont:
    """
    Load a TrueType font for a Font spec.

    Falls back to the default font if no candidate is available.
    """
    size = max(1, round(font.size))
    base = font.family.replace(" ", "")
    suffix = ("-Bold" if font.bold else "") + ("Italic" if font.italic else "")
    font_options = [
        f"{base}{suffix}.ttf",
        f"{font.family}.ttf",
        f"{base}.ttf",
        "DejaVuSerif-Bold.ttf" if font.bold else "DejaVuSerif.ttf",
        "DejaVuSans.ttf",
        "arial.ttf",
    ]
    for font_name in font_options:
        try:
            return ImageFont.truetype(font_name, size)
        except (IOError, OSError):
            continue

    logger.debug(f"Could not load TrueType font for {font.family!r}, using default")
    return ImageFont.load_default()


def _pdf_font_name(font: Font) -> str:
    """Map a Font spec onto one of the standard PDF fonts."""
    family = font.family.lower()
    if "times" in family or "georgia" in family or ("serif" in family and "sans" not in family):
        names = ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic")
    elif "courier" in family or "mono" in family:
        names = ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique")
    else:
        names = ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique")
    return names[int(font.bold) + 2 * int(font.italic)]
