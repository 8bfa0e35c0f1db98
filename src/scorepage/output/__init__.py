"""
Module: output

Purpose:
    Drawing surfaces and file renderers for laid out pages.

Key Functions:
    - render_to_png(): Paint a layout onto a PIL image and save it
    - render_to_pdf(): Paint a layout onto a one-page PDF

Key Classes:
    - Font, RenderingResources: Painting styles
    - TextAlign, Canvas, PilCanvas, PdfCanvas: Drawing surfaces

Dependencies:
    - PIL: Raster output
    - reportlab: PDF output
"""

from .resources import Font, RenderingResources
from .canvas import Canvas, PdfCanvas, PilCanvas, TextAlign
from .renderer import render_to_pdf, render_to_png

__all__ = [
    "Font",
    "RenderingResources",
    "Canvas",
    "PdfCanvas",
    "PilCanvas",
    "TextAlign",
    "render_to_pdf",
    "render_to_png",
]
