"""
Module: output.resources

Purpose:
    Fonts and colors used when painting a laid out page.

Key Classes:
    - Font: Font family, size and style
    - RenderingResources: Fonts and colors for header and staves

Dependencies:
    - dataclasses (std)

Used By:
    - layout.header: Header fonts and score info color
    - layout.stave_group: Staff and bar number styling
    - output.canvas: Font resolution
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Font:
    """
    Font specification (immutable).

    Attributes:
        family: Family name, e.g. "Times New Roman"
        size: Size in page units
        bold: Bold weight
        italic: Italic style
    """

    family: str = "Times New Roman"
    size: float = 12.0
    bold: bool = False
    italic: bool = False

    def scaled(self, scale: float) -> Font:
        """Copy with size multiplied by scale."""
        return replace(self, size=self.size * scale)


@dataclass(frozen=True)
class RenderingResources:
    """
    Fonts and colors for painting (immutable).

    Colors are "#rrggbb" strings understood by both PIL and reportlab.
    """

    title_font: Font = field(default_factory=lambda: Font("Times New Roman", 32.0))
    sub_title_font: Font = field(default_factory=lambda: Font("Times New Roman", 20.0))
    words_font: Font = field(default_factory=lambda: Font("Times New Roman", 15.0))
    effect_font: Font = field(default_factory=lambda: Font("Times New Roman", 12.0, italic=True))
    bar_number_font: Font = field(default_factory=lambda: Font("Arial", 11.0))

    score_info_color: str = "#000000"
    main_glyph_color: str = "#000000"
    staff_line_color: str = "#a5a5a5"
    bar_separator_color: str = "#222211"
    bar_number_color: str = "#c80000"

    def scaled(self, scale: float) -> RenderingResources:
        """Copy with every font size multiplied by scale."""
        return replace(
            self,
            title_font=self.title_font.scaled(scale),
            sub_title_font=self.sub_title_font.scaled(scale),
            words_font=self.words_font.scaled(scale),
            effect_font=self.effect_font.scaled(scale),
            bar_number_font=self.bar_number_font.scaled(scale),
        )
