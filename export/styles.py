"""
Text styles of the paginated export.

A style fixes font, size, colour and the line-height multiplier used to
measure how far the render cursor advances per line.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from core.constants import (
    BODY_LINE_SPACING,
    COLORS,
    FONT_BOLD,
    FONT_REGULAR,
    FONT_SIZES,
    HEADING_LINE_SPACING,
    TOC_LINE_SPACING,
)


@dataclass(frozen=True)
class TextStyle:
    """Font settings of one kind of text."""
    font_size: float
    color: Tuple[int, int, int]
    bold: bool = False
    line_spacing: float = BODY_LINE_SPACING

    @property
    def fontname(self) -> str:
        return FONT_BOLD if self.bold else FONT_REGULAR

    @property
    def line_height(self) -> float:
        """Vertical advance of one line."""
        return self.font_size * self.line_spacing

    @property
    def pdf_color(self) -> Tuple[float, float, float]:
        """Colour as PyMuPDF expects it (0-1 floats)."""
        return tuple(c / 255 for c in self.color)


def build_styles() -> Dict[str, TextStyle]:
    """Styles keyed by role."""
    return {
        # Cover
        'cover_title': TextStyle(FONT_SIZES['title'], COLORS['primary'], bold=True),
        'cover_category': TextStyle(FONT_SIZES['subtitle'], COLORS['primary']),
        'cover_author': TextStyle(FONT_SIZES['normal'], COLORS['primary']),
        'cover_date': TextStyle(FONT_SIZES['small'], COLORS['light']),

        # Table of contents
        'toc_title': TextStyle(FONT_SIZES['subtitle'], COLORS['primary'], bold=True),
        'toc_section': TextStyle(FONT_SIZES['section'], COLORS['section'], bold=True,
                                 line_spacing=TOC_LINE_SPACING['section']),
        'toc_chapter': TextStyle(FONT_SIZES['chapter'], COLORS['chapter'], bold=True,
                                 line_spacing=TOC_LINE_SPACING['chapter']),
        'toc_paragraph': TextStyle(FONT_SIZES['paragraph'], COLORS['paragraph'],
                                   line_spacing=TOC_LINE_SPACING['paragraph']),

        # Body
        'section': TextStyle(FONT_SIZES['section'], COLORS['section'], bold=True,
                             line_spacing=HEADING_LINE_SPACING['section']),
        'chapter': TextStyle(FONT_SIZES['chapter'], COLORS['chapter'], bold=True,
                             line_spacing=HEADING_LINE_SPACING['chapter']),
        'paragraph': TextStyle(FONT_SIZES['paragraph'], COLORS['paragraph'], bold=True,
                               line_spacing=HEADING_LINE_SPACING['paragraph']),
        'body': TextStyle(FONT_SIZES['normal'], COLORS['dark']),
        'notion_label': TextStyle(FONT_SIZES['normal'], COLORS['notion'], bold=True,
                                  line_spacing=HEADING_LINE_SPACING['chapter']),
        'notion': TextStyle(FONT_SIZES['small'], COLORS['dark']),

        # Conclusion
        'conclusion_heading': TextStyle(FONT_SIZES['section'], COLORS['primary'], bold=True,
                                        line_spacing=HEADING_LINE_SPACING['section']),
        'conclusion_body': TextStyle(FONT_SIZES['normal'], COLORS['black']),
        'objectives_heading': TextStyle(FONT_SIZES['paragraph'], COLORS['notion'], bold=True,
                                        line_spacing=HEADING_LINE_SPACING['paragraph']),
        'objective': TextStyle(FONT_SIZES['normal'], COLORS['dark']),

        'footer': TextStyle(FONT_SIZES['small'], COLORS['light']),
    }


STYLES = build_styles()
