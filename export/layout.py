"""
Flow layout over fixed-size pages.

RenderContext owns the PDF document being built and the render cursor
(current page and vertical offset). Every drawing call goes through it,
so page breaks follow one rule: before drawing an atomic unit of height
h, if cursor.y + h > page_height - margin a new page is started and the
cursor moves back to the top margin.

The cursor y is the top of the next unit; text baselines sit one font
size below it.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import fitz  # PyMuPDF

from core.constants import ORIENTATIONS, PAGE_FORMATS
from export.styles import TextStyle
from utils.text_utils import split_text_to_size


def normalize_orientation(orientation: str) -> str:
    """
    Map 'portrait'/'p' and 'landscape'/'l' to their canonical names.

    Raises:
        ValueError: If orientation is unknown
    """
    key = orientation.lower().strip() if isinstance(orientation, str) else None
    if key not in ORIENTATIONS:
        raise ValueError(f"Invalid orientation: {orientation!r}")
    return ORIENTATIONS[key]


@dataclass
class PageGeometry:
    """Page canvas size and margin, in points."""
    width: float
    height: float
    margin: float = 40.0

    @classmethod
    def from_format(cls, page_format: str, orientation: str, margin: float) -> 'PageGeometry':
        """
        Build geometry from a named format and an orientation.

        Raises:
            ValueError: If format or orientation is unknown
        """
        size = PAGE_FORMATS.get(page_format.lower())
        if size is None:
            raise ValueError(f"Unknown page format: {page_format!r}")
        width, height = size
        if normalize_orientation(orientation) == 'landscape':
            width, height = height, width
        return cls(width=width, height=height, margin=margin)

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def bottom(self) -> float:
        """Lowest y any flowing content may reach."""
        return self.height - self.margin

    @property
    def usable_height(self) -> float:
        return self.height - 2 * self.margin


@dataclass
class RenderCursor:
    """Current page and vertical offset."""
    page_index: int = -1
    y: float = 0.0


@dataclass
class DrawnUnit:
    """Record of one flowed line, used to check the layout."""
    page_index: int
    top: float
    bottom: float
    text: str


class RenderContext:
    """
    Drawing surface with a render cursor.

    One context is created per render call and discarded afterwards.
    """

    def __init__(self, geometry: PageGeometry, doc: Optional[fitz.Document] = None):
        self.geometry = geometry
        self.doc = doc if doc is not None else fitz.open()
        self.cursor = RenderCursor(page_index=-1, y=geometry.margin)
        self.drawn: List[DrawnUnit] = []

    @property
    def page(self) -> fitz.Page:
        return self.doc[self.cursor.page_index]

    @property
    def page_count(self) -> int:
        return len(self.doc)

    # -- Pages and cursor ---------------------------------------------------

    def new_page(self, y: Optional[float] = None) -> fitz.Page:
        """Append a page and move the cursor to its top margin (or y)."""
        page = self.doc.new_page(width=self.geometry.width, height=self.geometry.height)
        self.cursor.page_index = self.page_count - 1
        self.cursor.y = self.geometry.margin if y is None else y
        return page

    def fits(self, height: float) -> bool:
        return self.cursor.y + height <= self.geometry.bottom

    def ensure_space(self, height: float) -> bool:
        """
        Start a new page unless height fits below the cursor.

        Returns:
            True if a page break was inserted
        """
        if self.cursor.page_index < 0 or not self.fits(height):
            self.new_page()
            return True
        return False

    def advance(self, dy: float) -> None:
        self.cursor.y += dy

    # -- Measuring ------------------------------------------------------------

    @staticmethod
    def measure(text: str, style: TextStyle) -> float:
        """Rendered width of text in points."""
        return fitz.get_text_length(text, fontname=style.fontname, fontsize=style.font_size)

    def wrap(self, text: str, style: TextStyle, max_width: float) -> List[str]:
        """Split text into lines no wider than max_width."""
        return split_text_to_size(text, max_width, lambda s: self.measure(s, style))

    # -- Drawing --------------------------------------------------------------

    def place_text(
        self,
        text: str,
        style: TextStyle,
        x: float,
        top: float,
        align: str = 'left'
    ) -> None:
        """
        Draw one line at a fixed position, without flow or page checks.

        Args:
            text: Line of text
            style: Text style
            x: Left edge ('left'), centre ('center') or right edge ('right')
            top: Top of the line box
            align: 'left', 'center' or 'right'
        """
        if align == 'center':
            x = x - self.measure(text, style) / 2
        elif align == 'right':
            x = x - self.measure(text, style)
        self.page.insert_text(
            fitz.Point(x, top + style.font_size),
            text,
            fontsize=style.font_size,
            fontname=style.fontname,
            color=style.pdf_color,
        )

    def draw_line(self, text: str, style: TextStyle, x: float, align: str = 'left') -> None:
        """Flow one line: page-break check, draw at the cursor, advance."""
        self.ensure_space(style.line_height)
        self._draw_at_cursor(text, style, x, align)

    def draw_block(
        self,
        lines: Sequence[str],
        style: TextStyle,
        x: float,
        atomic: bool = False,
        align: str = 'left'
    ) -> int:
        """
        Flow several lines.

        An atomic block is moved to the next page as a whole when it does
        not fit; blocks taller than a page fall back to line-by-line flow.

        Returns:
            Number of lines drawn
        """
        block_height = len(lines) * style.line_height
        if atomic and lines and block_height <= self.geometry.usable_height:
            self.ensure_space(block_height)
            for line in lines:
                self._draw_at_cursor(line, style, x, align)
        else:
            for line in lines:
                self.draw_line(line, style, x, align)
        return len(lines)

    def draw_paragraph(
        self,
        text: str,
        style: TextStyle,
        x: float,
        max_width: float,
        atomic: bool = False
    ) -> int:
        """Wrap text to max_width and flow it. Returns the line count."""
        return self.draw_block(self.wrap(text, style, max_width), style, x, atomic=atomic)

    def _draw_at_cursor(self, text: str, style: TextStyle, x: float, align: str) -> None:
        top = self.cursor.y
        if text:
            self.place_text(text, style, x, top, align)
        self.drawn.append(DrawnUnit(
            page_index=self.cursor.page_index,
            top=top,
            bottom=top + style.line_height,
            text=text,
        ))
        self.cursor.y = top + style.line_height

    def draw_dot(
        self,
        page_index: int,
        x: float,
        y: float,
        radius: float,
        color: Tuple[int, int, int]
    ) -> None:
        """Draw a filled circle centred on (x, y) of the given page."""
        pdf_color = tuple(c / 255 for c in color)
        self.doc[page_index].draw_circle(fitz.Point(x, y), radius, color=pdf_color, fill=pdf_color)

    def draw_rule(
        self,
        x1: float,
        x2: float,
        y: float,
        color: Tuple[int, int, int],
        width: float = 1.0
    ) -> None:
        """Draw a horizontal rule on the current page."""
        self.page.draw_line(
            fitz.Point(x1, y),
            fitz.Point(x2, y),
            color=tuple(c / 255 for c in color),
            width=width,
        )
